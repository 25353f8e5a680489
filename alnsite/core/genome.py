"""
Genome registry and coordinate lookup.

A GenomeRegistry maps genome indices to Genome objects and acts as the
coordinate authority for variant sites: it resolves genome-wide positions
to chromosomes/contigs and answers overlapping-feature queries.

Author: Kevin R. Roy
"""

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import List, Optional, Sequence
import logging

from .coordinates import magnitude

logger = logging.getLogger(__name__)


class ChromosomeNotFoundError(LookupError):
    """Raised when a genome-wide position lies outside every chromosome."""


@dataclass(frozen=True)
class Chromosome:
    """
    A chromosome or contig within a genome's concatenated coordinate space.

    Attributes:
        name: Chromosome/contig name
        start: Genome-wide start offset (1-based)
        length: Length in bp
    """
    name: str
    start: int
    length: int

    @property
    def end(self) -> int:
        """Last genome-wide coordinate covered (inclusive)."""
        return self.start + self.length - 1

    def contains(self, position: int) -> bool:
        return self.start <= magnitude(position) <= self.end

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Feature:
    """
    Light-weight annotated feature interval.

    Attributes:
        genome_index: Index of the genome the feature belongs to
        left: Left bound in forward-strand coordinates
        right: Right bound in forward-strand coordinates (inclusive)
        strand: +1 for forward, -1 for reverse
        name: Optional feature name (e.g. locus tag)
        feature_type: Optional feature type (e.g. 'CDS')
    """
    genome_index: int
    left: int
    right: int
    strand: int = 1
    name: Optional[str] = None
    feature_type: Optional[str] = None

    def __post_init__(self):
        if self.left > self.right:
            raise ValueError(f"Feature left bound {self.left} > right bound {self.right}")

    @property
    def is_forward(self) -> bool:
        return self.strand > 0

    def overlaps(self, left: int, right: int) -> bool:
        return self.left <= right and left <= self.right


@dataclass
class Genome:
    """
    One genome participating in the alignment.

    Attributes:
        index: Dense zero-based genome index
        name: Genome name
        chromosomes: Chromosomes/contigs (kept sorted by start)
        features: Annotated features for this genome
    """
    index: int
    name: str
    chromosomes: List[Chromosome] = field(default_factory=list)
    features: List[Feature] = field(default_factory=list)

    def __post_init__(self):
        self.chromosomes = sorted(self.chromosomes, key=lambda c: c.start)
        self._starts = [c.start for c in self.chromosomes]

    @property
    def length(self) -> int:
        if not self.chromosomes:
            return 0
        return self.chromosomes[-1].end

    def chromosome_at(self, position: int) -> Chromosome:
        """
        Find the chromosome containing a genome-wide position.

        Args:
            position: Genome-wide position (sign is ignored)

        Returns:
            The Chromosome containing the position

        Raises:
            ChromosomeNotFoundError: If no chromosome contains the position
        """
        coord = magnitude(position)
        idx = bisect_right(self._starts, coord) - 1
        if idx >= 0 and self.chromosomes[idx].contains(coord):
            return self.chromosomes[idx]
        raise ChromosomeNotFoundError(
            f"Position {position} is not within any chromosome of genome "
            f"{self.index} ({self.name})"
        )

    def annotations_at(self, left: int, right: int, reverse: bool) -> List[Feature]:
        """
        Return the features on the requested strand overlapping [left, right].

        Negative query coordinates are taken by magnitude.
        """
        lo, hi = sorted((magnitude(left), magnitude(right)))
        return [
            f for f in self.features
            if f.is_forward != reverse and f.overlaps(lo, hi)
        ]


class GenomeRegistry:
    """Coordinate authority over the genomes of one alignment session."""

    def __init__(self, genomes: Sequence[Genome]):
        indices = sorted(g.index for g in genomes)
        if indices != list(range(len(genomes))):
            raise ValueError(f"Genome indices must be dense and zero-based, got {indices}")
        self.genomes = sorted(genomes, key=lambda g: g.index)

        logger.debug(f"Registry with {len(self.genomes)} genomes")

    def genome_count(self) -> int:
        return len(self.genomes)

    def genome_by_index(self, genome_index: int) -> Genome:
        if not 0 <= genome_index < len(self.genomes):
            raise IndexError(f"{genome_index} : genome index out of bounds")
        return self.genomes[genome_index]

    def chromosome_start(self, genome_index: int, chromosome: Chromosome) -> int:
        """Genome-wide start offset of a chromosome of the given genome."""
        genome = self.genome_by_index(genome_index)
        if chromosome not in genome.chromosomes:
            raise ChromosomeNotFoundError(
                f"Chromosome {chromosome.name} does not belong to genome {genome.name}"
            )
        return chromosome.start

    def resolve_chromosome(self, genome_index: int, position: int) -> Chromosome:
        return self.genome_by_index(genome_index).chromosome_at(position)

    def query_overlapping_features(
        self,
        genome_index: int,
        left: int,
        right: int,
        reverse: bool
    ) -> List[Feature]:
        return self.genome_by_index(genome_index).annotations_at(left, right, reverse)

    def __len__(self) -> int:
        return len(self.genomes)

    def __iter__(self):
        return iter(self.genomes)
