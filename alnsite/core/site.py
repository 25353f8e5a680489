"""
Variant site records for multi-genome alignments.

A VariantSite holds one alignment column: for each genome, whether a base
is present, the base itself, and its signed genome-wide position
(negative values indicate the reverse strand, 0 indicates a gap).

Author: Kevin R. Roy
"""

from typing import List, Optional, Union
import logging

from .coordinates import Strand, magnitude, strand_of
from .genome import Chromosome, Feature
from ..utils.sequence import GAP_CHAR, is_ambiguous

logger = logging.getLogger(__name__)


class GenomeIndexError(IndexError):
    """Raised when a genome index is outside the site's genome count."""


class VariantSite:
    """
    One alignment column across all genomes of an alignment.

    Sites are created empty and populated one genome at a time with
    set_genome_base(). Chromosome and local offset are cached when a base
    is set; get_contig() and get_local_offset() re-resolve them from the
    coordinate authority instead.

    Args:
        authority: Coordinate authority (e.g. a GenomeRegistry) providing
            genome_count(), resolve_chromosome(), chromosome_start() and
            query_overlapping_features()
        genome_count: Number of genomes (defaults to authority.genome_count())
        gap_char: Gap symbol
    """

    def __init__(self, authority, genome_count: Optional[int] = None, gap_char: str = GAP_CHAR):
        if genome_count is None:
            genome_count = authority.genome_count()
        self.authority = authority
        self.gap_char = gap_char
        self._present = [False] * genome_count
        self._bases = [gap_char] * genome_count
        self._positions = [0] * genome_count
        self._chromosomes: List[Optional[Chromosome]] = [None] * genome_count
        self._local_offsets = [0] * genome_count

    @property
    def genome_count(self) -> int:
        return len(self._bases)

    @property
    def pattern(self) -> str:
        """The column's bases concatenated in genome-index order."""
        return ''.join(self._bases)

    def _check_index(self, genome_index: int):
        if not 0 <= genome_index < len(self._bases):
            raise GenomeIndexError(f"{genome_index} : source index out of bounds")

    def set_genome_base(self, genome_index: int, base: str, position: int):
        """
        Add the base for the specified genome.

        Args:
            genome_index: Index of the genome
            base: Aligned character for this genome
            position: Signed genome-wide position (0 for a gap)

        Raises:
            GenomeIndexError: If genome_index is out of range
            ChromosomeNotFoundError: If the authority cannot place the position
        """
        self._check_index(genome_index)
        self._present[genome_index] = True
        self._bases[genome_index] = base
        self._positions[genome_index] = position
        if position == 0:
            self._local_offsets[genome_index] = 0
            return

        coord = magnitude(position)
        chrom = self.authority.resolve_chromosome(genome_index, coord)
        self._chromosomes[genome_index] = chrom
        self._local_offsets[genome_index] = (
            coord - self.authority.chromosome_start(genome_index, chrom) + 1
        )
        logger.debug(
            f"Genome {genome_index}: {base} at {position} -> "
            f"{chrom.name}:{self._local_offsets[genome_index]}"
        )

    def get_base(self, genome_index: int) -> str:
        self._check_index(genome_index)
        return self._bases[genome_index]

    def get_position(self, genome_index: int) -> int:
        self._check_index(genome_index)
        return self._positions[genome_index]

    def is_present(self, genome_index: int) -> bool:
        self._check_index(genome_index)
        return self._present[genome_index]

    def strand(self, genome_index: int) -> Strand:
        return strand_of(self.get_position(genome_index))

    def get_contig(self, genome_index: int) -> Optional[Chromosome]:
        """Resolve the chromosome for this site from the current position.

        Returns None when the genome has no base here.
        """
        position = self.get_position(genome_index)
        if position == 0:
            return None
        return self.authority.resolve_chromosome(genome_index, magnitude(position))

    def get_local_offset(self, genome_index: int) -> int:
        """1-based position within the contig, recomputed from the authority."""
        chrom = self.get_contig(genome_index)
        if chrom is None:
            return 0
        start = self.authority.chromosome_start(genome_index, chrom)
        return magnitude(self._positions[genome_index]) - start + 1

    def cached_contig(self, genome_index: int) -> Optional[Chromosome]:
        self._check_index(genome_index)
        return self._chromosomes[genome_index]

    def cached_local_offset(self, genome_index: int) -> int:
        self._check_index(genome_index)
        return self._local_offsets[genome_index]

    def features_overlapping(self, genome_index: int) -> List[Feature]:
        """Return the features in the given genome that overlap this site."""
        position = self.get_position(genome_index)
        return self.authority.query_overlapping_features(
            genome_index, position, position, position < 0
        )

    def has_gap(self, genome_index: Optional[int] = None) -> bool:
        """
        Check for gaps at this site.

        Args:
            genome_index: If given, only check this genome

        Returns:
            True if any genome (or the given genome) has the gap symbol
        """
        if genome_index is not None:
            return self.get_base(genome_index) == self.gap_char
        return any(base == self.gap_char for base in self._bases)

    def has_ambiguity(self) -> bool:
        """True if any base is an IUPAC ambiguity code or a gap."""
        return any(is_ambiguous(base, self.gap_char) for base in self._bases)

    def are_equal(self, x: Union[int, object], y: Union[int, object]) -> bool:
        """True if genomes x and y share the same base at this site.

        Accepts genome indices or genome objects with an ``index`` attribute.
        """
        x = x if isinstance(x, int) else x.index
        y = y if isinstance(y, int) else y.index
        return self.get_base(x) == self.get_base(y)

    def to_fields(self) -> List[Union[str, int]]:
        """Pattern followed by (contig name or "null", offset, position) per genome."""
        fields: List[Union[str, int]] = [self.pattern]
        for chrom, offset, position in zip(self._chromosomes, self._local_offsets, self._positions):
            fields.append(chrom.name if chrom is not None else 'null')
            fields.append(offset)
            fields.append(position)
        return fields

    def to_line(self) -> str:
        """
        Tab-delimited description of the site.

        Format: pattern, then per genome contig name (or "null"), position
        in contig and genome-wide position, e.g.::

            AC  contig_0087  1658  -51235  Chromosome  1090  1090
        """
        return '\t'.join(str(f) for f in self.to_fields())

    def __str__(self) -> str:
        return self.to_line()

    def __repr__(self) -> str:
        return f"VariantSite(pattern={self.pattern}, positions={self._positions})"
