"""
Site export pipeline.

Author: Kevin R. Roy
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional
import logging

from .config import ExportConfig
from .core.extract import extract_sites
from .core.genome import GenomeRegistry
from .core.ordering import sort_sites
from .core.site import VariantSite
from .io.genomes import load_registry
from .io.output import write_site_table

logger = logging.getLogger(__name__)


@dataclass
class ExportSummary:
    """Counts from one export run."""
    columns: int = 0
    sites: int = 0
    gapped: int = 0
    ambiguous: int = 0
    written: int = 0
    output_path: Optional[Path] = None

    def __str__(self) -> str:
        return (
            f"{self.columns} columns, {self.sites} variant sites "
            f"({self.gapped} gapped, {self.ambiguous} ambiguous), {self.written} written"
        )


class SiteExportPipeline:
    """Extracts, orders and writes the variant sites of an aligned block."""

    def __init__(self, config: ExportConfig, registry: Optional[GenomeRegistry] = None):
        self.config = config
        self.registry = registry if registry is not None else load_registry(
            config.chromosome_table, config.feature_table
        )

        block_genomes = config.block.genome_count
        if block_genomes != self.registry.genome_count():
            raise ValueError(
                f"Alignment block has {block_genomes} rows but the registry "
                f"has {self.registry.genome_count()} genomes"
            )
        if not 0 <= config.site.reference_genome < block_genomes:
            raise ValueError(
                f"Reference genome {config.site.reference_genome} is out of range "
                f"for {block_genomes} genomes"
            )

    def _extract(self) -> List[VariantSite]:
        site_cfg = self.config.site
        return extract_sites(
            self.config.block,
            self.registry,
            include_gapped=site_cfg.include_gapped,
            gap_char=site_cfg.gap_char,
        )

    def _filter_and_sort(self, sites: List[VariantSite]) -> List[VariantSite]:
        site_cfg = self.config.site
        if not site_cfg.include_ambiguous:
            kept = [s for s in sites if not s.has_ambiguity()]
            logger.info(f"Dropped {len(sites) - len(kept)} ambiguous sites")
            sites = kept
        return sort_sites(sites, site_cfg.reference_genome)

    def collect_sites(self) -> List[VariantSite]:
        """Extract sites and order them along the reference genome."""
        return self._filter_and_sort(self._extract())

    def run(self, output_path: Optional[Path] = None) -> ExportSummary:
        """
        Run the export.

        Args:
            output_path: Output TSV (uses config.output if None)

        Returns:
            ExportSummary with column and site counts
        """
        output_path = Path(output_path or self.config.output)

        logger.info(
            f"Scanning {self.config.block.length} columns across "
            f"{self.registry.genome_count()} genomes"
        )
        all_sites = self._extract()
        summary = ExportSummary(
            columns=self.config.block.length,
            sites=len(all_sites),
            gapped=sum(1 for s in all_sites if s.has_gap()),
            ambiguous=sum(1 for s in all_sites if s.has_ambiguity()),
        )

        sites = self._filter_and_sort(all_sites)
        genome_names = [g.name for g in self.registry]
        summary.output_path = write_site_table(
            sites, output_path, genome_names, header=self.config.header
        )
        summary.written = len(sites)

        logger.info(f"Export complete: {summary}")
        return summary
