"""
alnsite - variant sites of multi-genome alignments.

Author: Kevin R. Roy
"""

__version__ = "0.1.0"
__author__ = "Kevin R. Roy"

from .config import (
    ExportConfig,
    SiteConfig,
)
from .core.genome import Chromosome, Feature, Genome, GenomeRegistry
from .core.intervals import relative_pos
from .core.ordering import compare_sites, sort_sites
from .core.site import GenomeIndexError, VariantSite

__all__ = [
    "SiteConfig",
    "ExportConfig",
    "Chromosome",
    "Feature",
    "Genome",
    "GenomeRegistry",
    "VariantSite",
    "GenomeIndexError",
    "relative_pos",
    "compare_sites",
    "sort_sites",
    "__version__",
]
