"""
Core site model for alnsite.

Author: Kevin R. Roy
"""

from .coordinates import (
    SignedPosition,
    Strand,
    magnitude,
    strand_of,
)
from .extract import (
    AlignedBlock,
    extract_sites,
)
from .genome import (
    Chromosome,
    ChromosomeNotFoundError,
    Feature,
    Genome,
    GenomeRegistry,
)
from .intervals import (
    SitePartition,
    features_containing,
    partition_sites,
    relative_pos,
)
from .ordering import (
    compare_sites,
    site_comparator,
    sort_sites,
)
from .site import (
    GenomeIndexError,
    VariantSite,
)

__all__ = [
    # Coordinates
    'Strand',
    'SignedPosition',
    'strand_of',
    'magnitude',
    # Genomes
    'Chromosome',
    'ChromosomeNotFoundError',
    'Feature',
    'Genome',
    'GenomeRegistry',
    # Sites
    'VariantSite',
    'GenomeIndexError',
    # Ordering
    'compare_sites',
    'site_comparator',
    'sort_sites',
    # Intervals
    'relative_pos',
    'features_containing',
    'SitePartition',
    'partition_sites',
    # Extraction
    'AlignedBlock',
    'extract_sites',
]
