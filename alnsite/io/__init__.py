"""
Input/output modules for alnsite.

Author: Kevin R. Roy
"""

from .genomes import (
    load_chromosome_table,
    load_feature_table,
    load_registry,
    parse_strand,
)
from .output import (
    site_table_columns,
    sites_to_dataframe,
    write_site_table,
)

__all__ = [
    'load_chromosome_table',
    'load_feature_table',
    'load_registry',
    'parse_strand',
    'site_table_columns',
    'sites_to_dataframe',
    'write_site_table',
]
