"""
Site table output.

Author: Kevin R. Roy
"""

from pathlib import Path
from typing import List, Optional, Sequence
import logging

import pandas as pd

from ..core.site import VariantSite

logger = logging.getLogger(__name__)

PATTERN_COLUMN = 'SNP pattern'


def site_table_columns(genome_names: Sequence[str]) -> List[str]:
    """Column names: pattern, then contig / position in contig / genome-wide position per genome."""
    columns = [PATTERN_COLUMN]
    for name in genome_names:
        columns.extend([f"{name}_Contig", f"{name}_PosInContg", f"{name}_GenWidePos"])
    return columns


def sites_to_dataframe(
    sites: Sequence[VariantSite],
    genome_names: Optional[Sequence[str]] = None
) -> pd.DataFrame:
    """
    Tabulate sites, one row per site in the site line layout.

    Args:
        sites: Sites to tabulate
        genome_names: Genome names for the column headers
            (defaults to sequence_1, sequence_2, ...)

    Returns:
        DataFrame with one row per site
    """
    if genome_names is None:
        count = sites[0].genome_count if sites else 0
        genome_names = [f"sequence_{i + 1}" for i in range(count)]

    columns = site_table_columns(genome_names)
    rows = [site.to_fields() for site in sites]
    for row in rows:
        if len(row) != len(columns):
            raise ValueError(
                f"Site has {(len(row) - 1) // 3} genomes but {len(genome_names)} genome names were given"
            )
    return pd.DataFrame(rows, columns=columns)


def write_site_table(
    sites: Sequence[VariantSite],
    output_path: Path,
    genome_names: Optional[Sequence[str]] = None,
    header: bool = True,
) -> Path:
    """
    Write sites to a TSV file.

    Args:
        sites: Sites in the order they should be written
        output_path: Path for output TSV
        genome_names: Genome names for the header
        header: Write the header line

    Returns:
        Path to written file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    df = sites_to_dataframe(sites, genome_names)
    df.to_csv(output_path, sep='\t', index=False, header=header)

    logger.info(f"Wrote {len(df)} sites to {output_path}")
    return output_path
