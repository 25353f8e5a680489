"""
Variant site extraction from an aligned block.

Walks the columns of an already-aligned block, tracking each genome's
genome-wide position, and emits a VariantSite for each variable column.

Author: Kevin R. Roy
"""

from dataclasses import dataclass
from typing import List
import logging

from .site import VariantSite
from ..utils.sequence import GAP_CHAR, is_variable_column

logger = logging.getLogger(__name__)


@dataclass
class AlignedBlock:
    """
    A gapped alignment block with one row per genome.

    Attributes:
        rows: Aligned rows in genome-index order, all the same length
        starts: Signed genome-wide start of each row. Positive values give
            the left end of a forward-strand row; negative values give
            the right end (as a negative number) of a reverse-strand row,
            whose bases are numbered downwards. 0 marks a genome absent
            from the block (all-gap row).
    """
    rows: List[str]
    starts: List[int]

    def __post_init__(self):
        if len(self.rows) != len(self.starts):
            raise ValueError(
                f"Block has {len(self.rows)} rows but {len(self.starts)} start positions"
            )
        lengths = {len(row) for row in self.rows}
        if len(lengths) > 1:
            raise ValueError(f"Aligned rows differ in length: {sorted(lengths)}")

    @property
    def genome_count(self) -> int:
        return len(self.rows)

    @property
    def length(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def column(self, idx: int) -> str:
        return ''.join(row[idx] for row in self.rows)


def extract_sites(
    block: AlignedBlock,
    authority,
    include_gapped: bool = False,
    gap_char: str = GAP_CHAR
) -> List[VariantSite]:
    """
    Build VariantSites for the variable columns of a block.

    Args:
        block: The aligned block
        authority: Coordinate authority used to resolve positions
        include_gapped: Also emit columns where a gap sits next to a
            single base
        gap_char: Gap symbol

    Returns:
        List of VariantSite objects in column order

    Raises:
        ValueError: If a genome marked absent (start 0) has bases
    """
    for i, (row, start) in enumerate(zip(block.rows, block.starts)):
        if start == 0 and any(base != gap_char for base in row):
            raise ValueError(f"Row {i} has bases but no start position")

    # Position of the next base in each row
    next_pos = list(block.starts)
    sites = []

    for col_idx in range(block.length):
        column = block.column(col_idx)
        positions = []
        for i, base in enumerate(column):
            if base == gap_char:
                positions.append(0)
                continue
            if next_pos[i] == 0:
                raise ValueError(f"Row {i} runs past the start of its genome")
            positions.append(next_pos[i])
            # reverse rows are stored negative, so their magnitude counts down
            next_pos[i] += 1

        if not is_variable_column(column, gap_char, include_gapped):
            continue

        site = VariantSite(authority, genome_count=block.genome_count, gap_char=gap_char)
        for i, (base, position) in enumerate(zip(column, positions)):
            if position != 0:
                site.set_genome_base(i, base, position)
        sites.append(site)

    logger.debug(f"Extracted {len(sites)} sites from {block.length} columns")
    return sites
