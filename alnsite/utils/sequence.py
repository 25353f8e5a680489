"""
Alignment symbol utilities.

Provides the gap symbol and IUPAC ambiguity code handling used when
classifying alignment columns.

Author: Kevin R. Roy
"""

from typing import Iterable, Set

GAP_CHAR = '-'

# IUPAC two-base and multi-base codes, plus X for unknown
AMBIGUITY_CODES = frozenset('KMRYSWBVHDXN')


def is_gap(base: str, gap_char: str = GAP_CHAR) -> bool:
    """Return True if base is the gap symbol."""
    return base == gap_char


def is_ambiguity_code(base: str) -> bool:
    """Return True if base is an IUPAC ambiguity code (case-insensitive)."""
    return base.upper() in AMBIGUITY_CODES


def is_ambiguous(base: str, gap_char: str = GAP_CHAR) -> bool:
    """Return True if base is an ambiguity code or the gap symbol.

    Gaps count as ambiguous here: a column with a gap cannot be called
    as a clean substitution.
    """
    return is_gap(base, gap_char) or is_ambiguity_code(base)


def distinct_bases(column: Iterable[str], gap_char: str = GAP_CHAR) -> Set[str]:
    """Return the set of uppercased non-gap bases in an alignment column."""
    return {base.upper() for base in column if base != gap_char}


def is_variable_column(
    column: Iterable[str],
    gap_char: str = GAP_CHAR,
    include_gapped: bool = False
) -> bool:
    """Check whether an alignment column carries a variant.

    Args:
        column: One character per genome
        gap_char: Gap symbol
        include_gapped: Also accept columns mixing gaps with a single base

    Returns:
        True if the column has two or more distinct non-gap bases, or
        (with include_gapped) a gap next to at least one base
    """
    column = list(column)
    bases = distinct_bases(column, gap_char)
    if len(bases) > 1:
        return True
    if include_gapped and bases:
        return any(base == gap_char for base in column)
    return False
