"""
Utility modules for alnsite.

Author: Kevin R. Roy
"""

from .sequence import (
    AMBIGUITY_CODES,
    GAP_CHAR,
    distinct_bases,
    is_ambiguity_code,
    is_ambiguous,
    is_gap,
    is_variable_column,
)

__all__ = [
    'GAP_CHAR',
    'AMBIGUITY_CODES',
    'is_gap',
    'is_ambiguity_code',
    'is_ambiguous',
    'distinct_bases',
    'is_variable_column',
]
