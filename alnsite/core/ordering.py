"""
Reference-relative ordering of variant sites.

Sites are ordered by their position in one reference genome: forward
strand sites ascending, then reverse strand sites in descending numeric
order (i.e. ascending along the reverse strand).

Author: Kevin R. Roy
"""

from functools import cmp_to_key
from typing import Callable, Iterable, List

from .site import VariantSite


def compare_sites(a: VariantSite, b: VariantSite, reference_index: int) -> int:
    """
    Compare two sites by position in the reference genome.

    A position of 0 (no base in the reference) is classed with the forward
    strand when the other site is present, so 0 sorts before any reverse
    strand site. Against a forward strand site the comparison is not
    symmetric: both compare(0, x) and compare(x, 0) return 1 for x > 0.

    Args:
        a: First site
        b: Second site
        reference_index: Genome index to order by

    Returns:
        -1, 0 or 1
    """
    p1 = a.get_position(reference_index)
    p2 = b.get_position(reference_index)
    if p1 == 0 and p2 == 0:
        return 0

    if (p1 >= 0) != (p2 >= 0):
        # reverse strand sites go last
        return 1 if p1 < 0 else -1

    if p1 > 0:
        if p1 > p2:
            return 1
        if p1 < p2:
            return -1
        return 0

    # reverse strand (or zero against a forward site): descending
    if p1 > p2:
        return -1
    if p1 < p2:
        return 1
    return 0


def site_comparator(reference_index: int) -> Callable:
    """Return a sort key ordering sites along the given reference genome."""
    return cmp_to_key(lambda a, b: compare_sites(a, b, reference_index))


def sort_sites(sites: Iterable[VariantSite], reference_index: int) -> List[VariantSite]:
    """Return the sites sorted along the given reference genome."""
    return sorted(sites, key=site_comparator(reference_index))
