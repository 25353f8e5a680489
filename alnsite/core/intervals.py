"""
Strand-aware comparison of variant sites against feature intervals.

Author: Kevin R. Roy
"""

from dataclasses import dataclass, field
from typing import Iterable, List

from .genome import Feature
from .site import VariantSite


def relative_pos(site: VariantSite, feature: Feature) -> int:
    """
    Position of a site relative to a feature in the feature's genome.

    Comparison follows the feature's reading direction, so on the reverse
    strand "before" means numerically greater than the right bound. A site
    on the other strand is before a forward feature and after a reverse
    one, whatever its coordinate. A gap is always after.

    Args:
        site: The site to compare
        feature: The feature to compare against

    Returns:
        -1 if the site comes before the feature, 0 if it lies within it,
        1 if it comes after it
    """
    position = site.get_position(feature.genome_index)
    coord = abs(position)
    if coord == 0:
        return 1

    site_fwd = position > 0
    feat_fwd = feature.strand > 0
    if site_fwd != feat_fwd:
        return -1 if feat_fwd else 1

    if feat_fwd:
        if coord < feature.left:
            return -1
        elif coord <= feature.right:
            return 0
        else:
            return 1
    else:
        if coord > feature.right:
            return -1
        elif coord >= feature.left:
            return 0
        else:
            return 1


def features_containing(site: VariantSite, features: Iterable[Feature]) -> List[Feature]:
    """Return the features that contain the site on their own strand."""
    return [f for f in features if relative_pos(site, f) == 0]


@dataclass
class SitePartition:
    """Sites split by their position relative to one feature."""
    feature: Feature
    before: List[VariantSite] = field(default_factory=list)
    within: List[VariantSite] = field(default_factory=list)
    after: List[VariantSite] = field(default_factory=list)


def partition_sites(sites: Iterable[VariantSite], feature: Feature) -> SitePartition:
    """Split sites into those before, within and after a feature."""
    partition = SitePartition(feature=feature)
    buckets = {-1: partition.before, 0: partition.within, 1: partition.after}
    for site in sites:
        buckets[relative_pos(site, feature)].append(site)
    return partition
