"""Core region model for chromregion.

This module contains the region value type and the operations on it:

- region: ChromRegion, compare, is_equal
- clip: coordinate and region clipping
- reference: reference chromosome tables
- algebra: overlap, assimilate, concat, intersect, minus, move, extend

Example:
    >>> from chromregion.core import ChromRegion
    >>> ChromRegion("chr1:1-100").length
    100
"""

from chromregion.core.region import ChromRegion, compare, is_equal, is_valid_chrom_region

__all__ = [
    "ChromRegion",
    "compare",
    "is_equal",
    "is_valid_chrom_region",
]
