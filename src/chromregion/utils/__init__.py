"""Utility functions for chromregion.

This module provides common utilities used across chromregion:

- Region string and BED line parsing/formatting
- Natural chromosome name ordering
- Logging configuration

Example:
    >>> from chromregion.utils.regions import parse_region, RegionFields
    >>> fields = parse_region("chr1:1000-2000")
    >>> from chromregion.utils.chrom_names import chrom_sort_key
    >>> sorted(["chr10", "chr2"], key=chrom_sort_key)
    ['chr2', 'chr10']
"""

from chromregion.utils.chrom_names import chrom_sort_key, compare_chrom_names, split_chrom_name
from chromregion.utils.regions import (
    RegionFields,
    parse_bed_line,
    parse_region,
    region_from_scaffold,
    region_to_bed,
    region_to_str,
)

__all__ = [
    "RegionFields",
    "parse_region",
    "parse_bed_line",
    "region_to_str",
    "region_to_bed",
    "region_from_scaffold",
    "chrom_sort_key",
    "compare_chrom_names",
    "split_chrom_name",
]
