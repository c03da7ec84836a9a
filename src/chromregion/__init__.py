"""chromregion: chromosomal regions and their interval algebra.

chromregion models a region on a named chromosome (0-based, half-open,
with an optional strand) and provides parsing, formatting, comparison,
clipping against a reference genome, and interval operations such as
overlap, union, intersection, subtraction, shifting and resizing.

Example:
    >>> from chromregion import ChromRegion
    >>> region = ChromRegion("chr1:12345-67890(+)")
    >>> region.overlap(ChromRegion("chr1:60000-77890(+)"))
    7891

Modules:
    core: Region value type, clipping, reference tables, interval algebra
    strand: Tri-state strand and its parser
    config: Configuration defaults and loading
    errors: Exception hierarchy
    utils: Text parsing/formatting, chromosome name ordering, logging
"""

from chromregion.core.algebra import round_half_up
from chromregion.core.clip import CoordinateRef, clip_coordinate, clip_region
from chromregion.core.reference import (
    ChromInfo,
    ReferenceTable,
    build_reference_table,
    lookup_chrom,
)
from chromregion.core.region import ChromRegion, compare, is_equal, is_valid_chrom_region
from chromregion.errors import (
    ChromRegionError,
    InvalidArgumentError,
    InvalidFormatError,
    InvalidMutationError,
    OutOfBoundsError,
    UnknownChromosomeError,
)
from chromregion.strand import Strand, parse_strand
from chromregion.utils.chrom_names import chrom_sort_key, compare_chrom_names

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Region
    "ChromRegion",
    "compare",
    "is_equal",
    "is_valid_chrom_region",
    "round_half_up",
    # Clipping and reference tables
    "CoordinateRef",
    "clip_coordinate",
    "clip_region",
    "ChromInfo",
    "ReferenceTable",
    "build_reference_table",
    "lookup_chrom",
    # Strand
    "Strand",
    "parse_strand",
    # Chromosome ordering
    "chrom_sort_key",
    "compare_chrom_names",
    # Errors
    "ChromRegionError",
    "InvalidArgumentError",
    "InvalidFormatError",
    "InvalidMutationError",
    "OutOfBoundsError",
    "UnknownChromosomeError",
]
