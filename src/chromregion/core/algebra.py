"""Interval algebra on chromosomal regions.

Operations fall in two groups:

- Mutating: ``assimilate``, ``concat``, ``intersect``, ``move`` and
  ``extend`` modify their first argument and return it (or return None,
  leaving it untouched, when the operation does not apply).
- Non-mutating: ``overlap`` and ``minus`` leave their arguments unchanged;
  ``minus`` returns newly created pieces.

Regions on different chromosomes never overlap and are never combined.
With ``strand_specific=True``, two regions only conflict when both strands
are known and differ; an unknown strand matches either strand.

Example:
    >>> from chromregion import ChromRegion
    >>> from chromregion.core import algebra
    >>> a = ChromRegion("chr1:5001-50000")
    >>> [str(r) for r in algebra.minus(a, ChromRegion("chr1:15001-28000"))]
    ['chr1:5001-15000', 'chr1:28001-50000']
"""

from __future__ import annotations

import math
from numbers import Real
from typing import TYPE_CHECKING

from chromregion.core.reference import ReferenceTable, lookup_chrom
from chromregion.errors import InvalidArgumentError
from chromregion.strand import Strand

if TYPE_CHECKING:
    from chromregion.core.region import ChromRegion


# =============================================================================
# Helpers
# =============================================================================


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounded towards +infinity.

    Unlike the built-in ``round``, halves never go to the even neighbour.

    Example:
        >>> round_half_up(1000.5), round_half_up(-3000.5)
        (1001, -3000)
    """
    return math.floor(value + 0.5)


def _finite(value: object, what: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
        raise InvalidArgumentError(f"Invalid {what}: {value!r}")
    return value


def _strands_conflict(a: ChromRegion, b: ChromRegion, strand_specific: bool) -> bool:
    return strand_specific and a.strand.conflicts_with(b.strand)


def _disjoint(a: ChromRegion, b: ChromRegion) -> bool:
    return a.start >= b.end or a.end <= b.start


# =============================================================================
# Overlap-based Operations
# =============================================================================


def overlap(a: ChromRegion, b: ChromRegion, strand_specific: bool = False) -> int:
    """Length of the overlap between two regions.

    Args:
        a: First region.
        b: Second region.
        strand_specific: Whether regions on opposite known strands are
            considered non-overlapping.

    Returns:
        Overlap length in base pairs (0 if none).
    """
    if a.chr != b.chr or _strands_conflict(a, b, strand_specific) or _disjoint(a, b):
        return 0
    return min(a.end, b.end) - max(a.start, b.start)


def assimilate(
    a: ChromRegion,
    b: ChromRegion,
    strand_specific: bool = False,
    ignore_overlap: bool = False,
) -> ChromRegion | None:
    """Expand ``a`` to cover ``b`` as well.

    Args:
        a: Region to expand; modified in place.
        b: Region to assimilate.
        strand_specific: Whether opposite known strands block assimilation.
        ignore_overlap: Assimilate even if the regions do not overlap (they
            must still be on the same chromosome).

    Returns:
        ``a`` if assimilated, None otherwise (``a`` unchanged).
    """
    if a.chr != b.chr or _strands_conflict(a, b, strand_specific):
        return None
    if not ignore_overlap and not overlap(a, b, strand_specific):
        return None
    a.set_bounds(min(a.start, b.start), max(a.end, b.end))
    return a


def concat(a: ChromRegion, b: ChromRegion, strand_specific: bool = False) -> ChromRegion | None:
    """Concatenate ``b`` to ``a`` if the two are adjacent.

    ``b`` may sit on either side of ``a``. Overlapping regions are not
    concatenated.

    Returns:
        ``a`` if concatenated, None otherwise (``a`` unchanged).
    """
    if a.chr != b.chr or _strands_conflict(a, b, strand_specific):
        return None
    if a.end == b.start:
        a.set_bounds(a.start, b.end)
    elif a.start == b.end:
        a.set_bounds(b.start, a.end)
    else:
        return None
    return a


def intersect(a: ChromRegion, b: ChromRegion, strand_specific: bool = False) -> ChromRegion | None:
    """Shrink ``a`` to its overlap with ``b``.

    Returns:
        ``a`` if the regions overlap, None otherwise (``a`` unchanged).
    """
    if not overlap(a, b, strand_specific):
        return None
    a.set_bounds(max(a.start, b.start), min(a.end, b.end))
    return a


def minus(a: ChromRegion, b: ChromRegion, strand_specific: bool = False) -> list[ChromRegion]:
    """Parts of ``a`` not covered by ``b``.

    A zero-length ``b`` strictly inside ``a`` splits ``a`` in two.

    Args:
        a: Region to subtract from; not modified.
        b: Region to subtract.
        strand_specific: Whether opposite known strands prevent subtraction.

    Returns:
        ``[a]`` (the same instance) if ``b`` does not touch ``a``; otherwise
        0-2 new regions, left remainder first. The pieces keep the
        chromosome, strand, name and attributes of ``a``.
    """
    if a.chr != b.chr or _strands_conflict(a, b, strand_specific) or _disjoint(a, b):
        return [a]

    pieces = []
    if b.start > a.start:
        left = a.clone()
        left.set_bounds(a.start, b.start)
        pieces.append(left)
    if b.end < a.end:
        right = a.clone()
        right.set_bounds(b.end, a.end)
        pieces.append(right)
    return pieces


# =============================================================================
# Move and Resize
# =============================================================================


def move(
    region: ChromRegion,
    distance: float,
    is_proportion: bool = False,
    ref_table: ReferenceTable | None = None,
    relative_to_strand: bool = False,
) -> ChromRegion:
    """Shift a region in place.

    Positive distances move to the right. The distance is shrunk as needed
    so the region stays within ``chrom_base`` and the chromosome end.

    Args:
        region: Region to move; modified in place.
        distance: Distance in bp, or a fraction of the length.
        is_proportion: Whether ``distance`` is a fraction of the length.
        ref_table: Optional reference table for the right bound.
        relative_to_strand: Reverse the direction on the negative strand.

    Returns:
        The same region.

    Raises:
        InvalidArgumentError: If ``distance`` is not a finite number.
    """
    distance = _finite(distance, "distance")
    if is_proportion:
        distance *= region.length
    distance = round_half_up(distance)
    if relative_to_strand and region.strand is Strand.NEGATIVE:
        distance = -distance

    if region.start + distance < region.chrom_base:
        distance = region.chrom_base - region.start
    else:
        info = lookup_chrom(ref_table, region.chr)
        if info is not None and region.end + distance > info.end:
            distance = info.end - region.end

    region.set_bounds(region.start + distance, region.end + distance)
    return region


def extend(
    region: ChromRegion,
    size_diff: float,
    center: float | None = None,
    is_proportion: bool = False,
    ref_table: ReferenceTable | None = None,
    minimum_size: int = 1,
) -> ChromRegion:
    """Extend (positive ``size_diff``) or shrink (negative) a region in place.

    The size difference is split between both ends in proportion to how the
    length is divided by ``center``: with the default center (the midpoint)
    both ends move equally, with ``center`` at ``start`` only the end moves.

    Args:
        region: Region to resize; modified in place.
        size_diff: Size difference in bp, or a fraction of the length.
        center: Fixed point of the resize. Defaults to the midpoint;
            values outside the region are moved to the closest end.
        is_proportion: Whether ``size_diff`` is a fraction of the length.
        ref_table: Optional reference table bounding the result.
        minimum_size: Minimum size of the result.

    Returns:
        The same region.

    Raises:
        InvalidArgumentError: If ``size_diff`` or ``center`` is not a
            finite number, or ``minimum_size`` is negative.
    """
    size_diff = _finite(size_diff, "size difference")
    if center is not None:
        center = _finite(center, "center")
    if minimum_size < 0:
        raise InvalidArgumentError(f"Minimum size must be >= 0, got {minimum_size}")
    if not size_diff:
        return region

    start, end, length = region.start, region.end, region.length
    if is_proportion:
        size_diff *= length
    size_diff = round_half_up(size_diff)
    new_size = length + size_diff

    if center is None:
        center = (start + end) / 2
    center = min(max(center, start), end)

    info = lookup_chrom(ref_table, region.chr)
    if new_size < minimum_size:
        new_size = minimum_size
        size_diff = new_size - length
    elif info is not None and info.length < new_size:
        new_size = info.length

    if center > start:
        # Room on the left: split proportionally around center
        start -= round_half_up(size_diff * (center - start) / length)
        start = max(start, region.chrom_base)
        end = start + new_size
    else:
        end += size_diff

    if info is not None and end > info.end:
        end = info.end
        start = end - new_size

    region.set_bounds(start, end)
    return region
