"""Clipping of coordinates and regions against reference bounds.

All coordinates are clamped to the coordinate floor (``chrom_base``). When a
reference table is supplied, coordinates and regions are further limited to
the span of their chromosome.

Example:
    >>> from chromregion.core.clip import CoordinateRef, clip_coordinate
    >>> clip_coordinate(CoordinateRef("chr2", 500000), table)
    CoordinateRef(chr='chr2', coor=99999)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import attrs

from chromregion.config import DEFAULT_CHROM_BASE
from chromregion.core.reference import ReferenceTable, lookup_chrom
from chromregion.errors import InvalidArgumentError, OutOfBoundsError, UnknownChromosomeError

if TYPE_CHECKING:
    from chromregion.core.region import ChromRegion

logger = logging.getLogger(__name__)


@attrs.define(frozen=True)
class CoordinateRef:
    """A single coordinate on a chromosome.

    Attributes:
        chr: Chromosome name.
        coor: Coordinate value (0-based).
    """

    chr: str
    coor: int


def clip_coordinate(
    coord: CoordinateRef,
    ref_table: ReferenceTable | None = None,
    chrom_base: int = DEFAULT_CHROM_BASE,
) -> CoordinateRef:
    """Clip a single coordinate.

    The coordinate is first raised to ``chrom_base``; if the reference table
    knows the chromosome, it is then limited to the last valid point of the
    chromosome (``end - 1``) and to its first point.

    Args:
        coord: Coordinate to clip.
        ref_table: Optional reference table.
        chrom_base: Minimum valid coordinate.

    Returns:
        A new, clipped CoordinateRef.
    """
    coor = max(coord.coor, chrom_base)
    info = lookup_chrom(ref_table, coord.chr)
    if info is not None:
        coor = min(max(coor, info.start), info.end - 1)
    return attrs.evolve(coord, coor=coor)


def clip_region(
    region: ChromRegion,
    ref_table: ReferenceTable | None = None,
    min_length: int | None = None,
) -> ChromRegion:
    """Clip a region in place.

    Steps:
        1. Raise ``start`` to the region's ``chrom_base``.
        2. With a reference table, rename the chromosome to its canonical
           case and lower ``end`` to the chromosome end.
        3. With ``min_length``, widen regions shorter than ``min_length``
           (to the left first, then to the right within the chromosome).

    Args:
        region: Region to clip; modified in place.
        ref_table: Optional reference table.
        min_length: Optional minimum length of the clipped region.

    Returns:
        The same region.

    Raises:
        UnknownChromosomeError: If the chromosome is not in ``ref_table``.
        InvalidArgumentError: If ``min_length`` is negative.
        OutOfBoundsError: If the clipped region would have ``start > end``.
    """
    chrom_base = region.chrom_base
    chrom = region.chr
    start = max(region.start, chrom_base)
    end = region.end

    info = None
    if ref_table is not None:
        info = lookup_chrom(ref_table, chrom)
        if info is None:
            raise UnknownChromosomeError(chrom)
        chrom = info.chr
        end = min(end, info.end)

    if min_length is not None:
        if min_length < 0:
            raise InvalidArgumentError(f"Minimum length must be >= 0, got {min_length}")
        if start > end - min_length:
            logger.info(f"Coordinates out of bounds: {chrom}:{start}-{end}.")
            start = max(chrom_base, end - min_length)
            if info is not None:
                end = min(info.end, start + min_length)
            logger.info(f"Changed into: {chrom}:{start}-{end}.")

    if start > end:
        raise OutOfBoundsError(chrom, start, end)

    region.chr = chrom
    region.set_bounds(start, end)
    return region
