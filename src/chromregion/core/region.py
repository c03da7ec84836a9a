"""The chromosomal region value type.

A :class:`ChromRegion` is a chromosome name plus a 0-based, half-open
coordinate interval, with an optional strand, name and caller-supplied
attributes. Regions can be built from:

- a region string (``chr1:12345-67890(+)``, 1-based inclusive),
- a mapping with ``chr``/``start``/``end`` (and optional ``strand``,
  ``name``/``regionname`` or a ``bedString``),
- another ChromRegion (copy constructor).

Every region is clipped on construction (see
:func:`chromregion.core.clip.clip_region`).

Example:
    >>> from chromregion import ChromRegion
    >>> region = ChromRegion("chr1:12345-67890")
    >>> region.start, region.end, region.length
    (12344, 67890, 55546)
    >>> region.get_extension(10000).to_display_string()
    'chr1:7345-72890'
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Mapping
from numbers import Integral, Real
from typing import Any, ClassVar

from chromregion.config import RegionConfig
from chromregion.core import algebra
from chromregion.core.clip import CoordinateRef, clip_coordinate, clip_region
from chromregion.core.reference import ReferenceTable, lookup_chrom
from chromregion.errors import ChromRegionError, InvalidFormatError, InvalidMutationError
from chromregion.strand import Strand, parse_strand
from chromregion.utils.chrom_names import chrom_sort_key
from chromregion.utils.regions import (
    RegionFields,
    parse_bed_line,
    parse_region,
    region_from_scaffold,
    region_to_bed,
    region_to_str,
)

logger = logging.getLogger(__name__)

# Keys of a source mapping that never end up in ``attributes``
BUILTIN_FIELDS = frozenset(
    {"chr", "start", "end", "strand", "name", "regionname", "bedString", "bed_string"}
)


def _coerce_coordinate(value: object, field: str) -> int:
    """Convert a coordinate from a caller-supplied mapping to int."""
    if isinstance(value, bool) or value is None:
        raise InvalidFormatError(f"Invalid {field} coordinate: {value!r}")
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, Real):
        if not math.isfinite(value):
            raise InvalidFormatError(f"Invalid {field} coordinate: {value!r}")
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip().replace(",", ""))
        except ValueError as e:
            raise InvalidFormatError(f"Invalid {field} coordinate: {value!r}") from e
    raise InvalidFormatError(f"Invalid {field} coordinate: {value!r}")


def _coerce_name(value: object) -> str:
    """Region names are stored as strings; empty values become ''."""
    return str(value) if value else ""


def _shorten_string(text: str, limit: int, prefix_length: int, suffix_length: int) -> str:
    if text and len(text) > limit:
        suffix = text[len(text) - suffix_length :] if suffix_length else ""
        return text[:prefix_length] + "..." + suffix
    return text


class ChromRegion:
    """A chromosomal region.

    Attributes:
        chr: Chromosome name (case preserved).
        name: Display label ('' when absent).
        attributes: Caller-supplied data attached at construction.
        config: Class-level region configuration.

    Args:
        source: Region string, mapping, or ChromRegion to copy.
        ref_table: Optional reference table used to resolve whole-chromosome
            strings and to clip the region.
        extra: Optional additional parameters. ``name``/``regionname`` fill an
            empty name; other non-built-in keys are added to ``attributes``
            unless already present.
        zero_based: Whether the start of a region string is 0-based.

    Raises:
        InvalidFormatError: If the source cannot be parsed.
        UnknownChromosomeError: If the chromosome is not in ``ref_table``.
        OutOfBoundsError: If the clipped region has ``start > end``.
    """

    config: ClassVar[RegionConfig] = RegionConfig()
    CHROM_BASE: ClassVar[int] = config.chrom_base

    # Mutable value type
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        source: str | Mapping[str, Any] | ChromRegion,
        ref_table: ReferenceTable | None = None,
        extra: Mapping[str, Any] | None = None,
        zero_based: bool = False,
    ) -> None:
        self.chr = ""
        self._start = 0
        self._end = 0
        self._strand = Strand.UNKNOWN
        self.name = ""
        self.attributes: dict[str, Any] = {}

        try:
            if isinstance(source, ChromRegion):
                self._init_from_region(source)
            elif isinstance(source, str):
                self._init_from_string(source, zero_based, ref_table)
            elif isinstance(source, Mapping):
                self._init_from_mapping(source)
            else:
                raise InvalidFormatError(
                    "Must create ChromRegion with a string, a mapping or a ChromRegion, "
                    f"got {type(source).__name__}"
                )
            self.clip_region(ref_table)
            if extra is not None:
                self._merge_extra(extra)
        except ChromRegionError as e:
            logger.warning(f"Cannot create chromosomal region from {source!r}: {e}")
            raise

    # -------------------------------------------------------------------------
    # Construction helpers
    # -------------------------------------------------------------------------

    def _apply_fields(self, fields: RegionFields) -> None:
        self.chr = fields.chr
        self._start = fields.start
        self._end = fields.end
        self._strand = fields.strand
        self.name = fields.name

    def _init_from_region(self, other: ChromRegion) -> None:
        self._apply_fields(other.to_fields())
        self.attributes = dict(other.attributes)

    def _init_from_string(
        self,
        region_str: str,
        zero_based: bool,
        ref_table: ReferenceTable | None,
    ) -> None:
        info = lookup_chrom(ref_table, region_str.strip())
        if info is not None:
            # Whole chromosome
            self._apply_fields(RegionFields(info.chr, info.start, info.end))
            return
        self._apply_fields(parse_region(region_str, zero_based, self.chrom_base))

    def _init_from_mapping(self, source: Mapping[str, Any]) -> None:
        name = _coerce_name(source.get("regionname") or source.get("name"))
        bed_line = source.get("bedString", source.get("bed_string"))

        if bed_line is not None:
            if not isinstance(bed_line, str):
                raise InvalidFormatError(f"BED line must be a string, got {type(bed_line).__name__}")
            fields = parse_bed_line(bed_line)
            self._apply_fields(fields._replace(name=fields.name or name))
        else:
            missing = [key for key in ("chr", "start", "end") if source.get(key) is None]
            if missing:
                raise InvalidFormatError(f"Missing required region fields: {missing}")
            self._apply_fields(
                RegionFields(
                    chr=str(source["chr"]),
                    start=_coerce_coordinate(source["start"], "start"),
                    end=_coerce_coordinate(source["end"], "end"),
                    strand=parse_strand(source.get("strand")),
                    name=name,
                )
            )

        for key, value in source.items():
            if key not in BUILTIN_FIELDS:
                self.attributes[key] = value

    def _merge_extra(self, extra: Mapping[str, Any]) -> None:
        extra_name = _coerce_name(extra.get("regionname") or extra.get("name"))
        if extra_name and not self.name:
            self.name = extra_name
        for key, value in extra.items():
            if key in BUILTIN_FIELDS:
                if key not in ("name", "regionname"):
                    logger.debug(f"Ignoring built-in field '{key}' in extra parameters")
                continue
            self.attributes.setdefault(key, value)

    @classmethod
    def from_scaffold(cls, chrom: str, length: int) -> ChromRegion:
        """Create a region covering an entire chromosome.

        Args:
            chrom: Chromosome name.
            length: Chromosome length in base pairs.
        """
        fields = region_from_scaffold(chrom, length, cls.config.chrom_base)
        return cls({"chr": fields.chr, "start": fields.start, "end": fields.end})

    @classmethod
    def from_bed(cls, bed_line: str, ref_table: ReferenceTable | None = None) -> ChromRegion:
        """Create a region from a BED line (coordinates taken as-is)."""
        return cls({"bedString": bed_line}, ref_table)

    @classmethod
    def with_config(cls, config: RegionConfig) -> type[ChromRegion]:
        """Return a subclass of this class bound to another configuration.

        Example:
            >>> OneBased = ChromRegion.with_config(RegionConfig(chrom_base=1))
            >>> OneBased("chr1:1-100").start
            1
        """
        return type(cls.__name__, (cls,), {"config": config, "CHROM_BASE": config.chrom_base})

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def chrom_base(self) -> int:
        """Minimum valid coordinate for this region's class."""
        return type(self).config.chrom_base

    @property
    def start(self) -> int:
        """Start coordinate (0-based, inclusive)."""
        return self._start

    @start.setter
    def start(self, value: int) -> None:
        self.set_bounds(value, self._end)

    @property
    def end(self) -> int:
        """End coordinate (0-based, exclusive)."""
        return self._end

    @end.setter
    def end(self, value: int) -> None:
        self.set_bounds(self._start, value)

    @property
    def strand(self) -> Strand:
        """Strand of the region."""
        return self._strand

    @strand.setter
    def strand(self, value: object) -> None:
        self._strand = parse_strand(value)

    @property
    def length(self) -> int:
        """Region length in base pairs."""
        return self._end - self._start

    @property
    def start_coor(self) -> CoordinateRef:
        """Chromosome and start coordinate."""
        return CoordinateRef(self.chr, self._start)

    @property
    def end_coor(self) -> CoordinateRef:
        """Chromosome and last covered coordinate (``end - 1``)."""
        return CoordinateRef(self.chr, self._end - 1)

    @property
    def short_name(self) -> str:
        """The name, shortened with an ellipsis if longer than the limit.

        With the default configuration ``'Superlongregion123'`` becomes
        ``'Superl...n123'``.
        """
        config = type(self).config
        return _shorten_string(
            self.name,
            config.shortname_limit,
            config.shortname_prefix_length,
            config.shortname_suffix_length,
        )

    def set_bounds(self, start: int, end: int) -> None:
        """Set both coordinates at once.

        Raises:
            InvalidMutationError: If the coordinates are not integers, if
                ``start > end`` or if ``start`` is below ``chrom_base``.
        """
        for value in (start, end):
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise InvalidMutationError(f"Coordinate must be an integer, got {value!r}")
        if start > end:
            raise InvalidMutationError(f"Invalid coordinates for {self.chr}: start {start} > end {end}")
        if start < self.chrom_base:
            raise InvalidMutationError(f"Start {start} is below the coordinate floor {self.chrom_base}")
        self._start = int(start)
        self._end = int(end)

    def get_strand(self, flank_before: str = "", flank_after: str = "") -> str | None:
        """Strand symbol padded with flanking strings.

        Example:
            >>> ChromRegion("chr1:1-10(+)").get_strand("(", ")")
            '(+)'

        Returns:
            The padded symbol, or None if the strand is unknown.
        """
        if not self._strand.is_known:
            return None
        return f"{flank_before}{self._strand.symbol}{flank_after}"

    def get_attribute(self, key: str, default: Any = None) -> Any:
        """Get a caller-supplied attribute."""
        return self.attributes.get(key, default)

    def has_attribute(self, key: str) -> bool:
        """Check whether a caller-supplied attribute is present."""
        return key in self.attributes

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def to_fields(self) -> RegionFields:
        """Plain tuple of the built-in fields."""
        return RegionFields(self.chr, self._start, self._end, self._strand, self.name)

    def to_display_string(self, include_strand: bool = True) -> str:
        """Human-readable ``chr:start-end (strand)``, 1-based inclusive."""
        return region_to_str(self.to_fields(), include_strand, self.chrom_base)

    def to_bed_line(self, include_strand: bool = True) -> str:
        """BED4 line, or BED6 when the strand is known and requested."""
        return region_to_bed(self.to_fields(), include_strand)

    def __str__(self) -> str:
        return self.to_display_string(include_strand=True)

    def __repr__(self) -> str:
        name = f", name={self.name!r}" if self.name else ""
        return f"{type(self).__name__}({self.to_display_string()!r}{name})"

    # -------------------------------------------------------------------------
    # Equality and ordering
    # -------------------------------------------------------------------------

    def equal_to(self, other: ChromRegion | None) -> bool:
        """Check chromosome, coordinates, strand and name for equality."""
        if other is None:
            return False
        return self.to_fields() == other.to_fields()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChromRegion):
            return NotImplemented
        return self.equal_to(other) and self.attributes == other.attributes

    def sort_key(self, chrom_key: Callable[[str], Any] = chrom_sort_key) -> tuple:
        """Key giving the order of :func:`compare`, for ``sorted``."""
        return (chrom_key(self.chr), self._start, self._end)

    # -------------------------------------------------------------------------
    # Copies
    # -------------------------------------------------------------------------

    def clone(self) -> ChromRegion:
        """Independent copy; attributes are shallow-copied."""
        return type(self)(self)

    def __copy__(self) -> ChromRegion:
        return self.clone()

    # -------------------------------------------------------------------------
    # Clipping
    # -------------------------------------------------------------------------

    def clip_region(
        self,
        ref_table: ReferenceTable | None = None,
        min_length: int | None = None,
    ) -> ChromRegion:
        """Clip in place. See :func:`chromregion.core.clip.clip_region`."""
        return clip_region(self, ref_table, min_length)

    @classmethod
    def clip_coordinate(
        cls,
        coord: CoordinateRef,
        ref_table: ReferenceTable | None = None,
    ) -> CoordinateRef:
        """Clip a single coordinate using this class's ``chrom_base``."""
        return clip_coordinate(coord, ref_table, cls.config.chrom_base)

    @classmethod
    def is_valid_chrom_region(
        cls,
        region: str | Mapping[str, Any] | ChromRegion,
        ref_table: ReferenceTable | None = None,
    ) -> bool:
        """Check whether a region is valid against a reference table.

        Never raises: any construction or clipping failure yields False.
        """
        try:
            cls(region).clip_region(ref_table)
        except ChromRegionError as e:
            logger.info(f"Invalid chromosomal region {region!r}: {e}")
            return False
        return True

    # -------------------------------------------------------------------------
    # Interval algebra (mutating: return self, or None if not applicable)
    # -------------------------------------------------------------------------

    def overlap(self, other: ChromRegion, strand_specific: bool = False) -> int:
        """Overlap length with ``other`` (0 if none)."""
        return algebra.overlap(self, other, strand_specific)

    def assimilate(
        self,
        other: ChromRegion,
        strand_specific: bool = False,
        ignore_overlap: bool = False,
    ) -> ChromRegion | None:
        """Expand to cover ``other``. Mutates; returns self or None."""
        return algebra.assimilate(self, other, strand_specific, ignore_overlap)

    def concat(self, other: ChromRegion, strand_specific: bool = False) -> ChromRegion | None:
        """Join an adjacent ``other``. Mutates; returns self or None."""
        return algebra.concat(self, other, strand_specific)

    def intersect(self, other: ChromRegion, strand_specific: bool = False) -> ChromRegion | None:
        """Shrink to the overlap with ``other``. Mutates; returns self or None."""
        return algebra.intersect(self, other, strand_specific)

    def move(
        self,
        distance: float,
        is_proportion: bool = False,
        ref_table: ReferenceTable | None = None,
        relative_to_strand: bool = False,
    ) -> ChromRegion:
        """Shift by ``distance``. Mutates; returns self."""
        return algebra.move(self, distance, is_proportion, ref_table, relative_to_strand)

    def extend(
        self,
        size_diff: float,
        center: float | None = None,
        is_proportion: bool = False,
        ref_table: ReferenceTable | None = None,
        minimum_size: int = 1,
    ) -> ChromRegion:
        """Extend or shrink by ``size_diff``. Mutates; returns self."""
        return algebra.extend(self, size_diff, center, is_proportion, ref_table, minimum_size)

    # -------------------------------------------------------------------------
    # Interval algebra (non-mutating: self unchanged)
    # -------------------------------------------------------------------------

    def minus(self, other: ChromRegion, strand_specific: bool = False) -> list[ChromRegion]:
        """Parts not covered by ``other``; ``[self]`` if ``other`` does not touch it."""
        return algebra.minus(self, other, strand_specific)

    def get_shift(
        self,
        distance: float,
        is_proportion: bool = False,
        ref_table: ReferenceTable | None = None,
        relative_to_strand: bool = False,
    ) -> ChromRegion:
        """Shifted copy; see :meth:`move`."""
        return self.clone().move(distance, is_proportion, ref_table, relative_to_strand)

    def get_extension(
        self,
        size_diff: float,
        center: float | None = None,
        is_proportion: bool = False,
        ref_table: ReferenceTable | None = None,
        minimum_size: int = 1,
    ) -> ChromRegion:
        """Extended or shrunk copy; see :meth:`extend`."""
        return self.clone().extend(size_diff, center, is_proportion, ref_table, minimum_size)


# =============================================================================
# Comparison Functions
# =============================================================================


def compare(
    region1: ChromRegion,
    region2: ChromRegion,
    chrom_key: Callable[[str], Any] = chrom_sort_key,
) -> int:
    """Compare two regions by chromosome, then start, then end.

    Chromosomes are ordered naturally (``chr2 < chr10``) unless another
    ``chrom_key`` is supplied.

    Returns:
        -1, 0 or 1 as ``region1`` sorts before, equal to, or after ``region2``.
    """
    key1 = region1.sort_key(chrom_key)
    key2 = region2.sort_key(chrom_key)
    return (key1 > key2) - (key1 < key2)


def is_equal(region1: ChromRegion | None, region2: ChromRegion | None) -> bool:
    """Check whether two regions share chromosome, start and end.

    Strand, name and attributes are ignored. Two None values are equal.
    """
    if region1 is None or region2 is None:
        return region1 is None and region2 is None
    return (
        region1.chr == region2.chr
        and region1.start == region2.start
        and region1.end == region2.end
    )


def is_valid_chrom_region(
    region: str | Mapping[str, Any] | ChromRegion,
    ref_table: ReferenceTable | None = None,
) -> bool:
    """Module-level form of :meth:`ChromRegion.is_valid_chrom_region`."""
    return ChromRegion.is_valid_chrom_region(region, ref_table)
