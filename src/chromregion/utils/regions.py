"""Region string and BED line parsing and formatting.

This module handles the textual forms of a chromosomal region. It works on
plain :class:`RegionFields` tuples; :class:`~chromregion.core.region.ChromRegion`
builds on it for construction and formatting.

Coordinate conventions:
    - Region strings: 1-based inclusive (standard genomic convention)
    - Internal storage: 0-based half-open (Python convention)
    - BED lines: 0-based half-open, no shift applied

Example:
    >>> from chromregion.utils.regions import parse_region, region_to_str
    >>> fields = parse_region("chr1:12,345-67,890 (+)")
    >>> fields.start  # 0-based
    12344
    >>> region_to_str(fields)
    'chr1:12345-67890 (+)'
"""

from __future__ import annotations

import re
from typing import NamedTuple

from chromregion.errors import InvalidArgumentError, InvalidFormatError
from chromregion.strand import Strand, parse_strand


class RegionFields(NamedTuple):
    """Parsed region fields with 0-based half-open coordinates.

    Attributes:
        chr: Chromosome name.
        start: Start position (0-based, inclusive).
        end: End position (0-based, exclusive).
        strand: Strand of the region.
        name: Region name ('' when absent).
    """

    chr: str
    start: int  # 0-based, inclusive
    end: int  # 0-based, exclusive
    strand: Strand = Strand.UNKNOWN
    name: str = ""


# Regex pattern for region parsing (commas already removed)
# Handles: chr1:1000-2000, chr1: 1 - 2000, chr1:1000-2000(+), chr1:1000-2000 (-)
_REGION_PATTERN = re.compile(
    r"^\s*(?P<chr>[^:\s]+)\s*:\s*(?P<start>\d+)\s*-\s*(?P<end>\d+)"
    r"\s*(?:\(\s*(?P<strand>[+\-.])\s*\))?\s*$"
)

# BED fields are separated by runs of spaces or by tabs
_BED_SPLIT_PATTERN = re.compile(r"[ \t]+")


def parse_region(
    region_str: str,
    zero_based: bool = False,
    chrom_base: int = 0,
) -> RegionFields:
    """Parse a region string into RegionFields.

    Supported formats:
        chr1:1000-2000        (1-based, inclusive - standard)
        chr1:1,000-2,000      (thousands separators are ignored)
        chr1:1000-2000(+)     (strand suffix, '+', '-' or '.')
        chr1:1000-2000 (-)    (as produced by region_to_str)

    Args:
        region_str: Region string in format chr:start-end[(strand)].
        zero_based: Whether the displayed start is already 0-based.
        chrom_base: Minimum valid coordinate of the storage convention.

    Returns:
        RegionFields with 0-based, half-open coordinates.

    Raises:
        InvalidFormatError: If the string does not follow the grammar.

    Example:
        >>> parse_region("chr1:1000-2000")
        RegionFields(chr='chr1', start=999, end=2000, strand=<Strand.UNKNOWN: '.'>, name='')
    """
    match = _REGION_PATTERN.match(region_str.replace(",", ""))

    if not match:
        raise InvalidFormatError(
            f"Invalid region format: '{region_str}'. "
            "Expected format: chr:start-end[(strand)] (e.g., chr1:1000-2000(+))"
        )

    offset = 0 if zero_based else 1 - chrom_base
    return RegionFields(
        chr=match.group("chr"),
        start=int(match.group("start")) - offset,
        end=int(match.group("end")),
        strand=parse_strand(match.group("strand")),
    )


def parse_bed_line(bed_line: str) -> RegionFields:
    """Parse a BED line into RegionFields.

    Only the 1st-3rd fields (BED3), the 4th field (name, if present and not
    '.') and the 6th field (strand, if present) are used. Coordinates are
    taken as-is.

    Args:
        bed_line: A single BED record.

    Returns:
        RegionFields with 0-based, half-open coordinates.

    Raises:
        InvalidFormatError: If fewer than three fields are present or the
            coordinates are not integers.

    Example:
        >>> parse_bed_line("chr1\\t12345\\t67890\\tgeneA\\t0\\t-")
        RegionFields(chr='chr1', start=12345, end=67890, strand=<Strand.NEGATIVE: '-'>, name='geneA')
    """
    tokens = _BED_SPLIT_PATTERN.split(bed_line.strip())
    if len(tokens) < 3:
        raise InvalidFormatError(
            f"Invalid BED line: '{bed_line}'. Expected at least 3 fields, got {len(tokens)}"
        )

    try:
        start = int(tokens[1])
        end = int(tokens[2])
    except ValueError as e:
        raise InvalidFormatError(f"Invalid BED coordinates in line: '{bed_line}'") from e

    name = tokens[3] if len(tokens) > 3 and tokens[3] != "." else ""
    strand = parse_strand(tokens[5]) if len(tokens) > 5 else Strand.UNKNOWN

    return RegionFields(chr=tokens[0], start=start, end=end, strand=strand, name=name)


def region_to_str(
    region: RegionFields,
    include_strand: bool = True,
    chrom_base: int = 0,
) -> str:
    """Convert region fields to a human-readable string.

    Args:
        region: RegionFields (0-based internally).
        include_strand: Append ' (+)' or ' (-)' when the strand is known.
        chrom_base: Minimum valid coordinate of the storage convention.

    Returns:
        Region string in 1-based inclusive format.

    Example:
        >>> region_to_str(RegionFields("chr1", 999, 2000, Strand.NEGATIVE))
        'chr1:1000-2000 (-)'
        >>> region_to_str(RegionFields("chr1", 999, 2000, Strand.NEGATIVE), include_strand=False)
        'chr1:1000-2000'
    """
    text = f"{region.chr}:{region.start + 1 - chrom_base}-{region.end}"
    if include_strand and region.strand.is_known:
        text += f" ({region.strand.symbol})"
    return text


def region_to_bed(region: RegionFields, include_strand: bool = True) -> str:
    """Convert region fields to a BED4 or BED6 line.

    Args:
        region: RegionFields (0-based internally).
        include_strand: If True and the strand is known, return BED6 with a
            score of 0 and the strand field.

    Returns:
        Tab-separated BED line (no trailing newline).

    Example:
        >>> region_to_bed(RegionFields("chr1", 999, 2000, Strand.POSITIVE))
        'chr1\\t999\\t2000\\t.\\t0\\t+'
    """
    fields = [region.chr, str(region.start), str(region.end), region.name or "."]
    if include_strand and region.strand.is_known:
        fields.extend(["0", region.strand.symbol])
    return "\t".join(fields)


def region_from_scaffold(chrom: str, length: int, chrom_base: int = 0) -> RegionFields:
    """Create region fields covering an entire chromosome.

    Args:
        chrom: Chromosome name.
        length: Chromosome length in base pairs.
        chrom_base: Minimum valid coordinate.

    Returns:
        RegionFields covering the entire chromosome.

    Example:
        >>> region_from_scaffold("chr1", 100000).end
        100000
    """
    if length < 0:
        raise InvalidArgumentError(f"Chromosome length must be >= 0, got {length}")
    return RegionFields(chrom, chrom_base, chrom_base + length)
