"""Reference chromosome tables.

A reference table maps lowercased chromosome names to :class:`ChromInfo`
entries describing the span (and optionally the centromere) of each
chromosome in a genome assembly. Tables are produced by the host
application and only ever read here.

Example:
    >>> from chromregion.core.reference import build_reference_table, lookup_chrom
    >>> table = build_reference_table({"chr1": 248956422, "chrX": 156040895})
    >>> lookup_chrom(table, "CHRX").chr_region.chr
    'chrX'
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

import attrs

if TYPE_CHECKING:
    from chromregion.core.region import ChromRegion


@attrs.define(frozen=True)
class ChromInfo:
    """Basic information about one reference chromosome.

    Attributes:
        chr_region: Region spanning the whole chromosome. Its ``chr`` is the
            canonical (case-preserving) chromosome name.
        centromere: Region of the centromere, if known.
    """

    chr_region: ChromRegion
    centromere: ChromRegion | None = None

    @property
    def chr(self) -> str:
        """Canonical chromosome name."""
        return self.chr_region.chr

    @property
    def start(self) -> int:
        """First valid coordinate of the chromosome (0-based)."""
        return self.chr_region.start

    @property
    def end(self) -> int:
        """First coordinate after the chromosome (0-based, exclusive)."""
        return self.chr_region.end

    @property
    def length(self) -> int:
        """Chromosome length in base pairs."""
        return self.chr_region.length


ReferenceTable = Mapping[str, ChromInfo]


def lookup_chrom(ref_table: ReferenceTable | None, chrom: str) -> ChromInfo | None:
    """Look up a chromosome case-insensitively.

    Args:
        ref_table: Reference table, or None.
        chrom: Chromosome name in any case.

    Returns:
        The matching ChromInfo, or None if there is no table or no entry.
    """
    if ref_table is None:
        return None
    return ref_table.get(chrom.lower())


def build_reference_table(
    lengths: Mapping[str, int],
    centromeres: Mapping[str, tuple[int, int]] | None = None,
) -> dict[str, ChromInfo]:
    """Build a reference table from chromosome lengths.

    Args:
        lengths: Chromosome name to length in base pairs.
        centromeres: Optional chromosome name to 0-based half-open
            (start, end) of the centromere.

    Returns:
        Reference table keyed by lowercased chromosome name.

    Example:
        >>> table = build_reference_table({"chr2": 100000}, {"chr2": (40000, 45000)})
        >>> table["chr2"].centromere.length
        5000
    """
    from chromregion.core.region import ChromRegion

    centromeres = centromeres or {}
    table = {}
    for chrom, length in lengths.items():
        chr_region = ChromRegion.from_scaffold(chrom, length)
        centromere = None
        if chrom in centromeres:
            cent_start, cent_end = centromeres[chrom]
            centromere = ChromRegion({"chr": chrom, "start": cent_start, "end": cent_end})
        table[chrom.lower()] = ChromInfo(chr_region=chr_region, centromere=centromere)
    return table
