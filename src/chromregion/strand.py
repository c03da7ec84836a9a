"""Strand representation for chromosomal regions.

Internally a region always carries a :class:`Strand`. The loosely typed
spellings found in region strings, BED files and caller-supplied mappings
are converted once, by :func:`parse_strand`, at the point where data enters
the package.

Example:
    >>> from chromregion.strand import Strand, parse_strand
    >>> parse_strand("-")
    <Strand.NEGATIVE: '-'>
    >>> parse_strand(".").is_known
    False
"""

from __future__ import annotations

import math
from enum import Enum
from numbers import Real

from chromregion.errors import InvalidFormatError


class Strand(Enum):
    """Orientation of a region.

    ``UNKNOWN`` acts as a wildcard in strand-specific comparisons: it
    matches either strand.
    """

    POSITIVE = "+"
    NEGATIVE = "-"
    UNKNOWN = "."

    @property
    def is_known(self) -> bool:
        """Whether the strand is either positive or negative."""
        return self is not Strand.UNKNOWN

    @property
    def symbol(self) -> str:
        """Single-character representation ('+', '-' or '.')."""
        return self.value

    def conflicts_with(self, other: Strand) -> bool:
        """Check whether two strands are both known and differ."""
        return self.is_known and other.is_known and self is not other


# Accepted string spellings; NEGSTR/POSSTR are the normalized tokens of
# parenthesized region-string suffixes.
_POSITIVE_TOKENS = frozenset({"+", "1", "POSSTR"})
_NEGATIVE_TOKENS = frozenset({"-", "0", "NEGSTR"})
_UNKNOWN_TOKENS = frozenset({"", "."})


def parse_strand(value: object) -> Strand:
    """Convert an external strand representation into a :class:`Strand`.

    Accepted inputs:
        - ``None``: unknown
        - a :class:`Strand`: returned unchanged
        - ``bool``: True is positive, False is negative
        - a number (legacy flag): > 0 is positive, otherwise negative
        - a string token: '+', '1', 'POSSTR' / '-', '0', 'NEGSTR' / '.', ''

    Args:
        value: The value to convert.

    Returns:
        The corresponding strand.

    Raises:
        InvalidFormatError: If the value has no strand interpretation.
    """
    if value is None:
        return Strand.UNKNOWN
    if isinstance(value, Strand):
        return value
    if isinstance(value, bool):
        return Strand.POSITIVE if value else Strand.NEGATIVE
    if isinstance(value, Real):
        if math.isnan(value):
            raise InvalidFormatError(f"Invalid strand value: {value!r}")
        return Strand.POSITIVE if value > 0 else Strand.NEGATIVE
    if isinstance(value, str):
        token = value.strip()
        if token in _UNKNOWN_TOKENS:
            return Strand.UNKNOWN
        if token in _POSITIVE_TOKENS:
            return Strand.POSITIVE
        if token in _NEGATIVE_TOKENS:
            return Strand.NEGATIVE
    raise InvalidFormatError(f"Invalid strand value: {value!r}")
