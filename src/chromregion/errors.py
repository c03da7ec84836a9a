"""Exception types raised by chromregion.

All errors derive from :class:`ChromRegionError`, which is itself a
``ValueError`` so callers that already guard region parsing with
``except ValueError`` keep working.

Example:
    >>> from chromregion import ChromRegion
    >>> from chromregion.errors import InvalidFormatError
    >>> try:
    ...     ChromRegion("chr1:abc-def")
    ... except InvalidFormatError as e:
    ...     print(e)
"""

from __future__ import annotations


class ChromRegionError(ValueError):
    """Base class for all chromosomal region errors."""


class InvalidFormatError(ChromRegionError):
    """A region string, mapping, BED line or strand token could not be parsed."""


class InvalidArgumentError(ChromRegionError):
    """A numeric argument (distance, size, minimum length) is not usable."""


class UnknownChromosomeError(ChromRegionError):
    """The chromosome is absent from the supplied reference table.

    Attributes:
        chrom: The chromosome name that failed the lookup.
    """

    def __init__(self, chrom: str) -> None:
        self.chrom = chrom
        super().__init__(f"{chrom} is not a valid chromosome within the given reference table")


class OutOfBoundsError(ChromRegionError):
    """Coordinates end up with ``start > end`` after clipping.

    Attributes:
        chrom: Chromosome name.
        start: Offending start coordinate (0-based).
        end: Offending end coordinate (0-based, exclusive).
    """

    def __init__(self, chrom: str, start: int, end: int) -> None:
        self.chrom = chrom
        self.start = start
        self.end = end
        super().__init__(f"Coordinates out of bounds: {chrom}:{start}-{end}")


class InvalidMutationError(ChromRegionError):
    """A direct start/end assignment would violate ``start <= end``."""
