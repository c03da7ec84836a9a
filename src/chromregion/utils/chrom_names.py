"""Natural ordering of chromosome names.

Plain string comparison puts ``chr10`` before ``chr2``. The key used here
splits a name into an optional ``chr`` prefix, an optional leading number
and the remaining suffix, so that numbered chromosomes sort numerically and
before named ones.

Example:
    >>> sorted(["chrX", "chr10", "chr2", "chr1_random", "chr1"], key=chrom_sort_key)
    ['chr1', 'chr1_random', 'chr2', 'chr10', 'chrX']
"""

from __future__ import annotations

import re

_CHROM_NAME_PATTERN = re.compile(r"^(chr)?(\d+)?(.*)$", re.IGNORECASE | re.DOTALL)

ChromKey = tuple[str, tuple[int, int], str]


def split_chrom_name(name: str) -> tuple[str, int | None, str]:
    """Split a chromosome name into prefix, number and suffix.

    Args:
        name: Chromosome name, e.g. 'chr12_KI270706v1_random'.

    Returns:
        Tuple of (lowercased prefix or '', leading number or None, suffix).

    Example:
        >>> split_chrom_name("chr12_random")
        ('chr', 12, '_random')
        >>> split_chrom_name("scaffold_3")
        ('', None, 'scaffold_3')
    """
    match = _CHROM_NAME_PATTERN.match(name)
    # The pattern matches any string
    prefix, number, suffix = match.groups()
    return (
        (prefix or "").lower(),
        int(number) if number is not None else None,
        suffix,
    )


def chrom_sort_key(name: str) -> ChromKey:
    """Sort key giving natural chromosome order.

    A name with a number at the numeric position sorts before one without.
    """
    prefix, number, suffix = split_chrom_name(name)
    numeric = (0, number) if number is not None else (1, 0)
    return (prefix, numeric, suffix)


def compare_chrom_names(name1: str, name2: str) -> int:
    """Compare two chromosome names in natural order.

    Returns:
        -1, 0 or 1 as ``name1`` sorts before, equal to, or after ``name2``.
    """
    key1 = chrom_sort_key(name1)
    key2 = chrom_sort_key(name2)
    return (key1 > key2) - (key1 < key2)
