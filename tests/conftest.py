"""Pytest configuration and shared fixtures for chromregion tests.

This module contains fixtures that are shared across multiple test modules.
Fixtures are organized by category:

- Reference table fixtures: Small genomes used for clipping
- Logging fixtures: Restore the package logger after tests
"""

import logging

import pytest

from chromregion import ChromInfo, ChromRegion
from chromregion.utils.logging import ROOT_LOGGER_NAME


# =============================================================================
# Reference Table Fixtures
# =============================================================================


@pytest.fixture
def chrom_info() -> dict[str, ChromInfo]:
    """Create a small reference table.

    - chr1: 2,000,000 bp
    - chr2: 2,000 bp
    """
    return {
        "chr1": ChromInfo(chr_region=ChromRegion("chr1: 1 - 2000000")),
        "chr2": ChromInfo(chr_region=ChromRegion("chr2: 1 - 2000")),
    }


@pytest.fixture
def chrom_info_100k() -> dict[str, ChromInfo]:
    """Reference table with a 100 kb chr2.

    - chr1: 2,000,000 bp
    - chr2: 100,000 bp
    """
    return {
        "chr1": ChromInfo(chr_region=ChromRegion("chr1: 1 - 2000000")),
        "chr2": ChromInfo(chr_region=ChromRegion("chr2: 1 - 100000")),
    }


@pytest.fixture
def chrom_info_offset() -> dict[str, ChromInfo]:
    """Reference table whose chr1 does not start at the coordinate floor.

    - chr1: [100000, 200000)
    - chr2: [0, 100000)
    """
    return {
        "chr1": ChromInfo(chr_region=ChromRegion("chr1: 100001 - 200000")),
        "chr2": ChromInfo(chr_region=ChromRegion("chr2: 1 - 100000")),
    }


# =============================================================================
# Logging Fixtures
# =============================================================================


@pytest.fixture
def clean_logger():
    """Yield the package logger and remove any handlers added by the test."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)
