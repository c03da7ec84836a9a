"""Configuration management for chromregion.

This module holds the tunable constants of the region model and the
logging defaults. Configuration can come from:
- Default values
- Configuration files (TOML)
- Plain dictionaries (e.g. from a host application's own config)

Example:
    >>> from chromregion.config import Config
    >>> config = Config.load("chromregion.toml")
    >>> config.region.chrom_base
    0
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

import attrs

# =============================================================================
# Default Configuration Values
# =============================================================================

# Coordinate floor (0 for UCSC-style coordinates)
DEFAULT_CHROM_BASE = 0

# Region name shortening
DEFAULT_SHORTNAME_LIMIT = 11
DEFAULT_SHORTNAME_PREFIX_LENGTH = 6
DEFAULT_SHORTNAME_SUFFIX_LENGTH = 4

# Logging
DEFAULT_VERBOSITY = 1


def _non_negative(instance: Any, attribute: attrs.Attribute, value: int) -> None:
    if value < 0:
        raise ValueError(f"{attribute.name} must be >= 0, got {value}")


# =============================================================================
# Configuration Classes
# =============================================================================


@attrs.define(frozen=True)
class RegionConfig:
    """Configuration for the region model.

    Attributes:
        chrom_base: Minimum valid coordinate value.
        shortname_limit: Names longer than this are shortened.
        shortname_prefix_length: Characters kept before the ellipsis.
        shortname_suffix_length: Characters kept after the ellipsis.
    """

    chrom_base: int = attrs.field(
        default=DEFAULT_CHROM_BASE, validator=[attrs.validators.instance_of(int), _non_negative]
    )
    shortname_limit: int = attrs.field(default=DEFAULT_SHORTNAME_LIMIT, validator=_non_negative)
    shortname_prefix_length: int = attrs.field(
        default=DEFAULT_SHORTNAME_PREFIX_LENGTH, validator=_non_negative
    )
    shortname_suffix_length: int = attrs.field(
        default=DEFAULT_SHORTNAME_SUFFIX_LENGTH, validator=_non_negative
    )


@attrs.define(frozen=True)
class LoggingConfig:
    """Configuration for logging.

    Attributes:
        verbosity: Verbosity level (0=warning, 1=info, 2=debug).
        log_file: Optional file to log to.
        use_rich: Use rich for console output.
    """

    verbosity: int = attrs.field(default=DEFAULT_VERBOSITY, validator=_non_negative)
    log_file: str | None = None
    use_rich: bool = True


@attrs.define(frozen=True)
class Config:
    """Main configuration container for chromregion.

    Attributes:
        region: Region model configuration.
        logging: Logging configuration.
    """

    region: RegionConfig = attrs.Factory(RegionConfig)
    logging: LoggingConfig = attrs.Factory(LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build a configuration from a nested dictionary.

        Args:
            data: Mapping with optional ``region`` and ``logging`` sections.

        Returns:
            Configuration object.

        Raises:
            ValueError: If a section or key is unknown.
        """
        sections = {"region": RegionConfig, "logging": LoggingConfig}
        unknown = set(data) - set(sections)
        if unknown:
            raise ValueError(f"Unknown configuration sections: {sorted(unknown)}")

        kwargs = {}
        for section, section_cls in sections.items():
            values = data.get(section, {})
            known = {a.name for a in attrs.fields(section_cls)}
            bad_keys = set(values) - known
            if bad_keys:
                raise ValueError(f"Unknown keys in [{section}]: {sorted(bad_keys)}")
            kwargs[section] = section_cls(**values)
        return cls(**kwargs)

    @classmethod
    def load(cls, path: Path | str | None = None) -> Config:
        """Load configuration from a TOML file.

        Args:
            path: Path to configuration file.
                  If None, returns default configuration.

        Returns:
            Loaded configuration object.

        Raises:
            FileNotFoundError: If configuration file doesn't exist.
            ValueError: If configuration file is invalid.
        """
        if path is None:
            return cls()

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path, "rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid configuration file {path}: {e}") from e

        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary.

        Returns:
            Dictionary representation of configuration.
        """
        return attrs.asdict(self)
