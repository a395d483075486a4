"""hideglue global configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class HideGlueConfig:
    """Global configuration with safe defaults.

    ``chunk_size`` can be overridden per comparator.
    """

    # I/O
    chunk_size: int = 1024

    # Fixtures
    project_root_var: str = "HIDEGLUE_PROJECT_ROOT"
    fixtures_dir: str = "tests/fixtures"
    temp_prefix: str = "hideglue-"


# Global singleton
_config = HideGlueConfig()


def configure(**kwargs) -> None:
    """Update global configuration.

    :param chunk_size: Chunk size in bytes (default 1024).
    :param project_root_var: Environment variable holding the project root.
    :param fixtures_dir: Fixture directory, relative to the project root.
    :param temp_prefix: Name prefix for temporary fixture directories.
    """
    from hideglue._types import ConfigError
    from hideglue._validate import validate_chunk_size

    global _config
    for key, value in kwargs.items():
        if not hasattr(_config, key):
            raise ConfigError(f"unknown config option: {key!r}")
        if key == "chunk_size":
            try:
                validate_chunk_size(value)
            except ValueError as exc:
                raise ConfigError(str(exc)) from exc
        elif not isinstance(value, str) or (key != "temp_prefix" and not value):
            raise ConfigError(f"{key} must be a non-empty string")
        setattr(_config, key, value)


def get_config() -> HideGlueConfig:
    """Get current global configuration."""
    return _config


def reset_config() -> None:
    """Reset configuration to defaults."""
    global _config
    _config = HideGlueConfig()
