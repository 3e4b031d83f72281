"""Configuration doubles: an empty configuration and a silent display."""

from __future__ import annotations

from lib_layered_config import Config

from ...domain.enums import OutputFormat


def get_config_in_memory(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return a configuration without any sections, whatever the profile."""
    return Config({}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Print nothing, but reject unknown sections like the real display.

    Example:
        >>> display_config_in_memory(Config({}, {}), section="properties")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: Section 'properties' not found in configuration
    """
    if section is not None and section not in config.as_dict():
        raise ValueError(f"Section {section!r} not found in configuration")


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
]
