"""Load graphmail's layered configuration.

Sources are merged by lib_layered_config in the order
defaults -> app -> host -> user -> dotenv -> env. The bundled
``defaultconfig.toml`` supplies the ``[lib_log_rich]``, ``[properties]`` and
``[credentials]`` sections. Results are cached per ``(profile, start_dir)``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from graphmail import __init__conf__


class CachedConfigLoader(Protocol):
    """``get_config`` signature plus the cache reset used by tests."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def get_default_config_path() -> Path:
    """Return the bundled ``defaultconfig.toml`` next to this module.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


@lru_cache(maxsize=4)
def _read_layers(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return the merged configuration for ``profile``.

    Args:
        profile: Optional profile name. A profile adds a ``profile/<name>/``
            level to every configuration directory.
        start_dir: Directory where ``.env`` discovery starts. Defaults to
            the current working directory.

    Raises:
        ValueError: If the profile name is empty, too long or contains path
            characters.

    Example:
        >>> "lib_log_rich" in get_config().as_dict()
        True
    """
    if profile is not None:
        validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)
    return _read_layers(profile, start_dir)


_get_config.cache_clear = _read_layers.cache_clear  # type: ignore[attr-defined]
get_config: CachedConfigLoader = cast(CachedConfigLoader, _get_config)


__all__ = [
    "CachedConfigLoader",
    "get_config",
    "get_default_config_path",
]
