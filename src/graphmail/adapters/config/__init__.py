"""Configuration adapter - loading, display, overrides, and default properties.

Provides adapters for configuration management using lib_layered_config.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.properties` - Default message properties and ``--property`` parsing
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides
from .properties import load_properties_from_dict, merge_properties

__all__ = [
    "apply_overrides",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_properties_from_dict",
    "merge_properties",
]
