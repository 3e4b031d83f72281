"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
    * Payload command from :mod:`.payload`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .payload import cli_build_payload

__all__ = [
    "cli_build_payload",
    "cli_config",
    "cli_info",
]
