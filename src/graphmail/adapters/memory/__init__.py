"""In-memory adapter implementations for testing.

Provides lightweight implementations of the application ports that operate
entirely in memory -- no filesystem, no network, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.credentials` - In-memory token provider (TokenProviderStub)
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import display_config_in_memory, get_config_in_memory
from .credentials import TokenProviderStub
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from graphmail.application.ports import (
        CreateTokenProvider,
        DisplayConfig,
        GetBearerToken,
        GetConfig,
        InitLogging,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_get_bearer_token: GetBearerToken = TokenProviderStub()
    _assert_create_token_provider: CreateTokenProvider = TokenProviderStub().create_token_provider

__all__ = [
    "TokenProviderStub",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
