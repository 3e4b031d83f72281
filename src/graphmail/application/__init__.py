"""Application layer - use cases and port definitions.

Contains the use case that orchestrates domain logic and the port
protocols that define the interfaces for adapter implementations.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
    * :mod:`.process` - Per-message processing use case
"""

from __future__ import annotations

from .ports import (
    CreateTokenProvider,
    DisplayConfig,
    GetBearerToken,
    GetConfig,
    InitLogging,
    SerializeEnvelope,
)
from .process import build_request_headers, process_message

__all__ = [
    "CreateTokenProvider",
    "DisplayConfig",
    "GetBearerToken",
    "GetConfig",
    "InitLogging",
    "SerializeEnvelope",
    "build_request_headers",
    "process_message",
]
