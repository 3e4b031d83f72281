"""Application ports - callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function. Existing module-level functions
and callable objects satisfy these protocols via structural subtyping
(PEP 544).

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``) are
    imported under ``TYPE_CHECKING`` only so that import-linter layer
    contracts remain satisfied at runtime.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat
from ..domain.mail import Envelope

if TYPE_CHECKING:
    from lib_layered_config import Config


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class GetBearerToken(Protocol):
    """Exchange a named credential for a bearer token.

    Raises ``CredentialResolutionError`` when the credential is unknown or
    the exchange fails. One attempt per call.
    """

    def __call__(self, credential_name: str) -> str: ...


class CreateTokenProvider(Protocol):
    """Build a token provider from the loaded configuration."""

    def __call__(self, config: Config) -> GetBearerToken: ...


class SerializeEnvelope(Protocol):
    """Render an envelope as canonical UTF-8 JSON bytes."""

    def __call__(self, envelope: Envelope) -> bytes: ...


__all__ = [
    "CreateTokenProvider",
    "DisplayConfig",
    "GetBearerToken",
    "GetConfig",
    "InitLogging",
    "SerializeEnvelope",
]
