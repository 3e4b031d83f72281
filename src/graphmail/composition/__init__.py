"""Wire graphmail's adapters to the application ports.

:func:`build_production` is what the console script and ``python -m``
use: layered configuration from disk, lib_log_rich logging and the
credential-store token provider. :func:`build_testing` swaps in the
in-memory adapters and a :class:`TokenProviderStub`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.credentials.provider import create_token_provider
from ..adapters.logging.setup import init_logging
from ..adapters.serialization.serializer import serialize_envelope

if TYPE_CHECKING:
    from ..adapters.memory.credentials import TokenProviderStub
    from ..application.ports import (
        CreateTokenProvider,
        DisplayConfig,
        GetConfig,
        InitLogging,
        SerializeEnvelope,
    )

    # Type checkers fail here when an adapter drifts from its port.
    _get_config_port: GetConfig = get_config
    _display_config_port: DisplayConfig = display_config
    _init_logging_port: InitLogging = init_logging
    _token_provider_port: CreateTokenProvider = create_token_provider
    _serializer_port: SerializeEnvelope = serialize_envelope


@dataclass(frozen=True, slots=True)
class AppServices:
    """The adapters a CLI invocation works with.

    Attributes:
        get_config: Loads layered configuration for a profile.
        display_config: Renders configuration for ``graphmail config``.
        init_logging: Starts the logging runtime from configuration.
        create_token_provider: Builds the bearer-token lookup from
            the ``[credentials]`` section.
        serialize_envelope: Renders the sendMail envelope to JSON bytes.
    """

    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging
    create_token_provider: CreateTokenProvider
    serialize_envelope: SerializeEnvelope


def build_production() -> AppServices:
    """Return services backed by real configuration, logging and credentials."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        init_logging=init_logging,
        create_token_provider=create_token_provider,
        serialize_envelope=serialize_envelope,
    )


def build_testing(*, token_provider: TokenProviderStub | None = None) -> AppServices:
    """Return services that touch neither disk nor network.

    Args:
        token_provider: Stub answering every credential lookup. A fresh
            stub without tokens is used when omitted; pass your own to
            seed tokens and inspect ``requested``.

    Example:
        >>> from graphmail.adapters.memory import TokenProviderStub
        >>> stub = TokenProviderStub(tokens={"SEND_MAIL": "abc"})
        >>> services = build_testing(token_provider=stub)
        >>> services.create_token_provider(services.get_config())("SEND_MAIL")
        'abc'
    """
    from ..adapters.memory import (
        TokenProviderStub,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    stub = token_provider if token_provider is not None else TokenProviderStub()
    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        create_token_provider=stub.create_token_provider,
        serialize_envelope=serialize_envelope,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "create_token_provider",
    "display_config",
    "get_config",
    "init_logging",
    "serialize_envelope",
]
