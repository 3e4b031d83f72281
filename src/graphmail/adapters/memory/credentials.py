"""In-memory token provider for testing.

Satisfies the ``GetBearerToken`` and ``CreateTokenProvider`` protocols
without any configuration lookup or network access.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from lib_layered_config import Config

from ...domain.errors import CredentialResolutionError


def _empty_tokens() -> dict[str, str]:
    """Create an empty typed token mapping."""
    return {}


def _empty_requests() -> list[str]:
    """Create an empty typed request log."""
    return []


@dataclass
class TokenProviderStub:
    """Returns canned tokens and records every requested credential name.

    Each test should create its own stub to avoid cross-test pollution.

    Attributes:
        tokens: Credential name to token mapping.
        requested: Credential names requested so far, in call order.
        raise_exception: When set, every call raises this exception.

    Example:
        >>> stub = TokenProviderStub(tokens={"SEND_MAIL": "abc"})
        >>> stub("SEND_MAIL")
        'abc'
        >>> stub.requested
        ['SEND_MAIL']
        >>> stub("OTHER")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        CredentialResolutionError: Credential OTHER is not configured
    """

    tokens: dict[str, str] = field(default_factory=_empty_tokens)
    requested: list[str] = field(default_factory=_empty_requests)
    raise_exception: Exception | None = None

    def __call__(self, credential_name: str) -> str:
        self.requested.append(credential_name)
        if self.raise_exception is not None:
            raise self.raise_exception
        try:
            return self.tokens[credential_name]
        except KeyError:
            raise CredentialResolutionError(
                credential_name, f"Credential {credential_name} is not configured"
            ) from None

    def create_token_provider(self, config: Config) -> TokenProviderStub:
        """Ignore the configuration and hand out this stub."""
        return self

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.requested.clear()
        self.raise_exception = None


__all__ = ["TokenProviderStub"]
