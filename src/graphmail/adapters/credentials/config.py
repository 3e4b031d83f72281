"""Credential store configuration model and loader.

Provides Pydantic models for the ``[credentials.<NAME>]`` sections and the
loader that builds them from configuration dictionaries.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

_SECRET_FIELDS = frozenset({"access_token", "client_secret", "refresh_token"})


class OAuth2CredentialConfig(BaseModel):
    """One named OAuth2 authorization-code credential.

    Either a ready ``access_token`` is configured, or the settings for a
    refresh-token exchange against ``token_url``.

    Example:
        >>> entry = OAuth2CredentialConfig(access_token="abc")
        >>> entry.uses_static_token
        True
        >>> entry = OAuth2CredentialConfig(
        ...     token_url="https://login.example.com/token",
        ...     client_id="app",
        ...     refresh_token="r1",
        ... )
        >>> entry.uses_static_token
        False
    """

    model_config = ConfigDict(frozen=True)

    access_token: str | None = None
    token_url: str | None = None
    client_id: str | None = None
    client_secret: str | None = None
    refresh_token: str | None = None
    scope: str | None = None
    timeout: float = 30.0

    @field_validator(
        "access_token",
        "token_url",
        "client_id",
        "client_secret",
        "refresh_token",
        "scope",
        mode="before",
    )
    @classmethod
    def _coerce_empty_string_to_none(cls, v: str | None) -> str | None:
        """Treat empty or whitespace-only strings from config files as "not configured"."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def _validate_entry(self) -> OAuth2CredentialConfig:
        """Reject entries that can neither supply nor obtain a token.

        Raises:
            ValueError: When the timeout is not positive or neither a static
                token nor a complete refresh-token exchange is configured.
        """
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        if self.access_token is not None:
            return self
        missing = [
            field_name
            for field_name in ("token_url", "client_id", "refresh_token")
            if getattr(self, field_name) is None
        ]
        if missing:
            raise ValueError(f"credential needs access_token or {', '.join(missing)} for a token exchange")
        return self

    @property
    def uses_static_token(self) -> bool:
        """Return True when a ready access token is configured."""
        return self.access_token is not None

    def __repr__(self) -> str:
        """Return string representation with secrets redacted.

        Example:
            >>> "abc" in repr(OAuth2CredentialConfig(access_token="abc"))
            False
        """
        parts: list[str] = []
        for name, value in self:
            if name in _SECRET_FIELDS and value is not None:
                parts.append(f"{name}='[REDACTED]'")
            else:
                parts.append(f"{name}={value!r}")
        return f"OAuth2CredentialConfig({', '.join(parts)})"


def _empty_credentials() -> dict[str, OAuth2CredentialConfig]:
    """Create an empty typed credential mapping."""
    return {}


class CredentialStoreConfig(BaseModel):
    """All configured credentials keyed by name.

    Example:
        >>> store = CredentialStoreConfig(credentials={"SEND_MAIL": {"access_token": "abc"}})
        >>> store.get("send_mail").access_token
        'abc'
        >>> store.get("OTHER") is None
        True
    """

    model_config = ConfigDict(frozen=True)

    credentials: dict[str, OAuth2CredentialConfig] = Field(default_factory=_empty_credentials)

    def get(self, name: str) -> OAuth2CredentialConfig | None:
        """Look up a credential by exact name, then case-insensitively."""
        entry = self.credentials.get(name)
        if entry is not None:
            return entry
        wanted = name.casefold()
        for key, candidate in self.credentials.items():
            if key.casefold() == wanted:
                return candidate
        return None

    @property
    def names(self) -> list[str]:
        """Return the configured credential names in sorted order."""
        return sorted(self.credentials)


def load_credential_store_from_dict(config_dict: Mapping[str, Any]) -> CredentialStoreConfig:
    """Load CredentialStoreConfig from a configuration dictionary.

    Bridges lib_layered_config's dictionary output with the typed model.
    Single-parse validation at the boundary.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.
            Expected to have a ``credentials`` section of named tables.

    Returns:
        Validated credential store; empty when the section is missing.

    Raises:
        pydantic.ValidationError: When an entry is incomplete or malformed.

    Example:
        >>> store = load_credential_store_from_dict(
        ...     {"credentials": {"SEND_MAIL": {"access_token": "abc"}}}
        ... )
        >>> store.names
        ['SEND_MAIL']
        >>> load_credential_store_from_dict({}).names
        []
    """
    section: Any = config_dict.get("credentials", {})
    if not isinstance(section, Mapping):
        return CredentialStoreConfig.model_validate({"credentials": section})
    return CredentialStoreConfig.model_validate({"credentials": dict(cast(Mapping[str, Any], section))})


__all__ = [
    "CredentialStoreConfig",
    "OAuth2CredentialConfig",
    "load_credential_store_from_dict",
]
