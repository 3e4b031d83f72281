"""Token provider backed by the configured credential store.

Resolves a named credential to a bearer token, either straight from the
store or through a single OAuth2 refresh-token exchange over httpx. Tokens
are not cached and failed exchanges are not retried.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from lib_layered_config import Config
from pydantic import ValidationError

from graphmail.domain.errors import ConfigurationError, CredentialResolutionError

from .config import CredentialStoreConfig, OAuth2CredentialConfig, load_credential_store_from_dict

logger = logging.getLogger(__name__)

# Keywords that may indicate sensitive data in exception messages
_SENSITIVE_KEYWORDS = frozenset(
    {
        "password",
        "credential",
        "auth",
        "secret",
        "token",
        "key",
        "login",
    }
)


def _sanitize_exception_message(exc: Exception) -> str:
    """Sanitize exception message to prevent credential exposure.

    Example:
        >>> class FakeExc(Exception): pass
        >>> _sanitize_exception_message(FakeExc("Connection refused"))
        'Connection refused'
        >>> _sanitize_exception_message(FakeExc("invalid client_secret"))
        'Token endpoint request failed. Check credential configuration.'
    """
    message = str(exc).lower()
    if any(keyword in message for keyword in _SENSITIVE_KEYWORDS):
        return "Token endpoint request failed. Check credential configuration."
    return str(exc)


def _exchange_form(entry: OAuth2CredentialConfig) -> dict[str, str]:
    """Build the form body of a refresh-token grant."""
    form = {
        "grant_type": "refresh_token",
        "client_id": entry.client_id or "",
        "refresh_token": entry.refresh_token or "",
    }
    if entry.client_secret is not None:
        form["client_secret"] = entry.client_secret
    if entry.scope is not None:
        form["scope"] = entry.scope
    return form


class CredentialStoreTokenProvider:
    """Callable satisfying the ``GetBearerToken`` port.

    Args:
        store: Validated credential store.
        client: Optional httpx client. When None, a short-lived client is
            opened per exchange. Primarily useful for testing with
            ``httpx.MockTransport``.

    Example:
        >>> store = CredentialStoreConfig(credentials={"SEND_MAIL": {"access_token": "abc"}})
        >>> CredentialStoreTokenProvider(store)("SEND_MAIL")
        'abc'
    """

    def __init__(self, store: CredentialStoreConfig, *, client: httpx.Client | None = None) -> None:
        self._store = store
        self._client = client

    def __call__(self, credential_name: str) -> str:
        """Return a bearer token for the named credential.

        Raises:
            CredentialResolutionError: Unknown credential, failed exchange,
                or a token response without ``access_token``.
        """
        entry = self._store.get(credential_name)
        if entry is None:
            raise CredentialResolutionError(credential_name, f"Credential {credential_name} is not configured")
        if entry.access_token is not None:
            logger.debug("Using configured access token", extra={"credential": credential_name})
            return entry.access_token
        return self._exchange(credential_name, entry)

    def _post(self, url: str, *, data: dict[str, str], timeout: float) -> httpx.Response:
        if self._client is not None:
            return self._client.post(url, data=data, timeout=timeout)
        with httpx.Client() as client:
            return client.post(url, data=data, timeout=timeout)

    def _exchange(self, credential_name: str, entry: OAuth2CredentialConfig) -> str:
        token_url = entry.token_url or ""
        logger.info("Requesting access token", extra={"credential": credential_name, "token_url": token_url})

        try:
            response = self._post(token_url, data=_exchange_form(entry), timeout=entry.timeout)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.debug("Token endpoint rejected the exchange", exc_info=True)
            raise CredentialResolutionError(
                credential_name,
                f"Token exchange for credential {credential_name} failed with HTTP {exc.response.status_code}",
            ) from exc
        except httpx.HTTPError as exc:
            logger.debug("Token endpoint unreachable", exc_info=True)
            raise CredentialResolutionError(
                credential_name,
                f"Token exchange for credential {credential_name} failed: {_sanitize_exception_message(exc)}",
            ) from exc

        try:
            body: Any = response.json()
        except ValueError as exc:
            raise CredentialResolutionError(
                credential_name, f"Token endpoint returned invalid JSON for credential {credential_name}"
            ) from exc

        token = body.get("access_token") if isinstance(body, dict) else None
        if not isinstance(token, str) or not token:
            raise CredentialResolutionError(
                credential_name, f"Token endpoint returned no access_token for credential {credential_name}"
            )

        logger.info("Access token obtained", extra={"credential": credential_name})
        return token


def create_token_provider(config: Config) -> CredentialStoreTokenProvider:
    """Build the production token provider from the ``[credentials]`` section.

    Raises:
        ConfigurationError: When a credential entry is invalid.
    """
    try:
        store = load_credential_store_from_dict(config.as_dict())
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid credential configuration: {exc}") from exc
    return CredentialStoreTokenProvider(store)


__all__ = [
    "CredentialStoreTokenProvider",
    "create_token_provider",
]
