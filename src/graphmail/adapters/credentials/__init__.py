"""Credential adapter - named credential to bearer token resolution.

Structure:
    * :mod:`.config` - Credential store configuration model and loader
    * :mod:`.provider` - Token provider with OAuth2 refresh-token exchange

Contents:
    * :class:`.config.CredentialStoreConfig` - Validated credential store
    * :class:`.config.OAuth2CredentialConfig` - One named credential
    * :func:`.config.load_credential_store_from_dict` - Config dict loader
    * :class:`.provider.CredentialStoreTokenProvider` - ``GetBearerToken`` implementation
    * :func:`.provider.create_token_provider` - Build the provider from Config
"""

from __future__ import annotations

from .config import CredentialStoreConfig, OAuth2CredentialConfig, load_credential_store_from_dict
from .provider import CredentialStoreTokenProvider, create_token_provider

__all__ = [
    "CredentialStoreConfig",
    "CredentialStoreTokenProvider",
    "OAuth2CredentialConfig",
    "create_token_provider",
    "load_credential_store_from_dict",
]
