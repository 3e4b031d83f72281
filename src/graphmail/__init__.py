"""Public package surface for building Graph sendMail payloads.

Routes imports through the architectural layers:
- Domain exports: message, envelope and property rules
- Application exports: per-message processing
- Composition exports: wired adapter services
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.process import build_request_headers, process_message

# Composition exports (wired adapters)
from .composition import create_token_provider, get_config, serialize_envelope

# Domain exports
from .domain.errors import (
    ConfigurationError,
    CredentialResolutionError,
    InvalidBodyError,
    MissingConfigurationError,
)
from .domain.message import Message
from .domain.payload import build_envelope, build_envelope_from_properties, read_mail_settings
from .domain.properties import PropertyName

__all__ = [
    "ConfigurationError",
    "CredentialResolutionError",
    "InvalidBodyError",
    "Message",
    "MissingConfigurationError",
    "PropertyName",
    "build_envelope",
    "build_envelope_from_properties",
    "build_request_headers",
    "create_token_provider",
    "get_config",
    "print_info",
    "process_message",
    "read_mail_settings",
    "serialize_envelope",
]
