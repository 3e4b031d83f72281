"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.properties` - Required/optional access to message properties
    * :mod:`.mail` - Immutable sendMail object graph
    * :mod:`.payload` - Property validation and envelope construction
    * :mod:`.message` - Message handed over by the invoking runtime
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .enums import OutputFormat
from .errors import (
    ConfigurationError,
    CredentialResolutionError,
    InvalidBodyError,
    MissingConfigurationError,
)
from .mail import (
    FILE_ATTACHMENT_ODATA_TYPE,
    Attachment,
    EmailAddress,
    Envelope,
    MailBodyContent,
    MailMessage,
    MailRecipient,
)
from .message import Message
from .payload import (
    AttachmentSettings,
    MailSettings,
    build_envelope,
    build_envelope_from_properties,
    read_mail_settings,
)
from .properties import PropertyName, optional, parse_save_flag, require

__all__ = [
    # Enums
    "OutputFormat",
    "PropertyName",
    # Errors
    "ConfigurationError",
    "CredentialResolutionError",
    "InvalidBodyError",
    "MissingConfigurationError",
    # Mail graph
    "FILE_ATTACHMENT_ODATA_TYPE",
    "Attachment",
    "EmailAddress",
    "Envelope",
    "MailBodyContent",
    "MailMessage",
    "MailRecipient",
    "Message",
    # Payload
    "AttachmentSettings",
    "MailSettings",
    "build_envelope",
    "build_envelope_from_properties",
    "read_mail_settings",
    # Properties
    "optional",
    "parse_save_flag",
    "require",
]
