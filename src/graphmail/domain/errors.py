"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when configuration values are absent, malformed, or logically
    inconsistent. Typically caught at CLI boundaries to provide
    user-friendly error messages.

    Example:
        >>> from graphmail.domain.errors import ConfigurationError
        >>> err = ConfigurationError("No credentials configured")
        >>> str(err)
        'No credentials configured'
    """


class MissingConfigurationError(ConfigurationError):
    """A required message property is absent or empty.

    Attributes:
        property_name: Name of the property that was not supplied.

    Example:
        >>> err = MissingConfigurationError("MAIL_SUBJECT")
        >>> str(err)
        'Property MAIL_SUBJECT is not specified'
        >>> err.property_name
        'MAIL_SUBJECT'
        >>> isinstance(err, ConfigurationError)
        True
    """

    def __init__(self, property_name: str) -> None:
        self.property_name = str(property_name)
        super().__init__(f"Property {self.property_name} is not specified")


class InvalidBodyError(ValueError):
    """The inbound message carries no body to use as mail content.

    Inherits from ValueError so generic ``except ValueError`` handlers at
    the CLI boundary still classify it as bad input.

    Example:
        >>> err = InvalidBodyError()
        >>> str(err)
        'Message body is null'
        >>> isinstance(err, ValueError)
        True
    """

    def __init__(self, message: str = "Message body is null") -> None:
        super().__init__(message)


class CredentialResolutionError(Exception):
    """A named credential could not be exchanged for a bearer token.

    Attributes:
        credential_name: Name of the credential that failed to resolve.

    Example:
        >>> err = CredentialResolutionError("SEND_MAIL", "Credential SEND_MAIL is not configured")
        >>> str(err)
        'Credential SEND_MAIL is not configured'
        >>> err.credential_name
        'SEND_MAIL'
    """

    def __init__(self, credential_name: str, message: str | None = None) -> None:
        self.credential_name = credential_name
        super().__init__(message or f"Could not resolve credential {credential_name}")


__all__ = [
    "ConfigurationError",
    "CredentialResolutionError",
    "InvalidBodyError",
    "MissingConfigurationError",
]
