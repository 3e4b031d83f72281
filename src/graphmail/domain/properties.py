"""Typed access to the named string properties of an inbound message.

Absent keys, ``None`` values and empty strings are all treated as "not
supplied". Only :func:`require` raises; :func:`optional` never does.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum

from .errors import MissingConfigurationError

Properties = Mapping[str, str | None]
"""Property set of an inbound message, keyed by property name."""


class PropertyName(str, Enum):
    """Names of the message properties that parametrize the payload.

    Inherits from str so members can be used directly as mapping keys.

    Example:
        >>> PropertyName.MAIL_SUBJECT.value
        'MAIL_SUBJECT'
        >>> PropertyName.MAIL_SUBJECT == "MAIL_SUBJECT"
        True
    """

    OAUTH2_AUTHORIZATION_CODE_CRED = "OAUTH2_AUTHORIZATION_CODE_CRED"
    MAIL_SUBJECT = "MAIL_SUBJECT"
    MAIL_CONTENT_TYPE = "MAIL_CONTENT_TYPE"
    MAIL_RECIPIENT = "MAIL_RECIPIENT"
    MAIL_CC_RECIPIENT = "MAIL_CC_RECIPIENT"
    MAIL_ATTACHMENT = "MAIL_ATTACHMENT"
    MAIL_ATTACHMENT_CONTENT_TYPE = "MAIL_ATTACHMENT_CONTENT_TYPE"
    MAIL_ATTACHMENT_NAME = "MAIL_ATTACHMENT_NAME"
    MAIL_SAVE_TO_SENT_ITEMS = "MAIL_SAVE_TO_SENT_ITEMS"


def _key(name: PropertyName | str) -> str:
    return name.value if isinstance(name, PropertyName) else name


def optional(properties: Properties, name: PropertyName | str) -> str | None:
    """Return the property value, or None when absent or empty.

    Example:
        >>> optional({"MAIL_CC_RECIPIENT": "b@x.com"}, PropertyName.MAIL_CC_RECIPIENT)
        'b@x.com'
        >>> optional({"MAIL_CC_RECIPIENT": ""}, PropertyName.MAIL_CC_RECIPIENT) is None
        True
        >>> optional({}, "MAIL_CC_RECIPIENT") is None
        True
    """
    value = properties.get(_key(name))
    if value is None or value == "":
        return None
    return value


def require(properties: Properties, name: PropertyName | str) -> str:
    """Return the property value or fail when it is absent or empty.

    Raises:
        MissingConfigurationError: When the property is not supplied.

    Example:
        >>> require({"MAIL_SUBJECT": "S"}, PropertyName.MAIL_SUBJECT)
        'S'
        >>> require({}, PropertyName.MAIL_SUBJECT)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        MissingConfigurationError: Property MAIL_SUBJECT is not specified
    """
    value = optional(properties, name)
    if value is None:
        raise MissingConfigurationError(_key(name))
    return value


def parse_save_flag(value: str | None) -> bool:
    """Interpret the save-to-sent-items property.

    Unset means ``True``. Otherwise only a case-insensitive ``"true"`` is
    truthy; the value is not trimmed.

    Example:
        >>> parse_save_flag(None)
        True
        >>> parse_save_flag("TRUE")
        True
        >>> parse_save_flag("false")
        False
        >>> parse_save_flag("yes")
        False
    """
    if value is None or value == "":
        return True
    return value.lower() == "true"


__all__ = [
    "Properties",
    "PropertyName",
    "optional",
    "parse_save_flag",
    "require",
]
