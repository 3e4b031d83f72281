"""Validate message properties and assemble the sendMail object graph.

All inputs are read and validated first (:func:`read_mail_settings`), then
the whole graph is built in one step (:func:`build_envelope`). A failure
at any rule therefore never leaves a partially built envelope behind.

Rules are evaluated in this order, the first failure wins:

1. ``MAIL_SUBJECT`` is required.
2. ``MAIL_CONTENT_TYPE`` is required.
3. The message body must not be None; it is decoded as UTF-8.
4. ``MAIL_RECIPIENT`` is required.
5. ``MAIL_CC_RECIPIENT`` is optional.
6. ``MAIL_ATTACHMENT`` is optional; when set, ``MAIL_ATTACHMENT_CONTENT_TYPE``
   and ``MAIL_ATTACHMENT_NAME`` become required.
7. ``MAIL_SAVE_TO_SENT_ITEMS`` is optional and defaults to true.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidBodyError
from .mail import Attachment, Envelope, MailBodyContent, MailMessage, MailRecipient
from .properties import Properties, PropertyName, optional, parse_save_flag, require


@dataclass(frozen=True, slots=True)
class AttachmentSettings:
    """Validated attachment properties; all three are always present together."""

    content_bytes: str
    content_type: str
    name: str


@dataclass(frozen=True, slots=True)
class MailSettings:
    """Validated inputs for one envelope.

    Attributes:
        subject: Mail subject line.
        content_type: Body content type as configured (``text`` or ``html``).
        content: Decoded message body.
        recipient: Primary recipient address.
        cc_recipient: Optional cc recipient address.
        attachment: Optional attachment settings.
        save_to_sent_items: Whether Graph keeps a copy in "Sent Items".
    """

    subject: str
    content_type: str
    content: str
    recipient: str
    cc_recipient: str | None = None
    attachment: AttachmentSettings | None = None
    save_to_sent_items: bool = True


def decode_body(raw_body: bytes | None) -> str:
    """Decode the raw message body as UTF-8 text.

    Malformed sequences are replaced rather than rejected.

    Raises:
        InvalidBodyError: When the body is None.

    Example:
        >>> decode_body(b"hello")
        'hello'
        >>> decode_body(b"caf\\xc3\\xa9")
        'café'
        >>> decode_body(b"\\xff") == "\\ufffd"
        True
    """
    if raw_body is None:
        raise InvalidBodyError()
    return bytes(raw_body).decode("utf-8", errors="replace")


def _read_attachment(properties: Properties) -> AttachmentSettings | None:
    content_bytes = optional(properties, PropertyName.MAIL_ATTACHMENT)
    if content_bytes is None:
        return None
    content_type = require(properties, PropertyName.MAIL_ATTACHMENT_CONTENT_TYPE)
    name = require(properties, PropertyName.MAIL_ATTACHMENT_NAME)
    return AttachmentSettings(content_bytes=content_bytes, content_type=content_type, name=name)


def read_mail_settings(properties: Properties, raw_body: bytes | None) -> MailSettings:
    """Read and validate every input needed for an envelope.

    Args:
        properties: Property set of the inbound message.
        raw_body: Raw message body.

    Returns:
        Frozen settings ready for :func:`build_envelope`.

    Raises:
        MissingConfigurationError: A required property is absent or empty.
        InvalidBodyError: The body is None.

    Example:
        >>> settings = read_mail_settings(
        ...     {"MAIL_SUBJECT": "S", "MAIL_CONTENT_TYPE": "text", "MAIL_RECIPIENT": "a@x.com"},
        ...     b"hello",
        ... )
        >>> settings.recipient, settings.save_to_sent_items
        ('a@x.com', True)
    """
    subject = require(properties, PropertyName.MAIL_SUBJECT)
    content_type = require(properties, PropertyName.MAIL_CONTENT_TYPE)
    content = decode_body(raw_body)
    recipient = require(properties, PropertyName.MAIL_RECIPIENT)
    cc_recipient = optional(properties, PropertyName.MAIL_CC_RECIPIENT)
    attachment = _read_attachment(properties)
    save_to_sent_items = parse_save_flag(optional(properties, PropertyName.MAIL_SAVE_TO_SENT_ITEMS))
    return MailSettings(
        subject=subject,
        content_type=content_type,
        content=content,
        recipient=recipient,
        cc_recipient=cc_recipient,
        attachment=attachment,
        save_to_sent_items=save_to_sent_items,
    )


def build_envelope(settings: MailSettings) -> Envelope:
    """Build the complete envelope from validated settings.

    Only one cc recipient and one attachment are supported.

    Example:
        >>> envelope = build_envelope(
        ...     MailSettings(subject="S", content_type="text", content="hello", recipient="a@x.com")
        ... )
        >>> envelope.message.cc_recipients, envelope.message.attachments
        ((), ())
    """
    cc_recipients: tuple[MailRecipient, ...] = ()
    if settings.cc_recipient is not None:
        cc_recipients = (MailRecipient.for_address(settings.cc_recipient),)

    attachments: tuple[Attachment, ...] = ()
    if settings.attachment is not None:
        attachments = (
            Attachment(
                name=settings.attachment.name,
                content_type=settings.attachment.content_type,
                content_bytes=settings.attachment.content_bytes,
            ),
        )

    return Envelope(
        message=MailMessage(
            subject=settings.subject,
            body=MailBodyContent(content_type=settings.content_type, content=settings.content),
            to_recipients=(MailRecipient.for_address(settings.recipient),),
            cc_recipients=cc_recipients,
            attachments=attachments,
        ),
        save_to_sent_items=settings.save_to_sent_items,
    )


def build_envelope_from_properties(properties: Properties, raw_body: bytes | None) -> Envelope:
    """Validate properties and body, then build the envelope."""
    return build_envelope(read_mail_settings(properties, raw_body))


__all__ = [
    "AttachmentSettings",
    "MailSettings",
    "build_envelope",
    "build_envelope_from_properties",
    "decode_body",
    "read_mail_settings",
]
