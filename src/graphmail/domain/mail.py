"""Immutable object graph of a Graph ``sendMail`` request.

Field names follow Python conventions; the camelCase wire names are
applied by the serializer adapter.
"""

from __future__ import annotations

from dataclasses import dataclass

#: Marker Graph uses to identify an inline file attachment.
FILE_ATTACHMENT_ODATA_TYPE = "#microsoft.graph.fileAttachment"


@dataclass(frozen=True, slots=True)
class EmailAddress:
    """A single mailbox address, passed through without validation."""

    address: str


@dataclass(frozen=True, slots=True)
class MailRecipient:
    """Recipient entry wrapping an :class:`EmailAddress`."""

    email_address: EmailAddress

    @classmethod
    def for_address(cls, address: str) -> MailRecipient:
        """Build a recipient directly from an address string.

        Example:
            >>> MailRecipient.for_address("a@x.com").email_address.address
            'a@x.com'
        """
        return cls(email_address=EmailAddress(address=address))


@dataclass(frozen=True, slots=True)
class MailBodyContent:
    """Mail body text and its declared content type (``text`` or ``html``)."""

    content_type: str
    content: str


@dataclass(frozen=True, slots=True)
class Attachment:
    """Inline file attachment whose content is already base64 text."""

    name: str
    content_type: str
    content_bytes: str
    odata_type: str = FILE_ATTACHMENT_ODATA_TYPE


@dataclass(frozen=True, slots=True)
class MailMessage:
    """The message part of the envelope.

    Raises:
        ValueError: When constructed without a primary recipient.

    Example:
        >>> MailMessage(subject="S", body=MailBodyContent("text", "hi"), to_recipients=())
        Traceback (most recent call last):
        ...
        ValueError: A mail message needs at least one primary recipient
    """

    subject: str
    body: MailBodyContent
    to_recipients: tuple[MailRecipient, ...]
    cc_recipients: tuple[MailRecipient, ...] = ()
    attachments: tuple[Attachment, ...] = ()

    def __post_init__(self) -> None:
        if not self.to_recipients:
            raise ValueError("A mail message needs at least one primary recipient")


@dataclass(frozen=True, slots=True)
class Envelope:
    """Top-level request object: the message plus the save-to-sent-items flag."""

    message: MailMessage
    save_to_sent_items: bool = True


__all__ = [
    "FILE_ATTACHMENT_ODATA_TYPE",
    "Attachment",
    "EmailAddress",
    "Envelope",
    "MailBodyContent",
    "MailMessage",
    "MailRecipient",
]
