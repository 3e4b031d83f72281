"""Render the sendMail envelope as canonical JSON bytes with orjson.

Key order is fixed by the dict construction below and orjson preserves
insertion order, so identical envelopes always serialize to identical
bytes. Output is compact and non-ASCII text is emitted as raw UTF-8.
"""

from __future__ import annotations

from typing import Any

import orjson

from graphmail.domain.mail import Attachment, Envelope, MailRecipient


def _recipient_payload(recipient: MailRecipient) -> dict[str, Any]:
    return {"emailAddress": {"address": recipient.email_address.address}}


def _attachment_payload(attachment: Attachment) -> dict[str, Any]:
    return {
        "@odata.type": attachment.odata_type,
        "name": attachment.name,
        "contentType": attachment.content_type,
        "contentBytes": attachment.content_bytes,
    }


def envelope_to_payload(envelope: Envelope) -> dict[str, Any]:
    """Map the envelope onto the Graph wire shape.

    Empty cc and attachment sequences stay present as empty lists.

    Example:
        >>> from graphmail.domain.mail import MailBodyContent, MailMessage
        >>> envelope = Envelope(
        ...     MailMessage("S", MailBodyContent("text", "hello"), (MailRecipient.for_address("a@x.com"),))
        ... )
        >>> list(envelope_to_payload(envelope)["message"])
        ['subject', 'body', 'toRecipients', 'ccRecipients', 'attachments']
    """
    message = envelope.message
    return {
        "message": {
            "subject": message.subject,
            "body": {
                "contentType": message.body.content_type,
                "content": message.body.content,
            },
            "toRecipients": [_recipient_payload(r) for r in message.to_recipients],
            "ccRecipients": [_recipient_payload(r) for r in message.cc_recipients],
            "attachments": [_attachment_payload(a) for a in message.attachments],
        },
        "saveToSentItems": envelope.save_to_sent_items,
    }


def serialize_envelope(envelope: Envelope) -> bytes:
    """Serialize the envelope to compact UTF-8 JSON.

    Example:
        >>> from graphmail.domain.mail import MailBodyContent, MailMessage
        >>> envelope = Envelope(
        ...     MailMessage("S", MailBodyContent("text", "hello"), (MailRecipient.for_address("a@x.com"),))
        ... )
        >>> serialize_envelope(envelope)[:24]
        b'{"message":{"subject":"S'
    """
    return orjson.dumps(envelope_to_payload(envelope))


__all__ = [
    "envelope_to_payload",
    "serialize_envelope",
]
