"""Turn an inbound message into an authenticated sendMail request.

Contents:
    * :func:`process_message` - Per-message use case invoked by the runtime.
    * :func:`build_request_headers` - Headers attached to the outbound request.

System Role:
    Sequences the domain validation, the token provider port and the
    serializer port. Headers and body are only touched after every step has
    succeeded, so a failure leaves the message exactly as it arrived.
"""

from __future__ import annotations

import logging

from ..domain.message import Message
from ..domain.payload import build_envelope_from_properties
from ..domain.properties import PropertyName, require
from .ports import GetBearerToken, SerializeEnvelope

logger = logging.getLogger(__name__)

AUTHORIZATION_HEADER = "Authorization"
CONTENT_TYPE_HEADER = "Content-Type"
#: Hint consumed by the HTTP transport that sends the request.
MIME_HEADER = "MIME"

JSON_CONTENT_TYPE = "application/json"
TRANSPORT_MIME_TYPE = "text/plain"


def build_request_headers(token: str) -> dict[str, str]:
    """Return the headers for an authenticated sendMail request.

    Example:
        >>> build_request_headers("abc")
        {'Authorization': 'Bearer abc', 'Content-Type': 'application/json', 'MIME': 'text/plain'}
    """
    return {
        AUTHORIZATION_HEADER: f"Bearer {token}",
        CONTENT_TYPE_HEADER: JSON_CONTENT_TYPE,
        MIME_HEADER: TRANSPORT_MIME_TYPE,
    }


def process_message(
    message: Message,
    *,
    get_bearer_token: GetBearerToken,
    serialize_envelope: SerializeEnvelope,
) -> Message:
    """Replace the message body with a sendMail payload and authenticate it.

    Args:
        message: Message supplied by the invoking runtime.
        get_bearer_token: Token provider resolving the configured credential.
        serialize_envelope: Serializer rendering the envelope to bytes.

    Returns:
        The same message, with request headers set and the JSON payload
        as body.

    Raises:
        MissingConfigurationError: A required property is absent or empty.
        CredentialResolutionError: The credential could not be resolved.
        InvalidBodyError: The message has no body.

    Side Effects:
        Mutates ``message.headers`` and ``message.body`` on success only.
    """
    credential_name = require(message.properties, PropertyName.OAUTH2_AUTHORIZATION_CODE_CRED)
    token = get_bearer_token(credential_name)
    envelope = build_envelope_from_properties(message.properties, message.body)
    payload = serialize_envelope(envelope)

    message.headers.update(build_request_headers(token))
    message.body = payload

    logger.info(
        "Built sendMail payload",
        extra={
            "credential": credential_name,
            "cc_count": len(envelope.message.cc_recipients),
            "attachment_count": len(envelope.message.attachments),
            "save_to_sent_items": envelope.save_to_sent_items,
            "payload_bytes": len(payload),
        },
    )
    return message


__all__ = [
    "AUTHORIZATION_HEADER",
    "CONTENT_TYPE_HEADER",
    "JSON_CONTENT_TYPE",
    "MIME_HEADER",
    "TRANSPORT_MIME_TYPE",
    "build_request_headers",
    "process_message",
]
