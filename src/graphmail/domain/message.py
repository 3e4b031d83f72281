"""Inbound/outbound message exchanged with the invoking runtime."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


def _empty_headers() -> dict[str, str]:
    """Create an empty typed header dict."""
    return {}


@dataclass
class Message:
    """A message as handed over by the host runtime.

    The runtime owns the property set, header storage and body. Processing
    reads ``properties`` and ``body`` and, on success only, replaces the
    body and adds request headers in place.

    Attributes:
        properties: Named string properties configuring the payload.
        body: Raw body bytes, or None when the runtime supplied no body.
        headers: Mutable header storage.

    Example:
        >>> msg = Message(properties={"MAIL_SUBJECT": "S"}, body=b"hello")
        >>> msg.headers
        {}
    """

    properties: Mapping[str, str]
    body: bytes | None = None
    headers: dict[str, str] = field(default_factory=_empty_headers)


__all__ = ["Message"]
