"""Serialization adapter - orjson rendering of the sendMail envelope.

Contents:
    * :func:`.serializer.serialize_envelope` - Envelope to UTF-8 JSON bytes
    * :func:`.serializer.envelope_to_payload` - Envelope to Graph-shaped dict
"""

from __future__ import annotations

from .serializer import envelope_to_payload, serialize_envelope

__all__ = [
    "envelope_to_payload",
    "serialize_envelope",
]
