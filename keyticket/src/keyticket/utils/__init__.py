from __future__ import annotations

from .b64 import b64d, b64e, ticket_from_text, ticket_to_text
from .text import encode_name, encode_text
from .config import (
    DEFAULT_CHALLENGE_LENGTH,
    KdfParams,
    MAX_NAME_BYTES,
    PROTOCOL_KDF,
    PROTOCOL_VERSION,
)

__all__ = [
    "b64e",
    "b64d",
    "ticket_from_text",
    "ticket_to_text",
    "encode_name",
    "encode_text",
    "DEFAULT_CHALLENGE_LENGTH",
    "KdfParams",
    "MAX_NAME_BYTES",
    "PROTOCOL_KDF",
    "PROTOCOL_VERSION",
]
