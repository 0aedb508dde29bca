from __future__ import annotations

from ..core.exceptions import InvalidTextError
from .config import MAX_NAME_BYTES


def encode_text(value: str, *, field: str = "text") -> bytes:
    """UTF-8 encode ``value``; lone surrogates are rejected instead of escaped"""
    try:
        return value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidTextError(f"{field} is not encodable as UTF-8") from exc


def encode_name(name: str | bytes) -> bytes:
    """UTF-8 encode ``name`` and cut it to the longest length a ticket can carry.

    The cut is done on bytes, so a multibyte character straddling the limit is
    dropped partially. Both sides of the protocol use the same byte prefix.
    """
    raw = encode_text(name, field="name") if isinstance(name, str) else bytes(name)
    return raw[:MAX_NAME_BYTES]


__all__ = ["encode_name", "encode_text"]
