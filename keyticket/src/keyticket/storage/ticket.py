from __future__ import annotations

import struct
from dataclasses import dataclass

from ..utils.text import encode_name
from ..utils.config import NAME_LENGTH_SIZE, PUBLIC_KEY_SIZE, SIGNATURE_SIZE, TICKET_OVERHEAD
from ..core.exceptions import MalformedTicketError

NAME_LENGTH_STRUCT = struct.Struct("<H")


@dataclass(frozen=True, slots=True)
class Ticket:
    """Decoded identity ticket. Field contents are not validated here."""
    name_length: int
    name: bytes
    public_key: bytes
    challenge_answer: bytes
    signature: bytes

    @property
    def name_text(self) -> str:
        return self.name.decode("utf-8", errors="replace")

    def unsigned_bytes(self) -> bytes:
        """Rebuild the prefix covered by ``signature`` from the decoded fields"""
        return (
            NAME_LENGTH_STRUCT.pack(self.name_length)
            + self.name
            + self.public_key
            + self.challenge_answer
        )

    def to_bytes(self) -> bytes:
        return self.unsigned_bytes() + self.signature

    @classmethod
    def from_bytes(cls, data: bytes) -> "Ticket":
        result = decode(data)
        if isinstance(result, MalformedTicket):
            raise MalformedTicketError(result.reason)
        return result


@dataclass(frozen=True, slots=True)
class MalformedTicket:
    """Decode outcome for buffers that cannot hold the declared layout"""
    reason: str
    size: int


def ticket_length(name_length: int) -> int:
    return name_length + TICKET_OVERHEAD


def encode_unsigned(name: str | bytes, public_key: bytes, challenge_answer: bytes) -> bytes:
    if len(public_key) != PUBLIC_KEY_SIZE:
        raise ValueError(f"Public key must be {PUBLIC_KEY_SIZE} bytes")
    if len(challenge_answer) != SIGNATURE_SIZE:
        raise ValueError(f"Challenge answer must be {SIGNATURE_SIZE} bytes")
    raw_name = encode_name(name)
    return NAME_LENGTH_STRUCT.pack(len(raw_name)) + raw_name + bytes(public_key) + bytes(challenge_answer)


def decode(data: bytes) -> Ticket | MalformedTicket:
    view = bytes(data)
    if len(view) < NAME_LENGTH_SIZE:
        return MalformedTicket(reason="Truncated name length", size=len(view))
    (name_length,) = NAME_LENGTH_STRUCT.unpack_from(view)
    if len(view) < ticket_length(name_length):
        return MalformedTicket(
            reason=f"Ticket declares {ticket_length(name_length)} bytes but holds {len(view)}",
            size=len(view),
        )

    offset = NAME_LENGTH_SIZE
    name = view[offset:offset + name_length]
    offset += name_length
    public_key = view[offset:offset + PUBLIC_KEY_SIZE]
    offset += PUBLIC_KEY_SIZE
    challenge_answer = view[offset:offset + SIGNATURE_SIZE]
    offset += SIGNATURE_SIZE
    signature = view[offset:offset + SIGNATURE_SIZE]
    return Ticket(
        name_length=name_length,
        name=name,
        public_key=public_key,
        challenge_answer=challenge_answer,
        signature=signature,
    )


__all__ = ["MalformedTicket", "NAME_LENGTH_STRUCT", "TICKET_OVERHEAD", "Ticket", "decode", "encode_unsigned", "ticket_length"]
