# Serializable summary of a decoded ticket for display and audit output.

from __future__ import annotations

from pydantic import BaseModel

from .crypto.hasher import sha256
from .storage.ticket import Ticket
from .utils.config import PROTOCOL_VERSION


class TicketInfo(BaseModel):
    protocol: str = PROTOCOL_VERSION
    name: str
    name_length: int
    public_key: str
    fingerprint: str  #* hex SHA-256 of the raw public key
    challenge_answer: str
    signature: str
    size: int

    model_config = {"frozen": True}

    @classmethod
    def from_ticket(cls, ticket: Ticket) -> "TicketInfo":
        return cls(
            name=ticket.name_text,
            name_length=ticket.name_length,
            public_key=ticket.public_key.hex(),
            fingerprint=sha256(ticket.public_key).hex(),
            challenge_answer=ticket.challenge_answer.hex(),
            signature=ticket.signature.hex(),
            size=len(ticket.to_bytes()),
        )


__all__ = ["TicketInfo"]
