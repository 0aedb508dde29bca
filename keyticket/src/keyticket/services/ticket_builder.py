# Assemble a signed identity ticket from a name, a password and a server challenge.
from __future__ import annotations

import logging

from ..challenge import solve_challenge
from ..crypto.hasher import sha256
from ..crypto.signing import Ed25519Signer
from ..keys import derive_keypair
from ..storage.ticket import TICKET_OVERHEAD, encode_unsigned

logger = logging.getLogger(__name__)


def create_identity_ticket(name: str, password: str, challenge: bytes) -> bytes:
    keypair = derive_keypair(name, password)
    answer = solve_challenge(challenge, keypair.private_key)
    unsigned = encode_unsigned(name, keypair.public_key, answer)
    #* the signature covers the digest of the unsigned prefix, not the raw bytes
    signature = Ed25519Signer.from_seed(keypair.private_key).sign(message=sha256(unsigned))
    ticket = unsigned + signature
    logger.debug(
        "ticket.created",
        extra={"name_length": len(ticket) - TICKET_OVERHEAD, "ticket_length": len(ticket)},
    )
    return ticket


__all__ = ["create_identity_ticket"]
