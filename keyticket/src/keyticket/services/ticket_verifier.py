# Check an identity ticket against the challenge it was meant to answer.
from __future__ import annotations

import logging

from ..core.exceptions import CryptoError
from ..crypto.hasher import sha256
from ..crypto.signing import Ed25519Signer
from ..storage.ticket import MalformedTicket, decode

logger = logging.getLogger(__name__)


def verify_identity_ticket(ticket: bytes, challenge_question: bytes) -> bool:
    """Return True when ``ticket`` is self-consistent and answers ``challenge_question``.

    Verification is total: malformed buffers, bad key material and any
    primitive failure all produce False instead of an exception. The caller's
    buffer is never modified; the signed prefix is rebuilt from decoded fields.
    """
    try:
        decoded = decode(ticket)
        if isinstance(decoded, MalformedTicket):
            logger.debug("ticket.verify", extra={"valid": False, "reason": "malformed", "detail": decoded.reason})
            return False

        unsigned_digest = sha256(decoded.unsigned_bytes())
        challenge_digest = sha256(challenge_question)
        verifier = Ed25519Signer.from_public_bytes(decoded.public_key)

        sig_ok = _check(verifier, unsigned_digest, decoded.signature)
        challenge_ok = _check(verifier, challenge_digest, decoded.challenge_answer)
    except Exception as exc:
        logger.debug("ticket.verify", extra={"valid": False, "reason": "error", "error": type(exc).__name__})
        return False

    if not sig_ok:
        reason = "bad_signature"
    elif not challenge_ok:
        reason = "bad_challenge"
    else:
        reason = "ok"
    logger.debug("ticket.verify", extra={"valid": sig_ok and challenge_ok, "reason": reason})
    return sig_ok and challenge_ok


def _check(verifier: Ed25519Signer, message: bytes, signature: bytes) -> bool:
    try:
        verifier.verify(message=message, signature=signature)
    except CryptoError:
        return False
    return True


__all__ = ["verify_identity_ticket"]
