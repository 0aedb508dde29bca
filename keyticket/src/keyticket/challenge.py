from __future__ import annotations

import os

from .crypto.hasher import sha256
from .crypto.signing import Ed25519Signer
from .utils.config import DEFAULT_CHALLENGE_LENGTH


def generate_random_challenge(length: int = DEFAULT_CHALLENGE_LENGTH) -> bytes:
    if length < 0:
        raise ValueError("Challenge length must be non-negative")
    return os.urandom(length)


def solve_challenge(challenge: bytes, private_key: bytes) -> bytes:
    """Sign the SHA-256 digest of ``challenge`` and return the 64-byte answer"""
    return Ed25519Signer.from_seed(private_key).sign(message=sha256(challenge))


__all__ = ["generate_random_challenge", "solve_challenge"]
