"""Deterministic Ed25519 keypairs derived from a name and a password."""

from __future__ import annotations
from dataclasses import dataclass, field

from .crypto.kdf import Pbkdf2Kdf
from .crypto.signing import Ed25519Signer
from .utils.config import PROTOCOL_KDF
from .utils.text import encode_name, encode_text


@dataclass(frozen=True, slots=True)
class Keypair:
    """Raw 32-byte Ed25519 key material; regenerate it instead of storing it"""
    private_key: bytes = field(repr=False)
    public_key: bytes


def derive_keypair(name: str, password: str) -> Keypair:
    seed = Pbkdf2Kdf(PROTOCOL_KDF).identity_seed(encode_name(name), encode_text(password, field="password"))
    signer = Ed25519Signer.from_seed(seed[:PROTOCOL_KDF.seed_length])
    return Keypair(private_key=signer.private_bytes(), public_key=signer.public_bytes())


__all__ = ["Keypair", "derive_keypair"]
