from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey
)

from keyticket.core.exceptions import CryptoError


class Ed25519Signer:
    """Thin wrapper around Ed25519 that normalizes error handling"""
    
    def __init__(self, *, private_key: Ed25519PrivateKey | None = None, public_key: Ed25519PublicKey | None = None) -> None:
        if not private_key and not public_key:
            raise CryptoError("At least one of private_key or public_key is required")
        self._private_key = private_key
        self._public_key = public_key or private_key.public_key()  #* type: ignore[union-attr]
    
    @classmethod
    def from_seed(cls, seed: bytes) -> Ed25519Signer:
        """Build a signer from a 32-byte private seed"""
        try:
            return cls(private_key=Ed25519PrivateKey.from_private_bytes(seed))
        except (TypeError, ValueError) as exc:
            raise CryptoError("Invalid Ed25519 private key material") from exc
    
    @classmethod
    def from_public_bytes(cls, data: bytes) -> Ed25519Signer:
        try:
            return cls(public_key=Ed25519PublicKey.from_public_bytes(data))
        except (TypeError, ValueError) as exc:
            raise CryptoError("Invalid Ed25519 public key material") from exc
    
    def public_bytes(self) -> bytes:
        return self._public_key.public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        )
    
    def private_bytes(self) -> bytes:
        if not self._private_key:
            raise CryptoError("No private key material available")
        return self._private_key.private_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PrivateFormat.Raw,
            encryption_algorithm=serialization.NoEncryption(),
        )
    
    def sign(self, *, message: bytes) -> bytes:
        if not self._private_key:
            raise CryptoError("Signing requested without private key material")
        return self._private_key.sign(message)
    
    def verify(self, *, message: bytes, signature: bytes) -> None:
        try:
            self._public_key.verify(signature, message)
        except InvalidSignature as exc:
            raise CryptoError("Signature verification failed") from exc
