from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

PROTOCOL_VERSION = "0.2"

MAX_NAME_BYTES = 0xFFFF
NAME_LENGTH_SIZE = 2
PUBLIC_KEY_SIZE = 32
SIGNATURE_SIZE = 64
#* name length prefix + public key + challenge answer + signature
TICKET_OVERHEAD = NAME_LENGTH_SIZE + PUBLIC_KEY_SIZE + 2 * SIGNATURE_SIZE

DEFAULT_CHALLENGE_LENGTH = 512


@dataclass(frozen=True)
class KdfParams:
    """Parameters for stretching name and password hashes with PBKDF2"""
    
    algorithm: str = "pbkdf2-hmac-sha256"
    iterations: int = 4096
    length: int = 64
    seed_length: int = 32
    
    def as_dict(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "iterations": self.iterations,
            "length": self.length,
            "seed_length": self.seed_length,
        }


PROTOCOL_KDF = KdfParams()

__all__ = [
    "DEFAULT_CHALLENGE_LENGTH",
    "KdfParams",
    "MAX_NAME_BYTES",
    "NAME_LENGTH_SIZE",
    "PROTOCOL_KDF",
    "PROTOCOL_VERSION",
    "PUBLIC_KEY_SIZE",
    "SIGNATURE_SIZE",
    "TICKET_OVERHEAD",
]
