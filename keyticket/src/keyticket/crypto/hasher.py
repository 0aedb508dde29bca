# SHA-256 digest used for names, passwords, challenges and unsigned tickets.
from __future__ import annotations
import hashlib

DIGEST_SIZE = 32


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()
