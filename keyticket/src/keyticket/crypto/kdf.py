# PBKDF2-HMAC-SHA256 stretching of name and password digests into an identity seed.
from __future__ import annotations
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from ..utils.config import KdfParams, PROTOCOL_KDF
from .hasher import sha256

class Pbkdf2Kdf:
  def __init__(self, params: KdfParams = PROTOCOL_KDF):
    self.params = params
  
  def derive(self, secret: bytes, salt: bytes) -> bytes:
    kdf = PBKDF2HMAC(algorithm=hashes.SHA256(), length=self.params.length, salt=salt, iterations=self.params.iterations)
    return kdf.derive(secret)
  
  def identity_seed(self, name: bytes, password: bytes) -> bytes:
    """Return the full-length identity seed for already encoded name and password"""
    name_hash = sha256(name)
    password_hash = sha256(password)
    return self.derive(name_hash + password_hash, salt=name_hash)
