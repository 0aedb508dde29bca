from __future__ import annotations

"""Central exception hierarchy"""
class KeyTicketError(Exception):
    """Base exception for all failures"""


class CryptoError(KeyTicketError):
    """Raised when a hash, KDF or signature primitive rejects its input"""


class MalformedTicketError(KeyTicketError):
    """Raised when ticket bytes are too short for their declared layout"""


class ConfigError(KeyTicketError):
    """Raised when a configuration file cannot be loaded"""


class InvalidTextError(KeyTicketError, ValueError):
    """Raised when a name or password cannot be encoded as UTF-8"""
