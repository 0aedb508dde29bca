"""Password-derived Ed25519 identity tickets."""

from .challenge import generate_random_challenge, solve_challenge
from .core.exceptions import ConfigError, CryptoError, InvalidTextError, KeyTicketError, MalformedTicketError
from .keys import Keypair, derive_keypair
from .logging import install_null_handler
from .services.ticket_builder import create_identity_ticket
from .services.ticket_verifier import verify_identity_ticket
from .storage.ticket import MalformedTicket, Ticket, decode, encode_unsigned
from .utils.config import PROTOCOL_VERSION
from .version import __version__

install_null_handler()

__all__ = [
    "ConfigError",
    "CryptoError",
    "InvalidTextError",
    "KeyTicketError",
    "Keypair",
    "MalformedTicket",
    "MalformedTicketError",
    "PROTOCOL_VERSION",
    "Ticket",
    "__version__",
    "create_identity_ticket",
    "decode",
    "derive_keypair",
    "encode_unsigned",
    "generate_random_challenge",
    "solve_challenge",
    "verify_identity_ticket",
]
