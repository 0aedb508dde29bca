from __future__ import annotations

import hashlib

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from keyticket.crypto.kdf import Pbkdf2Kdf
from keyticket.core.exceptions import InvalidTextError, KeyTicketError
from keyticket.keys import Keypair, derive_keypair
from keyticket.utils.text import encode_name
from keyticket.utils.config import MAX_NAME_BYTES, PROTOCOL_KDF


def _reference_keypair(name: bytes, password: bytes) -> Keypair:
    name_hash = hashlib.sha256(name).digest()
    password_hash = hashlib.sha256(password).digest()
    seed = hashlib.pbkdf2_hmac("sha256", name_hash + password_hash, name_hash, 4096, dklen=64)
    private = Ed25519PrivateKey.from_private_bytes(seed[:32])
    public = private.public_key().public_bytes(serialization.Encoding.Raw, serialization.PublicFormat.Raw)
    return Keypair(private_key=seed[:32], public_key=public)


def test_derive_keypair_matches_reference_derivation() -> None:
    keypair = derive_keypair("alice", "correct horse battery staple")
    assert keypair == _reference_keypair(b"alice", b"correct horse battery staple")
    assert len(keypair.private_key) == 32
    assert len(keypair.public_key) == 32


def test_identity_seed_is_full_length() -> None:
    seed = Pbkdf2Kdf().identity_seed(b"alice", b"pw")
    assert len(seed) == PROTOCOL_KDF.length == 64


def test_derive_keypair_is_deterministic() -> None:
    assert derive_keypair("bob", "hunter2") == derive_keypair("bob", "hunter2")


@pytest.mark.parametrize(
    "other",
    [("bob", "hunter3"), ("Bob", "hunter2"), ("bob ", "hunter2"), ("hunter2", "bob")],
)
def test_derive_keypair_differs_on_any_change(other: tuple[str, str]) -> None:
    assert derive_keypair("bob", "hunter2").public_key != derive_keypair(*other).public_key


def test_empty_inputs_are_valid() -> None:
    keypair = derive_keypair("", "")
    assert keypair == _reference_keypair(b"", b"")


def test_long_name_is_truncated_to_limit() -> None:
    long_name = "n" * (MAX_NAME_BYTES + 4000)
    assert derive_keypair(long_name, "pw") == derive_keypair(long_name[:MAX_NAME_BYTES], "pw")


def test_truncation_counts_bytes_not_characters() -> None:
    #* 1 + 2 * 40000 bytes; the cut lands right after 32767 two-byte characters
    long_name = "a" + "é" * 40000
    assert len(encode_name(long_name)) == MAX_NAME_BYTES
    assert derive_keypair(long_name, "pw") == derive_keypair("a" + "é" * 32767, "pw")


def test_truncation_may_split_multibyte_character() -> None:
    raw = encode_name("é" * 40000)
    assert len(raw) == MAX_NAME_BYTES
    assert raw.endswith(b"\xc3")


def test_keypair_repr_hides_private_key() -> None:
    keypair = derive_keypair("carol", "secret")
    assert keypair.private_key.hex() not in repr(keypair)
    assert "private_key" not in repr(keypair)


@pytest.mark.parametrize(("name", "password"), [("\ud800", "pw"), ("bob", "pw\udfff")])
def test_unencodable_text_raises_library_error(name: str, password: str) -> None:
    with pytest.raises(InvalidTextError) as excinfo:
        derive_keypair(name, password)
    assert isinstance(excinfo.value, KeyTicketError)
    assert isinstance(excinfo.value.__cause__, UnicodeEncodeError)


def test_encode_name_passes_bytes_through() -> None:
    assert encode_name(b"\xff\x00") == b"\xff\x00"
