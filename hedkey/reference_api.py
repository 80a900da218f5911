"""
Stable reference API for hedkey test vectors.

Wraps PrivateKey into a bytes/hex in, bytes/hex out surface that the
vector generator and tests can depend on without touching key objects.
"""

from typing import Tuple

from hedkey.private_key import PrivateKey


def seed_to_private_key_text(seed: bytes) -> str:
    """Canonical DER-prefixed hex text for a 32-byte seed."""
    return PrivateKey.from_bytes(seed).to_string()


def private_key_text_to_seed(text: str) -> bytes:
    return PrivateKey.from_string(text).to_bytes()


def sk_to_pk(sk: bytes) -> bytes:
    """
    Public key bytes for any accepted private key encoding.
    """
    return PrivateKey.from_bytes(sk).public_key().encode()  # 32-byte pubkey


def sign_message(sk: bytes, message: bytes) -> bytes:
    return PrivateKey.from_bytes(sk).sign(message)


def master_from_seed(seed: bytes) -> Tuple[bytes, bytes]:
    """SLIP-0010 master (secret, chain code)."""
    key = PrivateKey.from_seed(seed)
    return key.to_bytes(), key.chain_code


def derive_path(seed: bytes, path: str) -> Tuple[bytes, bytes]:
    """
    Derive (secret, chain code) at ``path`` below the SLIP-0010 master
    for ``seed``.
    """
    key = PrivateKey.from_seed(seed).derive_path(path)
    return key.to_bytes(), key.chain_code
