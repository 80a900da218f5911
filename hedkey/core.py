# hedkey/core.py

import binascii
import hashlib
import hmac
import logging
import os
from typing import Callable, Optional, Tuple

from nacl import bindings, signing
from nacl.exceptions import CryptoError

from .errors import DerivationError, HexDecodeError, LengthError, SignatureError

log = logging.getLogger(__name__)

SEED_LENGTH = bindings.crypto_sign_SEEDBYTES
SIGNATURE_LENGTH = bindings.crypto_sign_BYTES
CHAIN_CODE_LENGTH = 32

# ASN.1 DER header of a PKCS#8 Ed25519 private key, followed by the 32-byte seed.
DER_PREFIX = "302e020100300506032b657004220420"
DER_PREFIX_BYTES = binascii.unhexlify(DER_PREFIX)

HARDENED_OFFSET = 0x80000000
SLIP10_CURVE_KEY = b"ed25519 seed"


# ---------- Hex codec ----------

def encode_hex(data: bytes) -> str:
    return binascii.hexlify(data).decode("ascii")


def decode_hex(text: str) -> bytes:
    try:
        return binascii.unhexlify(text)
    except (binascii.Error, ValueError, TypeError) as exc:
        raise HexDecodeError(f"invalid hex string: {exc}") from exc


# ---------- Seed to keypair ----------

def keypair_from_seed(seed: bytes) -> signing.SigningKey:
    """
    Build the PyNaCl keypair for a 32 byte seed.

    The caller is responsible for slicing; anything PyNaCl rejects is
    reported as SignatureError.
    """
    try:
        return signing.SigningKey(bytes(seed))
    except CryptoError as exc:
        raise SignatureError(str(exc)) from exc


# ---------- Encoding disambiguation ----------

# (name, predicate, seed extractor), tried in order.
SEED_ENCODINGS: Tuple[Tuple[str, Callable[[bytes], bool], Callable[[bytes], bytes]], ...] = (
    ("raw", lambda data: len(data) == SEED_LENGTH, lambda data: data),
    (
        "der",
        lambda data: len(data) == len(DER_PREFIX_BYTES) + SEED_LENGTH
        and data.startswith(DER_PREFIX_BYTES),
        lambda data: data[len(DER_PREFIX_BYTES):],
    ),
    ("extended", lambda data: len(data) == 2 * SEED_LENGTH, lambda data: data[:SEED_LENGTH]),
)


def _match_encoding(data: bytes) -> Tuple[str, bytes]:
    for name, accepts, extract in SEED_ENCODINGS:
        if accepts(data):
            return name, extract(data)
    raise LengthError(len(data))


def detect_encoding(data: bytes) -> str:
    """Name of the encoding ``data`` is in: "raw", "der" or "extended"."""
    return _match_encoding(bytes(data))[0]


def extract_seed(data: bytes) -> bytes:
    name, seed = _match_encoding(bytes(data))
    log.debug("private key bytes recognised as %s encoding", name)
    return seed


# ---------- Randomness ----------

def random_entropy(length: int, randbytes: Optional[Callable[[int], bytes]] = None) -> bytes:
    """
    Draw ``length`` bytes from ``randbytes`` (os.urandom by default).

    A short read is fatal, a key is never built from partial entropy.
    """
    source = randbytes or os.urandom
    entropy = source(length)
    if len(entropy) != length:
        raise RuntimeError(
            f"randomness source returned {len(entropy)} bytes, expected {length}"
        )
    return bytes(entropy)


# ---------- SLIP-10 (Ed25519, hardened only) ----------

def _hmac_sha512(key: bytes, data: bytes) -> bytes:
    return hmac.new(key, data, hashlib.sha512).digest()


def slip10_master(seed: bytes) -> Tuple[bytes, bytes]:
    """
    Master (key, chain code) for a binary seed as defined by SLIP-0010.
    """
    if not 16 <= len(seed) <= 64:
        raise ValueError("seed must be between 16 and 64 bytes")
    i = _hmac_sha512(SLIP10_CURVE_KEY, bytes(seed))
    return i[:32], i[32:]


def slip10_child(secret: bytes, chain_code: bytes, index: int) -> Tuple[bytes, bytes]:
    """
    Hardened child (key, chain code). Ed25519 has no public derivation,
    so the hardened bit is always set.
    """
    if index < 0 or index >= 2 * HARDENED_OFFSET:
        raise DerivationError(f"derivation index out of range: {index}")
    index |= HARDENED_OFFSET
    data = b"\x00" + bytes(secret) + index.to_bytes(4, "big")
    i = _hmac_sha512(bytes(chain_code), data)
    return i[:32], i[32:]


def parse_path(path: str) -> Tuple[int, ...]:
    """
    Turn "m/44'/3030'/0'" into (44, 3030, 0). Every level is hardened,
    so the trailing ' or H is optional.
    """
    parts = path.strip().split("/")
    if parts and parts[0] in ("m", "M"):
        parts = parts[1:]

    indices = []
    for part in parts:
        if part.endswith(("'", "h", "H")):
            part = part[:-1]
        if not part.isdigit():
            raise DerivationError(f"invalid derivation path component in {path!r}")
        indices.append(int(part))
    return tuple(indices)
