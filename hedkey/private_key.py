# hedkey/private_key.py

import logging
from typing import Callable, Optional, Union

from nacl import signing

from .core import (
    CHAIN_CODE_LENGTH,
    DER_PREFIX,
    SEED_LENGTH,
    decode_hex,
    encode_hex,
    extract_seed,
    keypair_from_seed,
    parse_path,
    random_entropy,
    slip10_child,
    slip10_master,
)
from .errors import DerivationError

log = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


class PrivateKey:
    """
    An Ed25519 private key.

    Holds the 32 byte seed, the PyNaCl keypair derived from it and, for
    keys that came from generate() or derivation, a 32 byte chain code.
    Two keys are equal when their seeds are equal; the chain code plays
    no part in identity.

    The canonical text form is DER_PREFIX followed by the lowercase hex
    seed, whichever encoding the key was parsed from.
    """

    __slots__ = ("_signing_key", "_chain_code")

    def __init__(self, seed: bytes, chain_code: Optional[bytes] = None):
        if len(seed) != SEED_LENGTH:
            raise ValueError(f"seed must be {SEED_LENGTH} bytes")
        if chain_code is not None and len(chain_code) != CHAIN_CODE_LENGTH:
            raise ValueError(f"chain code must be {CHAIN_CODE_LENGTH} bytes")

        self._signing_key = keypair_from_seed(seed)
        self._chain_code = bytes(chain_code) if chain_code is not None else None

    # ---------- Construction ----------

    @classmethod
    def generate(cls, randbytes: Optional[Callable[[int], bytes]] = None) -> "PrivateKey":
        """
        New key from 64 bytes of randomness: seed first, chain code second.

        ``randbytes`` defaults to os.urandom and exists so tests can pin it.
        """
        entropy = random_entropy(SEED_LENGTH + CHAIN_CODE_LENGTH, randbytes)
        return cls(entropy[:SEED_LENGTH], entropy[SEED_LENGTH:])

    @classmethod
    def from_bytes(cls, data: BytesLike) -> "PrivateKey":
        """
        Accepts a bare 32 byte seed, a 48 byte DER encoded key or a 64 byte
        seed-plus-public-key blob. Anything else raises LengthError.
        """
        return cls(extract_seed(data))

    @classmethod
    def from_string(cls, text: str) -> "PrivateKey":
        return cls.from_bytes(decode_hex(text))

    @classmethod
    def from_seed(cls, seed: bytes) -> "PrivateKey":
        """SLIP-0010 master key for a 16 to 64 byte binary seed."""
        secret, chain_code = slip10_master(seed)
        return cls(secret, chain_code)

    # ---------- Derivation ----------

    def derive(self, index: int) -> "PrivateKey":
        """Hardened SLIP-0010 child at ``index``."""
        if self._chain_code is None:
            raise DerivationError("key has no chain code, it cannot be derived from")
        log.debug("deriving hardened child %d", index)
        secret, chain_code = slip10_child(self.to_bytes(), self._chain_code, index)
        return PrivateKey(secret, chain_code)

    def derive_path(self, path: str) -> "PrivateKey":
        key = self
        for index in parse_path(path):
            key = key.derive(index)
        return key

    # ---------- Accessors ----------

    @property
    def chain_code(self) -> Optional[bytes]:
        return self._chain_code

    def to_bytes(self) -> bytes:
        return self._signing_key.encode()

    def to_string(self) -> str:
        return DER_PREFIX + encode_hex(self.to_bytes())

    def public_key(self) -> signing.VerifyKey:
        """
        The public key for this private key. It can be handed out freely
        and used by others to verify signatures made with sign().
        """
        return self._signing_key.verify_key

    def sign(self, message: BytesLike) -> bytes:
        """Deterministic 64 byte Ed25519 signature over ``message``."""
        return self._signing_key.sign(bytes(message)).signature

    # ---------- Protocol ----------

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"PrivateKey(public_key={encode_hex(self.public_key().encode())})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrivateKey):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __hash__(self) -> int:
        return hash(self.to_bytes())


def parse_private_key(value: Union[str, BytesLike]) -> PrivateKey:
    """Parse hex text or raw bytes in any of the accepted encodings."""
    if isinstance(value, str):
        return PrivateKey.from_string(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return PrivateKey.from_bytes(value)
    raise TypeError(f"cannot parse a private key from {type(value).__name__}")
