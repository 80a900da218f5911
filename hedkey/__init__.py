# hedkey/__init__.py

from .core import (
    DER_PREFIX,
    SEED_LENGTH,
    SIGNATURE_LENGTH,
    detect_encoding,
)
from .errors import (
    DerivationError,
    HexDecodeError,
    LengthError,
    PrivateKeyError,
    SignatureError,
)
from .private_key import (
    PrivateKey,
    parse_private_key,
)
from .signature import (
    public_key_to_hex,
    verify_signature,
)

__all__ = [
    "DER_PREFIX",
    "SEED_LENGTH",
    "SIGNATURE_LENGTH",
    "detect_encoding",
    "DerivationError",
    "HexDecodeError",
    "LengthError",
    "PrivateKeyError",
    "SignatureError",
    "PrivateKey",
    "parse_private_key",
    "public_key_to_hex",
    "verify_signature",
]
