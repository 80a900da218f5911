# hedkey/signature.py

from typing import Union

from nacl import signing
from nacl.exceptions import BadSignatureError, CryptoError

from .core import SIGNATURE_LENGTH, decode_hex, encode_hex


def public_key_to_hex(vk: signing.VerifyKey) -> str:
    return encode_hex(vk.encode())


def verify_signature(
    public_key: Union[signing.VerifyKey, bytes],
    message: bytes,
    signature: bytes,
) -> bool:
    """
    Check an Ed25519 signature made by PrivateKey.sign().

    ``public_key`` is a VerifyKey or its 32 raw bytes.

    Returns:
        True if valid, False otherwise.
    """
    if len(signature) != SIGNATURE_LENGTH:
        return False

    if not isinstance(public_key, signing.VerifyKey):
        try:
            public_key = signing.VerifyKey(bytes(public_key))
        except CryptoError:
            return False

    try:
        public_key.verify(bytes(message), bytes(signature))
    except BadSignatureError:
        return False

    return True


def verify_signature_hex(public_key_hex: str, message: bytes, signature_hex: str) -> bool:
    """Hex variant of verify_signature. Malformed hex raises HexDecodeError."""
    return verify_signature(decode_hex(public_key_hex), message, decode_hex(signature_hex))
