# hedkey/errors.py


class PrivateKeyError(ValueError):
    """Base class for everything that can go wrong building a private key."""


class LengthError(PrivateKeyError):
    """
    Raised when a byte buffer matches none of the accepted key encodings.

    The offending length is kept on ``.length``.
    """

    def __init__(self, length: int):
        self.length = length
        super().__init__(
            f"invalid private key length: {length} bytes "
            "(expected 32, 48 with DER prefix, or 64)"
        )


class SignatureError(PrivateKeyError):
    """PyNaCl refused the seed material."""


class HexDecodeError(PrivateKeyError):
    """Text input is not valid hex."""


class DerivationError(PrivateKeyError):
    """Child key derivation was not possible for this key or index."""
