class DSAKeyError(Exception):
    """Base class for every failure raised by a DSA key operation."""

    def __init__(self, message: str, operation: str = None):
        super().__init__(message)
        self.operation = operation

    def __str__(self):
        message = super().__str__()
        if self.operation:
            return f"{self.operation}: {message}"
        return message


class InvalidKeyMaterial(DSAKeyError):
    """A numeric field could not be decoded, is non-positive, or was rejected."""


class MissingPrivateKey(DSAKeyError):
    """The private exponent is required but absent."""


class IncompleteKey(DSAKeyError):
    """One of the public fields p, q, g, y is absent."""


class GenerationFailed(DSAKeyError):
    """Parameter or key-pair generation failed."""


class SignatureFailed(DSAKeyError):
    """The signing primitive failed."""


class VerificationFailed(DSAKeyError):
    """Verification could not run: malformed input or an internal error."""


class IoError(DSAKeyError):
    """A key file could not be opened, read or written."""


class EncodingFailed(DSAKeyError):
    """The key could not be serialized to its PEM container."""
