"""
Error kinds raised by symcrypt.

Each one also derives from the builtin a caller would naturally catch
(``TypeError`` for bad arguments, ``ValueError`` for bad text).
"""


class SymcryptError(Exception):
    """Base class for every error raised by this package."""


class InputValidationError(SymcryptError, TypeError):
    """An argument is not a string or cannot be encoded as text."""


class EncodingError(SymcryptError, ValueError):
    """An envelope is not valid Base64, or decrypted bytes are not valid text."""


class CryptoOperationError(SymcryptError):
    """Key unusable for AES-GCM, envelope malformed, or authentication failed.

    An authentication failure means tampering, corruption or the wrong key.
    """
