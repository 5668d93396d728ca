"""
symcrypt - encrypt short strings with a key derived from a passphrase.

    key = await symcrypt.derive_key("32-byte-random-string")
    envelope = await symcrypt.encrypt("hello world", key)
    assert await symcrypt.decrypt(envelope, key) == "hello world"
"""

from loguru import logger

from symcrypt.core.errors import (
    CryptoOperationError,
    EncodingError,
    InputValidationError,
    SymcryptError,
)
from symcrypt.models.key import SymmetricKey
from symcrypt.services.symmetric import (
    create_symmetric_crypto_key,
    create_symmetric_key_with_text,
    decrypt,
    decrypt_symmetrically,
    decrypt_symmetrically_text,
    derive_key,
    encrypt,
    encrypt_symmetrically,
    encrypt_symmetrically_text,
)

# silent until the application calls symcrypt.core.logging.configure_logging()
logger.disable("symcrypt")

__version__ = "0.1.0"

__all__ = [
    "CryptoOperationError",
    "EncodingError",
    "InputValidationError",
    "SymcryptError",
    "SymmetricKey",
    "create_symmetric_crypto_key",
    "create_symmetric_key_with_text",
    "decrypt",
    "decrypt_symmetrically",
    "decrypt_symmetrically_text",
    "derive_key",
    "encrypt",
    "encrypt_symmetrically",
    "encrypt_symmetrically_text",
]
