"""
Symmetric encryption helper ‑ derives an AES-256-GCM key from a string.

The key is the SHA-256 digest of the encoded input: the same string always
gives the same key, so its strength is exactly the input's entropy (a
32-byte random string is recommended). No salt, no iterations.

Envelope format::

    b64(nonce) + b64(ciphertext ‖ tag)

12 bytes encode to 16 Base64 chars without padding, so the envelope is also
valid Base64 for ``nonce ‖ ciphertext ‖ tag`` and is decoded in one go.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import os
from typing import Tuple

from cryptography.exceptions import InvalidTag
from loguru import logger

from symcrypt.core.config import settings
from symcrypt.core.errors import CryptoOperationError, EncodingError, InputValidationError
from symcrypt.models.key import SymmetricKey

ENCRYPTION_ALGORITHM = "AES-GCM"
KEY_BYTES_LENGTH = 32
IV_BYTES_LENGTH = 12
TAG_BYTES_LENGTH = 16
KEY_USAGES = ("encrypt", "decrypt")
# AES-GCM plaintext limit is 2^39 - 256 bits
MAX_PLAINTEXT_BYTES = (2**39 - 256) // 8


def _encode_text(value, what: str, encoding: str | None) -> bytes:
    if not isinstance(value, str):
        raise InputValidationError(f"{what} must be a str, not {type(value).__name__}")
    try:
        return value.encode(encoding or settings.TEXT_ENCODING)
    except (UnicodeError, LookupError) as exc:
        raise InputValidationError(f"{what} cannot be encoded: {exc}") from exc


def _require_usage(key, usage: str) -> SymmetricKey:
    if not isinstance(key, SymmetricKey):
        raise CryptoOperationError(f"expected a SymmetricKey, not {type(key).__name__}")
    if key.algorithm != ENCRYPTION_ALGORITHM or not key.allows(usage):
        raise CryptoOperationError(f"key {key!r} cannot be used to {usage}")
    return key


def import_key(material: bytes) -> SymmetricKey:
    """Wrap raw 32-byte material as a non-extractable encrypt/decrypt key."""
    if len(material) != KEY_BYTES_LENGTH:
        raise CryptoOperationError(
            f"AES-256-GCM needs {KEY_BYTES_LENGTH} bytes of key material, got {len(material)}"
        )
    try:
        return SymmetricKey(material, ENCRYPTION_ALGORITHM, KEY_USAGES)
    except ValueError as exc:
        raise CryptoOperationError(f"key import rejected: {exc}") from exc


def derive_key(text: str, *, encoding: str | None = None) -> SymmetricKey:
    digest = hashlib.sha256(_encode_text(text, "key text", encoding)).digest()
    logger.debug("derived {}-{} key", ENCRYPTION_ALGORITHM, KEY_BYTES_LENGTH * 8)
    return import_key(digest)


def join_envelope(nonce: bytes, ciphertext: bytes) -> str:
    # two independent encodings, concatenated as text
    return base64.b64encode(nonce).decode("ascii") + base64.b64encode(ciphertext).decode("ascii")


def split_envelope(envelope: str) -> Tuple[bytes, bytes]:
    """Decode an envelope once and split it at the nonce boundary."""
    if not isinstance(envelope, str):
        raise InputValidationError(f"envelope must be a str, not {type(envelope).__name__}")
    try:
        raw = base64.b64decode(envelope, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise EncodingError(f"envelope is not valid Base64: {exc}") from exc
    if len(raw) < IV_BYTES_LENGTH:
        raise CryptoOperationError(
            f"envelope too short: {len(raw)} bytes, need at least {IV_BYTES_LENGTH}"
        )
    return raw[:IV_BYTES_LENGTH], raw[IV_BYTES_LENGTH:]


def encrypt(plaintext: str, key: SymmetricKey, *, encoding: str | None = None) -> str:
    key = _require_usage(key, "encrypt")
    data = _encode_text(plaintext, "plaintext", encoding)
    if len(data) > MAX_PLAINTEXT_BYTES:
        raise CryptoOperationError(f"plaintext longer than {MAX_PLAINTEXT_BYTES} bytes")

    nonce = os.urandom(IV_BYTES_LENGTH)
    try:
        ciphertext = key.aead.encrypt(nonce, data, None)
    except (OverflowError, ValueError) as exc:
        raise CryptoOperationError(f"encryption failed: {exc}") from exc

    logger.debug("encrypted {} bytes into {} bytes", len(data), IV_BYTES_LENGTH + len(ciphertext))
    return join_envelope(nonce, ciphertext)


def decrypt(envelope: str, key: SymmetricKey, *, encoding: str | None = None) -> str:
    nonce, ciphertext = split_envelope(envelope)
    key = _require_usage(key, "decrypt")
    try:
        data = key.aead.decrypt(nonce, ciphertext, None)
    except InvalidTag as exc:
        logger.warning("authentication failed for a {} byte envelope", IV_BYTES_LENGTH + len(ciphertext))
        raise CryptoOperationError("authentication failed: tampered data or wrong key") from exc
    except (OverflowError, ValueError) as exc:
        raise CryptoOperationError(f"decryption failed: {exc}") from exc

    try:
        return data.decode(encoding or settings.TEXT_ENCODING)
    except (UnicodeError, LookupError) as exc:
        raise EncodingError(f"decrypted bytes are not valid text: {exc}") from exc
