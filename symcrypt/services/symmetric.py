"""
Async API over :mod:`symcrypt.core.crypto`.

Every call resolves to exactly one result or raises; nothing is cached
between calls. With ``SYMCRYPT_OFFLOAD_TO_THREAD`` on (the default) the
hash / AEAD work runs in a worker thread so the event loop stays free.
"""

from __future__ import annotations

import asyncio
from functools import partial
from typing import Callable, TypeVar

from symcrypt.core import crypto
from symcrypt.core.config import settings
from symcrypt.models.key import SymmetricKey

T = TypeVar("T")


async def _run(func: Callable[..., T], *args, **kwargs) -> T:
    if settings.OFFLOAD_TO_THREAD:
        return await asyncio.to_thread(partial(func, *args, **kwargs))
    return func(*args, **kwargs)


async def derive_key(text: str, *, encoding: str | None = None) -> SymmetricKey:
    """
    Hash ``text`` with SHA-256 and import the digest as an AES-GCM key.

    A 32-byte high entropy string is recommended.
    Raises InputValidationError if ``text`` is not a str or cannot be encoded.
    """
    return await _run(crypto.derive_key, text, encoding=encoding)


async def encrypt(plaintext: str, key: SymmetricKey, *, encoding: str | None = None) -> str:
    """
    Encrypt ``plaintext`` and return the Base64 envelope.

    Raises CryptoOperationError when the key is not valid or the plaintext
    is longer than AES-GCM allows.
    """
    return await _run(crypto.encrypt, plaintext, key, encoding=encoding)


async def decrypt(envelope: str, key: SymmetricKey, *, encoding: str | None = None) -> str:
    """
    Decrypt an envelope produced by :func:`encrypt` with the same key.

    Raises InputValidationError if ``envelope`` is not a str,
    EncodingError if it contains characters outside the Base64 alphabet,
    CryptoOperationError if the key is wrong, the envelope is too short or
    it was tampered with.
    """
    return await _run(crypto.decrypt, envelope, key, encoding=encoding)


# names used by the JavaScript package this mirrors
create_symmetric_crypto_key = create_symmetric_key_with_text = derive_key
encrypt_symmetrically = encrypt_symmetrically_text = encrypt
decrypt_symmetrically = decrypt_symmetrically_text = decrypt
