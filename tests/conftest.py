import asyncio
import base64
import os

import pytest

from symcrypt.core import crypto

KEY_TEXT = "correct-horse-battery-staple-32"


def random_string(length: int = 32) -> str:
    # a Base64 char carries 6 bits
    return base64.b64encode(os.urandom(length * 3 // 4)).decode("ascii")


@pytest.fixture
def run():
    """Drive a coroutine to completion from a plain test."""
    return asyncio.run


@pytest.fixture
def key():
    return crypto.derive_key(KEY_TEXT)


@pytest.fixture
def other_key():
    return crypto.derive_key(random_string())
