import pytest
from pydantic import ValidationError

from symcrypt.core import crypto
from symcrypt.core.config import Settings, settings


def test_defaults(monkeypatch):
    for name in ("ENV", "LOG_LEVEL", "LOG_FILE", "TEXT_ENCODING", "OFFLOAD_TO_THREAD"):
        monkeypatch.delenv(f"SYMCRYPT_{name}", raising=False)
    fresh = Settings(_env_file=None)
    assert fresh.ENV == "development"
    assert fresh.LOG_LEVEL == "INFO"
    assert fresh.LOG_FILE is None
    assert fresh.TEXT_ENCODING == "utf-8"
    assert fresh.OFFLOAD_TO_THREAD is True


def test_reads_prefixed_env(monkeypatch):
    monkeypatch.setenv("SYMCRYPT_LOG_LEVEL", "debug")
    monkeypatch.setenv("SYMCRYPT_TEXT_ENCODING", "UTF8")
    monkeypatch.setenv("SYMCRYPT_OFFLOAD_TO_THREAD", "false")
    fresh = Settings(_env_file=None)
    assert fresh.LOG_LEVEL == "DEBUG"
    assert fresh.TEXT_ENCODING == "utf-8"
    assert fresh.OFFLOAD_TO_THREAD is False


def test_unknown_encoding_is_rejected(monkeypatch):
    monkeypatch.setenv("SYMCRYPT_TEXT_ENCODING", "no-such-codec")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_configured_encoding_is_used(monkeypatch):
    monkeypatch.setattr(settings, "TEXT_ENCODING", "utf-16")
    key = crypto.derive_key("k")
    envelope = crypto.encrypt("hi", key)
    # utf-16 adds a 2-byte BOM and 2 bytes per char
    assert len(crypto.split_envelope(envelope)[1]) == 6 + 16
    assert crypto.decrypt(envelope, key) == "hi"
