"""
Centralised settings using `pydantic-settings`.

All env-vars (prefixed ``SYMCRYPT_``) are loaded once at import time.
"""

from __future__ import annotations

import codecs
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class _Settings(BaseSettings):
    # environment
    ENV: str = "development"  # development | production

    # Log level (DEBUG/INFO/WARNING/ERROR)
    LOG_LEVEL: str = "INFO"
    # Optional rotating log file, e.g. "logs/symcrypt_{time:YYYY-MM-DD}.log"
    LOG_FILE: str | None = None

    # Text codec for key input and plaintext (stands in for a reusable encoder)
    TEXT_ENCODING: str = "utf-8"

    # Run hash / AEAD calls in a worker thread from the async API
    OFFLOAD_TO_THREAD: bool = True

    # --- internal ---
    model_config = SettingsConfigDict(
        env_prefix="SYMCRYPT_",
        env_file=Path(__file__).resolve().parent.parent.parent / ".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("TEXT_ENCODING")
    @classmethod
    def _known_codec(cls, value: str) -> str:
        try:
            return codecs.lookup(value).name
        except LookupError as exc:
            raise ValueError(f"unknown text encoding: {value!r}") from exc

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


Settings = _Settings

settings = _Settings()  # Singleton
