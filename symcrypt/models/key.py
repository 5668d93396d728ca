from __future__ import annotations

import hmac
from typing import Iterable

from cryptography.hazmat.primitives.ciphers.aead import AESGCM


class SymmetricKey:
    """
    Opaque AES-GCM key handle.

    The raw material stays private: there is no accessor, the repr hides it
    and the object refuses to be pickled. Handles are immutable, so one key
    can be shared between threads and tasks.
    """

    __slots__ = ("_material", "_aead", "algorithm", "length", "usages", "extractable")

    def __init__(self, material: bytes, algorithm: str, usages: Iterable[str]):
        object.__setattr__(self, "_material", bytes(material))
        object.__setattr__(self, "_aead", AESGCM(self._material))
        object.__setattr__(self, "algorithm", algorithm)
        object.__setattr__(self, "length", len(self._material) * 8)
        object.__setattr__(self, "usages", frozenset(usages))
        object.__setattr__(self, "extractable", False)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        raise TypeError(f"{type(self).__name__} is not extractable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SymmetricKey):
            return NotImplemented
        return (
            self.algorithm == other.algorithm
            and self.usages == other.usages
            and hmac.compare_digest(self._material, other._material)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        usages = ", ".join(sorted(self.usages))
        return f"<SymmetricKey {self.algorithm}-{self.length} usages=[{usages}]>"

    def allows(self, usage: str) -> bool:
        return usage in self.usages

    @property
    def aead(self) -> AESGCM:
        return self._aead
