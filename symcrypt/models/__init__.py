from .key import SymmetricKey

__all__ = ["SymmetricKey"]
