"""
Key store module for link shortener.
Implements Strategy Pattern for flexible storage backends.
"""

from .strategies import KeyStore, RedisKeyStore, InMemoryKeyStore
from .factory import StoreFactory, StoreBackend

__all__ = [
    "KeyStore",
    "RedisKeyStore",
    "InMemoryKeyStore",
    "StoreFactory",
    "StoreBackend",
]
