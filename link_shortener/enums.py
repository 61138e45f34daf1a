"""Shared enums for the link shortener.

Kept free of other package imports so settings can use them as field types.
"""

from enum import Enum

__all__ = ["CollisionPolicy", "StoreBackend"]


class CollisionPolicy(Enum):
    """How shorten() behaves when a generated key is already taken"""
    RETRY = "retry"  # Regenerate, then give up after max_retries
    OVERWRITE = "overwrite"  # Last write wins


class StoreBackend(Enum):
    """Available key store backends"""
    REDIS = "redis"
    MEMORY = "memory"
