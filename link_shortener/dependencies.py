"""
FastAPI dependencies for dependency injection.

This module provides the singleton key store and key strategy, and builds
a ShortenerService per request with both passed in explicitly.
"""

import random
from functools import lru_cache

from fastapi import Depends

from link_shortener.config import settings
from link_shortener.services.key_strategies import KeyStrategy, RandomKeyStrategy
from link_shortener.services.shortener_service import ShortenerService
from link_shortener.store.factory import StoreFactory
from link_shortener.store.strategies import KeyStore


def get_store() -> KeyStore:
    """
    Get key store instance (singleton).
    
    StoreFactory caches the instance, so the app shutdown can close
    exactly the store that requests used.
    """
    return StoreFactory.create(settings.store_backend)


@lru_cache()
def get_key_strategy() -> KeyStrategy:
    """
    Get key strategy instance (singleton).
    
    One generator per process; a configured seed makes the key
    sequence reproducible.
    """
    return RandomKeyStrategy(
        length=settings.key_length,
        alphabet=settings.key_alphabet,
        rng=random.Random(settings.key_seed),
    )


def get_shortener_service(
    store: KeyStore = Depends(get_store),
    key_strategy: KeyStrategy = Depends(get_key_strategy)
) -> ShortenerService:
    """Get ShortenerService with its store and key strategy injected."""
    return ShortenerService(
        store=store,
        key_strategy=key_strategy,
        collision_policy=settings.collision_policy,
        max_retries=settings.max_retries,
    )
