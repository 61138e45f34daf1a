import logging
from typing import FrozenSet

from link_shortener.enums import CollisionPolicy
from link_shortener.exceptions import KeyGenerationExhaustedError
from link_shortener.services.key_strategies import KeyStrategy
from link_shortener.store.strategies import KeyStore

logger = logging.getLogger(__name__)

# Paths served by the app itself; GET /<key> for these never reaches the redirect
RESERVED_KEYS = frozenset({"health", "shorten", "docs", "redoc", "openapi.json"})


class ShortenerService:
    """
    Shortener service with dependency injection for store and key strategy.
    
    - Store and key strategy are injected (not created internally)
    - Easy to test (inject an in-memory store and a seeded strategy)
    - Flexible (swap backends without changing code)
    
    Input validation is not done here; the HTTP layer owns it.
    """
    
    def __init__(
        self,
        store: KeyStore,
        key_strategy: KeyStrategy,
        collision_policy: CollisionPolicy = CollisionPolicy.RETRY,
        max_retries: int = 5,
        reserved_keys: FrozenSet[str] = RESERVED_KEYS
    ):
        """
        Initialize shortener service with dependencies.
        
        Args:
            store: Key store holding key -> URL mappings
            key_strategy: Generates candidate keys
            collision_policy: RETRY (default) or OVERWRITE
            max_retries: Attempts before KeyGenerationExhaustedError
            reserved_keys: Keys never handed out, treated as collisions
        """
        if max_retries < 1:
            raise ValueError("max_retries must be at least 1")
        self.store = store
        self.key_strategy = key_strategy
        self.collision_policy = collision_policy
        self.max_retries = max_retries
        self.reserved_keys = reserved_keys

    def get_hello(self) -> str:
        return "Hello World!"

    async def _try_store(self, key: str, url: str) -> bool:
        if key in self.reserved_keys:
            return False
        if self.collision_policy == CollisionPolicy.OVERWRITE:
            await self.store.put(key, url)
            return True
        return await self.store.put_if_absent(key, url)

    async def shorten(self, url: str) -> str:
        """Store url under a freshly generated key and return the key
        
        With OVERWRITE a free key is written unconditionally, so a collision
        with a stored link silently replaces it. With RETRY each candidate
        goes through put_if_absent, which checks and writes in one atomic
        store operation; concurrent calls therefore cannot clobber each
        other. Reserved keys are regenerated under both policies.
        """
        for attempt in range(1, self.max_retries + 1):
            key = self.key_strategy.generate()
            if await self._try_store(key, url):
                return key
            logger.warning(
                "Key collision on '%s' (attempt %d/%d)",
                key, attempt, self.max_retries
            )

        logger.error("Key generation exhausted after %d attempts", self.max_retries)
        raise KeyGenerationExhaustedError(self.max_retries)

    async def retrieve(self, key: str) -> str:
        """Return the URL stored under key
        
        Raises LinkNotFoundError for unknown keys.
        """
        return await self.store.get(key)
