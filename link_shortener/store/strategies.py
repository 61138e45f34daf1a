"""
Key store strategies using Strategy Pattern.
Allows switching between different storage backends (In-Memory, Redis).

The key store is the system of record for short links, so unlike a cache a
miss is an error (LinkNotFoundError) and a broken connection is an error
(StoreUnavailableError). Neither is ever reported as None.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, Optional

from redis.asyncio import Redis
from redis.asyncio.retry import Retry
from redis.backoff import ExponentialBackoff
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from link_shortener.exceptions import LinkNotFoundError, StoreUnavailableError

logger = logging.getLogger(__name__)


class KeyStore(ABC):
    """
    Abstract base class for key stores.
    
    This is the Strategy Pattern interface - the shortener service works
    against it without knowing which backend is behind it.
    
    All methods are async because the networked backend does I/O.
    """
    
    @abstractmethod
    async def put(self, key: str, value: str) -> None:
        """
        Store value under key, overwriting any previous value.
        
        Args:
            key: Short link key
            value: Original URL
        """
        pass
    
    @abstractmethod
    async def get(self, key: str) -> str:
        """
        Get the value stored under key.
        
        Args:
            key: Short link key
            
        Returns:
            The stored value (an empty string is a valid value)
            
        Raises:
            LinkNotFoundError: If key was never stored
        """
        pass
    
    @abstractmethod
    async def put_if_absent(self, key: str, value: str) -> bool:
        """
        Atomically store value under key only if key is free.
        
        Args:
            key: Short link key
            value: Original URL
            
        Returns:
            True if stored, False if key already existed (left untouched)
        """
        pass
    
    async def close(self) -> None:
        """Release any resources held by the store"""
        pass


class InMemoryKeyStore(KeyStore):
    """
    In-memory key store using a Python dict.
    
    Pros:
    - Very fast (no network overhead)
    - No external dependencies
    - Good for development and testing
    
    Cons:
    - Lost on restart
    - Not shared between processes
    - Unbounded growth
    
    A lock guards the dict so concurrent callers on different threads
    cannot interleave a check-and-set.
    """
    
    def __init__(self):
        self._data: Dict[str, str] = {}
        self._lock = threading.Lock()
    
    async def put(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value
    
    async def get(self, key: str) -> str:
        with self._lock:
            if key not in self._data:
                logger.debug("Key '%s' not found", key)
                raise LinkNotFoundError(key)
            return self._data[key]
    
    async def put_if_absent(self, key: str, value: str) -> bool:
        with self._lock:
            if key in self._data:
                return False
            self._data[key] = value
            return True
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._data)


class RedisKeyStore(KeyStore):
    """
    Redis key store implementation with async operations.
    
    - Shared by every app process pointing at the same Redis
    - Persistence is whatever the Redis server is configured for
    - Eviction, if any, is owned by Redis (an evicted key reads as a miss)
    
    The client connects lazily on the first command. Connection failures and
    timeouts are raised as StoreUnavailableError.
    """
    
    def __init__(
        self,
        host: str = "localhost",
        port: int = 6379,
        db: int = 0,
        timeout: float = 2.0,
        retries: int = 0,
        key_prefix: str = "link:",
        client: Optional[Redis] = None
    ):
        """
        Initialize Redis key store.
        
        Args:
            host: Redis host
            port: Redis port
            db: Redis database index
            timeout: Connect and socket timeout in seconds
            retries: Retries with exponential backoff on connection errors
            key_prefix: Namespace prepended to every key
            client: Pre-built client (skips building one from host/port)
        """
        self.key_prefix = key_prefix
        self.address = f"{host}:{port}/{db}"
        if client is None:
            client = Redis(
                host=host,
                port=port,
                db=db,
                socket_connect_timeout=timeout,
                socket_timeout=timeout,
                retry=Retry(ExponentialBackoff(), retries),
                decode_responses=True,
            )
        self.redis = client
    
    def _key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"
    
    def _unavailable(self, operation: str, error: Exception) -> StoreUnavailableError:
        logger.error("Redis %s failed on %s: %s", operation, self.address, error)
        return StoreUnavailableError(
            f"Key store at {self.address} is unavailable: {error}"
        )
    
    async def put(self, key: str, value: str) -> None:
        try:
            await self.redis.set(self._key(key), value)
        except (RedisConnectionError, RedisTimeoutError) as e:
            raise self._unavailable("put", e) from e
    
    async def get(self, key: str) -> str:
        try:
            value = await self.redis.get(self._key(key))
        except (RedisConnectionError, RedisTimeoutError) as e:
            raise self._unavailable("get", e) from e
        if value is None:
            logger.debug("Key '%s' not found", key)
            raise LinkNotFoundError(key)
        return value
    
    async def put_if_absent(self, key: str, value: str) -> bool:
        try:
            # SET NX replies OK when stored and nil when the key exists
            stored = await self.redis.set(self._key(key), value, nx=True)
        except (RedisConnectionError, RedisTimeoutError) as e:
            raise self._unavailable("put_if_absent", e) from e
        return bool(stored)
    
    async def close(self) -> None:
        await self.redis.aclose()
