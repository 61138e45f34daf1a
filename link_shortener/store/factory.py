"""
Factory for creating key store instances.
Simple, clean factory with singleton caching.
"""

import logging
from .strategies import KeyStore, RedisKeyStore, InMemoryKeyStore
from link_shortener.enums import StoreBackend
from link_shortener.config import settings

logger = logging.getLogger(__name__)


class StoreFactory:
    """
    Simple factory for creating key store instances.
    
    Uses Singleton Pattern - creates instance once, reuses it.
    Gets configuration from settings (not passed as parameters).
    
    There is no fallback from Redis to memory: links written to a
    process-local dict would vanish on restart, so an unreachable Redis
    has to surface as StoreUnavailableError instead.
    """
    
    _instance: KeyStore = None  # Single cached instance
    
    @classmethod
    def create(cls, backend: StoreBackend) -> KeyStore:
        """
        Create or return cached key store instance.
        
        Args:
            backend: Type of store backend (from enum)
            
        Returns:
            Singleton key store instance
        """
        if cls._instance is not None:
            return cls._instance
        
        if backend == StoreBackend.REDIS:
            cls._instance = RedisKeyStore(
                host=settings.store_host,
                port=settings.store_port,
                db=settings.store_db,
                timeout=settings.store_timeout,
                retries=settings.store_retries,
                key_prefix=settings.store_key_prefix,
            )
            logger.info(
                "Redis key store initialized (%s:%s)",
                settings.store_host,
                settings.store_port,
            )
            
        elif backend == StoreBackend.MEMORY:
            cls._instance = InMemoryKeyStore()
            logger.info("In-memory key store initialized")
            
        else:
            raise ValueError(f"Unknown store backend: {backend}")
        
        return cls._instance
    
    @classmethod
    def clear_instance(cls):
        """Clear cached instance (for testing)"""
        cls._instance = None
    
    @classmethod
    async def close_instance(cls):
        """Close and clear the cached instance, if one was ever created"""
        if cls._instance is None:
            return
        instance, cls._instance = cls._instance, None
        await instance.close()
        logger.info("Key store closed")
