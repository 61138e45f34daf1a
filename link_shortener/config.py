from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
import string

from link_shortener.enums import CollisionPolicy, StoreBackend


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """
    
    # Environment
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    
    # Application
    app_name: str = "Link Shortener"
    app_version: str = "1.0.0"
    
    # Key store
    store_backend: StoreBackend = StoreBackend.MEMORY
    store_host: str = "localhost"
    store_port: int = 6379
    store_db: int = 0
    store_timeout: float = 2.0  # Connect and operation timeout in seconds
    store_retries: int = 0  # Retries with exponential backoff, 0 disables
    store_key_prefix: str = "link:"
    
    # Key generation
    key_length: int = 6
    key_alphabet: str = string.ascii_lowercase + string.digits
    key_seed: Optional[int] = None  # Fixed seed makes keys reproducible
    
    # Collision handling
    collision_policy: CollisionPolicy = CollisionPolicy.RETRY
    max_retries: int = 5
    
    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
