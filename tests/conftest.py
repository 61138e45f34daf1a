"""
Test configuration and fixtures for FastAPI link shortener.
This centralizes all test setup, making individual tests clean.
"""

import random

import pytest
from fastapi.testclient import TestClient
from main import app
from link_shortener.dependencies import get_store, get_key_strategy
from link_shortener.services.key_strategies import RandomKeyStrategy
from link_shortener.services.shortener_service import ShortenerService
from link_shortener.store.factory import StoreFactory
from link_shortener.store.strategies import InMemoryKeyStore


class SequenceKeyStrategy:
    """Key strategy that hands out a fixed sequence of keys, for collision tests"""

    def __init__(self, keys):
        self._keys = iter(keys)

    def generate(self) -> str:
        return next(self._keys)


@pytest.fixture(scope="function")
def store():
    """
    Fresh in-memory key store for each test.
    This ensures tests are isolated and don't affect each other.
    """
    return InMemoryKeyStore()


@pytest.fixture(scope="function")
def key_strategy():
    """Seeded key strategy so generated keys are reproducible"""
    return RandomKeyStrategy(length=6, rng=random.Random(1234))


@pytest.fixture(scope="function")
def service(store, key_strategy):
    return ShortenerService(store=store, key_strategy=key_strategy)


@pytest.fixture(scope="function")
def client(store, key_strategy):
    """
    Create a test client with the store and key strategy overridden.
    This is the main fixture that API tests will use.
    """
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_key_strategy] = lambda: key_strategy
    
    with TestClient(app) as test_client:
        yield test_client
    
    # Clean up overrides
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def reset_store_factory():
    """Drop the factory singleton so factory tests start clean"""
    StoreFactory.clear_instance()
    yield
    StoreFactory.clear_instance()
