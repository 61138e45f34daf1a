"""
Key generation strategies for link shortener.
Uses Strategy Pattern to allow different generation algorithms.
"""

import random
import string
from abc import ABC, abstractmethod
from typing import Optional


class KeyStrategy(ABC):
    """Abstract base class for key generation strategies"""
    
    @abstractmethod
    def generate(self) -> str:
        """
        Generate a candidate key.
        
        Uniqueness is not guaranteed here; the service checks candidates
        against the key store.
        """
        pass


class RandomKeyStrategy(KeyStrategy):
    """
    Random generation strategy.
    Draws each character independently from the alphabet.
    
    Pros: Simple, unpredictable to casual users, no shared counter
    Cons: Collisions possible, not cryptographically secure
    
    The random source is injected so a seeded generator gives a
    reproducible key sequence.
    """
    
    MIN_LENGTH = 5
    MAX_LENGTH = 8
    DEFAULT_ALPHABET = string.ascii_lowercase + string.digits
    
    def __init__(
        self,
        length: int = 6,
        alphabet: str = DEFAULT_ALPHABET,
        rng: Optional[random.Random] = None
    ):
        if not self.MIN_LENGTH <= length <= self.MAX_LENGTH:
            raise ValueError(
                f"Key length must be between {self.MIN_LENGTH} and "
                f"{self.MAX_LENGTH}, got {length}"
            )
        if not alphabet:
            raise ValueError("Key alphabet must not be empty")
        self.length = length
        self.alphabet = alphabet
        self.rng = rng if rng is not None else random.Random()
    
    def generate(self) -> str:
        """Generate a random string of the configured length"""
        return ''.join(self.rng.choice(self.alphabet) for _ in range(self.length))
