"""
Error taxonomy for the link shortener.

Service and store code raise these; the HTTP layer maps them to status codes
in ``main.py``.
"""


class ShortenerError(Exception):
    """Base class for all link shortener errors."""

    status_code = 500


class LinkNotFoundError(ShortenerError):
    """Raised when a key was never stored."""

    status_code = 404

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Short link '{key}' not found")


class StoreUnavailableError(ShortenerError):
    """Raised when the networked key store cannot be reached or times out."""

    status_code = 503


class KeyGenerationExhaustedError(ShortenerError):
    """Raised when every generated key collided with an existing one."""

    status_code = 503

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(
            f"Could not generate unique key after {attempts} attempts"
        )


class InvalidInputError(ShortenerError):
    """Raised when a request is missing required input."""

    status_code = 400
