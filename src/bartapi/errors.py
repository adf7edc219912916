"""BART-specific exception definitions."""

from typing import Any, Optional


class BartError(Exception):
    """Base class for every error raised by this package."""


class BartAPIError(BartError):
    """Raised when the BART API answers with an error envelope.

    Attributes:
        message: Human-readable error text built from the envelope.
        payload: The raw ``root.message.error`` value, or None for XML envelopes.
    """

    def __init__(self, message: str, payload: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.payload = payload


class BartDecodeError(BartError, ValueError):
    """Raised when a response body does not match the expected shape."""


class InvalidStationError(BartError, ValueError):
    """Raised when a station abbreviation is rejected before dispatch."""

    def __init__(self, abbr: str):
        super().__init__(f"invalid station abbreviation {abbr!r}")
        self.abbr = abbr


__all__ = [
    "BartError",
    "BartAPIError",
    "BartDecodeError",
    "InvalidStationError",
]
