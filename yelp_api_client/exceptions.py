"""
Custom exception types for the Yelp API client.

These exceptions allow callers to distinguish between failures
occurring during authentication, invalid search parameters and
error responses from the Yelp API.  Transport failures raised by
``requests`` are not wrapped and reach the caller unchanged.
"""

from __future__ import annotations

from typing import Optional


class YelpError(Exception):
    """Base exception for all Yelp client errors."""


class YelpAuthError(YelpError):
    """Raised when the token endpoint rejects the client credentials."""


class YelpAPIError(YelpError):
    """Raised when a request to the Yelp API does not return ``200 OK``."""

    def __init__(self, status_code: int, reason: str, url: Optional[str] = None) -> None:
        self.status_code = status_code
        self.reason = reason
        self.url = url
        super().__init__(f"Yelp request failed with status {self.status}")

    @property
    def status(self) -> str:
        return f"{self.status_code} {self.reason}".strip()


class YelpValidationError(YelpError, ValueError):
    """Raised when search options are rejected before any request is sent."""


class YelpDecodeError(YelpError, ValueError):
    """Raised when a JSON body does not have the expected shape."""
