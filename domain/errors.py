"""
domain/errors.py

Fetch failure taxonomy.

- NetworkError: transport failure, timeout, or a non-200 status.
- DecodeError: a payload arrived but is malformed or misses required fields.
"""

from __future__ import annotations

from typing import Optional


class FetchError(Exception):
    """Base class for every failure raised by a fetch pipeline."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class NetworkError(FetchError):
    """Transport error or HTTP status other than 200."""

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message, url)
        self.status_code = status_code


class DecodeError(FetchError):
    """Response body could not be decoded into the expected record."""
