"""
domain/events.py

Typed error events handed from the fetch pipelines to the error reporter.

Usage:
    from domain.events import ErrorEvent

    event = ErrorEvent.from_exception(exc, source="quote", retry=lambda: controller.load_quote("AAPL"))
    reporter.report(event)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from domain.errors import DecodeError, FetchError, NetworkError


class ErrorKind(Enum):
    NETWORK = "network"
    DECODE = "decode"


@dataclass(frozen=True)
class ErrorEvent:
    """A pipeline failure as seen by the user-facing reporter."""

    kind: ErrorKind
    source: str  # "directory" | "quote" | "logo"
    detail: str = ""
    # Only network errors carry a retry; decode errors are acknowledged only
    retry: Optional[Callable[[], None]] = field(default=None, compare=False, repr=False)

    @property
    def is_retryable(self) -> bool:
        return self.retry is not None

    @classmethod
    def from_exception(
        cls,
        exc: FetchError,
        source: str,
        retry: Optional[Callable[[], None]] = None,
    ) -> ErrorEvent:
        if isinstance(exc, DecodeError):
            return cls(kind=ErrorKind.DECODE, source=source, detail=str(exc))
        if isinstance(exc, NetworkError):
            return cls(kind=ErrorKind.NETWORK, source=source, detail=str(exc), retry=retry)
        raise TypeError(f"Unsupported fetch error: {type(exc).__name__}")
