"""
Core Interfaces - Dependency Inversion Layer

Protocols the quote controller depends on, so core never imports widgets:

    core → interfaces ← widgets
"""

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from domain.events import ErrorEvent
from domain.quote import Quote


@runtime_checkable
class QuoteView(Protocol):
    """Passive display for one quote (name, symbol, price, change, logo)"""

    def show_loading(self) -> None:
        """Blank every field and start the busy indicator"""
        ...

    def show_quote(self, quote: Quote) -> None:
        """Render a decoded quote and stop the busy indicator"""
        ...

    def show_logo(self, data: bytes) -> None:
        """Replace the logo image; undecodable bytes show as blank"""
        ...

    def set_busy(self, active: bool) -> None:
        """Start or stop the busy indicator"""
        ...


@runtime_checkable
class SelectionSource(Protocol):
    """Data source consumed by the company picker"""

    def count(self) -> int:
        ...

    def title(self, index: int) -> str:
        ...


@runtime_checkable
class CompanyPickerView(Protocol):
    """Picker widget that reads titles from a SelectionSource"""

    def reload(self, source: SelectionSource) -> None:
        """Repopulate from source and select the first row"""
        ...


@runtime_checkable
class ErrorSink(Protocol):
    """Consumer of pipeline error events"""

    def report(self, event: ErrorEvent) -> None:
        ...


@runtime_checkable
class JobRunner(Protocol):
    """Background executor for blocking fetch jobs"""

    def submit(self, name: str, job: Callable[[], None]) -> None:
        ...

    def cancel_pending(self) -> None:
        ...


# Applies a callable on the presentation (Qt main) thread
Dispatch = Callable[[Callable[[], None]], None]
