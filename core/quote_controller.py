"""
core/quote_controller.py

Orchestrates the two fetch pipelines behind the quote screen.

Company Directory Pipeline (once at startup):
    load_directory() ─> worker: GET list/infocus + decode
                     ─> UI: merge directory, reload picker, load_quote(row 0)

Quote Fetch Pipeline (startup and every picker selection):
    load_quote(symbol) ─> UI: view.show_loading()
                       ─> worker: GET quote + decode ─> UI: view.show_quote()
                       ─> worker: GET logo          ─> UI: view.show_logo()

Threading:
    Workers never touch the view or the directory. Every completion, success or
    failure, is handed to `dispatch`, which applies it on the Qt main thread.

    There is no cancellation: when the user reselects while a fetch is in flight,
    both fetches complete and whichever lands last owns the display.
"""

from __future__ import annotations

from functools import partial
from typing import Callable, Optional

import structlog

from core.interfaces import CompanyPickerView, Dispatch, ErrorSink, JobRunner, QuoteView
from domain.company_directory import CompanyDirectory
from domain.errors import FetchError
from domain.events import ErrorEvent
from domain.quote import Quote
from services.iex_client import IexClient
from services.iex_schemas import CompanyListing
from utils.qt_bridge import marshal_to_qt_thread

log = structlog.get_logger(__name__)


class QuoteController:
    """
    Owns the company directory and drives the quote view.

    Also serves as the picker's SelectionSource: count(), title() and
    symbol_at() all read the same (names, symbols) snapshot, taken from a
    single enumeration of the directory after each merge.
    """

    def __init__(
        self,
        client: IexClient,
        runner: JobRunner,
        view: QuoteView,
        picker: CompanyPickerView,
        reporter: ErrorSink,
        dispatch: Dispatch = marshal_to_qt_thread,
    ):
        self._client = client
        self._runner = runner
        self._view = view
        self._picker = picker
        self._reporter = reporter
        self._dispatch = dispatch

        self._directory = CompanyDirectory()
        self._names: tuple[str, ...] = ()
        self._symbols: tuple[str, ...] = ()

    # ---- SelectionSource ------------------------------------------------
    def count(self) -> int:
        return len(self._names)

    def title(self, index: int) -> str:
        return self._names[index]

    def symbol_at(self, index: int) -> str:
        return self._symbols[index]

    @property
    def directory(self) -> CompanyDirectory:
        return self._directory

    # ---- Lifecycle ------------------------------------------------------
    def start(self) -> None:
        """Kick off the directory load (call once the window is shown)."""
        self.load_directory()

    # ---- Company Directory Pipeline -------------------------------------
    def load_directory(self) -> None:
        self._view.set_busy(True)
        log.info("directory.requested", url=self._client.company_list_url())
        self._runner.submit("directory", self._fetch_directory)

    def _fetch_directory(self) -> None:
        # Runs on a pool worker
        try:
            listings = self._client.fetch_company_list()
        except FetchError as exc:
            self._dispatch(partial(self._report, exc, "directory", self.load_directory))
            return
        self._dispatch(partial(self._apply_directory, listings))

    def _apply_directory(self, listings: list[CompanyListing]) -> None:
        self._directory.merge(listings)
        self._names, self._symbols = self._directory.entries()
        log.info("directory.loaded", received=len(listings), companies=self.count())

        self._picker.reload(self)

        if not self._symbols:
            log.warning("directory.empty")
            self._view.set_busy(False)
            return

        self.load_quote(self._symbols[0])

    # ---- Quote Fetch Pipeline -------------------------------------------
    def on_select(self, index: int) -> None:
        """Picker row selected by the user."""
        if not 0 <= index < self.count():
            log.warning("selection.out_of_range", index=index, count=self.count())
            return
        self.load_quote(self._symbols[index])

    def load_quote(self, symbol: str) -> None:
        self._view.show_loading()
        log.info("quote.requested", symbol=symbol)
        self._runner.submit(f"quote:{symbol}", partial(self._fetch_quote, symbol))
        self._runner.submit(f"logo:{symbol}", partial(self._fetch_logo, symbol))

    def _fetch_quote(self, symbol: str) -> None:
        # Runs on a pool worker
        try:
            quote = self._client.fetch_quote(symbol)
        except FetchError as exc:
            self._dispatch(partial(self._report, exc, "quote", partial(self.load_quote, symbol)))
            return
        self._dispatch(partial(self._apply_quote, quote))

    def _fetch_logo(self, symbol: str) -> None:
        # Runs on a pool worker
        try:
            data = self._client.fetch_logo(symbol)
        except FetchError as exc:
            self._dispatch(partial(self._report, exc, "logo", partial(self.load_quote, symbol)))
            return
        self._dispatch(partial(self._apply_logo, symbol, data))

    def _apply_quote(self, quote: Quote) -> None:
        log.info("quote.loaded", symbol=quote.symbol, price=quote.price, change=quote.price_change)
        self._view.show_quote(quote)

    def _apply_logo(self, symbol: str, data: bytes) -> None:
        log.debug("logo.loaded", symbol=symbol, size=len(data))
        self._view.show_logo(data)

    # ---- Errors ---------------------------------------------------------
    def _report(self, exc: FetchError, source: str, retry: Optional[Callable[[], None]]) -> None:
        event = ErrorEvent.from_exception(exc, source=source, retry=retry)
        log.warning(
            "fetch.failed",
            source=source,
            kind=event.kind.value,
            url=exc.url,
            error=str(exc),
        )
        self._reporter.report(event)
