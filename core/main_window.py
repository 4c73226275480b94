"""
Main Window Module

Single-screen window: company picker on top, quote panel below.
Wires the picker, panel and error reporter into a QuoteController and starts
the directory load once the event loop is running.
"""

from __future__ import annotations

from typing import Optional

from PyQt6 import QtCore, QtGui, QtWidgets

from config.theme import THEME
from core.error_reporter import ErrorReporter
from core.fetch_runner import FetchRunner
from core.quote_controller import QuoteController
from services.iex_client import IexClient
from utils.logger import get_logger
from widgets.company_picker import CompanyPicker
from widgets.quote_panel import QuotePanel

log = get_logger("MainWindow")


class MainWindow(QtWidgets.QMainWindow):
    """Stocks main window."""

    def __init__(
        self,
        client: Optional[IexClient] = None,
        runner: Optional[FetchRunner] = None,
        autostart: bool = True,
    ) -> None:
        super().__init__()
        log.info("[startup] Initializing MainWindow")

        self._client = client or IexClient()
        self._runner = runner or FetchRunner()

        self._setup_window()
        self._build_ui()
        self._setup_controller()

        if autostart:
            # Defer until the event loop runs so the first paint is not blocked
            QtCore.QTimer.singleShot(0, self.controller.start)

        log.info("[startup] MainWindow initialized")

    # -------------------- Initialization Methods --------------------

    def _setup_window(self) -> None:
        self.setWindowTitle("Stocks")
        self.setMinimumSize(int(THEME["window_min_width"]), int(THEME["window_min_height"]))

    def _build_ui(self) -> None:
        central = QtWidgets.QWidget(self)
        central.setObjectName("CentralWidget")
        central.setStyleSheet(f"QWidget#CentralWidget {{ background: {THEME['bg_primary']}; }}")
        self.setCentralWidget(central)

        outer = QtWidgets.QVBoxLayout(central)
        outer.setContentsMargins(12, 12, 12, 12)
        outer.setSpacing(8)

        self.quote_panel = QuotePanel(central)
        self.company_picker = CompanyPicker(central)

        outer.addWidget(self.quote_panel, 1)
        outer.addWidget(self.company_picker)

    def _setup_controller(self) -> None:
        self.error_reporter = ErrorReporter(self)
        self.controller = QuoteController(
            client=self._client,
            runner=self._runner,
            view=self.quote_panel,
            picker=self.company_picker,
            reporter=self.error_reporter,
        )
        self.company_picker.rowSelected.connect(self.controller.on_select)

    # -------------------- Qt overrides --------------------

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:
        # Drop queued fetches; in-flight ones finish on their own
        self._runner.cancel_pending()
        self._client.close()
        log.info("[shutdown] MainWindow closed")
        super().closeEvent(event)
