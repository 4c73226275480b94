"""
core/error_reporter.py

User-facing alerts for failed fetches.

Two kinds, decided by ErrorEvent.kind:
- NETWORK: "check your connection" with a single Retry button that re-runs the
  failed pipeline.
- DECODE: acknowledgment only. Malformed payloads are not retried.

Alerts are window-modal but non-blocking (QMessageBox.open), so the pipeline that
raised the error never waits on the user.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Optional

from PyQt6 import QtCore, QtWidgets

from domain.events import ErrorEvent, ErrorKind
from utils.logger import get_logger

log = get_logger(__name__)


NETWORK_ERROR_TITLE = "Network Error"
NETWORK_ERROR_MESSAGE = "Please, check your internet connection"
RETRY_LABEL = "Retry"

DECODE_ERROR_TITLE = "Error"
DECODE_ERROR_MESSAGE = "Oops! Something went wrong. please try again later"
ACK_LABEL = "Ok"


class ErrorReporter:
    """Presents ErrorEvents as message boxes parented to `parent`."""

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None):
        self._parent = parent

    def report(self, event: ErrorEvent) -> QtWidgets.QMessageBox:
        if event.kind is ErrorKind.NETWORK:
            return self.report_network_error(event.retry)
        return self.report_decode_error()

    def report_network_error(self, retry: Optional[Callable[[], None]]) -> QtWidgets.QMessageBox:
        box = self._build_box(NETWORK_ERROR_TITLE, NETWORK_ERROR_MESSAGE)
        retry_button = box.addButton(RETRY_LABEL, QtWidgets.QMessageBox.ButtonRole.AcceptRole)
        if retry is not None:
            retry_button.clicked.connect(lambda: self._on_retry(retry))
        box.open()
        return box

    def report_decode_error(self) -> QtWidgets.QMessageBox:
        box = self._build_box(DECODE_ERROR_TITLE, DECODE_ERROR_MESSAGE)
        box.addButton(ACK_LABEL, QtWidgets.QMessageBox.ButtonRole.AcceptRole)
        box.open()
        return box

    # -------------------- internals --------------------
    def _build_box(self, title: str, message: str) -> QtWidgets.QMessageBox:
        box = QtWidgets.QMessageBox(self._parent)
        box.setIcon(QtWidgets.QMessageBox.Icon.Warning)
        box.setWindowTitle(title)
        box.setText(message)
        box.setAttribute(QtCore.Qt.WidgetAttribute.WA_DeleteOnClose, True)
        return box

    @staticmethod
    def _on_retry(retry: Callable[[], None]) -> None:
        log.info("[ErrorReporter] Retry requested")
        retry()
