"""
Qt Thread Safety Bridge

Purpose:
    Centralized utilities for safely marshaling operations from background threads
    to the main Qt event loop thread.

Background:
    Fetch jobs run on QThreadPool workers. Any code that touches Qt widgets, or the
    company directory owned by the quote controller, MUST run on the main thread.

Solution:
    A small QObject invoker lives on the main thread. Emitting its signal from a
    worker thread queues the callback onto the main event loop; emitting from the
    main thread calls it directly.

Usage:
    from utils.qt_bridge import marshal_to_qt_thread

    def on_quote_fetched(quote):
        # Called from a pool worker
        marshal_to_qt_thread(panel.show_quote, quote)
"""

from __future__ import annotations

from collections.abc import Callable
import threading
from typing import Any, Optional

from PyQt6 import QtCore, QtWidgets

from utils.logger import get_logger

log = get_logger(__name__)


class _UiInvoker(QtCore.QObject):
    call_sig = QtCore.pyqtSignal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.call_sig.connect(self._invoke)

    @QtCore.pyqtSlot(object)
    def _invoke(self, fn: Callable[[], None]) -> None:
        try:
            fn()
        except Exception:
            log.exception("[qt_bridge] Marshaled callback failed")


_invoker: Optional[_UiInvoker] = None
_invoker_lock = threading.Lock()


def _get_invoker() -> _UiInvoker:
    global _invoker
    with _invoker_lock:
        if _invoker is None:
            app = QtWidgets.QApplication.instance()
            if app is None:
                raise RuntimeError("marshal_to_qt_thread requires a running QApplication")
            invoker = _UiInvoker()
            # Created on the calling thread; push it to the GUI thread
            invoker.moveToThread(app.thread())
            _invoker = invoker
        return _invoker


def marshal_to_qt_thread(callback: Callable, *args: Any, **kwargs: Any) -> None:
    """
    Execute callback in the main Qt thread.

    Args:
        callback: The function to call on the main thread
        *args: Positional arguments to pass to callback
        **kwargs: Keyword arguments to pass to callback

    Notes:
        - Non-blocking for callers on a worker thread
        - Runs synchronously when already on the main thread
        - Exceptions raised by callback are logged, not propagated
    """
    _get_invoker().call_sig.emit(lambda: callback(*args, **kwargs))


def is_main_thread() -> bool:
    """
    Check if currently executing on the Qt main thread.

    Returns:
        True if on main thread, False otherwise (including when no QApplication exists)
    """
    app = QtWidgets.QApplication.instance()
    if app is None:
        return False
    return QtCore.QThread.currentThread() == app.thread()


__all__ = ["marshal_to_qt_thread", "is_main_thread"]
