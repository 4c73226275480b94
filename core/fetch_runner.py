"""
Background Fetch Runner

Runs blocking network jobs on Qt's QThreadPool so the UI thread never waits on I/O.

Jobs are fire-and-forget: a job is responsible for handing its own result (or
failure) back to the main thread, typically via utils.qt_bridge.marshal_to_qt_thread.

Architecture:
    UI thread ── submit(name, job) ──> QThreadPool worker
                                        │ blocking GET + decode
                                        ▼
                                      dispatch(apply_on_ui)
"""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import QRunnable, QThreadPool, pyqtSlot

from config.settings import FETCH_MAX_WORKERS
from utils.logger import get_logger

log = get_logger(__name__)


class FetchWorker(QRunnable):
    """
    Background worker for one fetch job.

    Example:
        >>> worker = FetchWorker("quote:AAPL", job)
        >>> QThreadPool.globalInstance().start(worker)
    """

    def __init__(self, name: str, job: Callable[[], None]):
        super().__init__()
        self.name = name
        self.job = job
        self.setAutoDelete(True)

    @pyqtSlot()
    def run(self):
        log.debug(f"[FetchWorker] Starting: {self.name}")
        try:
            self.job()
        except Exception:
            # Jobs route their own FetchErrors; anything here is a programming error
            log.exception(f"[FetchWorker] Unhandled error in {self.name}")
        else:
            log.debug(f"[FetchWorker] Completed: {self.name}")


class FetchRunner:
    """
    Thread-pool executor for fetch jobs.

    Usage:
        >>> runner = FetchRunner(max_workers=4)
        >>> runner.submit("directory", controller_job)
    """

    def __init__(self, max_workers: int = FETCH_MAX_WORKERS):
        self.thread_pool = QThreadPool()
        self.thread_pool.setMaxThreadCount(max_workers)
        log.info(f"[FetchRunner] Initialized with {max_workers} workers")

    def submit(self, name: str, job: Callable[[], None]) -> None:
        self.thread_pool.start(FetchWorker(name, job))

    def cancel_pending(self) -> None:
        """Drop jobs that have not started yet."""
        self.thread_pool.clear()

    def wait_for_done(self, timeout_ms: int = -1) -> bool:
        """Block until all queued jobs finish (shutdown and tests)."""
        return self.thread_pool.waitForDone(timeout_ms)
