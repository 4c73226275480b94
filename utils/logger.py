# -------------------- logger (start)
"""
utils/logger.py
Unified logger for Stocks: handles console + file output with rotation,
respects DEBUG_MODE from config/settings.py, and provides a standard
get_logger() accessor for all modules and services.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
import os
import sys

import structlog

from config.settings import DEBUG_MODE, LOG_DIR


class SafeRotatingFileHandler(RotatingFileHandler):
    """RotatingFileHandler that keeps writing to the current file when rotation is blocked.

    Windows file locking can prevent rotation while another process holds the log.
    """

    def doRollover(self) -> None:
        try:
            super().doRollover()
        except PermissionError:
            # Locked by another process: skip the rotation, keep appending
            pass


def _init_logger_system() -> None:
    """Initializes global logging handlers (console + rotating file)."""
    if getattr(_init_logger_system, "_initialized", False):
        return

    log_level = logging.DEBUG if DEBUG_MODE else logging.INFO

    os.makedirs(LOG_DIR, exist_ok=True)
    log_path = os.path.join(LOG_DIR, "stocks.log")

    fmt = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(fmt, datefmt)

    file_handler = SafeRotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3, encoding="utf-8", delay=True)
    file_handler.setFormatter(formatter)
    file_handler.setLevel(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.addHandler(file_handler)

    # Console handler - only in DEBUG mode
    if DEBUG_MODE:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(log_level)
        root_logger.addHandler(console_handler)
        print(f"[Logger] Initialized ({logging.getLevelName(log_level)}) -> {log_path}")

    # Route structlog events (network layer, controller) through the same handlers
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    _init_logger_system._initialized = True


def configure_logging() -> None:
    """Install file/console handlers and structlog routing (idempotent)."""
    _init_logger_system()


def get_logger(name: str = "Stocks") -> logging.Logger:
    """
    Returns a module-scoped logger.
    Example:
        log = get_logger(__name__)
        log.info("Hello from module")
    """
    _init_logger_system()
    return logging.getLogger(name)


def setup_debug_logging(enabled: bool = False) -> None:
    """
    Globally elevate log level to DEBUG if enabled=True.
    Useful for runtime toggles.
    """
    root = logging.getLogger()
    new_level = logging.DEBUG if enabled else logging.INFO
    root.setLevel(new_level)
    for h in root.handlers:
        h.setLevel(new_level)


# -------------------- logger (end)
