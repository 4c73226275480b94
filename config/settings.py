# -------------------- config/settings.py (start)
from __future__ import annotations

import contextlib
import os
from pathlib import Path
from typing import Optional


# -------------------- helpers --------------------
def _env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    val = os.getenv(name)
    return val if val not in ("", None) else default


def _env_int(name: str, default: Optional[int] = None) -> Optional[int]:
    val = os.getenv(name)
    if val in (None, ""):
        return default
    try:
        return int(val)
    except ValueError:
        return default


def _env_float(name: str, default: Optional[float] = None) -> Optional[float]:
    val = os.getenv(name)
    if val in (None, ""):
        return default
    try:
        return float(val)
    except ValueError:
        return default


def _env_bool(name: str, default: bool = False) -> bool:
    return str(os.getenv(name, "1" if default else "0")).strip().lower() in ("1", "true", "yes", "on")


# --- Paths ---
HOME: str = str(Path.home())
LOG_DIR: str = _env_str("STOCKS_LOG_DIR", str(Path(HOME) / ".stocks" / "logs")) or str(Path(HOME) / ".stocks" / "logs")

# Ensure log dir exists (non-fatal)
with contextlib.suppress(OSError):
    Path(LOG_DIR).mkdir(parents=True, exist_ok=True)

# --- Feature flags ---
DEBUG_MODE: bool = _env_bool("DEBUG_MODE", False)
DEBUG_NETWORK: bool = _env_bool("DEBUG_NETWORK", False)  # request/response tracing

# -------------------- IEX endpoints --------------------
IEX_API_BASE: str = (_env_str("IEX_API_BASE", "https://api.iextrading.com") or "").rstrip("/")
LOGO_BASE: str = (_env_str("LOGO_BASE", "https://storage.googleapis.com") or "").rstrip("/")

# -------------------- Transport --------------------
HTTP_TIMEOUT_SEC: float = _env_float("HTTP_TIMEOUT_SEC", 10.0) or 10.0
FETCH_MAX_WORKERS: int = _env_int("FETCH_MAX_WORKERS", 4) or 4

# Optional boot banner (helps confirm effective values during dev)
if DEBUG_MODE:
    print(
        "[SETTINGS] "
        f"IEX_API_BASE={IEX_API_BASE} | "
        f"LOGO_BASE={LOGO_BASE} | "
        f"HTTP_TIMEOUT_SEC={HTTP_TIMEOUT_SEC} | "
        f"FETCH_MAX_WORKERS={FETCH_MAX_WORKERS} | "
        f"LOG_DIR={LOG_DIR} | "
        f"DEBUG_NETWORK={int(DEBUG_NETWORK)}"
    )

# Explicit export list (useful for linters)
__all__ = [
    "HOME",
    "LOG_DIR",
    "DEBUG_MODE",
    "DEBUG_NETWORK",
    "IEX_API_BASE",
    "LOGO_BASE",
    "HTTP_TIMEOUT_SEC",
    "FETCH_MAX_WORKERS",
]
# -------------------- config/settings.py (end)
