"""
services/iex_client.py

Blocking HTTP client for the IEX endpoints used by the quote screen.

Every method runs on a background worker (see core/fetch_runner.py) and either
returns a decoded value or raises a FetchError:

- NetworkError: requests transport failure, timeout, or status != 200
- DecodeError: 200 response whose body does not decode

Endpoints:
    GET {IEX_API_BASE}/1.0/stock/market/list/infocus
    GET {IEX_API_BASE}/1.0/stock/{symbol}/quote
    GET {LOGO_BASE}/iex/api/logos/{symbol}.png
"""

from __future__ import annotations

from typing import Optional

import requests
import structlog

from config.settings import DEBUG_NETWORK, HTTP_TIMEOUT_SEC, IEX_API_BASE, LOGO_BASE
from domain.errors import NetworkError
from domain.quote import Quote
from services.iex_schemas import CompanyListing, parse_company_list, parse_quote

log = structlog.get_logger(__name__)


COMPANY_LIST_PATH = "/1.0/stock/market/list/infocus"
QUOTE_PATH = "/1.0/stock/{symbol}/quote"
LOGO_PATH = "/iex/api/logos/{symbol}.png"


class IexClient:
    """
    IEX REST client.

    Args:
        session: requests.Session to issue GETs on (a new one by default)
        api_base: base URL for directory and quote endpoints
        logo_base: base URL for logo images
        timeout: per-request timeout in seconds
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        api_base: str = IEX_API_BASE,
        logo_base: str = LOGO_BASE,
        timeout: float = HTTP_TIMEOUT_SEC,
    ):
        self._session = session or requests.Session()
        self.api_base = api_base.rstrip("/")
        self.logo_base = logo_base.rstrip("/")
        self.timeout = timeout

    # ---- URLs -----------------------------------------------------------
    def company_list_url(self) -> str:
        return f"{self.api_base}{COMPANY_LIST_PATH}"

    def quote_url(self, symbol: str) -> str:
        return f"{self.api_base}{QUOTE_PATH.format(symbol=symbol)}"

    def logo_url(self, symbol: str) -> str:
        return f"{self.logo_base}{LOGO_PATH.format(symbol=symbol)}"

    # ---- Public API -----------------------------------------------------
    def fetch_company_list(self) -> list[CompanyListing]:
        """Fetch and decode the tracked-companies list."""
        return parse_company_list(self._get(self.company_list_url()))

    def fetch_quote(self, symbol: str) -> Quote:
        """Fetch and decode the latest quote for symbol."""
        return parse_quote(self._get(self.quote_url(symbol)))

    def fetch_logo(self, symbol: str) -> bytes:
        """
        Fetch raw logo bytes for symbol.

        Raises:
            NetworkError: transport failure, non-200 status, or an empty body
        """
        url = self.logo_url(symbol)
        data = self._get(url)
        if not data:
            raise NetworkError("Empty logo body", url=url, status_code=200)
        return data

    def close(self) -> None:
        self._session.close()

    # ---- Transport ------------------------------------------------------
    def _get(self, url: str) -> bytes:
        if DEBUG_NETWORK:
            log.debug("iex.request", url=url, timeout=self.timeout)

        try:
            response = self._session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            log.warning("iex.transport_error", url=url, error=str(e))
            raise NetworkError(f"Transport error: {e}", url=url) from e

        if response.status_code != 200:
            log.warning("iex.bad_status", url=url, status_code=response.status_code)
            raise NetworkError(f"HTTP {response.status_code}", url=url, status_code=response.status_code)

        if DEBUG_NETWORK:
            log.debug("iex.response", url=url, status_code=response.status_code, size=len(response.content))

        return response.content
