"""
services/iex_schemas.py

Decoders for IEX JSON payloads.

Company list: validated with a Pydantic model (strict string fields, unknown
fields allowed).

Quote: read generically from the top-level object. The upstream quote carries
dozens of fields; only companyName, symbol, latestPrice and change are needed
and each of them must be present with the right JSON type.
"""

from __future__ import annotations

from typing import Any

import orjson
from pydantic import BaseModel, ConfigDict, Field, StrictStr, TypeAdapter, ValidationError

from domain.errors import DecodeError
from domain.quote import Quote


# ==================== Company list ====================


class CompanyListing(BaseModel):
    """One entry of /stock/market/list/infocus"""

    company_name: StrictStr = Field(..., alias="companyName")
    symbol: StrictStr

    model_config = ConfigDict(extra="allow")


_COMPANY_LIST_ADAPTER = TypeAdapter(list[CompanyListing])


def _load_json(data: bytes) -> Any:
    try:
        return orjson.loads(data)
    except orjson.JSONDecodeError as e:
        raise DecodeError(f"Malformed JSON: {e}") from e


def parse_company_list(data: bytes) -> list[CompanyListing]:
    """
    Decode the tracked-companies payload.

    Raises:
        DecodeError: body is not JSON, not an array, or an entry misses
            a string companyName/symbol
    """
    raw = _load_json(data)
    try:
        return _COMPANY_LIST_ADAPTER.validate_python(raw)
    except ValidationError as e:
        raise DecodeError(f"Invalid company list: {e.error_count()} validation error(s)") from e


# ==================== Quote ====================


def _require_str(payload: dict, key: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str):
        raise DecodeError(f"Quote field '{key}' missing or not a string")
    return value


def _require_number(payload: dict, key: str) -> float:
    value = payload.get(key)
    # bool is an int subclass but never a price
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"Quote field '{key}' missing or not a number")
    return float(value)


def parse_quote(data: bytes) -> Quote:
    """
    Decode a /stock/{symbol}/quote payload.

    Raises:
        DecodeError: body is not a JSON object or a required field is
            missing or has the wrong type

    Example:
        >>> parse_quote(b'{"companyName": "Apple Inc.", "symbol": "AAPL", "latestPrice": 150, "change": -2.5}')
        Quote(company_name='Apple Inc.', symbol='AAPL', price=150.0, price_change=-2.5)
    """
    payload = _load_json(data)
    if not isinstance(payload, dict):
        raise DecodeError("Quote payload is not a JSON object")

    return Quote(
        company_name=_require_str(payload, "companyName"),
        symbol=_require_str(payload, "symbol"),
        price=_require_number(payload, "latestPrice"),
        price_change=_require_number(payload, "change"),
    )


__all__ = ["CompanyListing", "parse_company_list", "parse_quote"]
