"""
Unit tests for the IEX payload decoders.

Run with: pytest tests/unit/test_iex_schemas.py -v
"""

import json

import pytest

from domain.errors import DecodeError
from domain.quote import Quote
from services.iex_schemas import CompanyListing, parse_company_list, parse_quote


def _quote_payload(**overrides) -> bytes:
    payload = {
        "companyName": "Apple Inc.",
        "symbol": "AAPL",
        "latestPrice": 150.0,
        "change": -2.5,
        "peRatio": 17.3,
        "sector": "Technology",
    }
    payload.update(overrides)
    return json.dumps({k: v for k, v in payload.items() if v is not ...}).encode()


class TestParseCompanyList:
    """Decoding /stock/market/list/infocus."""

    def test_decodes_names_and_symbols(self):
        data = b'[{"companyName": "Apple Inc.", "symbol": "AAPL"}, {"companyName": "Tesla, Inc.", "symbol": "TSLA"}]'
        listings = parse_company_list(data)
        assert [(l.company_name, l.symbol) for l in listings] == [("Apple Inc.", "AAPL"), ("Tesla, Inc.", "TSLA")]

    def test_extra_fields_are_ignored(self):
        data = b'[{"companyName": "Apple Inc.", "symbol": "AAPL", "latestPrice": 150.0, "primaryExchange": "NASDAQ"}]'
        listing = parse_company_list(data)[0]
        assert isinstance(listing, CompanyListing)
        assert listing.symbol == "AAPL"

    def test_empty_array(self):
        assert parse_company_list(b"[]") == []

    @pytest.mark.parametrize(
        "data",
        [
            b"not json",
            b"",
            b'{"companyName": "Apple Inc.", "symbol": "AAPL"}',
            b'[{"symbol": "AAPL"}]',
            b'[{"companyName": "Apple Inc."}]',
            b'[{"companyName": null, "symbol": "AAPL"}]',
            b'[{"companyName": "Apple Inc.", "symbol": 42}]',
            b'[{"company_name": "Apple Inc.", "symbol": "AAPL"}]',
        ],
        ids=["garbage", "empty", "object", "no-name", "no-symbol", "null-name", "numeric-symbol", "field-name-not-alias"],
    )
    def test_malformed_payloads_raise_decode_error(self, data):
        with pytest.raises(DecodeError):
            parse_company_list(data)


class TestParseQuote:
    """Decoding /stock/{symbol}/quote."""

    def test_reads_the_four_fields(self):
        quote = parse_quote(_quote_payload())
        assert quote == Quote(company_name="Apple Inc.", symbol="AAPL", price=150.0, price_change=-2.5)

    def test_integer_numbers_become_floats(self):
        quote = parse_quote(_quote_payload(latestPrice=150, change=0))
        assert quote.price == 150.0
        assert isinstance(quote.price, float)
        assert quote.price_change == 0.0

    @pytest.mark.parametrize("field", ["companyName", "symbol", "latestPrice", "change"])
    def test_missing_field_raises_decode_error(self, field):
        with pytest.raises(DecodeError, match=field):
            parse_quote(_quote_payload(**{field: ...}))

    @pytest.mark.parametrize(
        "overrides",
        [
            {"latestPrice": "150.0"},
            {"change": None},
            {"change": True},
            {"companyName": 12},
            {"symbol": ["AAPL"]},
        ],
    )
    def test_wrong_types_raise_decode_error(self, overrides):
        with pytest.raises(DecodeError):
            parse_quote(_quote_payload(**overrides))

    def test_non_object_payload(self):
        with pytest.raises(DecodeError):
            parse_quote(b"[1, 2, 3]")

    def test_malformed_json(self):
        with pytest.raises(DecodeError):
            parse_quote(b"{companyName:")
