"""
Unit tests for ErrorEvent construction from fetch errors.
"""

import pytest

from domain.errors import DecodeError, FetchError, NetworkError
from domain.events import ErrorEvent, ErrorKind


class TestErrorEventFromException:
    def test_network_error_keeps_retry(self):
        calls = []
        event = ErrorEvent.from_exception(
            NetworkError("HTTP 503", url="https://x", status_code=503),
            source="directory",
            retry=lambda: calls.append("retry"),
        )

        assert event.kind is ErrorKind.NETWORK
        assert event.source == "directory"
        assert event.is_retryable
        event.retry()
        assert calls == ["retry"]

    def test_decode_error_drops_retry(self):
        event = ErrorEvent.from_exception(
            DecodeError("Quote field 'change' missing or not a number"),
            source="quote",
            retry=lambda: None,
        )

        assert event.kind is ErrorKind.DECODE
        assert event.retry is None
        assert not event.is_retryable
        assert "change" in event.detail

    def test_base_fetch_error_is_rejected(self):
        with pytest.raises(TypeError):
            ErrorEvent.from_exception(FetchError("?"), source="quote")

    def test_network_error_metadata(self):
        exc = NetworkError("HTTP 404", url="https://api.test/x", status_code=404)
        assert exc.url == "https://api.test/x"
        assert exc.status_code == 404
        assert isinstance(exc, FetchError)
