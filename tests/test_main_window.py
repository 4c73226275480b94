"""
Smoke test for MainWindow wiring, with a fake session and manual runner.
"""

import json

import pytest

from core.main_window import MainWindow
from domain.events import ErrorKind
from services.iex_client import IexClient
from tests.fakes import API_BASE, DIRECTORY_URL, LOGO_BASE, FakeResponse, FakeSession, ManualRunner, logo_url, quote_url


@pytest.fixture
def session():
    return FakeSession(
        {
            DIRECTORY_URL: FakeResponse(
                200,
                json.dumps(
                    [
                        {"companyName": "Apple Inc.", "symbol": "AAPL"},
                        {"companyName": "Ford Motor Co.", "symbol": "F"},
                    ]
                ).encode(),
            ),
            quote_url("AAPL"): FakeResponse(
                200, b'{"companyName": "Apple Inc.", "symbol": "AAPL", "latestPrice": 150.0, "change": 1.5}'
            ),
            quote_url("F"): FakeResponse(
                200, b'{"companyName": "Ford Motor Co.", "symbol": "F", "latestPrice": 12.0, "change": -0.2}'
            ),
            logo_url("AAPL"): FakeResponse(200, b"garbage"),
            logo_url("F"): FakeResponse(200, b"garbage"),
        }
    )


@pytest.fixture
def window(qtbot, session):
    runner = ManualRunner()
    client = IexClient(session=session, api_base=API_BASE, logo_base=LOGO_BASE)
    win = MainWindow(client=client, runner=runner, autostart=False)
    win.runner = runner
    qtbot.addWidget(win)
    return win


def drain(window, qtbot, symbol_field):
    window.runner.run_all()
    qtbot.waitUntil(lambda: window.quote_panel.symbol_cell.value_text() == symbol_field, timeout=2000)


def test_startup_flow_shows_first_company(window, qtbot):
    window.controller.start()
    drain(window, qtbot, "AAPL")

    assert window.company_picker.count() == 2
    assert window.quote_panel.name_cell.value_text() == "Apple Inc."
    assert not window.quote_panel.is_busy


def test_picker_activation_loads_selected_quote(window, qtbot):
    window.controller.start()
    drain(window, qtbot, "AAPL")

    window.company_picker.activated.emit(1)
    drain(window, qtbot, "F")

    assert window.quote_panel.price_cell.value_text() == "12.0"


def test_errors_route_to_reporter(window, qtbot, session, monkeypatch):
    reported = []
    monkeypatch.setattr(window.error_reporter, "report", reported.append)
    session.routes[DIRECTORY_URL] = FakeResponse(500, b"")

    window.controller.start()
    window.runner.run_all()
    qtbot.waitUntil(lambda: bool(reported), timeout=2000)

    assert reported[0].kind is ErrorKind.NETWORK


def test_close_drops_queued_jobs_and_closes_session(window, session):
    window.controller.start()
    assert window.runner.names() == ["directory"]

    window.close()

    assert window.runner.names() == []
    assert session.closed
