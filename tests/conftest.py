"""
Stocks Test Configuration

Pytest fixtures for the quote controller, IEX client and widgets.
Widget tests use pytest-qt's qtbot on the offscreen Qt platform.
"""
from __future__ import annotations

import os
from pathlib import Path
import sys
import tempfile

import pytest


# Must be set before PyQt6 / config.settings are imported
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("STOCKS_LOG_DIR", tempfile.mkdtemp(prefix="stocks-test-logs-"))

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tests.fakes import (  # noqa: E402
    API_BASE,
    LOGO_BASE,
    FakeSession,
    ManualRunner,
    RecordingPicker,
    RecordingReporter,
    RecordingView,
    immediate_dispatch,
)


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def iex_client(fake_session):
    from services.iex_client import IexClient

    return IexClient(session=fake_session, api_base=API_BASE, logo_base=LOGO_BASE, timeout=3.0)


@pytest.fixture
def runner():
    return ManualRunner()


@pytest.fixture
def view():
    return RecordingView()


@pytest.fixture
def picker():
    return RecordingPicker()


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def controller(iex_client, runner, view, picker, reporter):
    from core.quote_controller import QuoteController

    return QuoteController(
        client=iex_client,
        runner=runner,
        view=view,
        picker=picker,
        reporter=reporter,
        dispatch=immediate_dispatch,
    )
