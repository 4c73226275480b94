"""
Tests for FetchRunner and the main-thread bridge.

These use a real QThreadPool, so completions are awaited with qtbot.waitUntil.
"""

import threading

import pytest
from PyQt6 import QtCore

from core.fetch_runner import FetchRunner
from utils.qt_bridge import is_main_thread, marshal_to_qt_thread


@pytest.fixture
def fetch_runner(qapp):
    runner = FetchRunner(max_workers=2)
    yield runner
    runner.wait_for_done(2000)


def test_job_runs_off_main_thread(fetch_runner, qtbot):
    seen = {}

    def job():
        seen["main"] = is_main_thread()
        seen["thread"] = threading.get_ident()

    fetch_runner.submit("probe", job)
    qtbot.waitUntil(lambda: "main" in seen, timeout=2000)

    assert seen["main"] is False
    assert seen["thread"] != threading.get_ident()


def test_marshal_delivers_on_main_thread(fetch_runner, qtbot):
    delivered = []

    def on_main(value):
        delivered.append((value, is_main_thread()))

    fetch_runner.submit("probe", lambda: marshal_to_qt_thread(on_main, 42))
    qtbot.waitUntil(lambda: bool(delivered), timeout=2000)

    assert delivered == [(42, True)]


def test_marshal_on_main_thread_runs_immediately(qapp):
    delivered = []

    marshal_to_qt_thread(delivered.append, "now")

    assert delivered == ["now"]


def test_failing_job_does_not_kill_pool(fetch_runner, qtbot):
    done = []

    def broken():
        raise RuntimeError("boom")

    fetch_runner.submit("broken", broken)
    fetch_runner.submit("after", lambda: done.append(True))
    qtbot.waitUntil(lambda: bool(done), timeout=2000)

    assert done == [True]


def test_is_main_thread_on_main(qapp):
    assert QtCore.QThread.currentThread() == qapp.thread()
    assert is_main_thread()
