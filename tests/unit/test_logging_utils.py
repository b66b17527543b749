"""Unit tests for console logging setup."""

from __future__ import annotations

import logging

import pytest

from pdf_indexer.logging_utils import LOG_FORMAT, QUIET_LOGGERS, setup_logging


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    levels = {name: logging.getLogger(name).level for name in QUIET_LOGGERS}
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, lvl in levels.items():
        logging.getLogger(name).setLevel(lvl)


def test_root_logger_gets_single_stdout_handler_with_thread_name() -> None:
    setup_logging("WARNING")

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert root.handlers[0].formatter._fmt == LOG_FORMAT
    assert "%(threadName)s" in LOG_FORMAT


def test_client_libraries_are_quieted() -> None:
    setup_logging("INFO")

    assert logging.getLogger("pypdf").level == logging.ERROR
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("openai").level == logging.WARNING


def test_debug_shows_client_libraries() -> None:
    setup_logging("DEBUG")

    assert logging.getLogger("httpx").level == logging.NOTSET
    assert logging.getLogger("pypdf").level == logging.NOTSET
