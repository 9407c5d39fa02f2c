from __future__ import annotations

import io
import logging

import pytest

from zodiac_mapper.boot import configure_logging
from zodiac_mapper.boot.logging import LOG_LEVEL_ENV_VAR, PACKAGE_LOGGER, resolve_level


@pytest.fixture(autouse=True)
def _reset_package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_explicit_level_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "ERROR")
    assert configure_logging(level="debug") == logging.DEBUG
    assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG


def test_environment_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "error")
    assert configure_logging() == logging.ERROR


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("info", logging.INFO),
        (" Debug ", logging.DEBUG),
        (logging.ERROR, logging.ERROR),
        ("bogus", logging.WARNING),
        ("", logging.WARNING),
        (None, logging.WARNING),
    ],
)
def test_resolve_level(raw: str | int | None, expected: int) -> None:
    assert resolve_level(raw) == expected


def test_root_logger_is_untouched(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    root = logging.getLogger()
    before = (list(root.handlers), root.level)
    configure_logging(level="info", stream=io.StringIO())
    assert (list(root.handlers), root.level) == before


def test_package_records_reach_the_stream() -> None:
    stream = io.StringIO()
    configure_logging(level="debug", stream=stream)
    logging.getLogger("zodiac_mapper.index").debug("built %s", "index")
    assert "DEBUG [zodiac_mapper.index] built index" in stream.getvalue()


def test_reconfiguring_replaces_the_console_handler() -> None:
    first, second = io.StringIO(), io.StringIO()
    configure_logging(level="warning", stream=first)
    configure_logging(level="warning", stream=second)
    logging.getLogger("zodiac_mapper.locales").warning("once")
    assert first.getvalue() == ""
    assert second.getvalue().count("once") == 1
