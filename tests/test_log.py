"""
Test logging configuration.
"""

# Path setup handled by conftest.py
import logging

from rich.logging import RichHandler

from led.log import LOGGER_NAME, configure_logging


def rich_handlers():
    logger = logging.getLogger(LOGGER_NAME)
    return [h for h in logger.handlers if isinstance(h, RichHandler)]


def test_default_level_is_warning(monkeypatch):
    monkeypatch.delenv("LED_LOG_LEVEL", raising=False)
    configure_logging()
    assert logging.getLogger(LOGGER_NAME).level == logging.WARNING


def test_environment_sets_level(monkeypatch):
    monkeypatch.setenv("LED_LOG_LEVEL", "debug")
    configure_logging()
    assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG


def test_explicit_level_wins(monkeypatch):
    monkeypatch.setenv("LED_LOG_LEVEL", "ERROR")
    configure_logging("INFO")
    assert logging.getLogger(LOGGER_NAME).level == logging.INFO


def test_unknown_level_falls_back(monkeypatch):
    monkeypatch.delenv("LED_LOG_LEVEL", raising=False)
    configure_logging("LOUD")
    assert logging.getLogger(LOGGER_NAME).level == logging.WARNING


def test_repeat_calls_keep_one_handler(monkeypatch):
    monkeypatch.delenv("LED_LOG_LEVEL", raising=False)
    configure_logging()
    configure_logging()
    assert len(rich_handlers()) == 1
