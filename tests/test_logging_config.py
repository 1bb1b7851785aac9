"""Tests for root logger configuration."""

import logging

from customer_manager_api.app.core.config import settings
from customer_manager_api.app.core.logging_config import setup_logging


def _bare_root_logger(monkeypatch) -> logging.Logger:
    """Strip the root logger's handlers for the rest of the test.

    Called from the test body because pytest attaches its capture
    handlers when the test call starts.
    """
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    return root


def test_defaults_come_from_settings(tmp_path, monkeypatch):
    log_file = tmp_path / "api.log"
    monkeypatch.setattr(settings, "log_level", "warning")
    monkeypatch.setattr(settings, "log_file", str(log_file))
    root = _bare_root_logger(monkeypatch)

    assert setup_logging() is True

    assert root.level == logging.WARNING
    file_handlers = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].baseFilename == str(log_file.resolve())
    for handler in file_handlers:
        handler.close()


def test_console_only_without_log_file(monkeypatch):
    monkeypatch.setattr(settings, "log_file", "")
    root = _bare_root_logger(monkeypatch)

    setup_logging("debug")

    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert not isinstance(root.handlers[0], logging.FileHandler)


def test_unknown_level_falls_back_to_info(monkeypatch):
    monkeypatch.setattr(settings, "log_file", "")
    root = _bare_root_logger(monkeypatch)

    setup_logging("chatty")

    assert root.level == logging.INFO


def test_configures_only_once(monkeypatch):
    monkeypatch.setattr(settings, "log_file", "")
    root = _bare_root_logger(monkeypatch)

    assert setup_logging() is True
    assert setup_logging() is False
    assert len(root.handlers) == 1
