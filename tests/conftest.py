"""Shared fixtures for the test suite."""

import logging
import sys

import pytest

from tiny_error.config import CONFIG_ENV_VAR


@pytest.fixture
def restore_logging():
    """Undo the root-logger and excepthook changes made by setup_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    excepthook = sys.excepthook
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
    sys.excepthook = excepthook


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """Point TINY_ERROR_CONFIG at a config.yml inside tmp_path and return its path."""
    path = tmp_path / "config.yml"
    path.write_text(
        "logging:\n"
        "  log_level: CRITICAL\n"
        f"  file_log_dir: {tmp_path / 'logs'}\n"
        "report:\n"
        '  prefix: "Error: "\n'
        "  exit_code: 1\n",
        encoding="utf-8",
    )
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    return path
