"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real log, config and
working directories.
"""

from __future__ import annotations

import logging
import logging.handlers
from unittest.mock import patch

import pytest


def _drop_file_handlers() -> None:
    logger = logging.getLogger("todos_cli")
    for handler in list(logger.handlers):
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            logger.removeHandler(handler)
            handler.close()


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Send logs and config.json into *tmp_path* for every test.

    Also resets the logger singleton and the config service cache so each
    test starts fresh.
    """
    import todos_cli.utils.logger as logger_mod
    from todos_cli.services.config_service import get_config_service

    logger_mod._logger = None
    _drop_file_handlers()
    get_config_service.cache_clear()

    with patch(
        "todos_cli.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")
    ):
        with patch(
            "todos_cli.services.config_service.user_config_dir",
            return_value=str(tmp_path / "config"),
        ):
            yield

    _drop_file_handlers()
    logger_mod._logger = None
    get_config_service.cache_clear()


@pytest.fixture()
def workdir(tmp_path, monkeypatch):
    """Run the test from an empty working directory."""
    path = tmp_path / "work"
    path.mkdir()
    monkeypatch.chdir(path)
    return path
