"""Pytest configuration: isolate config, environment and logging per test."""

import logging
import os

import pytest

from cidrview.config import set_config

CONFIG_VARS = ("CIDRVIEW_FORMAT", "CIDRVIEW_LOG_LEVEL", "CIDRVIEW_LOG_FILE")


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep real .env files, config and log handlers out of tests."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    for var in CONFIG_VARS:
        monkeypatch.delenv(var, raising=False)
    set_config(None)

    yield

    # load_dotenv writes straight into os.environ
    for var in CONFIG_VARS:
        os.environ.pop(var, None)
    set_config(None)

    logger = logging.getLogger("cidrview")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
