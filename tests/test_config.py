"""
Tests for settings validation and logging setup.
"""

import logging

import pytest

from cafe_directory.config import Settings, get_settings
from cafe_directory.logging_config import setup_logging


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_settings_overrides():
    settings = Settings(api_port=9000, log_level="debug", cafe_data_path="cafes.json")
    assert settings.api_port == 9000
    assert settings.cafe_data_path == "cafes.json"


@pytest.mark.parametrize("port", [0, 70000])
def test_invalid_port(port):
    with pytest.raises(ValueError, match="API_PORT"):
        Settings(api_port=port)


def test_invalid_log_level():
    with pytest.raises(ValueError, match="LOG_LEVEL"):
        Settings(log_level="loud")


def test_setup_logging_sets_level():
    root = logging.getLogger()
    previous = root.level
    try:
        setup_logging("warning")
        assert root.level == logging.WARNING
        assert root.handlers
    finally:
        root.setLevel(previous)
