"""Tests for BoomSettings."""

import pytest

from httpboom.config import BoomSettings, get_config, reload_config


def test_defaults():
    """Test default settings."""
    config = BoomSettings(_env_file=None)
    assert config.internal_error_message == "An internal server error occurred"
    assert config.unknown_error_label == "Unknown"
    assert config.log_level == "INFO"


def test_settings_from_env(monkeypatch):
    """Test settings can be loaded from prefixed environment variables."""
    monkeypatch.setenv("HTTPBOOM_INTERNAL_ERROR_MESSAGE", "Oops")
    monkeypatch.setenv("HTTPBOOM_LOG_LEVEL", "debug")
    config = BoomSettings(_env_file=None)
    assert config.internal_error_message == "Oops"
    assert config.log_level == "DEBUG"


def test_config_singleton():
    """Test that get_config returns singleton instance."""
    config1 = get_config()
    config2 = get_config()
    assert config1 is config2


def test_reload_config(monkeypatch):
    """Test that reload_config creates new config instance."""
    config1 = get_config()
    monkeypatch.setenv("HTTPBOOM_UNKNOWN_ERROR_LABEL", "Unassigned")
    config2 = reload_config()
    assert config1 is not config2
    assert config2.unknown_error_label == "Unassigned"


def test_validate_config_empty_internal_message():
    """Test that an empty internal message fails validation."""
    with pytest.raises(ValueError, match="INTERNAL_ERROR_MESSAGE cannot be empty"):
        BoomSettings(_env_file=None, internal_error_message="  ").validate_config()


def test_validate_config_bad_log_level():
    """Test that an unknown log level fails validation."""
    with pytest.raises(ValueError, match="LOG_LEVEL must be one of"):
        BoomSettings(_env_file=None, log_level="loud").validate_config()


def test_validate_config_reports_all_errors():
    """Test that every problem is listed."""
    config = BoomSettings(_env_file=None, internal_error_message="", unknown_error_label="")
    with pytest.raises(ValueError) as excinfo:
        config.validate_config()
    assert "INTERNAL_ERROR_MESSAGE" in str(excinfo.value)
    assert "UNKNOWN_ERROR_LABEL" in str(excinfo.value)


def test_validate_config_valid():
    """Test that valid configuration passes validation."""
    BoomSettings(_env_file=None).validate_config()  # Should not raise
