"""Tests for config module."""

import pytest

from lazy_sequences.config import DemoConfig, get_demo_config


def test_defaults(monkeypatch):
    """Test defaults when no environment variables are set."""
    monkeypatch.delenv("DEMO_COUNT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    config = get_demo_config()

    assert config.demo_count == 100
    assert config.log_level == "INFO"


def test_from_env(monkeypatch):
    """Test values are read from the environment."""
    monkeypatch.setenv("DEMO_COUNT", "12")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = DemoConfig.from_env()

    assert config.demo_count == 12
    assert config.log_level == "DEBUG"


def test_validation():
    """Test invalid values are rejected."""
    with pytest.raises(ValueError):
        DemoConfig(demo_count=-1)
    with pytest.raises(ValueError):
        DemoConfig(log_level="LOUD")
