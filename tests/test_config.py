"""Tests for loading TsmlServerConfig from the environment."""

import dataclasses

import pytest

from tsml_mcp.config import (
    DEFAULT_TIMEOUT_MS,
    DEFAULT_USER_AGENT,
    ConfigurationError,
    TsmlServerConfig,
)


def test_defaults_applied_when_only_url_set():
    config = TsmlServerConfig.from_environment({"TSML_WORDPRESS_URL": "https://example.org"})

    assert config.wordpress_url == "https://example.org"
    assert config.api_key is None
    assert config.timeout == DEFAULT_TIMEOUT_MS == 30000
    assert config.user_agent == DEFAULT_USER_AGENT
    assert "1.0.0" in config.user_agent


def test_overrides_read_from_environment():
    config = TsmlServerConfig.from_environment({
        "TSML_WORDPRESS_URL": "https://example.org",
        "TSML_API_KEY": "abc123",
        "TSML_TIMEOUT": "5000",
        "TSML_USER_AGENT": "agent/2.0",
    })

    assert config.api_key == "abc123"
    assert config.timeout == 5000
    assert config.timeout_seconds == 5.0
    assert config.user_agent == "agent/2.0"


@pytest.mark.parametrize("environ", [{}, {"TSML_WORDPRESS_URL": ""}])
def test_missing_url_is_fatal(environ):
    with pytest.raises(ConfigurationError, match="TSML_WORDPRESS_URL"):
        TsmlServerConfig.from_environment(environ)


@pytest.mark.parametrize("timeout", ["soon", "0", "-10"])
def test_invalid_timeout_rejected(timeout):
    with pytest.raises(ConfigurationError, match="TSML_TIMEOUT"):
        TsmlServerConfig.from_environment({
            "TSML_WORDPRESS_URL": "https://example.org",
            "TSML_TIMEOUT": timeout,
        })


def test_config_is_immutable():
    config = TsmlServerConfig(wordpress_url="https://example.org")

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.api_key = "changed"


@pytest.mark.parametrize("timeout", [0, -1, -30000])
def test_direct_construction_rejects_non_positive_timeout(timeout):
    with pytest.raises(ConfigurationError, match="TSML_TIMEOUT"):
        TsmlServerConfig(wordpress_url="https://example.org", timeout=timeout)
