"""
Tests for Client Configuration

Tests for reading ClientConfig from environment variables.
"""

import logging

import pytest

from chat_session.config import DEFAULT_SERVER_URL, ClientConfig


def test_defaults_from_empty_environment():
    config = ClientConfig.from_env({})
    assert config.server_url == DEFAULT_SERVER_URL
    assert config.ui == "tui"
    assert config.log_file == "chat_client.log"
    assert config.log_level == logging.WARNING


def test_values_from_environment():
    config = ClientConfig.from_env(
        {
            "CHAT_SERVER_URL": "ws://chat.example:9000",
            "CHAT_CLIENT_UI": "PLAIN",
            "CHAT_CLIENT_LOG_FILE": "/tmp/client.log",
            "CHAT_CLIENT_LOG_LEVEL": "debug",
        }
    )
    assert config.server_url == "ws://chat.example:9000"
    assert config.ui == "plain"
    assert config.log_file == "/tmp/client.log"
    assert config.log_level == logging.DEBUG


def test_unknown_ui_mode_is_rejected():
    with pytest.raises(ValueError, match="CHAT_CLIENT_UI"):
        ClientConfig.from_env({"CHAT_CLIENT_UI": "gui"})


def test_unknown_log_level_is_rejected():
    with pytest.raises(ValueError, match="Unknown log level"):
        ClientConfig.from_env({"CHAT_CLIENT_LOG_LEVEL": "chatty"})
