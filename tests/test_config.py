"""Tests for configuration loading and server startup."""

import os
from unittest.mock import patch

import pytest

from todoist_mcp import server
from todoist_mcp.config import DEFAULT_BASE_URL, TodoistConfig, load_config
from todoist_mcp.errors import ConfigurationError

TOKEN = "0123456789abcdef0123"


class TestLoadConfig:
    """Tests for building TodoistConfig from environment variables."""

    def test_defaults(self):
        """Test that only the token is required."""
        config = load_config({"TODOIST_API_TOKEN": TOKEN})
        assert config.api_token == TOKEN
        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout_ms == 10000
        assert config.timeout_seconds == 10.0
        assert config.bulk_max_tasks == 50
        assert config.log_level == "INFO"

    def test_all_variables(self):
        """Test reading every supported variable."""
        config = load_config(
            {
                "TODOIST_API_TOKEN": TOKEN,
                "TODOIST_API_BASE_URL": "http://localhost:8080/api/v1/",
                "REQUEST_TIMEOUT": "2500",
                "TODOIST_BULK_MAX_TASKS": "20",
                "LOG_LEVEL": "debug",
            }
        )
        assert config.base_url == "http://localhost:8080/api/v1"
        assert config.timeout_ms == 2500
        assert config.timeout_seconds == 2.5
        assert config.bulk_max_tasks == 20
        assert config.log_level == "DEBUG"

    def test_empty_values_use_defaults(self):
        """Test that blank variables are treated as unset."""
        config = load_config({"TODOIST_API_TOKEN": TOKEN, "REQUEST_TIMEOUT": ""})
        assert config.timeout_ms == 10000

    def test_missing_token(self):
        """Test that a missing token is a configuration error."""
        with pytest.raises(ConfigurationError, match="TODOIST_API_TOKEN"):
            load_config({})

    def test_short_token(self):
        """Test that an implausibly short token is rejected."""
        with pytest.raises(ConfigurationError, match="^TODOIST_API_TOKEN:"):
            load_config({"TODOIST_API_TOKEN": "short"})

    def test_timeout_out_of_range(self):
        """Test the timeout bounds."""
        with pytest.raises(ConfigurationError, match="^REQUEST_TIMEOUT:"):
            load_config({"TODOIST_API_TOKEN": TOKEN, "REQUEST_TIMEOUT": "500"})
        with pytest.raises(ConfigurationError, match="^REQUEST_TIMEOUT:"):
            load_config({"TODOIST_API_TOKEN": TOKEN, "REQUEST_TIMEOUT": "60001"})

    def test_bulk_limit_out_of_range(self):
        """Test that the bulk limit cannot exceed the sync command cap."""
        with pytest.raises(ConfigurationError, match="^TODOIST_BULK_MAX_TASKS:"):
            load_config({"TODOIST_API_TOKEN": TOKEN, "TODOIST_BULK_MAX_TASKS": "101"})

    def test_invalid_base_url(self):
        """Test that the base URL must be http(s)."""
        with pytest.raises(ConfigurationError, match="^TODOIST_API_BASE_URL:"):
            load_config({"TODOIST_API_TOKEN": TOKEN, "TODOIST_API_BASE_URL": "ftp://example.com"})

    def test_invalid_log_level(self):
        """Test that unknown log levels are rejected."""
        with pytest.raises(ConfigurationError, match="^LOG_LEVEL:"):
            load_config({"TODOIST_API_TOKEN": TOKEN, "LOG_LEVEL": "verbose"})

    def test_reads_process_environment(self):
        """Test that the process environment is used after loading .env."""
        with patch("todoist_mcp.config.load_dotenv") as mock_dotenv, patch.dict(
            os.environ, {"TODOIST_API_TOKEN": TOKEN, "LOG_LEVEL": "WARNING"}, clear=True
        ):
            config = load_config()
        mock_dotenv.assert_called_once()
        assert config.log_level == "WARNING"

    def test_config_is_immutable(self):
        """Test that configuration cannot change after loading."""
        config = TodoistConfig(api_token=TOKEN)
        with pytest.raises(ValueError):
            config.api_token = "another-token-value"


class TestRun:
    """Tests for the server entry point."""

    def test_exits_without_configuration(self):
        """Test that startup fails fast when the token is missing."""
        error = ConfigurationError("TODOIST_API_TOKEN is required")
        with patch.object(server, "load_config", side_effect=error), patch.object(server.mcp, "run") as mock_run:
            with pytest.raises(SystemExit) as exc_info:
                server.run()
        assert exc_info.value.code == 1
        mock_run.assert_not_called()

    def test_starts_server(self):
        """Test that a valid configuration starts the stdio server."""
        config = TodoistConfig(api_token=TOKEN, log_level="ERROR")
        with patch.object(server, "load_config", return_value=config), patch.object(
            server, "configure_logging"
        ) as mock_logging, patch.object(server.mcp, "run") as mock_run:
            server.run()
        mock_logging.assert_called_once_with("ERROR")
        mock_run.assert_called_once()
