"""Unit tests for configuration settings."""

import json
import os
from unittest.mock import patch

from httpbench.shared.config import Config


class TestSettings:
    """Test Settings configuration class."""

    def test_default_settings(self):
        """Test default configuration values."""
        settings = Config()
        assert settings.concurrency == 1
        assert settings.requests == 1
        assert settings.output_path == "./"
        assert settings.user_agent == "Bench 0.0.1 Alpha"
        assert settings.http_timeout == 5.0
        assert settings.max_retries == 0

    @patch.dict(os.environ, {"HTTPBENCH_CONCURRENCY": "8"})
    def test_env_override_concurrency(self):
        """Test overriding concurrency via environment variable."""
        settings = Config()
        assert settings.concurrency == 8

    @patch.dict(os.environ, {"HTTPBENCH_USER_AGENT": "Custom/1.0"})
    def test_env_override_user_agent(self):
        """Test overriding the user agent via environment variable."""
        settings = Config()
        assert settings.user_agent == "Custom/1.0"

    @patch.dict(os.environ, {
        "HTTPBENCH_HTTP_TIMEOUT": "0.5",
        "HTTPBENCH_REQUESTS": "100",
        "HTTPBENCH_OUTPUT_PATH": "/tmp/bench"
    })
    def test_multiple_env_overrides(self):
        """Test multiple environment variable overrides."""
        settings = Config()
        assert settings.http_timeout == 0.5
        assert settings.requests == 100
        assert settings.output_path == "/tmp/bench"

    def test_json_config_file(self, tmp_path, monkeypatch):
        """Test values from httpbench.json in the working directory."""
        (tmp_path / "httpbench.json").write_text(json.dumps({"concurrency": 4, "max_retries": 2}))
        monkeypatch.chdir(tmp_path)
        settings = Config()
        assert settings.concurrency == 4
        assert settings.max_retries == 2

    @patch.dict(os.environ, {"HTTPBENCH_CONCURRENCY": "6"})
    def test_env_wins_over_json_file(self, tmp_path, monkeypatch):
        (tmp_path / "httpbench.json").write_text(json.dumps({"concurrency": 4}))
        monkeypatch.chdir(tmp_path)
        assert Config().concurrency == 6
