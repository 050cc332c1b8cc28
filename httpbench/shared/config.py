import json
from pathlib import Path
from typing import Dict, Any

from pydantic_settings import BaseSettings, SettingsConfigDict

from httpbench.const import (
    CONFIG_FILE_NAME, DEFAULT_CONCURRENCY, DEFAULT_NUM_REQUESTS, DEFAULT_OUTPUT_PATH,
    DEFAULT_USER_AGENT, DEFAULT_HTTP_TIMEOUT, DEFAULT_MAX_RETRIES, DEFAULT_LOG_LEVEL,
    LIBRARY_LOG_LEVELS
)


class Config(BaseSettings):
    """Global configuration settings for httpbench."""

    concurrency: int = DEFAULT_CONCURRENCY
    requests: int = DEFAULT_NUM_REQUESTS
    output_path: str = DEFAULT_OUTPUT_PATH
    user_agent: str = DEFAULT_USER_AGENT
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    log_level: str = DEFAULT_LOG_LEVEL
    library_log_levels: Dict[str, str] = dict(LIBRARY_LOG_LEVELS)

    model_config = SettingsConfigDict(
        env_prefix='HTTPBENCH_',
    )

    @classmethod
    def load_config_from_json(cls) -> Dict[str, Any]:
        """Load configuration from httpbench.json file."""
        config_path = Path(CONFIG_FILE_NAME)
        if config_path.exists():
            with open(config_path, 'r') as f:
                return json.load(f)
        return {}

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """
        Customise the sources for settings.

        Order of precedence (highest to lowest):
        1. Environment variables
        2. Init settings (kwargs passed to constructor)
        3. JSON config file
        4. Default values
        """
        def json_source():
            return cls.load_config_from_json()

        return (
            env_settings,
            init_settings,
            json_source,
        )
