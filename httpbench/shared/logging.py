import logging
import sys
from typing import Optional

from .config import Config
from httpbench.const import LOG_FORMAT, LOG_DATE_FORMAT


class LoggingManager:
    """Manager for logging setup and logger retrieval."""

    @classmethod
    def setup_logging(cls, level: Optional[str] = None) -> None:
        """Setup logging for the command line tool.

        Log records go to stderr so they never mix with the benchmark report.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
                Falls back to the configured log level.
        """
        config = Config()
        level = level or config.log_level

        # Convert string level to logging level
        numeric_level = getattr(logging, level.upper(), logging.INFO)

        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(numeric_level)

        root_logger = logging.getLogger()
        root_logger.setLevel(numeric_level)
        root_logger.addHandler(console_handler)

        # Set levels for noisy libraries
        for logger_name, lib_level in config.library_log_levels.items():
            logging.getLogger(logger_name).setLevel(getattr(logging, lib_level.upper(), logging.WARNING))

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a logger instance.

        Args:
            name: Logger name, typically __name__

        Returns:
            Configured logger instance
        """
        return logging.getLogger(name)
