"""Handles individual request execution and timing."""
import time
import logging
from typing import Tuple
import requests

from httpbench.const import USER_AGENT_HEADER, ACCEPT_HEADER, ACCEPT_ANY
from .models import BenchmarkConfig
from .exceptions import RequestError


# Configure logging
logger = logging.getLogger(__name__)


class RequestExecutor:
    """Handles individual request execution and timing."""

    def __init__(self, config: BenchmarkConfig):
        self.config = config

    @property
    def headers(self) -> dict:
        return {
            USER_AGENT_HEADER: self.config.user_agent,
            ACCEPT_HEADER: ACCEPT_ANY,
        }

    def send_request(self, session: requests.Session) -> Tuple[int, float]:
        """
        Send a single GET request to the configured URL and measure latency.

        Args:
            session: Requests session shared by the workers.

        Returns:
            Tuple of (status code, latency in milliseconds).

        Raises:
            RequestError: If the request fails at the transport level.
        """
        start_time = time.perf_counter()
        try:
            response = session.get(self.config.url, headers=self.headers, timeout=self.config.timeout)
        except requests.RequestException as e:
            raise RequestError(f"Request to {self.config.url} failed: {e}") from e

        end_time = time.perf_counter()
        return response.status_code, (end_time - start_time) * 1000.0
