"""Manages HTTP request sessions shared by the workers."""
import logging
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry
from httpbench.const import DEFAULT_MAX_RETRIES, DEFAULT_CONCURRENCY


# Configure logging
logger = logging.getLogger(__name__)


class RequestSessionManager:
    """Manages HTTP request sessions shared by the workers."""

    @staticmethod
    def create_session(pool_size: int = DEFAULT_CONCURRENCY, max_retries: int = DEFAULT_MAX_RETRIES) -> requests.Session:
        """Create a requests session with one pooled connection per worker.

        Retries are disabled by default so that every attempt is counted.
        """
        session = requests.Session()
        retry = Retry(
            total=max_retries,
            backoff_factor=1,
            status_forcelist=[429, 500, 502, 503, 504],
            raise_on_status=False,
        )
        adapter = HTTPAdapter(pool_connections=pool_size, pool_maxsize=pool_size, max_retries=retry)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        logger.debug(f"Created session with pool size {pool_size} and {max_retries} retries")
        return session
