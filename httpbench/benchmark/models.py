"""Data models for the benchmarking system."""
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, TextIO
from urllib.parse import urlsplit

from httpbench.const import (
    DEFAULT_CONCURRENCY, DEFAULT_NUM_REQUESTS, DEFAULT_OUTPUT_PATH, DEFAULT_USER_AGENT,
    DEFAULT_HTTP_TIMEOUT, SUPPORTED_SCHEMES
)
from .exceptions import (
    NoURLError, InvalidURLError, InvalidRequestsError, InvalidConcurrencyError, ValueCannotBeNilError
)


class RunState(Enum):
    """Lifecycle of a single benchmark."""
    CONFIGURED = "configured"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class BenchmarkConfig:
    """Configuration for the benchmark.

    Validated on construction, in this order: URL presence, URL parse and host,
    number of requests, output streams, concurrency.
    """
    url: str = ""
    requests: int = DEFAULT_NUM_REQUESTS
    concurrency: int = DEFAULT_CONCURRENCY
    output_path: str = DEFAULT_OUTPUT_PATH
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = DEFAULT_HTTP_TIMEOUT
    graphs: bool = False
    export_stats: bool = False
    stdout: Optional[TextIO] = field(default_factory=lambda: sys.stdout, repr=False, compare=False)
    stderr: Optional[TextIO] = field(default_factory=lambda: sys.stderr, repr=False, compare=False)

    def __post_init__(self):
        if not self.url:
            raise NoURLError("no URL to test")
        try:
            parts = urlsplit(self.url)
            host = parts.hostname
        except ValueError as e:
            raise InvalidURLError(f"invalid URL {self.url!r}") from e
        if not host:
            raise InvalidURLError(f"invalid URL {self.url!r}")
        if parts.scheme not in SUPPORTED_SCHEMES:
            raise InvalidURLError(f"invalid URL {self.url!r}: unsupported scheme {parts.scheme!r}")
        if self.requests < 1:
            raise InvalidRequestsError(f"{self.requests} is invalid number of requests")
        if self.stdout is None:
            raise ValueCannotBeNilError("stdout cannot be None")
        if self.stderr is None:
            raise ValueCannotBeNilError("stderr cannot be None")
        if self.concurrency < 1:
            raise InvalidConcurrencyError(f"{self.concurrency} is invalid concurrency")


@dataclass(frozen=True)
class LatencyResults:
    """Container for mean latency and percentiles, in milliseconds."""
    mean: float
    p50: float
    p90: float
    p99: float


@dataclass(frozen=True)
class Stats:
    """Aggregate summary of one benchmark run.

    The mean is not persisted in stats files, so it is left out of equality.
    """
    url: str = ""
    requests: int = 0
    successes: int = 0
    failures: int = 0
    mean: float = field(default=0.0, compare=False)
    p50: float = 0.0
    p90: float = 0.0
    p99: float = 0.0


@dataclass(frozen=True)
class StatsDelta:
    """Field-wise difference between two stats records."""
    p50: float = 0.0
    p90: float = 0.0
    p99: float = 0.0
    requests: int = 0
    successes: int = 0
    failures: int = 0
