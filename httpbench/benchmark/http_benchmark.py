"""Main class for running an HTTP load benchmark against one URL."""
import logging
import threading
import time
from datetime import datetime
from pathlib import Path
from typing import List, Optional
import requests

from httpbench.const import STATS_FILE_NAME, SAMPLES_FILE_NAME, BOXPLOT_FILE_NAME, HISTOGRAM_FILE_NAME
from .models import BenchmarkConfig, RunState, Stats
from .exceptions import BenchmarkExecutionError
from .latency_recorder import LatencyRecorder, RequestCounters
from .work_queue import HandoffQueue
from .request_session_manager import RequestSessionManager
from .request_executor import RequestExecutor
from .latency_analyzer import LatencyAnalyzer
from .concurrency_manager import ConcurrencyManager
from .result_exporter import ResultExporter
from .visualization_generator import VisualizationGenerator


# Configure logging
logger = logging.getLogger(__name__)


def format_elapsed(seconds: float) -> str:
    """Render a duration rounded to the millisecond, e.g. ``850ms``, ``1.234s`` or ``1m2.5s``."""
    ms = int(seconds * 1000 + 0.5)
    if ms == 0:
        return "0s"
    if ms < 1000:
        return f"{ms}ms"
    hours, rest = divmod(ms, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    secs = f"{rest / 1000:.3f}".rstrip("0").rstrip(".")
    if hours:
        return f"{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{minutes}m{secs}s"
    return f"{secs}s"


class HttpBenchmark:
    """Runs one benchmark: dispatch, metrics, optional graphs and stats file, report."""

    def __init__(self, config: BenchmarkConfig, session: Optional[requests.Session] = None):
        self.config = config
        self._owns_session = session is None
        self.session = session or RequestSessionManager.create_session(pool_size=config.concurrency)
        self.work = HandoffQueue()
        self.latency_recorder = LatencyRecorder()
        self.counters = RequestCounters()
        self.request_executor = RequestExecutor(config)
        self.latency_analyzer = LatencyAnalyzer()
        self.concurrency_manager = ConcurrencyManager(
            self.request_executor, self.latency_recorder, self.counters, self.log_stderr
        )
        self.result_exporter = ResultExporter()
        self.visualization_generator = VisualizationGenerator(config.url)
        self.state = RunState.CONFIGURED
        self.start_time: Optional[datetime] = None
        self.elapsed: float = 0.0
        self._stats = Stats(url=config.url)
        self._stderr_lock = threading.Lock()

    @property
    def stats(self) -> Stats:
        return self._stats

    def samples(self) -> List[float]:
        """Latency samples collected so far, in milliseconds."""
        return self.latency_recorder.samples()

    def log_stdout(self, msg: str) -> None:
        self.config.stdout.write(msg)

    def log_stderr(self, msg: str) -> None:
        with self._stderr_lock:
            self.config.stderr.write(msg)

    def set_metrics(self) -> Stats:
        """
        Build the stats record from the counters and recorded samples.

        Raises:
            TimeNotRecordedError: If no latency sample was recorded.
        """
        latencies = self.latency_analyzer.compute_percentiles(self.samples())
        requests_count, successes, failures = self.counters.snapshot()
        self._stats = Stats(
            url=self.config.url,
            requests=requests_count,
            successes=successes,
            failures=failures,
            mean=latencies.mean,
            p50=latencies.p50,
            p90=latencies.p90,
            p99=latencies.p99,
        )
        return self._stats

    def run(self) -> Stats:
        """
        Run the benchmark and return its stats.

        Raises:
            BenchmarkExecutionError: If the benchmark already ran, or
                TimeNotRecordedError if no request produced a latency sample.
            OSError: If graphs or the stats file cannot be written.
        """
        if self.state is not RunState.CONFIGURED:
            raise BenchmarkExecutionError(f"benchmark cannot run from state {self.state.value}")
        self.state = RunState.RUNNING
        logger.info(f"Benchmarking {self.config.url} with {self.config.requests} requests "
                    f"and concurrency {self.config.concurrency}")
        try:
            self.start_time = datetime.now()
            started = time.perf_counter()
            self.concurrency_manager.dispatch(self.session, self.work, self.config.requests, self.config.concurrency)
            self.elapsed = time.perf_counter() - started
            self.set_metrics()
            if self.config.graphs:
                self.generate_graphs()
            if self.config.export_stats:
                self.export_stats()
        except Exception:
            self.state = RunState.FAILED
            raise
        finally:
            if self._owns_session:
                self.session.close()

        self.state = RunState.COMPLETED
        self.report()
        return self._stats

    def generate_graphs(self) -> None:
        """Save boxplot.png and histogram.png to the output path."""
        samples = self.samples()
        output_path = Path(self.config.output_path)
        self.visualization_generator.boxplot(samples, output_path / BOXPLOT_FILE_NAME)
        self.visualization_generator.histogram(samples, output_path / HISTOGRAM_FILE_NAME)

    def export_stats(self) -> None:
        """Save statsfile.txt and the raw samples to the output path."""
        output_path = Path(self.config.output_path)
        self.result_exporter.save_stats(self._stats, output_path / STATS_FILE_NAME)
        self.result_exporter.save_samples_to_csv(self.samples(), output_path / SAMPLES_FILE_NAME)

    def report(self) -> None:
        stats = self._stats
        self.log_stdout(f"The benchmark of {self.config.url} site took {format_elapsed(self.elapsed)}\n")
        self.log_stdout(f"Requests: {stats.requests} Success: {stats.successes} Failures: {stats.failures}\n")
        self.log_stdout(f"P50: {stats.p50:.3f}ms P90: {stats.p90:.3f}ms P99: {stats.p99:.3f}ms\n")
