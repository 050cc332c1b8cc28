"""Benchmark package initialization."""
from .models import BenchmarkConfig, LatencyResults, RunState, Stats, StatsDelta
from .exceptions import (
    ConfigurationError, NoArgsError, UnknownSubcommandError, NoURLError, InvalidURLError,
    InvalidRequestsError, InvalidConcurrencyError, ValueCannotBeNilError, BenchmarkExecutionError,
    TimeNotRecordedError, RequestError, MalformedRecordError
)
from .latency_recorder import LatencyRecorder, RequestCounters
from .work_queue import HandoffQueue, QueueClosed
from .stats_codec import (
    encode_stats, decode_stats, write_stats_file, read_stats_file, compare_stats, compare_stats_files
)
from .request_session_manager import RequestSessionManager
from .request_executor import RequestExecutor
from .latency_analyzer import LatencyAnalyzer
from .concurrency_manager import ConcurrencyManager
from .result_exporter import ResultExporter
from .visualization_generator import VisualizationGenerator
from .http_benchmark import HttpBenchmark
from .runner import BenchmarkRunner, main

__all__ = [
    'BenchmarkConfig',
    'LatencyResults',
    'RunState',
    'Stats',
    'StatsDelta',
    'ConfigurationError',
    'NoArgsError',
    'UnknownSubcommandError',
    'NoURLError',
    'InvalidURLError',
    'InvalidRequestsError',
    'InvalidConcurrencyError',
    'ValueCannotBeNilError',
    'BenchmarkExecutionError',
    'TimeNotRecordedError',
    'RequestError',
    'MalformedRecordError',
    'LatencyRecorder',
    'RequestCounters',
    'HandoffQueue',
    'QueueClosed',
    'encode_stats',
    'decode_stats',
    'write_stats_file',
    'read_stats_file',
    'compare_stats',
    'compare_stats_files',
    'RequestSessionManager',
    'RequestExecutor',
    'LatencyAnalyzer',
    'ConcurrencyManager',
    'ResultExporter',
    'VisualizationGenerator',
    'HttpBenchmark',
    'BenchmarkRunner',
    'main'
]
