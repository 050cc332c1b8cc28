"""Command line runner: parses subcommands and drives benchmarks and comparisons."""
import argparse
import logging
import sys
from typing import List, Optional, TextIO

from httpbench.const import RUN_COMMAND, CMP_COMMAND, EXIT_OK, EXIT_FAILURE
from httpbench.shared.config import Config
from httpbench.shared.logging import LoggingManager
from .models import BenchmarkConfig, StatsDelta
from .exceptions import (
    ConfigurationError, NoArgsError, UnknownSubcommandError, BenchmarkExecutionError, MalformedRecordError
)
from .http_benchmark import HttpBenchmark
from .request_session_manager import RequestSessionManager
from .stats_codec import compare_stats_files


# Configure logging
logger = logging.getLogger(__name__)

USAGE = f"usage: httpbench {{{RUN_COMMAND},{CMP_COMMAND}}} ...\n"


def _run_parser(settings: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=f"httpbench {RUN_COMMAND}", description="Benchmark a URL with GET requests")
    parser.add_argument("-u", dest="url", default="", help="url to run benchmark")
    parser.add_argument("-r", dest="requests", type=int, default=settings.requests,
                        help="number of requests to be performed in the benchmark")
    parser.add_argument("-c", dest="concurrency", type=int, default=settings.concurrency,
                        help="number of concurrent requests (users) to run benchmark")
    parser.add_argument("-g", dest="graphs", action="store_true", help="generate graphs")
    parser.add_argument("-s", dest="export_stats", action="store_true", help="generate stats file")
    parser.add_argument("-o", dest="output_path", default=settings.output_path,
                        help="directory for graphs and stats file")
    return parser


def _cmp_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=f"httpbench {CMP_COMMAND}", description="Compare two stats files")
    parser.add_argument("first", help="baseline stats file")
    parser.add_argument("second", help="stats file compared against the baseline")
    return parser


def parse_args(args: List[str], settings: Config, stderr: Optional[TextIO] = None) -> argparse.Namespace:
    """
    Parse a subcommand and its flags.

    Raises:
        NoArgsError: If args is empty; the usage line is written to stderr.
        UnknownSubcommandError: If the subcommand is neither run nor cmp.
    """
    if len(args) < 1:
        (stderr or sys.stderr).write(USAGE)
        raise NoArgsError("no arguments")
    command, rest = args[0], args[1:]
    if command == RUN_COMMAND:
        namespace = _run_parser(settings).parse_args(rest)
    elif command == CMP_COMMAND:
        namespace = _cmp_parser().parse_args(rest)
    else:
        raise UnknownSubcommandError(f"expected {RUN_COMMAND} or {CMP_COMMAND} subcommands, got {command!r}")
    namespace.command = command
    return namespace


def build_config(namespace: argparse.Namespace, settings: Config,
                 stdout: TextIO, stderr: TextIO) -> BenchmarkConfig:
    """Turn parsed run flags into a validated benchmark configuration."""
    return BenchmarkConfig(
        url=namespace.url,
        requests=namespace.requests,
        concurrency=namespace.concurrency,
        output_path=namespace.output_path,
        user_agent=settings.user_agent,
        timeout=settings.http_timeout,
        graphs=namespace.graphs,
        export_stats=namespace.export_stats,
        stdout=stdout,
        stderr=stderr,
    )


def format_delta(delta: StatsDelta) -> str:
    return (
        f"P50: {delta.p50:+.3f}ms P90: {delta.p90:+.3f}ms P99: {delta.p99:+.3f}ms\n"
        f"Requests: {delta.requests:+d} Success: {delta.successes:+d} Failures: {delta.failures:+d}\n"
    )


class BenchmarkRunner:
    """Orchestrates the execution of a subcommand and manages output."""

    def __init__(self, args: List[str], stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None,
                 settings: Optional[Config] = None):
        self.args = args
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.settings = settings or Config()

    def run(self) -> int:
        """Run the subcommand and return the process exit code."""
        try:
            namespace = parse_args(self.args, self.settings, self.stderr)
            if namespace.command == RUN_COMMAND:
                self.run_benchmark(namespace)
            else:
                self.compare(namespace)
        except (ConfigurationError, BenchmarkExecutionError, MalformedRecordError, OSError) as e:
            logger.error(f"httpbench {self.args[0] if self.args else ''} failed: {e}")
            self.stderr.write(f"{e}\n")
            return EXIT_FAILURE
        return EXIT_OK

    def run_benchmark(self, namespace: argparse.Namespace) -> HttpBenchmark:
        config = build_config(namespace, self.settings, self.stdout, self.stderr)
        session = RequestSessionManager.create_session(
            pool_size=config.concurrency, max_retries=self.settings.max_retries
        )
        benchmark = HttpBenchmark(config, session=session)
        try:
            benchmark.run()
        finally:
            session.close()
        return benchmark

    def compare(self, namespace: argparse.Namespace) -> StatsDelta:
        delta = compare_stats_files(namespace.first, namespace.second)
        self.stdout.write(format_delta(delta))
        return delta


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the httpbench command."""
    LoggingManager.setup_logging()
    args = sys.argv[1:] if argv is None else argv
    return BenchmarkRunner(args).run()
