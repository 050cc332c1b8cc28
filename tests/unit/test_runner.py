"""Unit tests for command line parsing and the subcommand runner."""

import io
from unittest.mock import patch

import pytest

from httpbench.benchmark.exceptions import NoArgsError, UnknownSubcommandError, NoURLError
from httpbench.benchmark.models import Stats, StatsDelta
from httpbench.benchmark.runner import BenchmarkRunner, parse_args, build_config, format_delta
from httpbench.benchmark.stats_codec import write_stats_file
from httpbench.shared.config import Config
from tests.test_const import TEST_URL, STATS_FIRST, STATS_SECOND


@pytest.fixture
def settings():
    return Config()


class TestParseArgs:
    """Test parse_args and build_config."""

    def test_no_args_prints_usage(self, settings):
        stderr = io.StringIO()
        with pytest.raises(NoArgsError):
            parse_args([], settings, stderr)
        assert "usage" in stderr.getvalue()

    def test_unknown_subcommand(self, settings):
        with pytest.raises(UnknownSubcommandError):
            parse_args(["walk", "-u", TEST_URL], settings)

    def test_run_flags(self, settings):
        namespace = parse_args(["run", "-c", "10", "-r", "20", "-g", "-s", "-u", TEST_URL], settings)
        config = build_config(namespace, settings, io.StringIO(), io.StringIO())
        assert namespace.command == "run"
        assert config.url == TEST_URL
        assert config.concurrency == 10
        assert config.requests == 20
        assert config.graphs
        assert config.export_stats

    def test_run_defaults(self, settings):
        namespace = parse_args(["run", "-u", TEST_URL], settings)
        config = build_config(namespace, settings, io.StringIO(), io.StringIO())
        assert config.requests == settings.requests
        assert config.concurrency == settings.concurrency
        assert config.user_agent == settings.user_agent
        assert config.timeout == settings.http_timeout
        assert not config.graphs
        assert not config.export_stats

    def test_run_without_url(self, settings):
        namespace = parse_args(["run", "-r", "10"], settings)
        with pytest.raises(NoURLError):
            build_config(namespace, settings, io.StringIO(), io.StringIO())

    def test_cmp_files(self, settings):
        namespace = parse_args(["cmp", "a.txt", "b.txt"], settings)
        assert (namespace.command, namespace.first, namespace.second) == ("cmp", "a.txt", "b.txt")


class TestBenchmarkRunner:
    """Test BenchmarkRunner exit codes and output."""

    def test_no_args_exit_code(self, settings):
        stderr = io.StringIO()
        assert BenchmarkRunner([], io.StringIO(), stderr, settings).run() == 1
        assert "no arguments" in stderr.getvalue()

    def test_missing_url_exit_code(self, settings):
        stderr = io.StringIO()
        assert BenchmarkRunner(["run"], io.StringIO(), stderr, settings).run() == 1
        assert "no URL" in stderr.getvalue()

    @patch('httpbench.benchmark.runner.HttpBenchmark')
    def test_run_invokes_benchmark(self, mock_benchmark_class, settings):
        runner = BenchmarkRunner(["run", "-u", TEST_URL, "-r", "3"], io.StringIO(), io.StringIO(), settings)
        assert runner.run() == 0
        config = mock_benchmark_class.call_args[0][0]
        assert config.requests == 3
        mock_benchmark_class.return_value.run.assert_called_once()

    def test_cmp_prints_delta(self, settings, tmp_path):
        first = tmp_path / "stats1.txt"
        second = tmp_path / "stats2.txt"
        with open(first, "w") as f:
            write_stats_file(f, Stats(**STATS_FIRST))
        with open(second, "w") as f:
            write_stats_file(f, Stats(**STATS_SECOND))
        stdout = io.StringIO()

        assert BenchmarkRunner(["cmp", str(first), str(second)], stdout, io.StringIO(), settings).run() == 0
        assert "P50: -15.000ms" in stdout.getvalue()
        assert "Requests: +20" in stdout.getvalue()

    def test_cmp_missing_file_exit_code(self, settings):
        assert BenchmarkRunner(["cmp", "bogus", "bogus"], io.StringIO(), io.StringIO(), settings).run() == 1

    def test_format_delta(self):
        text = format_delta(StatsDelta(p50=1.5, p90=-2, p99=0, requests=3, successes=-1, failures=0))
        assert text == ("P50: +1.500ms P90: -2.000ms P99: +0.000ms\n"
                        "Requests: +3 Success: -1 Failures: +0\n")
