"""Constants used across all test files."""

# Common test values
TEST_URL = "http://fake.url"
TEST_USER_AGENT = "CustomUserAgent"
TEST_OUTPUT_PATH = "/tmp"
TEST_REQUESTS = 10
TEST_CONCURRENCY = 10
UNREACHABLE_URL = "http://127.0.0.1:1/"

INVALID_URLS = [
    "bogus-no-scheme-or-domain",
    "bogus-no-host://",
    "bogus-no-scheme.fake",
    "ftp://fake.url",
]

# Latency samples and the statistics they must produce
PERCENTILE_SAMPLES = [5, 6, 7, 8, 10, 11, 13]
PERCENTILE_P50 = 8
PERCENTILE_P90 = 11
PERCENTILE_P99 = 13
MEAN_SAMPLES = [50, 100, 200, 100, 50]
MEAN_EXPECTED = 100

# Stats records
STATS_LINE = "http://fake.url,20,19,1,100.123,150.000,198.465"
STATS_FIRST = {"failures": 2, "p50": 20, "p90": 30, "p99": 100, "requests": 20, "successes": 18}
STATS_SECOND = {"failures": 1, "p50": 5, "p90": 33, "p99": 99, "requests": 40, "successes": 19}
DELTA_EXPECTED = {"failures": -1, "p50": -15, "p90": 3, "p99": -1, "requests": 20, "successes": 1}

# Server responses
OK_BODY = b"HelloWorld"
TEAPOT_STATUS = 418
SERVER_ERROR_STATUS = 500
