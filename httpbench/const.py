"""Constants for httpbench."""

# Benchmark defaults
DEFAULT_CONCURRENCY = 1
DEFAULT_NUM_REQUESTS = 1
DEFAULT_OUTPUT_PATH = "./"
DEFAULT_USER_AGENT = "Bench 0.0.1 Alpha"
DEFAULT_HTTP_TIMEOUT = 5.0  # seconds
DEFAULT_MAX_RETRIES = 0

# Logging configuration
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Library log levels
LIBRARY_LOG_LEVELS = {
    "urllib3": "WARNING",
    "matplotlib": "WARNING",
    "PIL": "WARNING"
}

# HTTP
HTTP_OK = 200
USER_AGENT_HEADER = "user-agent"
ACCEPT_HEADER = "accept"
ACCEPT_ANY = "*/*"
SUPPORTED_SCHEMES = ("http", "https")

# Output file names
CONFIG_FILE_NAME = "httpbench.json"
STATS_FILE_NAME = "statsfile.txt"
SAMPLES_FILE_NAME = "latencies.csv"
BOXPLOT_FILE_NAME = "boxplot.png"
HISTOGRAM_FILE_NAME = "histogram.png"

# Subcommands
RUN_COMMAND = "run"
CMP_COMMAND = "cmp"

# Exit codes
EXIT_OK = 0
EXIT_FAILURE = 1
