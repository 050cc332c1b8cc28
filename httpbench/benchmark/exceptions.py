"""Custom exceptions for the benchmarking system."""


class ConfigurationError(Exception):
    """Base exception for invalid benchmark configuration."""
    pass


class NoArgsError(ConfigurationError):
    """Exception raised when the command line has no arguments."""
    pass


class UnknownSubcommandError(ConfigurationError):
    """Exception raised when the subcommand is not run or cmp."""
    pass


class NoURLError(ConfigurationError):
    """Exception raised when no URL to test is configured."""
    pass


class InvalidURLError(ConfigurationError):
    """Exception raised when the URL cannot be parsed or has no host."""
    pass


class InvalidRequestsError(ConfigurationError):
    """Exception raised when the number of requests is lower than one."""
    pass


class InvalidConcurrencyError(ConfigurationError):
    """Exception raised when the number of workers is lower than one."""
    pass


class ValueCannotBeNilError(ConfigurationError):
    """Exception raised when an output stream is None."""
    pass


class BenchmarkExecutionError(Exception):
    """Custom exception for benchmark execution failures."""
    pass


class TimeNotRecordedError(BenchmarkExecutionError):
    """Exception raised when no execution time was recorded."""
    pass


class RequestError(Exception):
    """Exception raised when a request fails."""
    pass


class MalformedRecordError(Exception):
    """Exception raised when a stats record cannot be decoded."""
    pass
