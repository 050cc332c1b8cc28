"""httpbench: concurrent HTTP GET load testing."""

__version__ = "0.1.0"
