"""Entry point for ``python -m httpbench``."""
import sys

from httpbench.benchmark.runner import main


if __name__ == "__main__":
    sys.exit(main())
