"""Analyzes and computes latency statistics."""
import logging
from typing import Sequence

import numpy as np

from .models import LatencyResults
from .exceptions import TimeNotRecordedError


# Configure logging
logger = logging.getLogger(__name__)


class LatencyAnalyzer:
    """Analyzes and computes latency statistics."""

    PERCENTILES = (0.50, 0.90, 0.99)

    @staticmethod
    def nearest_rank_index(count: int, percentile: float) -> int:
        """
        Zero-based index of the nearest-rank percentile in sorted data.

        The rank is n * p rounded half away from zero, so 3.5 becomes 4.
        The index is clamped to [0, count - 1].
        """
        rank = int(np.floor(count * percentile + 0.5))
        return min(max(rank - 1, 0), count - 1)

    @staticmethod
    def compute_percentiles(latencies: Sequence[float]) -> LatencyResults:
        """
        Compute mean, p50, p90 and p99 without interpolation.

        Args:
            latencies: Latency measurements in milliseconds, in any order.

        Returns:
            LatencyResults dataclass with mean and percentiles.

        Raises:
            TimeNotRecordedError: If there are no measurements.
        """
        if len(latencies) < 1:
            raise TimeNotRecordedError("no execution time recorded")

        times = np.sort(np.asarray(latencies, dtype=float))
        count = len(times)
        p50, p90, p99 = (
            float(times[LatencyAnalyzer.nearest_rank_index(count, p)])
            for p in LatencyAnalyzer.PERCENTILES
        )
        mean = float(np.mean(times))
        logger.debug(f"Computed percentiles over {count} samples")
        return LatencyResults(mean=mean, p50=p50, p90=p90, p99=p99)
