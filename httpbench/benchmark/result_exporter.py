"""Handles exporting benchmark results to files."""
import logging
from pathlib import Path
from typing import List, Union
import pandas as pd

from .models import Stats
from .stats_codec import write_stats_file, read_stats_file


# Configure logging
logger = logging.getLogger(__name__)


class ResultExporter:
    """Handles exporting benchmark results to files."""

    @staticmethod
    def save_stats(stats: Stats, output_path: Union[Path, str]) -> None:
        """
        Save a stats record, replacing any previous content of the file.

        Args:
            stats: Stats record of the run.
            output_path: Path of the stats file.
        """
        with open(output_path, "w") as f:
            write_stats_file(f, stats)
        logger.info(f"Stats file saved: {output_path}")

    @staticmethod
    def load_stats(input_path: Union[Path, str]) -> List[Stats]:
        """Load every stats record from a stats file."""
        with open(input_path, "r") as f:
            stats = read_stats_file(f)
        logger.info(f"Stats loaded from: {input_path}")
        return stats

    @staticmethod
    def save_samples_to_csv(samples: List[float], output_path: Union[Path, str]) -> None:
        """
        Save raw latency samples to CSV for offline analysis.

        Args:
            samples: Latency samples in milliseconds, in recording order.
            output_path: Path to save CSV.
        """
        df = pd.DataFrame({'latency_ms': samples})
        df.index.name = 'sample'
        df.to_csv(output_path)
        logger.info(f"Latency samples saved to CSV: {output_path}")

    @staticmethod
    def load_samples_from_csv(input_path: Union[Path, str]) -> List[float]:
        """
        Load raw latency samples written by save_samples_to_csv.

        Args:
            input_path: Path to load CSV from.

        Returns:
            Latency samples in milliseconds.
        """
        df = pd.read_csv(input_path, index_col=0)
        logger.info(f"Latency samples loaded from CSV: {input_path}")
        return [float(v) for v in df['latency_ms']]
