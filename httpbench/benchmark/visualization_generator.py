"""Generates latency graphs from benchmark samples."""
import logging
from pathlib import Path
from typing import List, Union
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import seaborn as sns


# Configure logging
logger = logging.getLogger(__name__)


class VisualizationGenerator:
    """Generates latency graphs from benchmark samples."""

    FIGSIZE = (6, 4)
    DPI = 100
    HISTOGRAM_BINS = 50

    def __init__(self, url: str):
        self.url = url

    def boxplot(self, samples: List[float], output_path: Union[Path, str]) -> None:
        """
        Generate and save a latency boxplot.

        Args:
            samples: Latency samples in milliseconds.
            output_path: Path to save plot.
        """
        fig, ax = plt.subplots(figsize=self.FIGSIZE)
        try:
            sns.boxplot(y=samples, ax=ax, width=0.3)
            ax.set_title("Latency boxplot")
            ax.set_ylabel("latency (ms)")
            ax.set_xlabel(self.url)
            fig.tight_layout()
            fig.savefig(output_path, dpi=self.DPI)
        finally:
            plt.close(fig)
        logger.info(f"Boxplot saved: {output_path}")

    def histogram(self, samples: List[float], output_path: Union[Path, str]) -> None:
        """
        Generate and save a latency histogram.

        Args:
            samples: Latency samples in milliseconds.
            output_path: Path to save plot.
        """
        fig, ax = plt.subplots(figsize=self.FIGSIZE)
        try:
            sns.histplot(x=samples, bins=self.HISTOGRAM_BINS, ax=ax)
            ax.set_title("Latency Histogram")
            ax.set_ylabel("n reqs")
            ax.set_xlabel("latency (ms)")
            fig.tight_layout()
            fig.savefig(output_path, dpi=self.DPI)
        finally:
            plt.close(fig)
        logger.info(f"Histogram saved: {output_path}")
