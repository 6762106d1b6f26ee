"""Visualization utilities for batch results."""

from __future__ import annotations
import os
from typing import List

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .batch import BatchResult


class Visualizer:
    """
    Chart generator for batch solving results.

    Plots how solve time is distributed and how it relates to the
    amount of elimination work per puzzle.
    """

    SOLVED_COLOR = "#2ecc71"
    FAILED_COLOR = "#e74c3c"

    def __init__(self, results: List[BatchResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of batch results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        sns.set_theme(style="whitegrid")

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_time_distribution(),
            self.plot_eliminations_vs_time(),
        ]

    def plot_time_distribution(self) -> str:
        """Histogram of per-puzzle solve times in milliseconds."""
        fig, ax = plt.subplots(figsize=(10, 6))

        times_ms = np.array([r.time_seconds for r in self.results]) * 1000.0
        sns.histplot(times_ms, bins=30, color=self.SOLVED_COLOR, ax=ax)

        if len(times_ms):
            mean = float(np.mean(times_ms))
            ax.axvline(mean, color='black', linestyle='--', linewidth=1)
            ax.annotate(f'mean {mean:.2f} ms',
                        xy=(mean, ax.get_ylim()[1] * 0.95),
                        xytext=(5, 0),
                        textcoords="offset points",
                        fontsize=10)

        ax.set_xlabel('Solve Time (ms)', fontsize=12)
        ax.set_ylabel('Puzzles', fontsize=12)
        ax.set_title('Solve Time Distribution', fontsize=14, fontweight='bold')

        plt.tight_layout()
        path = os.path.join(self.output_dir, "time_distribution.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path

    def plot_eliminations_vs_time(self) -> str:
        """Scatter of eliminations against solve time, colored by outcome."""
        fig, ax = plt.subplots(figsize=(10, 6))

        eliminations = [r.eliminations for r in self.results]
        times_ms = [r.time_seconds * 1000.0 for r in self.results]
        colors = [self.SOLVED_COLOR if r.solved else self.FAILED_COLOR for r in self.results]

        ax.scatter(eliminations, times_ms, c=colors, alpha=0.7,
                   edgecolor='black', linewidth=0.3)

        ax.set_xlabel('Eliminations', fontsize=12)
        ax.set_ylabel('Solve Time (ms)', fontsize=12)
        ax.set_title('Elimination Work vs Solve Time', fontsize=14, fontweight='bold')
        ax.set_xlim(left=0)
        ax.set_ylim(bottom=0)

        plt.tight_layout()
        path = os.path.join(self.output_dir, "eliminations_vs_time.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path
