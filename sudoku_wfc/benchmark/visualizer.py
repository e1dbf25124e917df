"""Visualization utilities for benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult


class Visualizer:
    """
    Chart generator for WFC benchmark results.

    Shows how widely the random exploration order spreads the cost of
    solving the same puzzle.
    """

    COLORS = {
        "solved": "#0083b0",
        "unsolved": "#e74c3c",
    }

    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        if not results:
            raise ValueError("No benchmark results to visualize")

        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_steps_distribution(),
            self.plot_dead_ends_vs_steps(),
            self.plot_time_distribution(),
        ]

    def _save(self, name: str) -> str:
        plt.tight_layout()
        path = os.path.join(self.output_dir, name)
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()
        return path

    def plot_steps_distribution(self) -> str:
        """Histogram of steps needed per run."""
        fig, ax = plt.subplots(figsize=(10, 6))

        steps = [r.steps for r in self.results]
        sns.histplot(x=steps, ax=ax, color=self.COLORS["solved"], edgecolor='black', linewidth=0.5)
        ax.axvline(np.mean(steps), color='gray', linestyle='--', alpha=0.6,
                   label=f'Mean: {np.mean(steps):.1f}')

        ax.set_xlabel('Steps', fontsize=12)
        ax.set_ylabel('Runs', fontsize=12)
        ax.set_title('Steps per Run', fontsize=14, fontweight='bold')
        ax.legend()

        return self._save("steps_distribution.png")

    def plot_dead_ends_vs_steps(self) -> str:
        """Scatter plot of abandoned branches against steps."""
        fig, ax = plt.subplots(figsize=(10, 6))

        for label, solved in (("solved", True), ("unsolved", False)):
            subset = [r for r in self.results if r.solved == solved]
            if not subset:
                continue
            sns.scatterplot(
                x=[r.steps for r in subset],
                y=[r.dead_ends for r in subset],
                ax=ax,
                color=self.COLORS[label],
                label=label.capitalize(),
                edgecolor='black',
                linewidth=0.5
            )

        ax.set_xlabel('Steps', fontsize=12)
        ax.set_ylabel('Dead Ends', fontsize=12)
        ax.set_title('Dead Ends vs Steps', fontsize=14, fontweight='bold')

        return self._save("dead_ends_vs_steps.png")

    def plot_time_distribution(self) -> str:
        """Box plot of solve times."""
        fig, ax = plt.subplots(figsize=(8, 6))

        times = [r.time_seconds for r in self.results]
        sns.boxplot(y=times, ax=ax, color=self.COLORS["solved"])
        sns.stripplot(y=times, ax=ax, color='black', size=3, alpha=0.5)

        ax.set_ylabel('Time (seconds)', fontsize=12)
        ax.set_title('Solve Time Distribution', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)

        return self._save("time_distribution.png")
