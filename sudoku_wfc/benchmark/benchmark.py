"""Benchmarking framework for repeated WFC runs on one puzzle."""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Dict, Any, Optional
import json
import os

import numpy as np
from tqdm import tqdm

from ..core.board import Board
from ..solvers import WFCSolver


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    run_id: int
    seed: Optional[int]
    solved: bool
    status: str
    time_seconds: float
    memory_bytes: int
    steps: int
    dead_ends: int
    branches: int
    max_frontier_size: int
    collapses: int = 0
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "run_id": self.run_id,
            "seed": self.seed,
            "solved": self.solved,
            "status": self.status,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "steps": self.steps,
            "dead_ends": self.dead_ends,
            "branches": self.branches,
            "max_frontier_size": self.max_frontier_size,
            "collapses": self.collapses,
            "error": self.error,
        }


class Benchmark:
    """
    Runs the WFC solver repeatedly on one puzzle.

    Exploration order depends on the random source, so each run gets its
    own seed and the spread of steps, dead ends and time is collected.
    """

    def __init__(
        self,
        puzzle: Board,
        runs: int = 10,
        seed: Optional[int] = None,
        max_steps: Optional[int] = None
    ):
        """
        Initialize the benchmark.

        Args:
            puzzle: The puzzle to solve on every run.
            runs: Number of solver runs.
            seed: Base seed; run i uses seed + i. None leaves runs unseeded.
            max_steps: Step limit per run (None for no limit).
        """
        if runs < 1:
            raise ValueError(f"runs must be at least 1, got {runs}")

        self.puzzle = puzzle
        self.runs = runs
        self.seed = seed
        self.max_steps = max_steps
        self.results: List[BenchmarkResult] = []

    def run_seed(self, run_id: int) -> Optional[int]:
        return None if self.seed is None else self.seed + run_id

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the full benchmark.

        Returns:
            List of BenchmarkResult objects, one per run.
        """
        self.results = []

        for run_id in tqdm(range(self.runs), desc="Benchmarking", disable=not show_progress):
            self.results.append(self._run_single(run_id))

        return self.results

    def _run_single(self, run_id: int) -> BenchmarkResult:
        """Run the solver once."""
        seed = self.run_seed(run_id)
        solver = WFCSolver(seed=seed, max_steps=self.max_steps)
        _, stats = solver.solve(self.puzzle)

        return BenchmarkResult(run_id=run_id, seed=seed, **stats.to_dict())

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary: Dict[str, Any] = {
            "puzzle": self.puzzle.to_string(),
            "clues": self.puzzle.count_static(),
            "runs": len(self.results),
            "seed": self.seed,
            "max_steps": self.max_steps,
        }
        if not self.results:
            return summary

        solved = [r for r in self.results if r.solved]
        summary["total_solved"] = len(solved)
        summary["success_rate"] = len(solved) / len(self.results) * 100

        for metric in ("time_seconds", "steps", "dead_ends", "branches", "max_frontier_size"):
            values = np.array([getattr(r, metric) for r in self.results], dtype=float)
            summary[metric] = {
                "mean": float(np.mean(values)),
                "median": float(np.median(values)),
                "min": float(np.min(values)),
                "max": float(np.max(values)),
            }

        memory = np.array([r.memory_bytes for r in self.results], dtype=float)
        summary["avg_memory_mb"] = float(np.mean(memory)) / (1024 * 1024)

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save benchmark results and the puzzle to files."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        puzzle_file = os.path.join(output_dir, "puzzle.txt")
        with open(puzzle_file, "w") as f:
            f.write(self.puzzle.to_string())
            f.write("\n\nPretty format:\n")
            f.write(str(self.puzzle))

        print(f"Results saved to {output_dir}")
