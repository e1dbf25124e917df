"""Solvers module: the search frontier and the batch WFC solver."""

from .frontier import SearchFrontier, FrontierStatus, StepOutcome, StepResult
from .wfc_solver import WFCSolver, SolverStats

__all__ = [
    "SearchFrontier",
    "FrontierStatus",
    "StepOutcome",
    "StepResult",
    "WFCSolver",
    "SolverStats",
]
