"""Generic problem-solving strategies: define the problem, get the solutions."""

from .core import (
    Backtracking,
    DacAlgorithm,
    DacProblem,
    KeyedState,
    ProblemType,
    SearchStats,
    State,
)

__all__ = [
    "Backtracking",
    "DacAlgorithm",
    "DacProblem",
    "KeyedState",
    "ProblemType",
    "SearchStats",
    "State",
]
