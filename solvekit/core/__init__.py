from .bt import Backtracking, SearchStats
from .dac import DacAlgorithm, DacProblem
from .model import ProblemType
from .state import KeyedState, State

__all__ = [
    "Backtracking",
    "DacAlgorithm",
    "DacProblem",
    "KeyedState",
    "ProblemType",
    "SearchStats",
    "State",
]
