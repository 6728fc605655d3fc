from __future__ import annotations

import math
from enum import Enum


class ProblemType(str, Enum):
    """What a problem sees as the best solution."""
    MAX = "max"
    MIN = "min"
    ALL = "all"


def worst_value(problem_type: ProblemType) -> float:
    """Starting point for the running best of a search."""
    if problem_type is ProblemType.MAX:
        return -math.inf
    if problem_type is ProblemType.MIN:
        return math.inf
    return 0.0  # never compared for ALL


def permissive_estimate(problem_type: ProblemType) -> float:
    """Bound that never causes a branch to be pruned."""
    if problem_type is ProblemType.MAX:
        return math.inf
    if problem_type is ProblemType.MIN:
        return -math.inf
    return 0.0
