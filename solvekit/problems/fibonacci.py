from __future__ import annotations

from typing import Any, Dict, Hashable, List, Optional

from ..core.dac import DacProblem
from . import ProblemFormatError, register_problem, require


@register_problem
class Fibonacci(DacProblem[int, int]):
    """``F(n)`` from ``F(n-1)`` and ``F(n-2)``; exponential unless memoized."""
    name = "fibonacci"
    strategy = "dac"

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ProblemFormatError("n must be non-negative")
        self.n = n

    @classmethod
    def from_params(cls, params: Dict[str, Any]) -> "Fibonacci":
        return cls(int(require(params, "n")))

    def size(self) -> int:
        return self.n

    def is_base_case(self) -> bool:
        return self.n < 2

    def base_case_solution(self) -> int:
        return self.n

    def subproblem_count(self) -> int:
        return 2

    def get_subproblem(self, i: int) -> "Fibonacci":
        return Fibonacci(self.n - 1 - i)

    def combine(self, solutions: List[int]) -> int:
        return sum(solutions)

    def get_solution(self, partial_solution: int) -> Optional[int]:
        return partial_solution

    def memo_key(self) -> Optional[Hashable]:
        return self.n
