"""Divide & conquer strategy.

Independent from the backtracking engine: a problem is split into
subproblems, each is solved recursively, and the partial results are
combined.  Problems that expose a ``memo_key`` can share results between
equal subproblems.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Hashable, List, Optional, TypeVar

logger = logging.getLogger(__name__)

S = TypeVar("S")
E = TypeVar("E")


class DacProblem(ABC, Generic[S, E]):
    """Divide & conquer problem."""

    @abstractmethod
    def size(self) -> int:
        ...

    @abstractmethod
    def is_base_case(self) -> bool:
        ...

    @abstractmethod
    def base_case_solution(self) -> E:
        ...

    @abstractmethod
    def subproblem_count(self) -> int:
        ...

    @abstractmethod
    def get_subproblem(self, i: int) -> "DacProblem[S, E]":
        ...

    @abstractmethod
    def combine(self, solutions: List[E]) -> E:
        ...

    @abstractmethod
    def get_solution(self, partial_solution: E) -> Optional[S]:
        ...

    def memo_key(self) -> Optional[Hashable]:
        """Key identifying equal subproblems; ``None`` disables memoization."""
        return None


class DacAlgorithm(Generic[S, E]):
    """Solve a :class:`DacProblem` on construction."""

    def __init__(self, problem: DacProblem[S, E], memoize: bool = False) -> None:
        self.problem = problem
        self.memoize = memoize
        self.memo_hits = 0
        self._memo: Dict[Hashable, E] = {}
        self.partial_solution: E = self._solve(problem)
        if memoize:
            logger.debug("memo: %d entries, %d hits", len(self._memo), self.memo_hits)

    def _solve(self, problem: DacProblem[S, E]) -> E:
        key: Any = problem.memo_key() if self.memoize else None
        if key is not None and key in self._memo:
            self.memo_hits += 1
            return self._memo[key]

        if problem.is_base_case():
            result = problem.base_case_solution()
        else:
            solutions = [
                self._solve(problem.get_subproblem(i))
                for i in range(problem.subproblem_count())
            ]
            result = problem.combine(solutions)

        if key is not None:
            self._memo[key] = result
        return result

    def get_solution(self) -> Optional[S]:
        return self.problem.get_solution(self.partial_solution)
