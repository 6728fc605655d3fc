"""Backtracking search engine.

The engine owns a single live state and walks the decision tree depth
first, mutating that state forward before each recursive call and backward
after it.  Terminal states are scored against a running best and the
accepted ones are cloned into a deduplicated, size-capped set.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, List, Optional, Set, TypeVar

from .model import ProblemType, worst_value
from .state import State

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=State)

DEFAULT_SOLUTION_COUNT = 100


@dataclass
class SearchStats:
    """Counters collected while exploring."""
    nodes: int = 0
    terminals: int = 0
    accepted: int = 0
    pruned: int = 0
    forward_steps: int = 0


class Backtracking(Generic[P]):
    """Solve ``state`` by backtracking.

    >>> engine = Backtracking(state).solution_count(1)
    >>> engine.solve()
    >>> engine.all_solutions()
    """

    def __init__(self, state: P) -> None:
        self._state = state
        self._problem_type = state.problem_type()
        self._solution_count = DEFAULT_SOLUTION_COUNT
        self._solutions: Set[P] = set()
        self._best_value = worst_value(self._problem_type)
        self._best_state: Optional[P] = None
        self._success = False
        self.stats = SearchStats()

    def solution_count(self, count: int) -> "Backtracking[P]":
        """Change the number of solutions to collect before stopping.

        With ``count == 1`` the search stops after the first accepted
        solution.  Default is 100.
        """
        self._solution_count = count
        return self

    @property
    def problem_type(self) -> ProblemType:
        return self._problem_type

    @property
    def best_value(self) -> float:
        return self._best_value

    @property
    def success(self) -> bool:
        """True once the solution cap has been reached."""
        return self._success

    @property
    def state(self) -> P:
        return self._state

    def all_solutions(self) -> Set[P]:
        """All the solutions accepted so far."""
        return set(self._solutions)

    def best(self) -> Optional[P]:
        """The accepted state holding the best value, if any."""
        if self._problem_type is ProblemType.ALL:
            return min(self._solutions) if self._solutions else None
        return self._best_state

    def extracted_solutions(self) -> List[Any]:
        """External results of the accepted states, in state order."""
        result = []
        for state in sorted(self._solutions):
            sol = state.clone().solution()
            if sol is not None:
                result.append(sol)
        return result

    def solve(self) -> None:
        """Explore the tree below the live state.

        Calling it again keeps accumulating into the same solution set.
        """
        self._explore()
        logger.debug(
            "search finished: %d nodes, %d terminals, %d accepted, %d pruned, best=%s",
            self.stats.nodes,
            self.stats.terminals,
            self.stats.accepted,
            self.stats.pruned,
            self._best_value,
        )

    def _explore(self) -> None:
        self.stats.nodes += 1
        state = self._state
        if state.is_final():
            self._update_solutions()
            self._success = len(self._solutions) >= self._solution_count
            if self._success:
                logger.debug("solution cap of %d reached", self._solution_count)
            return

        candidates = []
        for alt in state.alternatives():
            if self._is_to_prune(alt):
                self.stats.pruned += 1
            else:
                candidates.append(alt)

        for alt in candidates:
            state.forward(alt)
            self.stats.forward_steps += 1
            self._explore()
            state.backward(alt)
            if self._success:
                break

    def _update_solutions(self) -> None:
        """Keep the current state if it beats the running best, or always for ALL."""
        value = self._state.value()
        self.stats.terminals += 1
        pt = self._problem_type
        if (
            pt is ProblemType.ALL
            or (pt is ProblemType.MIN and value < self._best_value)
            or (pt is ProblemType.MAX and value > self._best_value)
        ):
            snapshot = self._state.clone()
            self._solutions.add(snapshot)
            self._best_value = value
            self._best_state = snapshot
            self.stats.accepted += 1
            logger.debug("accepted solution with value %s", value)

    def _is_to_prune(self, alt: Any) -> bool:
        """Decide if ``alt`` cannot improve on the best value found so far."""
        if self._problem_type is ProblemType.MAX:
            return self._state.estimated_value(alt) <= self._best_value
        if self._problem_type is ProblemType.MIN:
            return self._state.estimated_value(alt) >= self._best_value
        return False
