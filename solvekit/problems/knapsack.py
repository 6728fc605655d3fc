"""0/1 knapsack: pick items maximizing value without exceeding capacity."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..core.model import ProblemType
from ..core.state import KeyedState
from . import ProblemFormatError, register_problem, require


@register_problem
class Knapsack(KeyedState[bool, Tuple[int, ...]]):
    """Each step decides whether the next item goes into the bag."""
    name = "knapsack"
    strategy = "bt"

    def __init__(self, weights: Sequence[int], values: Sequence[float], capacity: int) -> None:
        if len(weights) != len(values):
            raise ProblemFormatError("weights and values must have the same length")
        self.weights = tuple(weights)
        self.values = tuple(values)
        self.capacity = capacity
        self.index = 0
        self.chosen: List[bool] = []
        self.load = 0
        # running totals, one per decision, popped on undo
        self._totals: List[float] = [0.0]
        # suffix[i] is the value of every item from i on
        self._suffix = [0.0] * (len(self.values) + 1)
        for i in range(len(self.values) - 1, -1, -1):
            self._suffix[i] = self._suffix[i + 1] + self.values[i]

    @property
    def total(self) -> float:
        return self._totals[-1]

    @classmethod
    def from_params(cls, params: Dict[str, Any]) -> "Knapsack":
        items = require(params, "items")
        capacity = int(require(params, "capacity"))
        if capacity < 0:
            raise ProblemFormatError("capacity must be non-negative")
        try:
            weights = [int(item["weight"]) for item in items]
            values = [float(item["value"]) for item in items]
        except KeyError as exc:
            raise ProblemFormatError("each item needs a weight and a value") from exc
        return cls(weights, values, capacity)

    def problem_type(self) -> ProblemType:
        return ProblemType.MAX

    def size(self) -> int:
        return len(self.weights) - self.index

    def alternatives(self) -> List[bool]:
        if self.load + self.weights[self.index] <= self.capacity:
            return [True, False]
        return [False]

    def forward(self, take: bool) -> None:
        if take:
            self.load += self.weights[self.index]
            self._totals.append(self.total + self.values[self.index])
        else:
            self._totals.append(self.total)
        self.chosen.append(take)
        self.index += 1

    def backward(self, take: bool) -> None:
        self.index -= 1
        self.chosen.pop()
        self._totals.pop()
        if take:
            self.load -= self.weights[self.index]

    def value(self) -> float:
        return self.total

    def estimated_value(self, take: bool) -> float:
        # everything still ahead fits, in the best case
        bound = self.total + self._suffix[self.index + 1]
        if take:
            bound += self.values[self.index]
        return bound

    def solution(self) -> Optional[Tuple[int, ...]]:
        return tuple(i for i, taken in enumerate(self.chosen) if taken)

    def _key(self) -> tuple:
        return (self.weights, self.values, self.capacity, self.index, tuple(self.chosen))

    def __repr__(self) -> str:
        return f"Knapsack(chosen={self.solution()}, load={self.load}, total={self.total})"
