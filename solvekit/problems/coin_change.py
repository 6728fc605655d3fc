"""Fewest coins adding up to an amount."""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..core.model import ProblemType
from ..core.state import KeyedState
from . import ProblemFormatError, register_problem, require


@register_problem
class CoinChange(KeyedState[int, Dict[int, int]]):
    """Each step fixes how many coins of the next denomination are used.

    Denominations are tried from the largest down, and counts from the
    highest down, so the greedy answer is found first.
    """
    name = "coin_change"
    strategy = "bt"

    def __init__(self, denominations: Sequence[int], amount: int) -> None:
        if any(d <= 0 for d in denominations):
            raise ProblemFormatError("denominations must be positive")
        if amount < 0:
            raise ProblemFormatError("amount must be non-negative")
        self.denominations: Tuple[int, ...] = tuple(sorted(set(denominations), reverse=True))
        self.amount = amount
        self.counts: List[int] = []
        self.remaining = amount
        self.used = 0

    @classmethod
    def from_params(cls, params: Dict[str, Any]) -> "CoinChange":
        denominations = [int(d) for d in require(params, "denominations")]
        return cls(denominations, int(require(params, "amount")))

    def problem_type(self) -> ProblemType:
        return ProblemType.MIN

    def size(self) -> int:
        return len(self.denominations) - len(self.counts)

    def alternatives(self) -> List[int]:
        coin = self.denominations[len(self.counts)]
        return list(range(self.remaining // coin, -1, -1))

    def forward(self, count: int) -> None:
        self.remaining -= count * self.denominations[len(self.counts)]
        self.used += count
        self.counts.append(count)

    def backward(self, count: int) -> None:
        self.counts.pop()
        self.used -= count
        self.remaining += count * self.denominations[len(self.counts)]

    def value(self) -> float:
        if self.remaining:
            return math.inf
        return float(self.used)

    def estimated_value(self, count: int) -> float:
        idx = len(self.counts)
        left = self.remaining - count * self.denominations[idx]
        if left == 0:
            return float(self.used + count)
        if idx + 1 >= len(self.denominations):
            return math.inf
        return float(self.used + count + math.ceil(left / self.denominations[idx + 1]))

    def solution(self) -> Optional[Dict[int, int]]:
        if self.remaining:
            return None
        return {d: c for d, c in zip(self.denominations, self.counts) if c}

    def _key(self) -> tuple:
        return (self.denominations, self.amount, tuple(self.counts))
