from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from ..core.model import ProblemType
from ..core.state import KeyedState
from . import ProblemFormatError, register_problem, require


@register_problem
class Queens(KeyedState[int, Tuple[int, ...]]):
    """Place ``n`` non-attacking queens, one row at a time."""
    name = "queens"
    strategy = "bt"

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ProblemFormatError("board size must be non-negative")
        self.n = n
        self.columns: List[int] = []

    @classmethod
    def from_params(cls, params: Dict[str, Any]) -> "Queens":
        return cls(int(require(params, "n")))

    def problem_type(self) -> ProblemType:
        return ProblemType.ALL

    def size(self) -> int:
        return self.n - len(self.columns)

    def alternatives(self) -> List[int]:
        row = len(self.columns)
        return [
            col for col in range(self.n)
            if all(c != col and abs(c - col) != row - r for r, c in enumerate(self.columns))
        ]

    def forward(self, col: int) -> None:
        self.columns.append(col)

    def backward(self, col: int) -> None:
        self.columns.pop()

    def value(self) -> float:
        return float(len(self.columns))

    def solution(self) -> Optional[Tuple[int, ...]]:
        return tuple(self.columns)

    def _key(self) -> tuple:
        return (self.n, tuple(self.columns))
