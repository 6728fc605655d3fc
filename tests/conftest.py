from __future__ import annotations

from typing import List, Optional, Sequence

import pytest

from solvekit.core.model import ProblemType
from solvekit.core.state import KeyedState


class Scripted(KeyedState[int, int]):
    """One decision among fixed terminal values, visited left to right."""

    def __init__(self, values: Sequence[float], kind: ProblemType = ProblemType.MAX) -> None:
        self.values = tuple(values)
        self.kind = kind
        self.pick: Optional[int] = None

    def problem_type(self) -> ProblemType:
        return self.kind

    def size(self) -> int:
        return 1 if self.pick is None else 0

    def alternatives(self) -> List[int]:
        return list(range(len(self.values)))

    def forward(self, alt: int) -> None:
        self.pick = alt

    def backward(self, alt: int) -> None:
        self.pick = None

    def value(self) -> float:
        return self.values[self.pick]

    def solution(self) -> Optional[int]:
        return self.pick

    def _key(self) -> tuple:
        return (self.values, -1 if self.pick is None else self.pick)


@pytest.fixture
def scripted():
    return Scripted
