from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..core.model import ProblemType
from ..core.state import KeyedState
from . import ProblemFormatError, register_problem, require


@register_problem
class Subsets(KeyedState[bool, Tuple[Any, ...]]):
    """Enumerate every subset of a collection, one include/exclude per element."""
    name = "subsets"
    strategy = "bt"

    def __init__(self, elements: Sequence[Any]) -> None:
        self.elements = tuple(elements)
        self.chosen: List[bool] = []

    @classmethod
    def from_params(cls, params: Dict[str, Any]) -> "Subsets":
        elements = list(require(params, "elements"))
        try:
            hash(tuple(elements))
        except TypeError as exc:
            raise ProblemFormatError("subset elements must be hashable") from exc
        return cls(elements)

    def problem_type(self) -> ProblemType:
        return ProblemType.ALL

    def size(self) -> int:
        return len(self.elements) - len(self.chosen)

    def alternatives(self) -> List[bool]:
        return [True, False]

    def forward(self, include: bool) -> None:
        self.chosen.append(include)

    def backward(self, include: bool) -> None:
        self.chosen.pop()

    def value(self) -> float:
        return float(sum(self.chosen))

    def solution(self) -> Optional[Tuple[Any, ...]]:
        return tuple(e for e, inc in zip(self.elements, self.chosen) if inc)

    def _key(self) -> tuple:
        return (self.elements, tuple(self.chosen))
