from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from ..core.dac import DacProblem
from . import ProblemFormatError, register_problem, require


@register_problem
class MergeSort(DacProblem[List[Any], List[Any]]):
    name = "merge_sort"
    strategy = "dac"

    def __init__(self, items: Sequence[Any]) -> None:
        self.items = list(items)

    @classmethod
    def from_params(cls, params: Dict[str, Any]) -> "MergeSort":
        items = list(require(params, "items"))
        try:
            sorted(items)
        except TypeError as exc:
            raise ProblemFormatError("items must be mutually comparable") from exc
        return cls(items)

    def size(self) -> int:
        return len(self.items)

    def is_base_case(self) -> bool:
        return len(self.items) <= 1

    def base_case_solution(self) -> List[Any]:
        return list(self.items)

    def subproblem_count(self) -> int:
        return 2

    def get_subproblem(self, i: int) -> "MergeSort":
        mid = len(self.items) // 2
        return MergeSort(self.items[:mid] if i == 0 else self.items[mid:])

    def combine(self, solutions: List[List[Any]]) -> List[Any]:
        left, right = solutions
        merged = []
        i = j = 0
        while i < len(left) and j < len(right):
            if right[j] < left[i]:
                merged.append(right[j])
                j += 1
            else:
                merged.append(left[i])
                i += 1
        merged.extend(left[i:])
        merged.extend(right[j:])
        return merged

    def get_solution(self, partial_solution: List[Any]) -> Optional[List[Any]]:
        return partial_solution
