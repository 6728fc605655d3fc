"""State contract for backtracking problems."""

from __future__ import annotations

import copy
import functools
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from .model import ProblemType, permissive_estimate

A = TypeVar("A")
S = TypeVar("S")


class State(ABC, Generic[A, S]):
    """A mutable partial solution explored by :class:`~solvekit.core.bt.Backtracking`.

    Subclasses must also provide ``__eq__``, ``__hash__`` and ``__lt__``:
    accepted states are cloned into a set and sorted for output.

    ``forward`` and ``backward`` mutate the state in place and must be exact
    inverses of each other.  ``size`` must strictly decrease on every
    ``forward``; the engine does not detect a state that never becomes
    final.
    """

    @abstractmethod
    def problem_type(self) -> ProblemType:
        ...

    @abstractmethod
    def size(self) -> int:
        """Size of the remaining problem, usually referred to as ``n``."""

    def is_final(self) -> bool:
        """Final state - when going forward is impossible."""
        return self.size() == 0

    @abstractmethod
    def alternatives(self) -> List[A]:
        """Ways the problem can go forward, in exploration order."""

    @abstractmethod
    def forward(self, alt: A) -> None:
        ...

    @abstractmethod
    def backward(self, alt: A) -> None:
        ...

    @abstractmethod
    def value(self) -> float:
        """Value of a final state."""

    def estimated_value(self, alt: A) -> float:
        """Best value reachable by choosing ``alt``.

        Must be an upper bound for MAX problems and a lower bound for MIN
        problems, otherwise the engine prunes branches holding better
        solutions.  The default never prunes.
        """
        return permissive_estimate(self.problem_type())

    @abstractmethod
    def solution(self) -> Optional[S]:
        """External result of a final state, or ``None`` if there is none."""

    def clone(self) -> "State[A, S]":
        return copy.deepcopy(self)


@functools.total_ordering
class KeyedState(State[A, S]):
    """State whose equality, hash and order all derive from ``_key()``."""

    @abstractmethod
    def _key(self) -> tuple:
        ...

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()  # type: ignore[attr-defined]

    def __lt__(self, other: "KeyedState") -> bool:
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())
