"""Problem registry and shared errors."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Type


class ProblemFormatError(ValueError):
    """A problem description is missing data or holds invalid values."""


class UnknownProblemError(KeyError):
    """No problem is registered under the requested name."""


PROBLEM_REGISTRY: Dict[str, Type[Any]] = {}


def register_problem(cls: Type[Any]) -> Type[Any]:
    PROBLEM_REGISTRY[cls.name] = cls
    return cls


def build_problem(name: str, params: Mapping[str, Any] | None = None) -> Any:
    """Instantiate the registered problem ``name`` from its parameters."""
    try:
        cls = PROBLEM_REGISTRY[name]
    except KeyError as exc:
        known = ", ".join(sorted(PROBLEM_REGISTRY))
        raise UnknownProblemError(f"unknown problem {name!r} (known: {known})") from exc
    try:
        return cls.from_params(dict(params or {}))
    except ProblemFormatError:
        raise
    except (TypeError, ValueError) as exc:
        raise ProblemFormatError(f"invalid parameters for {name!r}: {exc}") from exc


def require(params: Mapping[str, Any], key: str) -> Any:
    if key not in params:
        raise ProblemFormatError(f"missing parameter {key!r}")
    return params[key]


# Register the bundled problems.
from . import coin_change, fibonacci, knapsack, merge_sort, queens, subsets  # noqa: E402,F401
