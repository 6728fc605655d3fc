from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

from ..core.bt import DEFAULT_SOLUTION_COUNT
from ..problems import ProblemFormatError


@dataclass
class SolverOptions:
    solution_count: int = DEFAULT_SOLUTION_COUNT
    memoize: bool = False


@dataclass
class ProblemSpec:
    problem: str
    params: Dict[str, Any] = field(default_factory=dict)
    options: SolverOptions = field(default_factory=SolverOptions)


def parse_options(data: Dict[str, Any] | None) -> SolverOptions:
    data = data or {}
    if not isinstance(data, dict):
        raise ProblemFormatError("'options' must be a mapping")
    try:
        solution_count = int(data.get("solution_count", DEFAULT_SOLUTION_COUNT))
    except (TypeError, ValueError) as exc:
        raise ProblemFormatError("'solution_count' must be an integer") from exc
    if solution_count < 1:
        raise ProblemFormatError("'solution_count' must be at least 1")
    return SolverOptions(solution_count=solution_count, memoize=bool(data.get("memoize", False)))


def parse_problem(data: Any) -> ProblemSpec:
    """Turn a decoded YAML document into a ProblemSpec."""
    if not isinstance(data, dict):
        raise ProblemFormatError("problem file must contain a mapping")
    if "problem" not in data:
        raise ProblemFormatError("missing 'problem' key")
    params = data.get("params") or {}
    if not isinstance(params, dict):
        raise ProblemFormatError("'params' must be a mapping")
    return ProblemSpec(
        problem=str(data["problem"]),
        params=params,
        options=parse_options(data.get("options")),
    )


def load_problem(path: str | Path) -> ProblemSpec:
    """Load a YAML problem description into a ProblemSpec object."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ProblemFormatError(f"invalid YAML in {path}: {exc}") from exc
    return parse_problem(data)
