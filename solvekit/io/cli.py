"""Command-line interface."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict

from ..core.bt import Backtracking
from ..core.dac import DacAlgorithm
from ..core.model import ProblemType
from ..problems import ProblemFormatError, UnknownProblemError, build_problem
from . import parser

logger = logging.getLogger(__name__)


def run(spec: parser.ProblemSpec) -> Dict[str, Any]:
    """Solve a loaded problem and return a JSON-ready report."""
    problem = build_problem(spec.problem, spec.params)
    if problem.strategy == "dac":
        algo = DacAlgorithm(problem, memoize=spec.options.memoize)
        return {"problem": spec.problem, "solution": algo.get_solution()}

    engine = Backtracking(problem).solution_count(spec.options.solution_count)
    engine.solve()
    solutions = engine.extracted_solutions()
    logger.info("%s: %d solution(s)", spec.problem, len(solutions))
    if engine.problem_type is ProblemType.ALL or engine.best() is None:
        best_value = None
    else:
        best_value = engine.best_value
    return {
        "problem": spec.problem,
        "type": engine.problem_type.value,
        "best_value": best_value,
        "solutions": solutions,
    }


def _found(report: Dict[str, Any]) -> bool:
    if "solutions" in report:
        return bool(report["solutions"])
    return report["solution"] is not None


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="solvekit", description="Solve a problem described in YAML")
    ap.add_argument("problem", type=Path, help="Path to problem YAML")
    ap.add_argument("--solution-count", type=int, default=None, help="Stop after this many solutions")
    ap.add_argument("--memoize", action="store_true", help="Memoize divide & conquer subproblems")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log search progress")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    try:
        spec = parser.load_problem(args.problem)
        if args.solution_count is not None:
            if args.solution_count < 1:
                raise ProblemFormatError("--solution-count must be at least 1")
            spec.options.solution_count = args.solution_count
        if args.memoize:
            spec.options.memoize = True
        report = run(spec)
    except (OSError, ProblemFormatError, UnknownProblemError) as exc:
        ap.error(str(exc))

    print(json.dumps(report, indent=2, allow_nan=False))
    return 0 if _found(report) else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
