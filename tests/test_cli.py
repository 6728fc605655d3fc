import json
from pathlib import Path

import pytest

from solvekit.io.cli import main

PROBLEMS = Path(__file__).resolve().parent.parent / "problems"


def _reject_constant(name):
    raise ValueError(f"non-standard JSON constant {name}")


def _run(capsys, *argv):
    code = main([str(a) for a in argv])
    return code, json.loads(capsys.readouterr().out, parse_constant=_reject_constant)


def test_knapsack(capsys):
    code, report = _run(capsys, PROBLEMS / "knapsack.yaml")
    assert code == 0
    assert report["type"] == "max"
    assert report["best_value"] == 90
    assert [1, 3] in report["solutions"]


def test_subsets(capsys):
    code, report = _run(capsys, PROBLEMS / "subsets.yaml")
    assert code == 0
    assert report["best_value"] is None
    assert len(report["solutions"]) == 8


def test_solution_count_override(capsys):
    code, report = _run(capsys, PROBLEMS / "queens.yaml", "--solution-count", "1")
    assert code == 0
    assert len(report["solutions"]) == 1


def test_coin_change(capsys):
    code, report = _run(capsys, PROBLEMS / "coin_change.yaml")
    assert report["best_value"] == 2


def test_dac_problems(capsys):
    code, report = _run(capsys, PROBLEMS / "fibonacci.yaml")
    assert code == 0
    assert report["solution"] == 832040
    code, report = _run(capsys, PROBLEMS / "merge_sort.yaml")
    assert report["solution"] == [1, 2, 5, 5, 6, 9]


def test_no_solution_exit_code(tmp_path, capsys):
    path = tmp_path / "coins.yaml"
    path.write_text("problem: coin_change\nparams: {denominations: [5], amount: 3}\n", encoding="utf-8")
    code, report = _run(capsys, path)
    assert code == 1
    assert report["solutions"] == []
    assert report["best_value"] is None


def test_unknown_problem_exits(tmp_path):
    path = tmp_path / "p.yaml"
    path.write_text("problem: sudoku\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main([str(path)])
    assert exc.value.code == 2


def test_missing_file_exits(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "missing.yaml")])
    assert exc.value.code == 2


def test_unsortable_items_exit(tmp_path):
    path = tmp_path / "sort.yaml"
    path.write_text("problem: merge_sort\nparams: {items: [1, a]}\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main([str(path)])
    assert exc.value.code == 2
