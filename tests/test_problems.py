import pytest

from solvekit.problems import (
    PROBLEM_REGISTRY,
    ProblemFormatError,
    UnknownProblemError,
    build_problem,
)
from solvekit.problems.knapsack import Knapsack


def test_registry_contents():
    assert {"knapsack", "subsets", "coin_change", "queens", "merge_sort", "fibonacci"} <= set(PROBLEM_REGISTRY)
    assert PROBLEM_REGISTRY["queens"].strategy == "bt"
    assert PROBLEM_REGISTRY["fibonacci"].strategy == "dac"


def test_build_knapsack():
    state = build_problem("knapsack", {"capacity": 5, "items": [{"weight": 2, "value": 3}]})
    assert isinstance(state, Knapsack)
    assert state.size() == 1


def test_unknown_problem():
    with pytest.raises(UnknownProblemError):
        build_problem("sudoku", {})


def test_missing_parameter():
    with pytest.raises(ProblemFormatError):
        build_problem("queens", {})


def test_bad_knapsack_item():
    with pytest.raises(ProblemFormatError):
        build_problem("knapsack", {"capacity": 5, "items": [{"weight": 2}]})


def test_bad_coin():
    with pytest.raises(ProblemFormatError):
        build_problem("coin_change", {"denominations": [0, 1], "amount": 3})


def test_states_compare_structurally():
    a = build_problem("subsets", {"elements": [1, 2]})
    b = build_problem("subsets", {"elements": [1, 2]})
    assert a == b
    assert hash(a) == hash(b)
    a.forward(True)
    b.forward(False)
    assert a != b
    assert b < a


def test_unhashable_subset_elements():
    with pytest.raises(ProblemFormatError):
        build_problem("subsets", {"elements": [{"a": 1}]})


def test_mixed_merge_sort_items():
    with pytest.raises(ProblemFormatError):
        build_problem("merge_sort", {"items": [1, "a"]})


def test_states_total_order():
    a = build_problem("queens", {"n": 4})
    b = build_problem("queens", {"n": 4})
    a.forward(2)
    b.forward(1)
    assert a > b
    assert a >= b
    assert b <= a
