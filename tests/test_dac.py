from solvekit import DacAlgorithm
from solvekit.problems.fibonacci import Fibonacci
from solvekit.problems.merge_sort import MergeSort


def test_merge_sort():
    algo = DacAlgorithm(MergeSort([5, 2, 9, 1, 5, 6]))
    assert algo.get_solution() == [1, 2, 5, 5, 6, 9]


def test_merge_sort_base_cases():
    assert DacAlgorithm(MergeSort([])).get_solution() == []
    assert DacAlgorithm(MergeSort([3])).get_solution() == [3]


def test_fibonacci_plain():
    assert DacAlgorithm(Fibonacci(10)).get_solution() == 55
    assert DacAlgorithm(Fibonacci(0)).get_solution() == 0


def test_fibonacci_memoized_matches_and_reuses():
    plain = DacAlgorithm(Fibonacci(20))
    memo = DacAlgorithm(Fibonacci(20), memoize=True)
    assert memo.get_solution() == plain.get_solution() == 6765
    assert plain.memo_hits == 0
    assert memo.memo_hits > 0


def test_memoize_ignored_without_key():
    algo = DacAlgorithm(MergeSort([2, 1, 2, 1]), memoize=True)
    assert algo.get_solution() == [1, 1, 2, 2]
    assert algo.memo_hits == 0
