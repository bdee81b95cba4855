import random

import pytest

from sortbench.sorts import (
    PivotType,
    build_max_heap,
    heap_sort,
    insert_sort,
    max_heapify,
    quick_sort,
    quick_sort_left,
    quick_sort_middle,
    quick_sort_random,
    quick_sort_right,
    shell_sort_knuth,
    shell_sort_shell,
)

ALL_SORTS = [
    "heap_sort",
    "insert_sort",
    "quick_sort_left",
    "quick_sort_middle",
    "quick_sort_right",
    "quick_sort_random",
    "shell_sort_shell",
    "shell_sort_knuth",
]


def _run_sort(name, values):
    if name == "heap_sort":
        return heap_sort(values)
    if name == "insert_sort":
        return insert_sort(values)
    if name == "quick_sort_left":
        return quick_sort_left(values)
    if name == "quick_sort_middle":
        return quick_sort_middle(values)
    if name == "quick_sort_right":
        return quick_sort_right(values)
    if name == "quick_sort_random":
        return quick_sort_random(values)
    if name == "shell_sort_shell":
        return shell_sort_shell(values)
    if name == "shell_sort_knuth":
        return shell_sort_knuth(values)
    raise KeyError(name)


def _random_ints(n, seed):
    rng = random.Random(seed)
    return [rng.randint(-1000, 1000) for _ in range(n)]


def _is_max_heap(values):
    n = len(values)
    return all(
        values[i] >= values[c]
        for i in range(n)
        for c in (2 * i + 1, 2 * i + 2)
        if c < n
    )


@pytest.mark.parametrize("sort", ALL_SORTS)
@pytest.mark.parametrize(
    "data",
    [
        [],
        [5],
        [2, 1],
        [1, 2, 3, 4, 5],
        [5, 4, 3, 2, 1],
        [3, 3, 3, 3],
        [0, -1, 7, -1, 7, 0, 2],
    ],
)
def test_small_inputs(sort, data):
    values = list(data)
    result = _run_sort(sort, values)
    assert result is None
    assert values == sorted(data)


@pytest.mark.parametrize("sort", ALL_SORTS)
@pytest.mark.parametrize("n", [17, 100, 513])
def test_random_ints(sort, n):
    data = _random_ints(n, seed=n)
    values = list(data)
    _run_sort(sort, values)
    assert values == sorted(data)


@pytest.mark.parametrize("sort", ALL_SORTS)
def test_random_floats(sort):
    rng = random.Random(7)
    data = [rng.uniform(-10000.0, 10000.0) for _ in range(300)]
    values = list(data)
    _run_sort(sort, values)
    assert values == sorted(data)


@pytest.mark.parametrize("sort", ALL_SORTS)
def test_sort_keeps_multiset(sort):
    data = [4, 1, 4, 2, 2, 9, 0, 1]
    values = list(data)
    _run_sort(sort, values)
    assert sorted(values) == sorted(data)
    assert len(values) == len(data)


@pytest.mark.parametrize("pivot", list(PivotType))
def test_quick_sort_every_pivot(pivot):
    data = _random_ints(250, seed=3)
    values = list(data)
    quick_sort(values, pivot)
    assert values == sorted(data)


def test_quick_sort_left_worst_case_is_not_limited_by_recursion():
    data = list(range(2000))
    values = list(data)
    quick_sort_left(values)
    assert values == data


def test_quick_sort_right_worst_case_is_not_limited_by_recursion():
    data = list(range(2000))
    values = list(data)
    quick_sort_right(values)
    assert values == data


def test_build_max_heap_produces_heap():
    values = _random_ints(101, seed=11)
    original = sorted(values)
    build_max_heap(values)
    assert _is_max_heap(values)
    assert values[0] == max(original)
    assert sorted(values) == original


def test_max_heapify_sifts_root_down():
    values = [1, 9, 8, 7, 6, 5, 4]
    max_heapify(values, 0, len(values))
    assert values[0] == 9
    assert _is_max_heap(values)


def test_max_heapify_respects_bound():
    values = [1, 9, 8, 100]
    max_heapify(values, 0, 3)
    assert values[3] == 100
    assert values[0] == 9


def test_shell_sort_shell_on_odd_length():
    data = [9, 8, 7, 6, 5, 4, 3, 2, 1]
    values = list(data)
    shell_sort_shell(values)
    assert values == sorted(data)