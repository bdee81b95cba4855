"""In-place sorting algorithms used by the benchmark.

Every sort takes a mutable sequence of mutually comparable numbers,
reorders it in ascending order and returns ``None``, like ``list.sort``.
"""

from __future__ import annotations

import random
from collections.abc import MutableSequence
from enum import Enum, auto
from typing import Any

_rng = random.Random()


class PivotType(Enum):
    """How quick sort picks the pivot of each partition."""

    LEFT = auto()
    MIDDLE = auto()
    RIGHT = auto()
    RANDOM = auto()


def max_heapify(values: MutableSequence[Any], i: int, n: int) -> None:
    """Restore the max-heap property below index ``i`` within the first ``n`` items."""
    while True:
        largest = i
        left = 2 * i + 1
        right = left + 1
        if left < n and values[left] > values[i]:
            largest = left
        if right < n and values[right] > values[largest]:
            largest = right
        if largest == i:
            return
        values[i], values[largest] = values[largest], values[i]
        i = largest


def build_max_heap(values: MutableSequence[Any]) -> None:
    """Rearrange ``values`` into a max-heap."""
    n = len(values)
    for i in range((n + 1) // 2 - 1, -1, -1):
        max_heapify(values, i, n)


def heap_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place with heap sort."""
    n = len(values)
    for i in range(n // 2 - 1, -1, -1):
        max_heapify(values, i, n)
    for end in range(n - 1, 0, -1):
        values[0], values[end] = values[end], values[0]
        max_heapify(values, 0, end)


def _gapped_insertion(values: MutableSequence[Any], gap: int) -> None:
    for i in range(gap, len(values)):
        item = values[i]
        j = i
        while j >= gap and item < values[j - gap]:
            values[j] = values[j - gap]
            j -= gap
        values[j] = item


def insert_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place with insertion sort."""
    _gapped_insertion(values, 1)


def _pivot_index(left: int, right: int, pivot: PivotType) -> int:
    match pivot:
        case PivotType.LEFT:
            return left
        case PivotType.MIDDLE:
            return (left + right) // 2
        case PivotType.RIGHT:
            return right
        case PivotType.RANDOM:
            return _rng.randint(left, right)
    raise ValueError(f"unknown pivot type: {pivot!r}")


def _partition(values: MutableSequence[Any], left: int, right: int, pivot: PivotType) -> int:
    p = _pivot_index(left, right, pivot)
    pivot_value = values[p]
    values[p], values[right] = values[right], values[p]
    store = left
    for i in range(left, right):
        if values[i] < pivot_value:
            values[i], values[store] = values[store], values[i]
            store += 1
    values[store], values[right] = values[right], values[store]
    return store


def quick_sort(values: MutableSequence[Any], pivot: PivotType) -> None:
    """Sort ``values`` in place with quick sort using the given pivot rule."""
    pending = [(0, len(values) - 1)]
    while pending:
        left, right = pending.pop()
        if left < right:
            p = _partition(values, left, right, pivot)
            pending.append((left, p - 1))
            pending.append((p + 1, right))


def quick_sort_left(values: MutableSequence[Any]) -> None:
    """Quick sort taking the leftmost element as pivot."""
    quick_sort(values, PivotType.LEFT)


def quick_sort_middle(values: MutableSequence[Any]) -> None:
    """Quick sort taking the middle element as pivot."""
    quick_sort(values, PivotType.MIDDLE)


def quick_sort_right(values: MutableSequence[Any]) -> None:
    """Quick sort taking the rightmost element as pivot."""
    quick_sort(values, PivotType.RIGHT)


def quick_sort_random(values: MutableSequence[Any]) -> None:
    """Quick sort taking a randomly chosen element as pivot."""
    quick_sort(values, PivotType.RANDOM)


def shell_sort_shell(values: MutableSequence[Any]) -> None:
    """Shell sort with Shell's original gaps n/2, n/4, ..., 1."""
    gap = len(values)
    while gap > 1:
        gap >>= 1
        _gapped_insertion(values, gap)


def shell_sort_knuth(values: MutableSequence[Any]) -> None:
    """Shell sort with Knuth's gaps 1, 4, 13, 40, ..."""
    n = len(values)
    gap = 1
    while gap < n // 3:
        gap = gap * 3 + 1
    while gap >= 1:
        _gapped_insertion(values, gap)
        gap //= 3