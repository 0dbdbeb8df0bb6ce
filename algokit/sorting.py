"""Comparison sorts that report how many basic operations they performed."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class SortResult:
    """Sorted values together with the number of basic operations counted."""

    values: list[int]
    operations: int


def merge_sort(values: Iterable[int]) -> SortResult:
    """Sort with top-down merge sort, counting element comparisons in merges."""
    operations = 0

    def sort(seq: list[int]) -> list[int]:
        nonlocal operations
        if len(seq) < 2:
            return list(seq)
        mid = (len(seq) + 1) // 2
        left, right = sort(seq[:mid]), sort(seq[mid:])
        merged: list[int] = []
        i = j = 0
        while i < len(left) and j < len(right):
            operations += 1
            if left[i] < right[j]:
                merged.append(left[i])
                i += 1
            else:
                merged.append(right[j])
                j += 1
        merged.extend(left[i:])
        merged.extend(right[j:])
        return merged

    result = sort(list(values))
    return SortResult(result, operations)


def _partition(items: list[int], low: int, high: int) -> tuple[int, int]:
    """Hoare-style partition around items[low]; return the pivot slot and step count."""
    pivot = items[low]
    i, j = low + 1, high
    steps = 0
    while True:
        while i <= high and items[i] <= pivot:
            i += 1
            steps += 1
        while j > low and items[j] > pivot:
            j -= 1
            steps += 1
        steps += 2
        if i < j:
            items[i], items[j] = items[j], items[i]
        else:
            items[low], items[j] = items[j], items[low]
            return j, steps


def quick_sort(values: Iterable[int]) -> SortResult:
    """Sort with quicksort using the first element as pivot, counting scan steps."""
    items = list(values)
    operations = 0
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot_index, steps = _partition(items, low, high)
        operations += steps
        pending.append((low, pivot_index - 1))
        pending.append((pivot_index + 1, high))
    return SortResult(items, operations)


def selection_sort(values: Iterable[int]) -> SortResult:
    """Sort with selection sort, counting element comparisons."""
    items = list(values)
    operations = 0
    size = len(items)
    for start in range(size - 1):
        smallest = min(range(start, size), key=items.__getitem__)
        operations += size - 1 - start
        items[start], items[smallest] = items[smallest], items[start]
    return SortResult(items, operations)