"""Comparison sorts: bubble sort, quicksort and merge sort.

Each function takes any iterable of mutually comparable values and returns
a new sorted list, leaving the input untouched.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = ["bubble_sort", "quick_sort", "merge_sort"]


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def _partition(items: list[Any], low: int, high: int) -> int:
    """Lomuto partition around the last element; return the pivot's final index."""
    pivot = items[high]
    boundary = low
    for j in range(low, high):
        if items[j] <= pivot:
            items[boundary], items[j] = items[j], items[boundary]
            boundary += 1
    items[boundary], items[high] = items[high], items[boundary]
    return boundary


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Sort with quicksort, using the last element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot_index = _partition(items, low, high)
        pending.append((pivot_index + 1, high))
        pending.append((low, pivot_index - 1))
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by splitting in halves (the left half takes the extra item) and merging."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))