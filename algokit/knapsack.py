"""0/1 knapsack (exhaustive and dynamic programming) and fractional knapsack."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import compress, product

__all__ = ["brute_force_knapsack", "knapsack_dp", "fractional_knapsack"]


def _pair(weights: Sequence, values: Sequence) -> list[tuple]:
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    return list(zip(weights, values))


def brute_force_knapsack(
    weights: Sequence[int], values: Sequence[int], capacity: int
) -> int:
    """Best total value over every subset of items that fits in ``capacity``."""
    items = _pair(weights, values)
    best = 0
    for mask in product((False, True), repeat=len(items)):
        chosen = list(compress(items, mask))
        if sum(w for w, _ in chosen) <= capacity:
            best = max(best, sum(v for _, v in chosen))
    return best


def knapsack_dp(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """Best total value for the 0/1 knapsack, by dynamic programming over capacities."""
    items = _pair(weights, values)
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(w < 0 for w, _ in items):
        raise ValueError("weights must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in items:
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], value + best[room - weight])
    return best[capacity]


def fractional_knapsack(
    weights: Sequence[float], values: Sequence[float], capacity: float
) -> float:
    """Best value when items may be split, taking the densest items first."""
    items = _pair(weights, values)
    if any(w <= 0 for w, _ in items):
        raise ValueError("weights must be positive")
    total = 0.0
    for weight, value in sorted(items, key=lambda item: item[1] / item[0], reverse=True):
        if capacity >= weight:
            total += value
            capacity -= weight
        else:
            total += value * (capacity / weight)
            break
    return total