"""Permutation-based algorithms: exhaustive assignment and Johnson-Trotter."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

__all__ = ["Assignment", "solve_assignment", "johnson_trotter"]


@dataclass(frozen=True)
class Assignment:
    """An assignment of jobs to people: ``jobs[person]`` is that person's job."""

    cost: int
    jobs: tuple[int, ...]
    costs: tuple[int, ...]


def _swap_permutations(items: list[int], start: int = 0) -> Iterator[tuple[int, ...]]:
    """Yield permutations in the order produced by recursive in-place swapping."""
    if start >= len(items) - 1:
        yield tuple(items)
        return
    for i in range(start, len(items)):
        items[start], items[i] = items[i], items[start]
        yield from _swap_permutations(items, start + 1)
        items[start], items[i] = items[i], items[start]


def solve_assignment(cost_matrix: Sequence[Sequence[int]]) -> Assignment:
    """Find the cheapest one-to-one assignment by trying every permutation.

    Among equally cheap assignments the first one generated is kept.
    """
    size = len(cost_matrix)
    if any(len(row) != size for row in cost_matrix):
        raise ValueError("cost matrix must be square")
    best: Assignment | None = None
    for perm in _swap_permutations(list(range(size))):
        costs = tuple(row[job] for row, job in zip(cost_matrix, perm))
        total = sum(costs)
        if best is None or total < best.cost:
            best = Assignment(cost=total, jobs=perm, costs=costs)
    assert best is not None
    return best


def _mobile_index(values: list[int], directions: list[int]) -> int | None:
    """Index of the largest element pointing at a smaller neighbour, if any."""
    found: int | None = None
    for i, (value, direction) in enumerate(zip(values, directions)):
        neighbour = i + direction
        if 0 <= neighbour < len(values) and value > values[neighbour]:
            if found is None or value > values[found]:
                found = i
    return found


def johnson_trotter(n: int) -> Iterator[tuple[int, ...]]:
    """Yield the permutations of ``1..n``, each differing by one adjacent swap."""
    if n < 0:
        raise ValueError("n must not be negative")
    values = list(range(1, n + 1))
    directions = [-1] * n
    yield tuple(values)
    for _ in range(1, math.factorial(n)):
        m = _mobile_index(values, directions)
        if m is None:
            return
        other = m + directions[m]
        values[m], values[other] = values[other], values[m]
        directions[m], directions[other] = directions[other], directions[m]
        moved = values[other]
        directions = [-d if v > moved else d for v, d in zip(values, directions)]
        yield tuple(values)