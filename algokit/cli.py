"""Command-line front end: one subcommand per algorithm, input read from stdin.

Input is whitespace-separated, in the same order the algorithms ask for it:
counts first, then the items they announce.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence

from algokit.graphs import INF, floyd_warshall, format_distances, topological_sort
from algokit.knapsack import brute_force_knapsack, fractional_knapsack, knapsack_dp
from algokit.matching import find_pattern
from algokit.permutations import johnson_trotter, solve_assignment
from algokit.sorting import bubble_sort, merge_sort, quick_sort

__all__ = ["main"]

DEFAULT_COSTS: tuple[tuple[int, ...], ...] = (
    (9, 2, 7),
    (6, 4, 3),
    (5, 8, 1),
)


class InputError(ValueError):
    """Raised when standard input does not hold what a command expects."""


class _Input:
    """Sequential reader over whitespace-separated tokens."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise InputError("unexpected end of input") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise InputError(f"expected an integer, got {token!r}") from None

    def number(self) -> float:
        token = self.word()
        try:
            return float(token)
        except ValueError:
            raise InputError(f"expected a number, got {token!r}") from None

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]

    def pairs(self, count: int, read: Callable[[], float]) -> tuple[list, list]:
        firsts, seconds = [], []
        for _ in range(count):
            firsts.append(read())
            seconds.append(read())
        return firsts, seconds


def _joined(values: Iterable[object]) -> str:
    return "".join(f"{value} " for value in values)


def _bubble(source: _Input) -> int:
    values = source.integers(source.integer())
    print("The sorted arr:" + _joined(bubble_sort(values)))
    return 0


def _quick(source: _Input) -> int:
    count = source.integer()
    if count <= 0:
        print("Invalid number of elements.")
        return 1
    values = source.integers(count)
    print("Sorted array:")
    print(_joined(quick_sort(values)))
    return 0


def _merge(source: _Input) -> int:
    values = source.integers(source.integer())
    print("sorted array:")
    print(_joined(merge_sort(values)))
    return 0


def _brute(source: _Input) -> int:
    weights, values = source.pairs(source.integer(), source.integer)
    capacity = source.integer()
    print(f"Maximum value in knapsack = {brute_force_knapsack(weights, values, capacity)}")
    return 0


def _dp(source: _Input) -> int:
    weights, values = source.pairs(source.integer(), source.integer)
    capacity = source.integer()
    result = knapsack_dp(weights, values, capacity)
    print(f"Maximum value that can be placed in the knapsack: {result}")
    return 0


def _fractional(source: _Input) -> int:
    weights, values = source.pairs(source.integer(), source.number)
    capacity = source.number()
    result = fractional_knapsack(weights, values, capacity)
    print(f"Maximum value in knapsack = {result:.2f}")
    return 0


def _topo(source: _Input) -> int:
    vertex_count = source.integer()
    edge_count = source.integer()
    edges = [(source.integer(), source.integer()) for _ in range(edge_count)]
    order = topological_sort(vertex_count, edges)
    print("Topological Order:")
    print(_joined(order))
    return 0


def _floyd(source: _Input) -> int:
    size = source.integer()
    matrix = [
        [
            INF if i != j and value == 0 else value
            for j, value in enumerate(source.integers(size))
        ]
        for i in range(size)
    ]
    print("Shortest distances between every pair of vertices:")
    print(format_distances(floyd_warshall(matrix)), end="")
    return 0


def _assign(source: _Input) -> int:
    best = solve_assignment(DEFAULT_COSTS)
    print(f"Minimum cost: {best.cost}")
    print("Best assignment:")
    for person, (job, cost) in enumerate(zip(best.jobs, best.costs), start=1):
        print(f"Person {person} -> Job {job + 1} (Cost: {cost})")
    return 0


def _trotter(source: _Input) -> int:
    for permutation in johnson_trotter(source.integer()):
        print(_joined(permutation))
    return 0


def _match(source: _Input) -> int:
    text = source.word()
    pattern = source.word()
    positions = find_pattern(text, pattern)
    for index in positions:
        print(f"Pattern found at index {index}")
    if not positions:
        print("Pattern not found.")
    return 0


_COMMANDS: dict[str, tuple[str, Callable[[_Input], int]]] = {
    "bubble": ("sort integers with bubble sort: n, then n values", _bubble),
    "quick": ("sort integers with quicksort: n, then n values", _quick),
    "merge": ("sort integers with merge sort: n, then n values", _merge),
    "knapsack-brute": (
        "0/1 knapsack by trying every subset: n, n weight/value pairs, capacity",
        _brute,
    ),
    "knapsack-dp": (
        "0/1 knapsack by dynamic programming: n, n weight/value pairs, capacity",
        _dp,
    ),
    "fractional": (
        "fractional knapsack: n, n weight/value pairs, capacity",
        _fractional,
    ),
    "topo": ("topological order: vertices, edge count, then edges as 'from to'", _topo),
    "floyd": (
        "all-pairs shortest paths: n, then an n x n matrix (0 off the diagonal means no edge)",
        _floyd,
    ),
    "assign": ("cheapest assignment for the built-in 3 x 3 cost matrix", _assign),
    "trotter": ("permutations of 1..n by Johnson-Trotter: n", _trotter),
    "match": ("every index of a pattern in a text: text, then pattern", _match),
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algokit", description="Run a classic algorithm on input read from stdin."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (summary, _) in _COMMANDS.items():
        commands.add_parser(name, help=summary, description=summary)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen algorithm on standard input; return the exit status."""
    args = _parser().parse_args(argv)
    _, handler = _COMMANDS[args.command]
    try:
        return handler(_Input(sys.stdin.read()))
    except ValueError as error:
        print(f"algokit: {error}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())