# algokit

Classic algorithms for sorting, the knapsack problem, directed graphs,
permutations and string search, usable as a library or through the
`algokit` command.

## What is inside

| Module                 | Public names                                                  |
|------------------------|---------------------------------------------------------------|
| `algokit.sorting`      | `bubble_sort`, `quick_sort`, `merge_sort`                     |
| `algokit.knapsack`     | `brute_force_knapsack`, `knapsack_dp`, `fractional_knapsack`  |
| `algokit.graphs`       | `INF`, `topological_sort`, `floyd_warshall`, `format_distances` |
| `algokit.permutations` | `Assignment`, `solve_assignment`, `johnson_trotter`           |
| `algokit.matching`     | `find_pattern`                                                |
| `algokit.cli`          | `main`                                                        |

### Sorting

`bubble_sort`, `quick_sort` and `merge_sort` take any iterable of mutually
comparable values and return a new sorted list; the input is left untouched.
Quicksort uses the Lomuto partition with the last element of each range as
pivot.

### Knapsack

- `brute_force_knapsack(weights, values, capacity)` tries every subset of
  items and returns the best total value that fits.
- `knapsack_dp(weights, values, capacity)` solves the same 0/1 problem by
  dynamic programming. It raises `ValueError` for a negative capacity or a
  negative weight.
- `fractional_knapsack(weights, values, capacity)` lets items be split and
  takes them greedily by value-to-weight ratio. It raises `ValueError` if a
  weight is not positive.

All three raise `ValueError` when `weights` and `values` differ in length.

### Graphs

- `topological_sort(vertex_count, edges)` orders the vertices
  `0..vertex_count-1` of a directed graph given as `(from, to)` pairs by
  reversed depth-first finishing time, starting from and exploring vertices in
  increasing order. A graph with a cycle still gets an order. An edge naming
  an unknown vertex, or a negative vertex count, raises `ValueError`.
- `floyd_warshall(matrix)` returns all-pairs shortest distances for a square
  matrix in which `INF` (`math.inf`) marks a missing edge. A non-square matrix
  raises `ValueError`.
- `format_distances(distances)` renders a distance matrix one row per line,
  integers right-aligned in three columns and `INF` for unreachable pairs.

### Permutations

- `solve_assignment(cost_matrix)` finds the cheapest one-to-one assignment of
  jobs to people by trying every permutation, and returns an `Assignment`
  with `cost` (the total), `jobs` (`jobs[person]` is that person's job,
  counted from 0) and `costs` (each person's cost). Among equally cheap
  assignments the first one generated is kept.
- `johnson_trotter(n)` is a generator of the permutations of `1..n` as
  tuples, each differing from the previous one by a single adjacent swap.

### Matching

`find_pattern(text, pattern)` returns every index at which `pattern` occurs
in `text`, overlapping occurrences included.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from algokit.sorting import merge_sort
from algokit.knapsack import knapsack_dp, fractional_knapsack
from algokit.graphs import topological_sort
from algokit.permutations import solve_assignment, johnson_trotter
from algokit.matching import find_pattern

merge_sort([5, 2, 9, 1])                               # [1, 2, 5, 9]

knapsack_dp([1, 3, 4, 5], [1, 4, 5, 7], 7)             # 9
fractional_knapsack([10, 20, 30], [60, 100, 120], 50)  # 240.0

topological_sort(4, [(0, 1), (1, 2), (0, 3)])

best = solve_assignment([[9, 2, 7], [6, 4, 3], [5, 8, 1]])
best.cost   # 9
best.jobs   # (1, 0, 2)

for permutation in johnson_trotter(3):
    print(permutation)

find_pattern("abracadabra", "abra")                    # [0, 7]
```

## Command line

The `algokit` command runs one algorithm per subcommand and reads its input
from standard input as whitespace-separated tokens, counts first:

| Subcommand       | Input                                                        |
|------------------|--------------------------------------------------------------|
| `bubble`         | `n`, then `n` integers                                       |
| `quick`          | `n`, then `n` integers (`n` must be positive)                |
| `merge`          | `n`, then `n` integers                                       |
| `knapsack-brute` | `n`, `n` weight/value integer pairs, capacity               |
| `knapsack-dp`    | `n`, `n` weight/value integer pairs, capacity               |
| `fractional`     | `n`, `n` weight/value number pairs, capacity                |
| `topo`           | vertex count, edge count, then edges as `from to`           |
| `floyd`          | `n`, then an `n` x `n` matrix; `0` off the diagonal means no edge |
| `assign`         | nothing; solves a built-in 3 x 3 cost matrix                 |
| `trotter`        | `n`                                                          |
| `match`          | a text, then a pattern (each a single word)                  |

For example:

```
echo "5 3 1 4 1 5" | algokit quick
echo "abracadabra abra" | algokit match
algokit assign
```

List the subcommands with:

```
algokit --help
```

The command exits with status 0 on success, 1 when `quick` is given a count
that is not positive, and 2 (with a message on standard error) when the input
is missing, malformed or rejected by the algorithm.

## Limits

`algokit assign` always works on its built-in cost matrix; to solve another
one, call `solve_assignment` from Python. The `match` subcommand reads a
single word each for the text and the pattern, so neither may contain spaces
there; `find_pattern` itself has no such limit.