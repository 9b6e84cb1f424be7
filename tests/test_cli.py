import io
import itertools

import pytest

from algokit.cli import DEFAULT_COSTS, main
from algokit.graphs import INF, floyd_warshall, format_distances
from algokit.knapsack import brute_force_knapsack, fractional_knapsack, knapsack_dp
from algokit.matching import find_pattern


def run(monkeypatch, capsys, args, stdin=""):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    code = main(args)
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def numbers(line):
    return [int(token) for token in line.split()]


@pytest.mark.parametrize(
    "command,header",
    [("bubble", "The sorted arr:"), ("quick", "Sorted array:"), ("merge", "sorted array:")],
)
def test_sort_commands_print_sorted_values(monkeypatch, capsys, command, header):
    values = [5, -3, 9, 0, 5, 2]
    stdin = f"{len(values)} " + " ".join(map(str, values))
    code, out, _ = run(monkeypatch, capsys, [command], stdin)
    assert code == 0
    assert out.startswith(header)
    assert numbers(out[len(header):]) == sorted(values)


def test_quick_rejects_non_positive_count(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, ["quick"], "0")
    assert code == 1
    assert out == "Invalid number of elements.\n"


def test_bubble_with_zero_elements(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, ["bubble"], "0")
    assert code == 0
    assert out.strip() == "The sorted arr:"


def test_missing_input_is_an_error(monkeypatch, capsys):
    code, out, err = run(monkeypatch, capsys, ["merge"], "4 1 2")
    assert code == 2
    assert out == ""
    assert "end of input" in err


def test_non_integer_input_is_an_error(monkeypatch, capsys):
    code, _, err = run(monkeypatch, capsys, ["bubble"], "2 1 x")
    assert code == 2
    assert "'x'" in err


def test_unknown_command_exits(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(SystemExit) as info:
        main(["nonsense"])
    assert info.value.code == 2


def test_knapsack_brute(monkeypatch, capsys):
    weights, values, capacity = [1, 3, 4, 5], [1, 4, 5, 7], 7
    pairs = " ".join(f"{w} {v}" for w, v in zip(weights, values))
    code, out, _ = run(monkeypatch, capsys, ["knapsack-brute"], f"4 {pairs} {capacity}")
    assert code == 0
    expected = brute_force_knapsack(weights, values, capacity)
    assert out == f"Maximum value in knapsack = {expected}\n"


def test_knapsack_dp_agrees_with_brute_force(monkeypatch, capsys):
    weights, values, capacity = [2, 3, 4, 5], [3, 4, 5, 6], 5
    pairs = " ".join(f"{w} {v}" for w, v in zip(weights, values))
    code, out, _ = run(monkeypatch, capsys, ["knapsack-dp"], f"4 {pairs} {capacity}")
    assert code == 0
    assert knapsack_dp(weights, values, capacity) == brute_force_knapsack(
        weights, values, capacity
    )
    expected = knapsack_dp(weights, values, capacity)
    assert out == f"Maximum value that can be placed in the knapsack: {expected}\n"


def test_fractional_prints_two_decimals(monkeypatch, capsys):
    weights, values, capacity = [10.0, 20.0, 30.0], [60.0, 100.0, 120.0], 50.0
    pairs = " ".join(f"{w} {v}" for w, v in zip(weights, values))
    code, out, _ = run(monkeypatch, capsys, ["fractional"], f"3 {pairs} {capacity}")
    assert code == 0
    expected = fractional_knapsack(weights, values, capacity)
    assert out == f"Maximum value in knapsack = {expected:.2f}\n"


def test_fractional_rejects_zero_weight(monkeypatch, capsys):
    code, _, err = run(monkeypatch, capsys, ["fractional"], "1 0 5 10")
    assert code == 2
    assert "positive" in err


def test_topo_order_respects_edges(monkeypatch, capsys):
    edges = [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]
    stdin = f"6 {len(edges)} " + " ".join(f"{u} {v}" for u, v in edges)
    code, out, _ = run(monkeypatch, capsys, ["topo"], stdin)
    assert code == 0
    header, body = out.split("\n", 1)
    assert header == "Topological Order:"
    order = numbers(body)
    assert sorted(order) == list(range(6))
    position = {vertex: i for i, vertex in enumerate(order)}
    assert all(position[u] < position[v] for u, v in edges)


def test_topo_rejects_unknown_vertex(monkeypatch, capsys):
    code, _, err = run(monkeypatch, capsys, ["topo"], "2 1 0 7")
    assert code == 2
    assert "unknown vertex" in err


def test_floyd_treats_zero_as_missing_edge(monkeypatch, capsys):
    rows = [[0, 3, 0, 7], [8, 0, 2, 0], [5, 0, 0, 1], [2, 0, 0, 0]]
    stdin = "4 " + " ".join(str(v) for row in rows for v in row)
    code, out, _ = run(monkeypatch, capsys, ["floyd"], stdin)
    assert code == 0
    matrix = [
        [INF if i != j and v == 0 else v for j, v in enumerate(row)]
        for i, row in enumerate(rows)
    ]
    expected = format_distances(floyd_warshall(matrix))
    assert out == "Shortest distances between every pair of vertices:\n" + expected
    assert "INF" not in out


def test_floyd_prints_inf_for_unreachable(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, ["floyd"], "2 0 4 0 0")
    assert code == 0
    lines = out.splitlines()
    assert lines[2].split() == ["INF", "0"]


def test_assign_uses_built_in_matrix(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, ["assign"])
    assert code == 0
    lines = out.splitlines()
    assert lines[0] == "Minimum cost: 9"
    assert lines[1] == "Best assignment:"
    jobs, total = [], 0
    for person, line in enumerate(lines[2:], start=1):
        prefix, rest = line.split(" -> Job ")
        assert prefix == f"Person {person}"
        job_text, cost_text = rest.split(" (Cost: ")
        job = int(job_text) - 1
        cost = int(cost_text.rstrip(")"))
        assert DEFAULT_COSTS[person - 1][job] == cost
        jobs.append(job)
        total += cost
    assert sorted(jobs) == [0, 1, 2]
    assert total == 9


@pytest.mark.parametrize("n", [1, 3, 4])
def test_trotter_lists_every_permutation_once(monkeypatch, capsys, n):
    code, out, _ = run(monkeypatch, capsys, ["trotter"], str(n))
    assert code == 0
    perms = [tuple(numbers(line)) for line in out.splitlines()]
    assert perms[0] == tuple(range(1, n + 1))
    assert sorted(perms) == sorted(itertools.permutations(range(1, n + 1)))
    for before, after in zip(perms, perms[1:]):
        differing = [i for i, (a, b) in enumerate(zip(before, after)) if a != b]
        assert len(differing) == 2 and differing[1] - differing[0] == 1


def test_trotter_rejects_negative(monkeypatch, capsys):
    code, _, err = run(monkeypatch, capsys, ["trotter"], "-1")
    assert code == 2
    assert "negative" in err


def test_match_reports_every_index(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, ["match"], "abababa aba")
    assert code == 0
    expected = [f"Pattern found at index {i}" for i in find_pattern("abababa", "aba")]
    assert out.splitlines() == expected
    assert len(expected) == 3


def test_match_not_found(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, ["match"], "hello xyz")
    assert code == 0
    assert out == "Pattern not found.\n"