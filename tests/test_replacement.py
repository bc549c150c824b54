import pytest

from graphkit.replacement import shortest_path_replacements


def test_cycle_uses_other_side():
    n = 6
    edges = [(i, i % n + 1, 1) for i in range(1, n + 1)]
    path = [1, 2, 3, 4]
    result = shortest_path_replacements(n, edges, 1, 4, path)
    assert result == [n - (len(path) - 1)] * (len(path) - 1)


def test_single_bypass():
    edges = [(1, 2, 1), (2, 3, 1), (3, 4, 1), (1, 4, 10)]
    assert shortest_path_replacements(4, edges, 1, 4, [1, 2, 3, 4]) == [10, 10, 10]


def test_detours_cover_different_edges():
    edges = [(1, 2, 1), (2, 3, 1), (3, 4, 1), (1, 5, 2), (5, 3, 2), (3, 6, 3), (6, 4, 3)]
    assert shortest_path_replacements(6, edges, 1, 4, [1, 2, 3, 4]) == [5, 5, 8]


def test_bridges_have_no_replacement():
    edges = [(1, 2, 1), (2, 3, 1)]
    assert shortest_path_replacements(3, edges, 1, 3, [1, 2, 3]) == [-1, -1]


def test_parallel_edge_replaces():
    edges = [(1, 2, 1), (1, 2, 4)]
    assert shortest_path_replacements(2, edges, 1, 2, [1, 2]) == [4]


def test_trivial_path():
    assert shortest_path_replacements(1, [], 1, 1, [1]) == []


def test_rejects_path_that_is_not_shortest():
    edges = [(1, 2, 5), (2, 3, 5), (1, 3, 1)]
    with pytest.raises(ValueError):
        shortest_path_replacements(3, edges, 1, 3, [1, 2, 3])


def test_rejects_missing_edge():
    edges = [(1, 2, 1), (2, 3, 1)]
    with pytest.raises(ValueError):
        shortest_path_replacements(3, edges, 1, 3, [1, 3])


def test_rejects_wrong_endpoints():
    edges = [(1, 2, 1), (2, 3, 1)]
    with pytest.raises(ValueError):
        shortest_path_replacements(3, edges, 1, 3, [2, 3])