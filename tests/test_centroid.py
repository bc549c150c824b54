import pytest

from graphkit.centroid import min_race_length, xenia_queries


def test_race_first_example():
    assert min_race_length(4, 3, [(0, 1, 1), (1, 2, 2), (1, 3, 4)]) == 2


def test_race_no_path():
    assert min_race_length(3, 3, [(0, 1, 1), (1, 2, 1)]) == -1


def test_race_larger_example():
    edges = [(0, 1, 3), (0, 2, 4), (2, 3, 5), (3, 4, 4), (4, 5, 6),
             (0, 6, 3), (6, 7, 2), (6, 8, 5), (8, 9, 6), (8, 10, 7)]
    assert min_race_length(11, 12, edges) == 2


def test_race_on_unit_path():
    n = 7
    edges = [(i, i + 1, 1) for i in range(n - 1)]
    assert [min_race_length(n, k, edges) for k in range(1, n)] == list(range(1, n))
    assert min_race_length(n, n, edges) == -1


def test_race_rejects_negative_lengths():
    with pytest.raises(ValueError):
        min_race_length(2, 1, [(0, 1, -1)])


def test_race_rejects_empty_tree():
    with pytest.raises(ValueError):
        min_race_length(0, 1, [])


def test_xenia_example():
    edges = [(1, 2), (2, 3), (2, 4), (4, 5)]
    queries = [(2, 1), (2, 5), (1, 2), (2, 5)]
    assert xenia_queries(5, edges, queries) == [0, 3, 2]


def test_xenia_on_path():
    n = 8
    edges = [(i, i + 1) for i in range(1, n)]
    first = xenia_queries(n, edges, [(1, 5)] + [(2, u) for u in range(1, n + 1)])
    assert first == [min(abs(u - 1), abs(u - 5)) for u in range(1, n + 1)]
    second = xenia_queries(n, edges, [(1, 5), (1, 8)] + [(2, u) for u in range(1, n + 1)])
    assert second == [min(abs(u - 1), abs(u - 5), abs(u - 8)) for u in range(1, n + 1)]


def test_xenia_painted_nodes_read_zero():
    edges = [(1, 2), (1, 3), (3, 4), (3, 5), (5, 6)]
    assert xenia_queries(6, edges, [(1, 6), (2, 6), (1, 4), (2, 4)]) == [0, 0]


def test_xenia_rejects_disconnected():
    with pytest.raises(ValueError):
        xenia_queries(3, [(1, 2)], [])


def test_xenia_rejects_unknown_kind():
    with pytest.raises(ValueError):
        xenia_queries(2, [(1, 2)], [(3, 1)])