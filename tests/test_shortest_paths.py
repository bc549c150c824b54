import pytest

from graphkit.shortest_paths import piggyback_cost, shortcut_savings, shortest_path_tree


def test_piggyback_meet_in_the_middle():
    b, e, p = 4, 4, 5
    assert piggyback_cost(b, e, p, 3, [(1, 3), (2, 3)]) == b + e


def test_piggyback_disconnected():
    with pytest.raises(ValueError):
        piggyback_cost(1, 1, 1, 4, [(1, 2), (3, 4)])


def test_shortest_path_tree_first_sample():
    edges = [(1, 2, 1), (2, 3, 1), (1, 3, 2)]
    assert shortest_path_tree(3, edges, 3) == (2, [1, 2])


def test_shortest_path_tree_second_sample():
    edges = [(1, 2, 1), (2, 3, 1), (3, 4, 1), (4, 1, 2)]
    total, ids = shortest_path_tree(4, edges, 4)
    assert ids == [4, 2, 3]
    assert total == sum(edges[i - 1][2] for i in ids)


def test_shortest_path_tree_invariants():
    n = 6
    edges = [(1, 2, 3), (2, 3, 1), (1, 3, 4), (3, 4, 2), (4, 5, 2), (3, 5, 4), (5, 6, 1), (2, 6, 9)]
    total, ids = shortest_path_tree(n, edges, 1)
    assert len(ids) == n - 1
    assert total == sum(edges[i - 1][2] for i in ids)


def test_shortest_path_tree_unreachable():
    with pytest.raises(ValueError):
        shortest_path_tree(3, [(1, 2, 1)], 1)


SHORTCUT_EDGES = [(1, 2, 5), (1, 3, 3), (2, 4, 3), (3, 4, 5), (4, 5, 2), (3, 5, 7)]


def test_shortcut_sample():
    assert shortcut_savings(5, 2, [1, 2, 3, 4, 5], SHORTCUT_EDGES) == 40


def test_longer_shortcut_saves_no_more():
    cows = [1, 2, 3, 4, 5]
    assert shortcut_savings(5, 3, cows, SHORTCUT_EDGES) <= shortcut_savings(5, 2, cows, SHORTCUT_EDGES)


def test_shortcut_disconnected():
    with pytest.raises(ValueError):
        shortcut_savings(3, 1, [1, 1, 1], [(1, 2, 1)])