import pytest

from graphkit.subtree_offline import color_count_queries, vasya_tree

N = 5
EDGES = [(1, 2), (1, 3), (2, 4), (4, 5)]


def test_deep_query_on_root_reaches_all():
    assert vasya_tree(N, EDGES, [(1, N, 7)]) == [7] * N


def test_zero_depth_touches_only_node():
    result = vasya_tree(N, EDGES, [(1, 0, 7)])
    assert result[0] == 7
    assert sum(result) == 7


def test_limited_depth_inside_subtree():
    result = vasya_tree(N, EDGES, [(2, 1, 3)])
    assert result == [0, 3, 0, 3, 0]


def test_queries_are_additive():
    first = [(2, 1, 3), (1, 2, -4)]
    second = [(4, 5, 6), (1, 0, 2)]
    combined = vasya_tree(N, EDGES, first + second)
    separate = [a + b for a, b in zip(vasya_tree(N, EDGES, first),
                                      vasya_tree(N, EDGES, second))]
    assert combined == separate


def test_single_color_tree():
    colors = [4] * N
    assert color_count_queries(colors, EDGES, [(1, N), (1, N + 1)]) == [1, 0]


def test_distinct_colors():
    colors = [1, 2, 3, 4, 5]
    result = color_count_queries(colors, EDGES, [(1, 1), (5, 2)])
    assert result[0] == len(colors)
    assert result[1] == 0


def test_answers_non_increasing_in_k():
    colors = [1, 2, 1, 2, 2]
    result = color_count_queries(colors, EDGES, [(1, k) for k in range(1, 6)])
    assert all(a >= b for a, b in zip(result, result[1:]))


def test_k_must_be_positive():
    with pytest.raises(ValueError):
        color_count_queries([1, 2, 3, 4, 5], EDGES, [(1, 0)])


def test_disconnected_tree_rejected():
    with pytest.raises(ValueError):
        vasya_tree(N, [(1, 2)], [])