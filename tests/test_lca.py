import pytest

from graphkit.lca import (
    RootedTree,
    barn_reach_counts,
    obx_queries,
    railway_edges,
    tree_dfs_roots,
)
from graphkit.trees import subordinate_counts

EDGES = [(1, 2), (1, 3), (2, 4), (2, 5)]


@pytest.fixture
def tree():
    return RootedTree(5, EDGES)


def test_lca(tree):
    assert tree.lca(4, 5) == 2
    assert tree.lca(4, 3) == 1
    assert tree.lca(2, 4) == 2


def test_distance_symmetric(tree):
    for a in range(1, 6):
        for b in range(1, 6):
            assert tree.distance(a, b) == tree.distance(b, a)
    assert tree.distance(4, 3) == 3


def test_ancestor(tree):
    assert tree.ancestor(4, 0) == 4
    assert tree.ancestor(4, 2) == 1
    with pytest.raises(ValueError):
        tree.ancestor(4, 3)


def test_disconnected_rejected():
    with pytest.raises(ValueError):
        RootedTree(4, [(1, 2)])


def test_obx_path():
    assert obx_queries(3, [(1, 2), (2, 3)], [(1, 3), (1, 2), (2, 2)]) == [2, 1, 0]


def test_obx_skips_redundant_edges():
    assert obx_queries(3, [(1, 2), (1, 2), (2, 3)], [(2, 3)]) == [3]


def test_barn_zero_limit_counts_self():
    assert barn_reach_counts(0, [(1, 4), (1, 2), (2, 7)]) == [1, 1, 1, 1]


def test_barn_large_limit_is_subtree_size():
    parents = [(1, 1), (2, 1), (2, 1), (1, 3)]
    expected = [c + 1 for c in subordinate_counts([p for p, _ in parents])]
    assert barn_reach_counts(100, parents) == expected


def test_dfs_roots_tree_all_ones():
    assert tree_dfs_roots(5, EDGES) == "1" * 5


def test_dfs_roots_triangle():
    assert tree_dfs_roots(3, [(1, 2), (2, 3), (3, 1)]) == "101"


def test_railway():
    edges = [(1, 2), (2, 3)]
    assert railway_edges(3, 1, edges, [[1, 3]]) == [1, 2]
    assert railway_edges(3, 2, edges, [[1, 3]]) == []
    assert railway_edges(3, 2, edges, [[1, 3], [1, 2]]) == [1]