import random

import pytest

from graphkit.dsu import (
    DisjointSet,
    process_union_find,
    restructuring_company,
    road_construction,
)


def test_union_reports_whether_it_merged():
    dsu = DisjointSet(4)
    assert dsu.union(1, 2) is True
    assert dsu.union(2, 1) is False
    assert dsu.same_set(1, 2)
    assert not dsu.same_set(1, 3)


def test_size_and_count_track_merges():
    n = 50
    rng = random.Random(7)
    dsu = DisjointSet(n)
    merges = 0
    for _ in range(80):
        if dsu.union(rng.randint(1, n), rng.randint(1, n)):
            merges += 1
    assert dsu.count() == n - merges
    roots = {dsu.find(x) for x in range(1, n + 1)}
    assert len(roots) == dsu.count()
    assert sum(dsu.size(root) for root in roots) == n


def test_same_set_is_transitive_along_a_chain():
    n = 8
    dsu = DisjointSet(n)
    for x in range(1, n):
        dsu.union(x, x + 1)
    assert dsu.same_set(1, n)
    assert dsu.size(4) == n


def test_find_rejects_out_of_range():
    with pytest.raises(IndexError):
        DisjointSet(3).find(4)


def test_process_union_find():
    ops = [(0, 1, 2), (1, 1, 2), (1, 2, 3), (0, 2, 3), (1, 1, 3)]
    assert process_union_find(3, ops) == [True, False, True]


def test_road_construction_chain():
    n = 6
    roads = [(i, i + 1) for i in range(1, n)]
    assert road_construction(n, roads) == [(n - i, i + 1) for i in range(1, n)]


def test_repeated_road_changes_nothing():
    result = road_construction(4, [(1, 2), (2, 1), (3, 4)])
    assert result[0] == result[1]
    assert result[2][0] == result[1][0] - 1


def test_restructuring_sample():
    queries = [(3, 2, 5), (1, 2, 5), (3, 2, 5), (2, 4, 7), (2, 1, 2), (3, 1, 7)]
    assert restructuring_company(8, queries) == [False, True, True]


def test_range_merge_joins_exactly_the_range():
    n = 10
    queries = [(2, 3, 7)] + [(3, 3, x) for x in range(1, n + 1)]
    assert restructuring_company(n, queries) == [3 <= x <= 7 for x in range(1, n + 1)]