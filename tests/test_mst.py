import random

import pytest

from graphkit.dsu import DisjointSet
from graphkit.mst import count_paths_within, new_road_queries, rebuild_roads, zoo_average

SAMPLE_TREE = [(1, 2, 1), (3, 2, 3), (2, 4, 1), (4, 5, 2), (5, 7, 4), (3, 6, 2)]


def test_count_paths_sample():
    assert count_paths_within(7, SAMPLE_TREE, [5, 2, 3, 4, 1]) == [21, 7, 15, 21, 3]


def test_count_paths_extremes():
    answers = count_paths_within(7, SAMPLE_TREE, [0, 100])
    assert answers[0] == 0
    assert answers[1] == 7 * 6 // 2


def test_count_paths_monotone():
    limits = [4, 0, 2, 3, 1, 5]
    answers = count_paths_within(7, SAMPLE_TREE, limits)
    by_limit = [a for _, a in sorted(zip(limits, answers))]
    assert by_limit == sorted(by_limit)


def test_zoo_sample():
    result = zoo_average([10, 20, 30, 40], [(1, 3), (2, 3), (4, 3)])
    assert result == pytest.approx(16.666667, rel=1e-6)


def test_zoo_two_areas_take_minimum():
    values = [3, 7]
    assert zoo_average(values, [(1, 2)]) == pytest.approx(min(values))


def test_zoo_connected_average_within_value_range():
    values = [5, 1, 9, 4, 6]
    edges = [(1, 2), (2, 3), (3, 4), (4, 5), (1, 5), (2, 4)]
    result = zoo_average(values, edges)
    assert min(values) <= result <= max(values)


def test_zoo_requires_two_areas():
    with pytest.raises(ValueError):
        zoo_average([4], [])


def test_rebuild_connected_needs_nothing():
    assert rebuild_roads(4, [(1, 2), (2, 3), (3, 4)]) == []


def _components(n, edges):
    dsu = DisjointSet(n)
    for u, v in edges:
        dsu.union(u, v)
    return dsu.count()


@pytest.mark.parametrize(
    "n, edges",
    [
        (7, [(1, 2), (2, 3), (3, 1), (4, 5), (5, 6), (6, 7)]),
        (6, [(1, 2), (2, 3), (3, 1), (4, 5), (4, 5)]),
    ],
)
def test_rebuild_joins_everything(n, edges):
    plan = rebuild_roads(n, edges)
    assert len(plan) == _components(n, edges) - 1
    roads = list(edges)
    for u, v, a, b in plan:
        roads.remove((u, v))
        roads.append((a, b))
    assert len(roads) == n - 1
    assert _components(n, roads) == 1


def test_new_roads_chain_needs_every_day():
    edges = [(1, 2), (2, 3), (3, 4)]
    assert new_road_queries(4, edges, [(1, 4)]) == [len(edges)]


def test_new_roads_same_city_and_disconnected():
    assert new_road_queries(4, [(1, 2)], [(3, 3), (1, 3)]) == [0, -1]


def test_new_roads_answer_is_earliest_day():
    rng = random.Random(7)
    n = 8
    edges = [(rng.randint(1, n), rng.randint(1, n)) for _ in range(12)]
    queries = [(u, v) for u in range(1, n + 1) for v in range(u + 1, n + 1)]
    answers = new_road_queries(n, edges, queries)
    for (u, v), day in zip(queries, answers):
        full = DisjointSet(n)
        for a, b in edges:
            full.union(a, b)
        if day == -1:
            assert not full.same_set(u, v)
            continue
        before, upto = DisjointSet(n), DisjointSet(n)
        for a, b in edges[: day - 1]:
            before.union(a, b)
        for a, b in edges[:day]:
            upto.union(a, b)
        assert upto.same_set(u, v)
        assert not before.same_set(u, v)