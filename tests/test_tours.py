from collections import Counter

import pytest

from graphkit.tours import toll_costs, wizard_tours


def _check_tours(edges, tours):
    available = Counter(frozenset(e) for e in edges)
    for x, y, z in tours:
        for e in (frozenset((x, y)), frozenset((y, z))):
            assert available[e] > 0
            available[e] -= 1


@pytest.mark.parametrize(
    "n,edges",
    [
        (3, [(1, 2), (2, 3), (1, 3)]),
        (4, [(1, 2), (2, 3), (3, 4), (4, 1)]),
        (5, [(1, 2), (1, 3), (1, 4), (1, 5), (2, 3), (4, 5), (2, 5)]),
        (4, [(1, 2), (2, 3), (3, 4)]),
    ],
)
def test_connected_graph_uses_half_the_edges(n, edges):
    tours = wizard_tours(n, edges)
    _check_tours(edges, tours)
    assert len(tours) == len(edges) // 2


def test_no_edges_no_tours():
    assert wizard_tours(3, []) == []


def test_toll_single_blocks():
    orders = [(0, 1, 5), (1, 2, 3)]
    assert toll_costs(1, 3, orders, [(0, 1), (0, 2), (0, 0), (1, 0)]) == [5, 8, -1, -1]


def test_toll_unreachable():
    orders = [(0, 2, 4), (1, 3, 2)]
    assert toll_costs(2, 4, orders, [(0, 3), (1, 3)]) == [-1, 2]


def test_toll_picks_cheapest():
    orders = [(0, 2, 1), (0, 3, 5), (2, 4, 10), (3, 4, 1)]
    assert toll_costs(2, 6, orders, [(0, 4)]) == [6]


def test_toll_bad_block_size():
    with pytest.raises(ValueError):
        toll_costs(0, 3, [], [])