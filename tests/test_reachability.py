from graphkit.reachability import count_ranked, min_new_roads


def test_three_cycle_all_ranked():
    assert count_ranked(3, [(1, 2, 5, 1), (2, 3, 5, 1), (3, 1, 5, 1)]) == 3


def test_chain_has_no_ranked():
    assert count_ranked(3, [(1, 2, 5, 1), (2, 3, 5, 1)]) == 0


def test_tie_means_second_wins():
    # 2 beats 1 by tie, 1 beats 2 outright: a two-cycle
    assert count_ranked(2, [(1, 2, 1, 1), (1, 2, 3, 0)]) == 2


def test_everything_reachable_needs_nothing():
    assert min_new_roads(4, [(1, 2), (2, 3), (3, 4)], 1) == 0


def test_chain_from_the_end_needs_one():
    assert min_new_roads(4, [(1, 2), (2, 3), (3, 4)], 4) == 1


def test_isolated_cities_each_need_a_road():
    n = 5
    assert min_new_roads(n, [], 1) == n - 1