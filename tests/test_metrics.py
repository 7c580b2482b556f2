import random

import pytest

from graphstats.services.metrics import (
    avg_shortest_path_len,
    diameter,
    effective_diameter,
    path_metrics,
)


def chain(n):
    return {i: [i + 1] for i in range(n - 1)}


@pytest.mark.parametrize("n", [2, 3, 5, 8])
def test_chain(n):
    adj = chain(n)
    res = path_metrics(adj)

    assert res["pairs"] == n * (n - 1) // 2
    expected_total = sum(d * (n - d) for d in range(1, n))
    assert res["total_distance"] == expected_total
    assert res["avg_path_len"] == pytest.approx(expected_total / res["pairs"])
    assert res["diameter"] == n - 1

    assert avg_shortest_path_len(adj) == res["avg_path_len"]
    assert diameter(adj) == n - 1


def test_chain_of_five_values():
    adj = chain(5)
    assert avg_shortest_path_len(adj) == 2.0
    assert diameter(adj) == 4


def test_two_disjoint_edges():
    adj = {0: [1], 2: [3]}
    res = path_metrics(adj)
    assert res["pairs"] == 2
    assert res["avg_path_len"] == 1.0
    assert res["diameter"] == 1


def test_unreachable_pairs_excluded(two_components):
    # cykl: 3 źródła * (1 + 2), krawędź 0 -> 1: 1
    res = path_metrics(two_components)
    assert res["pairs"] == 7
    assert res["total_distance"] == 10
    assert res["avg_path_len"] == pytest.approx(10 / 7)
    assert res["diameter"] == 2


def test_empty_graph_is_undefined():
    assert avg_shortest_path_len({}) is None
    assert diameter({}) is None

    res = path_metrics({})
    assert res["avg_path_len"] is None
    assert res["diameter"] is None
    assert res["effective_diameter"] is None
    assert res["pairs"] == 0


def test_only_self_loop_is_undefined():
    adj = {0: [0]}
    assert avg_shortest_path_len(adj) is None
    assert diameter(adj) is None


def test_self_loop_with_edge():
    adj = {0: [0, 1]}
    assert avg_shortest_path_len(adj) == 1.0
    assert diameter(adj) == 1


def test_multi_edges():
    adj = {0: [1, 1], 1: [2]}
    assert avg_shortest_path_len(adj) == pytest.approx(4 / 3)
    assert diameter(adj) == 2


def test_sinks_are_not_sources():
    adj = {0: [1]}
    res = path_metrics(adj)
    assert res["sources"] == 1
    assert res["pairs"] == 1


def test_histogram_consistent_with_totals(two_components):
    res = path_metrics(two_components)
    hist = res["distance_histogram"]

    assert hist[0] == 0
    assert sum(hist) == res["pairs"]
    assert sum(d * c for d, c in enumerate(hist)) == res["total_distance"]
    assert len(hist) - 1 == res["diameter"]


def test_chain_histogram():
    res = path_metrics(chain(4))
    assert res["distance_histogram"] == [0, 3, 2, 1]
    assert res["effective_diameter"] == pytest.approx(2.4)


@pytest.mark.parametrize(
    "hist, q, expected",
    [
        ([0, 1], 0.9, 0.9),
        ([0, 3, 2, 1], 0.5, 1.0),
        ([0, 3, 2, 1], 1.0, 3.0),
        ([5, 3, 2, 1], 0.9, 2.4),
    ],
)
def test_effective_diameter(hist, q, expected):
    assert effective_diameter(hist, q) == pytest.approx(expected)


def test_effective_diameter_empty():
    assert effective_diameter([0]) is None
    assert effective_diameter([]) is None


@pytest.mark.parametrize("q", [0.0, -0.1, 1.5])
def test_effective_diameter_bad_q(q):
    with pytest.raises(ValueError):
        effective_diameter([0, 1], q)


def test_workers_must_be_positive():
    with pytest.raises(ValueError):
        path_metrics(chain(3), workers=0)


def test_parallel_matches_sequential():
    rnd = random.Random(7)
    adj = {}
    for _ in range(300):
        adj.setdefault(rnd.randrange(60), []).append(rnd.randrange(60))

    assert path_metrics(adj, workers=2) == path_metrics(adj, workers=1)
