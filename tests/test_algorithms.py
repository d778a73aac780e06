import random

import networkx as nx
import pytest

from examslots.algorithms.dsatur import dsatur
from examslots.algorithms.propagate import (
    degree_order, first_fit, propagate_repair, repair_conflicts,
)
from examslots.errors import RepairStalledError, SchedulingError
from examslots.graph import ConflictGraph
from examslots.scheduling.evaluation import greedy_clique_lower_bound
from examslots.scheduling.validation import conflicts_ok


class PickLast:
    def choice(self, seq):
        return seq[-1]


def random_graph(n, p, seed):
    G = ConflictGraph()
    R = nx.gnp_random_graph(n, p, seed=seed)
    for u in R.nodes():
        G.add_vertex(f"E{u}")
    for u, v in R.edges():
        G.add_edge(f"E{u}", f"E{v}")
    return G


def test_first_fit():
    assert first_fit([]) == 0
    assert first_fit({0, 1, 3}) == 2
    assert first_fit({1, 2}, exclude=0) == 3
    assert first_fit(set(), exclude=0) == 1


def test_degree_order_breaks_ties_by_name(sample_graph):
    order = degree_order(sample_graph)
    assert order[:2] == ["History101", "Math101"]
    assert order[2:] == ["CS101", "English101", "Physics101"]


def test_propagate_on_sample_uses_two_slots(sample_graph):
    coloring = propagate_repair(sample_graph)
    assert conflicts_ok(sample_graph, coloring)
    assert coloring["History101"] == coloring["Math101"] == 0
    assert {coloring[c] for c in ("CS101", "English101", "Physics101")} == {1}


def test_propagate_empty_graph():
    assert propagate_repair(ConflictGraph()) == {}


def test_random_first_pick_comes_from_rng():
    G = ConflictGraph.from_edges([("hub", "a"), ("hub", "b"), ("hub", "c")])
    assert propagate_repair(G)["hub"] == 0
    coloring = propagate_repair(G, rng=PickLast(), random_first=True)
    assert coloring == {"c": 0, "hub": 1, "a": 0, "b": 0}


def test_random_first_is_reproducible_with_seed():
    G = random_graph(40, 0.3, seed=11)
    a = propagate_repair(G, rng=random.Random(5), random_first=True)
    b = propagate_repair(G, rng=random.Random(5), random_first=True)
    assert a == b
    assert conflicts_ok(G, a)


def test_repair_fixes_second_endpoint():
    G = ConflictGraph.from_edges([("A", "B")])
    coloring = {"A": 0, "B": 0}
    assert repair_conflicts(G, coloring, ["A", "B"], max_passes=5) == 2
    assert coloring == {"A": 0, "B": 1}


def test_repair_clean_coloring_takes_one_pass():
    G = ConflictGraph.from_edges([("A", "B")])
    assert repair_conflicts(G, {"A": 0, "B": 1}, ["A", "B"], max_passes=1) == 1


def test_repair_stall_raises():
    G = ConflictGraph.from_edges([("A", "B"), ("B", "C")])
    coloring = {"A": 0, "B": 0, "C": 0}
    with pytest.raises(RepairStalledError) as exc:
        repair_conflicts(G, coloring, ["A", "B", "C"], max_passes=1)
    assert isinstance(exc.value, SchedulingError)
    assert exc.value.passes == 1


def test_max_repair_passes_must_be_positive(triangle):
    with pytest.raises(ValueError):
        propagate_repair(triangle, max_repair_passes=0)


def test_dsatur_on_sample(sample_graph):
    coloring = dsatur(sample_graph)
    assert conflicts_ok(sample_graph, coloring)
    assert len(set(coloring.values())) == 2
    assert coloring["History101"] == 0


def test_dsatur_empty_graph():
    assert dsatur(ConflictGraph()) == {}


@pytest.mark.parametrize("algo", [propagate_repair, dsatur])
def test_triangle_needs_three_slots(algo, triangle):
    coloring = algo(triangle)
    assert conflicts_ok(triangle, coloring)
    assert sorted(coloring.values()) == [0, 1, 2]


@pytest.mark.parametrize("seed", range(6))
@pytest.mark.parametrize("p", [0.1, 0.4, 0.8])
def test_random_graphs_color_validly(seed, p):
    G = random_graph(35, p, seed)
    for coloring in (propagate_repair(G),
                     propagate_repair(G, rng=random.Random(seed), random_first=True),
                     dsatur(G)):
        assert set(coloring) == G.vertices()
        assert conflicts_ok(G, coloring)
        assert len(set(coloring.values())) >= greedy_clique_lower_bound(G)
        assert max(coloring.values()) <= max(G.degree(u) for u in G.vertices())
