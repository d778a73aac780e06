import random

import networkx as nx
import pytest

from examslots.graph import ConflictGraph
from examslots.scheduler import Scheduler, group_slots, label_slots


def test_unknown_algo_rejected():
    with pytest.raises(ValueError):
        Scheduler(algo="welsh")


def test_sample_schedule():
    sched = Scheduler.sample()
    sched.color_graph()
    assert sched.is_valid_coloring()
    assert sched.slot_count() == 2
    view = sched.schedule_view()
    assert list(view) == ["Time Slot 1", "Time Slot 2"]
    assert sorted(view["Time Slot 1"]) == ["History101", "Math101"]
    assert sorted(view["Time Slot 2"]) == ["CS101", "English101", "Physics101"]


def test_sample_slot_count_within_degree_bound():
    for algo in ("propagate", "dsatur"):
        sched = Scheduler.sample(algo=algo)
        sched.color_graph()
        assert 2 <= sched.slot_count() <= sched.graph.degree("Math101") + 1
        assert sched.is_valid_coloring()


def test_single_student_three_courses_is_a_triangle():
    sched = Scheduler()
    sched.add_registration(["Math101", "CS101", "Physics101"])
    assert sched.graph.edge_count() == 3
    sched.color_graph()
    assert sched.slot_count() == 3
    assert sched.is_valid_coloring()


def test_five_mutual_conflicts_need_five_slots():
    sched = Scheduler(algo="dsatur")
    sched.add_registration(["A", "B", "C", "D", "E"])
    sched.color_graph()
    assert sched.slot_count() >= 5


def test_empty_graph():
    sched = Scheduler()
    assert sched.color_graph() == {}
    assert sched.slot_count() == 0
    assert sched.schedule_view() == {}
    assert sched.is_valid_coloring()


def test_not_valid_before_coloring():
    sched = Scheduler.sample()
    assert not sched.is_valid_coloring()


def test_recoloring_starts_from_scratch():
    sched = Scheduler.sample(rng=random.Random(1), random_first=True)
    sched.color_graph()
    assert sched.is_valid_coloring()
    sched.add_class("Art101")
    assert not sched.is_valid_coloring()
    colors = sched.color_graph()
    assert sched.is_valid_coloring()
    assert colors["Art101"] == 0
    assert set(colors) == sched.graph.vertices()


def test_slot_groups_match_colors():
    sched = Scheduler.sample(algo="dsatur")
    colors = sched.color_graph()
    groups = sched.slot_groups
    assert sum(len(g) for g in groups.values()) == len(colors)
    for c, members in groups.items():
        for course in members:
            assert colors[course] == c


def test_returned_state_is_a_copy():
    sched = Scheduler.sample()
    colors = sched.color_graph()
    colors["Math101"] = 99
    sched.slot_groups[0].append("Bogus")
    assert sched.colors["Math101"] != 99
    assert "Bogus" not in sched.slot_groups[0]


def test_shared_graph():
    G = ConflictGraph.from_edges([("A", "B")])
    sched = Scheduler(G)
    sched.add_conflict("B", "C")
    assert G.are_adjacent("B", "C")


def test_group_and_label_helpers():
    groups = group_slots({"A": 1, "B": 0, "C": 1})
    assert groups == {1: ["A", "C"], 0: ["B"]}
    assert list(label_slots(groups).items()) == [("Time Slot 1", ["B"]), ("Time Slot 2", ["A", "C"])]


@pytest.mark.parametrize("seed", [0, 7, 21])
def test_coloring_twice_without_changes_stays_valid(seed):
    R = nx.gnp_random_graph(40, 0.3, seed=seed)
    G = ConflictGraph.from_edges((f"E{u}", f"E{v}") for u, v in R.edges())
    sched = Scheduler(G, rng=random.Random(seed), random_first=True)
    for _ in range(2):
        colors = sched.color_graph()
        assert set(colors) == G.vertices()
        assert sched.is_valid_coloring()
        assert sched.slot_count() == len(sched.slot_groups)
