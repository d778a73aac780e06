import pytest

from examslots.graph import ConflictGraph
from examslots.scheduler import Scheduler


@pytest.fixture
def sample_graph():
    return Scheduler.sample().graph


@pytest.fixture
def triangle():
    return ConflictGraph.from_edges([("Math101", "CS101"), ("CS101", "Physics101"), ("Math101", "Physics101")])
