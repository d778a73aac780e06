import logging
import random
from typing import Dict, Hashable, Iterable, List, Optional

from .algorithms.dsatur import dsatur
from .algorithms.propagate import propagate_repair
from .config import ALGORITHMS, DEFAULT_ALGO, SLOT_LABEL
from .graph import ConflictGraph
from .scheduling.validation import conflicts_ok

logger = logging.getLogger(__name__)

SAMPLE_COURSES = ["Math101", "CS101", "Physics101", "English101", "History101"]
SAMPLE_CONFLICTS = [
    ("Math101", "CS101"),
    ("Math101", "Physics101"),
    ("Math101", "English101"),
    ("CS101", "History101"),
    ("Physics101", "History101"),
    ("English101", "History101"),
]


def group_slots(colors: Dict[Hashable, int]) -> Dict[int, List[Hashable]]:
    groups: Dict[int, List[Hashable]] = {}
    for course, c in colors.items():
        groups.setdefault(c, []).append(course)
    return groups


def label_slots(groups: Dict[int, List[Hashable]]) -> Dict[str, List[Hashable]]:
    return {SLOT_LABEL.format(c + 1): list(groups[c]) for c in sorted(groups)}


class Scheduler:
    """Builds the course conflict graph and colors it into exam slots.

    ``colors`` maps course -> slot index (0-based) and ``slot_groups`` maps slot
    index -> courses. Both are cleared and rebuilt by every ``color_graph`` call.
    """

    def __init__(self, graph: Optional[ConflictGraph] = None, algo: str = DEFAULT_ALGO,
                 rng: Optional[random.Random] = None, random_first: bool = False,
                 max_repair_passes: Optional[int] = None):
        if algo not in ALGORITHMS:
            raise ValueError(f"algo must be one of {', '.join(ALGORITHMS)}")
        self._graph = graph if graph is not None else ConflictGraph()
        self.algo = algo
        self.rng = rng
        self.random_first = random_first
        self.max_repair_passes = max_repair_passes
        self._colors: Dict[Hashable, int] = {}
        self._slot_groups: Dict[int, List[Hashable]] = {}

    @classmethod
    def sample(cls, **kwargs) -> 'Scheduler':
        """Five courses, six conflicts; handy for demos."""
        sched = cls(**kwargs)
        for course in SAMPLE_COURSES:
            sched.add_class(course)
        for a, b in SAMPLE_CONFLICTS:
            sched.add_conflict(a, b)
        return sched

    @property
    def graph(self) -> ConflictGraph:
        return self._graph

    @property
    def colors(self) -> Dict[Hashable, int]:
        return dict(self._colors)

    @property
    def slot_groups(self) -> Dict[int, List[Hashable]]:
        return {c: list(members) for c, members in self._slot_groups.items()}

    def add_class(self, course: Hashable) -> None:
        self._graph.add_vertex(course)

    def add_conflict(self, course1: Hashable, course2: Hashable) -> None:
        self._graph.add_edge(course1, course2)

    def add_registration(self, courses: Iterable[Hashable]) -> None:
        """Register one student's courses: each pair of them conflicts."""
        courses = list(courses)
        for course in courses:
            self.add_class(course)
        for i in range(len(courses)):
            for j in range(i + 1, len(courses)):
                self.add_conflict(courses[i], courses[j])

    def color_graph(self) -> Dict[Hashable, int]:
        self._colors.clear()
        self._slot_groups.clear()
        if self.algo == 'dsatur':
            coloring = dsatur(self._graph)
        else:
            coloring = propagate_repair(self._graph, rng=self.rng,
                                        random_first=self.random_first,
                                        max_repair_passes=self.max_repair_passes)
        self._colors.update(coloring)
        self._update_slot_groups()
        logger.debug("%s colored %d courses into %d slots",
                     self.algo, len(self._colors), self.slot_count())
        return self.colors

    def _update_slot_groups(self) -> None:
        self._slot_groups.clear()
        self._slot_groups.update(group_slots(self._colors))

    def is_valid_coloring(self) -> bool:
        return conflicts_ok(self._graph, self._colors)

    def slot_count(self) -> int:
        return len(self._slot_groups)

    def schedule_view(self) -> Dict[str, List[Hashable]]:
        return label_slots(self._slot_groups)
