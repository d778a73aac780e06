from typing import Dict, Hashable, Iterable, List, Tuple

from .graph import ConflictGraph


def build_conflict_graph_from_students(students: Dict[str, Iterable[Hashable]]) -> ConflictGraph:
    G = ConflictGraph()
    for courses in students.values():
        for course in courses:
            G.add_vertex(course)
    for courses in students.values():
        courses = list(courses)
        for i in range(len(courses)):
            for j in range(i + 1, len(courses)):
                u, v = courses[i], courses[j]
                if u != v:
                    G.add_edge(u, v)
    return G


def build_conflict_graph_from_edges(edges: List[Tuple[Hashable, Hashable]]) -> ConflictGraph:
    return ConflictGraph.from_edges(edges)
