from typing import Hashable, Iterable, Set, Tuple
import networkx as nx


class ConflictGraph:
    """Undirected simple graph of courses; an edge means "not in the same slot".

    Queries on unknown courses return empty/zero/False instead of raising, unlike
    the underlying networkx graph.
    """

    def __init__(self):
        self._G = nx.Graph()

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[Hashable, Hashable]]) -> 'ConflictGraph':
        graph = cls()
        for u, v in edges:
            graph.add_edge(u, v)
        return graph

    @property
    def nx_graph(self) -> nx.Graph:
        return nx.freeze(self._G.copy())

    def add_vertex(self, vertex: Hashable) -> None:
        if vertex not in self._G:
            self._G.add_node(vertex)

    def add_edge(self, u: Hashable, v: Hashable) -> None:
        self.add_vertex(u)
        self.add_vertex(v)
        # a course cannot clash with itself
        if u != v:
            self._G.add_edge(u, v)

    def neighbors(self, vertex: Hashable) -> Set[Hashable]:
        if vertex not in self._G:
            return set()
        return set(self._G.neighbors(vertex))

    def vertices(self) -> Set[Hashable]:
        return set(self._G.nodes())

    def degree(self, vertex: Hashable) -> int:
        if vertex not in self._G:
            return 0
        return self._G.degree(vertex)

    def is_empty(self) -> bool:
        return self._G.number_of_nodes() == 0

    def vertex_count(self) -> int:
        return self._G.number_of_nodes()

    def edge_count(self) -> int:
        return self._G.number_of_edges()

    def are_adjacent(self, u: Hashable, v: Hashable) -> bool:
        if u not in self._G or v not in self._G:
            return False
        return self._G.has_edge(u, v)

    def edges(self):
        return list(self._G.edges())

    def __len__(self):
        return self._G.number_of_nodes()

    def __contains__(self, vertex):
        return vertex in self._G

    def describe(self) -> str:
        """Header line plus one ``course -> neighbors`` line per course, sorted by name."""
        lines = [repr(self) + ":"]
        for u in sorted(self._G.nodes(), key=str):
            lines.append(f"{u} -> {', '.join(sorted(map(str, self._G.neighbors(u))))}")
        return "\n".join(lines)

    def __repr__(self):
        return f"ConflictGraph with {self.vertex_count()} vertices and {self.edge_count()} edges"
