from typing import Dict, Hashable, Set

from ..graph import ConflictGraph
from .propagate import first_fit


def dsatur(G: ConflictGraph) -> Dict[Hashable, int]:
    """DSATUR: color the vertex with the most distinct neighbor colors next.

    Ties go to the higher degree, then to the smaller course id.
    """
    coloring: Dict[Hashable, int] = {}
    saturation: Dict[Hashable, Set[int]] = {u: set() for u in G.vertices()}
    degrees = {u: G.degree(u) for u in saturation}

    while len(coloring) < G.vertex_count():
        candidates = [u for u in saturation if u not in coloring]
        u = min(candidates, key=lambda x: (-len(saturation[x]), -degrees[x], str(x)))
        c = first_fit(coloring[v] for v in G.neighbors(u) if v in coloring)
        coloring[u] = c
        for v in G.neighbors(u):
            if v not in coloring:
                saturation[v].add(c)
    return coloring
