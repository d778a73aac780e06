from typing import Dict, Hashable

from ..graph import ConflictGraph


def conflicts_ok(G: ConflictGraph, coloring: Dict[Hashable, int]) -> bool:
    """True when every course has a slot and no two conflicting courses share one."""
    for u in G.vertices():
        if u not in coloring:
            return False
        for v in G.neighbors(u):
            if v not in coloring or coloring[v] == coloring[u]:
                return False
    return True
