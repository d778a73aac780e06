from typing import Dict, Hashable

from ..graph import ConflictGraph
from .validation import conflicts_ok


def greedy_clique_lower_bound(G: ConflictGraph) -> int:
    """Fast lower bound on the slot count via a greedy maximal clique.

    Picks the highest-degree course, then keeps adding a course that conflicts
    with every course already in the clique. The size of the clique found is a
    lower bound on the chromatic number, not necessarily the largest clique.
    """
    if G.is_empty():
        return 0
    seed = max(sorted(G.vertices(), key=str), key=G.degree)
    clique = {seed}
    candidates = G.neighbors(seed)
    while candidates:
        u = max(sorted(candidates, key=str), key=G.degree)
        new_cands = {v for v in candidates if all(G.are_adjacent(v, w) for w in clique)}
        if u in new_cands:
            clique.add(u)
            candidates = new_cands & G.neighbors(u)
        else:
            candidates.discard(u)
    return len(clique)


def summary(G: ConflictGraph, coloring: Dict[Hashable, int]) -> str:
    n = G.vertex_count()
    m = G.edge_count()
    slots_used = len(set(coloring.values()))
    lb = greedy_clique_lower_bound(G)
    return (
        f"Courses: {n}  Conflicts: {m}\n"
        f"Slots used: {slots_used}  Clique lower bound: {lb}\n"
        f"Valid (conflicts): {conflicts_ok(G, coloring)}\n"
    )
