"""Degree-first greedy coloring with neighbor propagation and conflict repair.

Vertices are visited by static degree (highest first). Each visited vertex gets
the first color free among its colored neighbors, then every still-uncolored
neighbor is colored right away with a first-fit color that also differs from
the visited vertex. After each step a repair loop rescans all edges and
recolors the second endpoint of any same-colored edge until a pass finds
nothing to fix.
"""
import logging
import random
from typing import Dict, Hashable, Iterable, List, Optional, Set

from ..config import MIN_REPAIR_PASSES
from ..errors import RepairStalledError
from ..graph import ConflictGraph

logger = logging.getLogger(__name__)


def first_fit(used: Iterable[int], exclude: Optional[int] = None) -> int:
    used = set(used)
    c = 0
    while c in used or c == exclude:
        c += 1
    return c


def neighbor_colors(G: ConflictGraph, u: Hashable, coloring: Dict[Hashable, int]) -> Set[int]:
    return {coloring[v] for v in G.neighbors(u) if v in coloring}


def degree_order(G: ConflictGraph) -> List[Hashable]:
    # ties go to the lexicographically smaller course id
    return sorted(G.vertices(), key=lambda u: (-G.degree(u), str(u)))


def _sorted_neighbors(G: ConflictGraph, u: Hashable) -> List[Hashable]:
    return sorted(G.neighbors(u), key=str)


def count_conflicts(G: ConflictGraph, coloring: Dict[Hashable, int]) -> int:
    return sum(1 for u, v in G.edges()
               if u in coloring and v in coloring and coloring[u] == coloring[v])


def repair_conflicts(G: ConflictGraph, coloring: Dict[Hashable, int],
                     order: List[Hashable], max_passes: int) -> int:
    """Rescan edges until a clean pass; return the number of passes used.

    Raises RepairStalledError if ``max_passes`` passes all found conflicts.
    """
    for passes in range(1, max_passes + 1):
        fixed = 0
        for u in order:
            if u not in coloring:
                continue
            for v in _sorted_neighbors(G, u):
                if v in coloring and coloring[u] == coloring[v]:
                    coloring[v] = first_fit(neighbor_colors(G, v, coloring))
                    fixed += 1
        if fixed == 0:
            return passes
        logger.debug("repair pass %d recolored %d vertices", passes, fixed)
    raise RepairStalledError(max_passes, count_conflicts(G, coloring))


def propagate_repair(G: ConflictGraph, rng: Optional[random.Random] = None,
                     random_first: bool = False,
                     max_repair_passes: Optional[int] = None) -> Dict[Hashable, int]:
    coloring: Dict[Hashable, int] = {}
    if G.is_empty():
        return coloring

    order = degree_order(G)
    pending = list(order)
    if random_first:
        if rng is None:
            rng = random.Random()
        first = rng.choice(pending)
        pending.remove(first)
        pending.insert(0, first)

    if max_repair_passes is None:
        max_repair_passes = max(MIN_REPAIR_PASSES, G.edge_count() + 1)
    elif max_repair_passes < 1:
        raise ValueError("max_repair_passes must be at least 1")

    while pending:
        u = pending.pop(0)
        c = first_fit(neighbor_colors(G, u, coloring))
        coloring[u] = c
        for v in _sorted_neighbors(G, u):
            if v not in coloring:
                coloring[v] = first_fit(neighbor_colors(G, v, coloring), exclude=c)
        repair_conflicts(G, coloring, order, max_repair_passes)
        pending = [v for v in pending if v not in coloring]
    return coloring
