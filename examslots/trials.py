"""Repeated-trial driver: rerun the scheduler and keep the smallest slot count."""
import logging
import random
from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional

from .config import DEFAULT_ALGO
from .graph import ConflictGraph
from .scheduler import Scheduler

logger = logging.getLogger(__name__)


@dataclass
class TrialReport:
    slot_counts: List[int] = field(default_factory=list)
    best_slots: Optional[int] = None
    best_trial: Optional[int] = None
    best_colors: Dict[Hashable, int] = field(default_factory=dict)
    all_valid: bool = True


def run_trials(G: ConflictGraph, trials: int, seed: Optional[int] = None,
               algo: str = DEFAULT_ALGO, random_first: bool = True) -> TrialReport:
    if trials < 1:
        raise ValueError("trials must be at least 1")
    report = TrialReport()
    for i in range(trials):
        rng = random.Random(None if seed is None else seed + i)
        sched = Scheduler(G, algo=algo, rng=rng, random_first=random_first)
        sched.color_graph()
        k = sched.slot_count()
        report.slot_counts.append(k)
        if not sched.is_valid_coloring():
            # a broken trial is a bug, never a candidate for the minimum
            logger.error("trial %d produced an invalid coloring", i)
            report.all_valid = False
            continue
        if report.best_slots is None or k < report.best_slots:
            report.best_slots = k
            report.best_trial = i
            report.best_colors = sched.colors
    logger.debug("best of %d trials: %s slots (trial %s)",
                 trials, report.best_slots, report.best_trial)
    return report
