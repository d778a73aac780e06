"""
ExamSlots

Assigns exam courses to time slots so that no student has two exams in the
same slot, using greedy coloring of the course conflict graph.
"""

from .graph import ConflictGraph
from .scheduler import Scheduler
from .trials import run_trials, TrialReport

__version__ = '1.0.0'

__all__ = [
    'ConflictGraph',
    'Scheduler',
    'run_trials',
    'TrialReport',
]
