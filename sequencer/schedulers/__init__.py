from sequencer.schedulers.base import BaseScheduler, Assignment
from sequencer.schedulers.duration import step_duration, STEP_DURATIONS
from sequencer.schedulers.sequential import SequentialScheduler
from sequencer.schedulers.workforce import WorkforceScheduler

__all__ = [
    "BaseScheduler", "Assignment", "step_duration", "STEP_DURATIONS",
    "SequentialScheduler", "WorkforceScheduler",
]
