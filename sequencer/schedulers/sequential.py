"""Sequential Scheduler — one worker, zero-duration steps, alphabetical tie-break."""

import logging

from sequencer.errors import CyclicOrUnreachableDependency
from sequencer.models.tracker import ReadinessTracker
from sequencer.schedulers.base import BaseScheduler, Assignment

logger = logging.getLogger(__name__)

SOLO_WORKER_ID = "solo"


class SequentialScheduler(BaseScheduler):
    """Repeatedly completes the alphabetically first doable step.

    With `strict=False` the order simply stops when nothing more is doable,
    which leaves steps caught in a cycle out of the result.
    """

    def __init__(self, strict: bool = True):
        self.strict = strict

    def schedule(self, tracker: ReadinessTracker) -> list[Assignment]:
        assignments: list[Assignment] = []

        while (step := tracker.next_ready()) is not None:
            assignments.append(
                Assignment(step=step, worker_id=SOLO_WORKER_ID, scheduled_time=len(assignments))
            )

        if not tracker.is_exhausted():
            if self.strict:
                raise CyclicOrUnreachableDependency(tracker.pending)
            logger.warning("Order truncated, %d steps never became doable", len(tracker.pending))

        logger.debug("Sequential order has %d steps", len(assignments))
        return assignments

    def order(self, tracker: ReadinessTracker) -> str:
        """The execution order as a single string, e.g. "CABDFE"."""
        return "".join(a.step for a in self.schedule(tracker))
