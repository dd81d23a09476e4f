"""Workforce Scheduler — discrete-clock simulation of a fixed pool of workers."""

import logging

from sequencer.config import SchedulerConfig, DEFAULT_BASE_DELAY, DEFAULT_WORKER_COUNT
from sequencer.errors import CyclicOrUnreachableDependency
from sequencer.models.tracker import ReadinessTracker
from sequencer.models.worker import Worker
from sequencer.schedulers.base import BaseScheduler, Assignment
from sequencer.schedulers.duration import step_duration
from sequencer.simulator.events import Event, EventType

logger = logging.getLogger(__name__)


class WorkforceScheduler(BaseScheduler):
    """
    Runs steps on `worker_count` workers, one clock tick at a time.

    Each tick: busy workers work one tick and report finished steps, the run
    stops if everything is done, then idle workers pick up doable steps in
    alphabetical order. A step takes `base_delay + step_duration(step)` ticks.
    """

    def __init__(
        self,
        worker_count: int = DEFAULT_WORKER_COUNT,
        base_delay: int = DEFAULT_BASE_DELAY,
    ):
        config = SchedulerConfig(worker_count=worker_count, base_delay=base_delay)
        self.base_delay = config.base_delay
        self.workers: list[Worker] = [
            Worker(id=f"worker-{i}") for i in range(config.worker_count)
        ]
        self.total_time: int = 0
        self.event_log: list[Event] = []
        self._event_counter: int = 0

    @classmethod
    def from_config(cls, config: SchedulerConfig) -> "WorkforceScheduler":
        return cls(worker_count=config.worker_count, base_delay=config.base_delay)

    def schedule(self, tracker: ReadinessTracker) -> list[Assignment]:
        """Run until every step is finished; `total_time` holds the final clock."""
        self._reset()
        assignments: list[Assignment] = []
        clock = 0

        while True:
            self._work(tracker, clock)

            if tracker.is_complete():
                self.total_time = clock
                logger.info(
                    "Completed %d steps with %d workers in %d ticks",
                    len(tracker.universe), len(self.workers), clock,
                )
                return assignments

            started = self._assign_work(tracker, clock)
            if not started and all(w.is_idle for w in self.workers):
                raise CyclicOrUnreachableDependency(tracker.unfinished)
            assignments.extend(started)

            clock += 1

    def complete_steps(self, tracker: ReadinessTracker) -> int:
        """Total ticks needed to finish every step."""
        self.schedule(tracker)
        return self.total_time

    # ── Phases ────────────────────────────────────────────────────────

    def _work(self, tracker: ReadinessTracker, clock: int) -> None:
        """Every busy worker spends one tick; finished steps are reported to the tracker."""
        for worker in self.workers:
            finished = worker.work()
            if finished is not None:
                tracker.finish(finished)
                self._record(clock, EventType.STEP_FINISHED, finished, worker.id)
                logger.debug("t=%d %s finished %s", clock, worker.id, finished)

    def _assign_work(self, tracker: ReadinessTracker, clock: int) -> list[Assignment]:
        """Hand doable steps, lowest first, to idle workers in slot order."""
        started: list[Assignment] = []

        for step in sorted(tracker.get_doable()):
            worker = next((w for w in self.workers if w.is_idle), None)
            if worker is None:
                break

            worker.assign(step, self.base_delay + step_duration(step))
            tracker.begin(step)
            started.append(Assignment(step=step, worker_id=worker.id, scheduled_time=clock))
            self._record(clock, EventType.STEP_STARTED, step, worker.id)
            logger.debug("t=%d %s started %s for %d ticks", clock, worker.id, step, worker.remaining)

        return started

    # ── Utilities ─────────────────────────────────────────────────────

    def _reset(self) -> None:
        for worker in self.workers:
            worker.reset()
        self.total_time = 0
        self.event_log = []
        self._event_counter = 0

    def _record(self, clock: int, event_type: EventType, step: str, worker_id: str) -> None:
        self._event_counter += 1
        self.event_log.append(Event(
            time=clock,
            sequence=self._event_counter,
            event_type=event_type,
            step=step,
            worker_id=worker_id,
        ))
