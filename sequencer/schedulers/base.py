"""Base Scheduler — abstract interface for step scheduling algorithms."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from sequencer.models.tracker import ReadinessTracker


@dataclass(frozen=True)
class Assignment:
    """Immutable scheduling decision: a step handed to a worker at a point in time."""
    step: str
    worker_id: str
    scheduled_time: int


class BaseScheduler(ABC):
    """Abstract base class for all schedulers. Subclasses implement schedule()."""

    @abstractmethod
    def schedule(self, tracker: ReadinessTracker) -> list[Assignment]:
        """Drive the tracker to completion and return the assignments made, in order."""
        ...

    @property
    def name(self) -> str:
        """Human-readable scheduler name for reports."""
        return self.__class__.__name__
