"""Event records for the discrete-time workforce simulation."""

from enum import Enum
from dataclasses import dataclass, field


class EventType(str, Enum):
    """Things that happen to a step during a workforce run."""
    STEP_STARTED = "step_started"
    STEP_FINISHED = "step_finished"


@dataclass(order=True)
class Event:
    """
    A single simulation event, ordered by clock then sequence number.
    Fields with compare=False are excluded from ordering.
    """
    time: int
    sequence: int
    event_type: EventType = field(compare=False)
    step: str = field(compare=False)
    worker_id: str = field(compare=False)

    def __repr__(self) -> str:
        return (
            f"Event(t={self.time}, type={self.event_type.value}, "
            f"step={self.step}, worker={self.worker_id})"
        )
