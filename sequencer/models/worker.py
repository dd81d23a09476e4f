"""Worker model — one slot of the workforce, holding at most one step."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class WorkerStatus(str, Enum):
    """Operational states: IDLE ↔ BUSY"""
    IDLE = "idle"
    BUSY = "busy"


class Worker(BaseModel):
    """A worker slot counting down the remaining ticks of its current step."""

    id: str = Field(description="Unique worker identifier")
    step: Optional[str] = Field(default=None, description="Step currently being worked on")
    remaining: int = Field(default=0, ge=0, description="Ticks left on the current step")
    status: WorkerStatus = Field(default=WorkerStatus.IDLE, description="Current operational state")
    busy_ticks: int = Field(default=0, ge=0, description="Ticks spent working since the last reset")

    @property
    def is_idle(self) -> bool:
        """Idle workers hold no step and can be assigned one."""
        return self.status == WorkerStatus.IDLE

    def assign(self, step: str, duration: int) -> None:
        """Take on a step lasting `duration` ticks (at least one)."""
        if duration < 1:
            raise ValueError(f"Step duration must be at least 1 tick, got {duration}")
        self.step = step
        self.remaining = duration
        self.status = WorkerStatus.BUSY

    def work(self) -> Optional[str]:
        """Spend one tick. Returns the step if it just finished; idle workers do nothing."""
        if self.is_idle or self.remaining == 0:
            return None

        self.remaining -= 1
        self.busy_ticks += 1
        if self.remaining > 0:
            return None

        finished, self.step = self.step, None
        self.status = WorkerStatus.IDLE
        return finished

    def reset(self) -> None:
        self.step = None
        self.remaining = 0
        self.status = WorkerStatus.IDLE
        self.busy_ticks = 0

    def __repr__(self) -> str:
        return (
            f"Worker(id={self.id!r}, step={self.step!r}, "
            f"remaining={self.remaining}, status={self.status.value})"
        )
