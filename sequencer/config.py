"""Scheduler configuration."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_WORKER_COUNT = 5
DEFAULT_BASE_DELAY = 60


class SchedulerConfig(BaseModel):
    """Workforce settings: pool size and the fixed overhead added to every step."""

    model_config = ConfigDict(frozen=True)

    worker_count: int = Field(default=DEFAULT_WORKER_COUNT, ge=1, description="Number of worker slots")
    base_delay: int = Field(default=DEFAULT_BASE_DELAY, ge=0, description="Ticks added to every step duration")

    @classmethod
    def simple(cls) -> "SchedulerConfig":
        """Two workers and no delay, the small worked-example setup."""
        return cls(worker_count=2, base_delay=0)
