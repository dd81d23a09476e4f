"""Requirement model — the "must finish before" relation between two steps."""

import logging
import re
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field

from sequencer.errors import RequirementParseError
from sequencer.models.tracker import ReadinessTracker

logger = logging.getLogger(__name__)

STEP_PATTERN = r"^[A-Z]$"

_RECORD_RE = re.compile(
    r"^Step (?P<must_finish>[A-Z]) must be finished before step (?P<can_begin>[A-Z]) can begin\.$"
)


class Requirement(BaseModel):
    """One precedence pair: `must_finish` has to complete before `can_begin` starts."""

    model_config = ConfigDict(frozen=True)

    must_finish: str = Field(pattern=STEP_PATTERN, description="Step that must be finished first")
    can_begin: str = Field(pattern=STEP_PATTERN, description="Step unlocked by it")

    @classmethod
    def parse(cls, line: str, line_number: int | None = None) -> "Requirement":
        """Parse `Step X must be finished before step Y can begin.`"""
        match = _RECORD_RE.match(line.strip())
        if match is None:
            raise RequirementParseError(line, line_number)
        return cls(**match.groupdict())

    def __str__(self) -> str:
        return f"Step {self.must_finish} must be finished before step {self.can_begin} can begin."

    def __repr__(self) -> str:
        return f"Requirement({self.must_finish!r} -> {self.can_begin!r})"


class PrecedenceSet:
    """Immutable collection of requirements; duplicates collapse."""

    def __init__(self, requirements: Iterable[Requirement] = ()):
        self.requirements: frozenset[Requirement] = frozenset(requirements)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "PrecedenceSet":
        """Parse text records, skipping blank lines. Stops at the first bad line."""
        requirements = [
            Requirement.parse(line, line_number)
            for line_number, line in enumerate(lines, start=1)
            if line.strip()
        ]
        logger.debug("Parsed %d requirement records", len(requirements))
        return cls(requirements)

    @property
    def universe(self) -> frozenset[str]:
        """Every step mentioned on either side of a requirement."""
        steps: set[str] = set()
        for req in self.requirements:
            steps.add(req.must_finish)
            steps.add(req.can_begin)
        return frozenset(steps)

    def tracker(self) -> ReadinessTracker:
        """A fresh tracker for one scheduling run."""
        return ReadinessTracker(self.requirements)

    def __len__(self) -> int:
        return len(self.requirements)

    def __iter__(self):
        return iter(sorted(self.requirements, key=lambda r: (r.must_finish, r.can_begin)))

    def __repr__(self) -> str:
        return f"PrecedenceSet(requirements={len(self.requirements)}, steps={len(self.universe)})"
