"""Domain errors raised by the sequencer."""

from typing import Iterable, Optional


class SequencerError(Exception):
    """Base class for every error the sequencer raises on purpose."""


class RequirementParseError(SequencerError):
    """A precedence record did not match the expected sentence."""

    def __init__(self, line: str, line_number: Optional[int] = None):
        self.line = line
        self.line_number = line_number
        where = f" on line {line_number}" if line_number is not None else ""
        super().__init__(f"Malformed requirement{where}: {line!r}")


class CyclicOrUnreachableDependency(SequencerError):
    """No progress is possible although some steps were never finished."""

    def __init__(self, stuck_steps: Iterable[str]):
        self.stuck_steps = sorted(stuck_steps)
        super().__init__(
            "Steps can never begin (cycle or unreachable predecessor): "
            + ", ".join(self.stuck_steps)
        )


class UnsupportedTaskIdentifier(SequencerError):
    """Step identifier outside the A..Z alphabet."""

    def __init__(self, step: object):
        self.step = step
        super().__init__(f"Unsupported step identifier: {step!r}")
