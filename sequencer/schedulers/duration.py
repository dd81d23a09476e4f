"""Duration policy — intrinsic work time of each step."""

import string

from sequencer.errors import UnsupportedTaskIdentifier

# A → 1, B → 2, ..., Z → 26
STEP_DURATIONS: dict[str, int] = {
    letter: position for position, letter in enumerate(string.ascii_uppercase, start=1)
}


def step_duration(step: str) -> int:
    """Ticks a step needs before any base delay is added."""
    try:
        return STEP_DURATIONS[step]
    except (KeyError, TypeError):
        raise UnsupportedTaskIdentifier(step) from None
