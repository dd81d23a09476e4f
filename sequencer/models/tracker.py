"""Readiness tracker — which steps are pending, in progress and done."""

from typing import TYPE_CHECKING, Iterable, Optional

if TYPE_CHECKING:
    from sequencer.models.requirement import Requirement


class ReadinessTracker:
    """
    Tracks the lifecycle of every step: PENDING → IN PROGRESS → DONE.

    A step is pending while it sits in `todo`, in progress once begun but not
    yet finished (in neither set), and done once it is in `done`. The tracker
    holds no scheduling policy: `begin` and `finish` accept any step, callers
    decide which steps are eligible.
    """

    def __init__(self, requirements: Iterable["Requirement"]):
        self._predecessors: dict[str, set[str]] = {}
        todo: set[str] = set()
        for req in requirements:
            todo.add(req.must_finish)
            todo.add(req.can_begin)
            self._predecessors.setdefault(req.can_begin, set()).add(req.must_finish)

        self.universe: frozenset[str] = frozenset(todo)
        self._todo: set[str] = todo
        self._done: set[str] = set()

    # ── Queries ───────────────────────────────────────────────────────

    @property
    def pending(self) -> frozenset[str]:
        return frozenset(self._todo)

    @property
    def done(self) -> frozenset[str]:
        return frozenset(self._done)

    @property
    def in_progress(self) -> frozenset[str]:
        return self.universe - self._todo - self._done

    @property
    def unfinished(self) -> frozenset[str]:
        """Steps of the universe not finished yet, pending or in progress."""
        return self.universe - self._done

    def predecessors(self, step: str) -> frozenset[str]:
        return frozenset(self._predecessors.get(step, ()))

    def is_done(self, step: str) -> bool:
        return step in self._done

    def is_doable(self, step: str) -> bool:
        """Pending, and every predecessor finished. Roots are trivially doable."""
        if step not in self._todo:
            return False
        return all(self.is_done(pred) for pred in self.predecessors(step))

    def get_doable(self) -> set[str]:
        """All doable steps, in no particular order."""
        return {step for step in self._todo if self.is_doable(step)}

    def is_complete(self) -> bool:
        """Nothing pending and every step of the universe finished."""
        return not self._todo and self.universe <= self._done

    def is_exhausted(self) -> bool:
        """Every step has been begun, so no step can become doable any more."""
        return not self._todo

    # ── Mutations ─────────────────────────────────────────────────────

    def begin(self, step: str) -> None:
        self._todo.discard(step)

    def finish(self, step: str) -> None:
        self._done.add(step)

    def do_it(self, step: str) -> None:
        """Begin and finish in one go (zero-duration work)."""
        self.begin(step)
        self.finish(step)

    def next_ready(self) -> Optional[str]:
        """Complete the alphabetically first doable step, or return None when stuck or done."""
        doable = self.get_doable()
        if not doable:
            return None
        step = min(doable)
        self.do_it(step)
        return step

    def __repr__(self) -> str:
        return (
            f"ReadinessTracker(pending={len(self._todo)}, "
            f"in_progress={len(self.in_progress)}, done={len(self._done)})"
        )
