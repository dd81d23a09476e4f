"""
Tests for the Sequential Scheduler.

These tests verify:
    1. The worked example yields CABDFE
    2. Every generated order respects every requirement
    3. No step is silently dropped from an acyclic input
    4. Cycles raise in strict mode and truncate otherwise
"""

import pytest

from sequencer.errors import CyclicOrUnreachableDependency
from sequencer.models.requirement import PrecedenceSet, Requirement
from sequencer.schedulers.sequential import SequentialScheduler, SOLO_WORKER_ID
from sequencer.simulator.generator import ScenarioGenerator


def _precedence(*pairs: str) -> PrecedenceSet:
    """Build a precedence set from "XY" strings meaning X before Y."""
    return PrecedenceSet(Requirement(must_finish=p[0], can_begin=p[1]) for p in pairs)


EXAMPLE = _precedence("CA", "CF", "AB", "AD", "BE", "DE", "FE")


class TestSequentialScheduler:
    """Tests for the single-worker alphabetical scheduler."""

    def setup_method(self):
        self.scheduler = SequentialScheduler()

    def test_example_order(self):
        assert self.scheduler.order(EXAMPLE.tracker()) == "CABDFE"

    def test_alphabetical_tie_break(self):
        """Independent roots come out in alphabetical order."""
        precedence = _precedence("ZB", "AB", "MB")
        assert self.scheduler.order(precedence.tracker()) == "AMZB"

    def test_assignments_are_positional(self):
        assignments = self.scheduler.schedule(EXAMPLE.tracker())
        assert [a.scheduled_time for a in assignments] == list(range(6))
        assert all(a.worker_id == SOLO_WORKER_ID for a in assignments)

    def test_tracker_complete_afterwards(self):
        tracker = EXAMPLE.tracker()
        self.scheduler.schedule(tracker)
        assert tracker.is_complete()

    @pytest.mark.parametrize("seed", range(10))
    def test_order_is_topological(self, seed):
        precedence = ScenarioGenerator(seed=seed).generate(num_steps=15, density=0.25)
        order = self.scheduler.order(precedence.tracker())
        position = {step: i for i, step in enumerate(order)}
        for req in precedence:
            assert position[req.must_finish] < position[req.can_begin]

    @pytest.mark.parametrize("seed", range(10))
    def test_order_covers_universe(self, seed):
        precedence = ScenarioGenerator(seed=seed).generate(num_steps=12, density=0.4)
        order = self.scheduler.order(precedence.tracker())
        assert len(order) == len(precedence.universe)
        assert set(order) == precedence.universe

    def test_cycle_raises(self):
        precedence = _precedence("AB", "BC", "CA", "DA")
        with pytest.raises(CyclicOrUnreachableDependency) as excinfo:
            self.scheduler.order(precedence.tracker())
        assert excinfo.value.stuck_steps == ["A", "B", "C"]

    def test_cycle_truncates_when_not_strict(self):
        precedence = _precedence("AB", "BA", "CD")
        scheduler = SequentialScheduler(strict=False)
        assert scheduler.order(precedence.tracker()) == "CD"

    def test_empty_precedence(self):
        assert self.scheduler.order(PrecedenceSet().tracker()) == ""

    def test_name(self):
        assert self.scheduler.name == "SequentialScheduler"
