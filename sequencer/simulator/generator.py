"""Scenario generator — reproducible random precedence sets for simulation."""

import random
import string

from sequencer.models.requirement import PrecedenceSet, Requirement


class ScenarioGenerator:
    """Generates acyclic precedence sets over A..Z using a seeded RNG."""

    def __init__(self, seed: int = 42):
        self.rng = random.Random(seed)

    def generate(self, num_steps: int = 10, density: float = 0.3) -> PrecedenceSet:
        """Random DAG on `num_steps` letters. Edges only point from earlier to later steps
        of a shuffled order, and every step takes part in at least one requirement."""
        if not 2 <= num_steps <= len(string.ascii_uppercase):
            raise ValueError(f"num_steps must be between 2 and 26, got {num_steps}")
        if not 0.0 <= density <= 1.0:
            raise ValueError(f"density must be between 0 and 1, got {density}")

        steps = self.rng.sample(string.ascii_uppercase, num_steps)
        requirements: set[Requirement] = set()
        linked: set[str] = set()

        for i, earlier in enumerate(steps):
            for later in steps[i + 1:]:
                if self.rng.random() < density:
                    requirements.add(Requirement(must_finish=earlier, can_begin=later))
                    linked.update((earlier, later))

        # Tie isolated steps into the graph so they belong to the universe
        for i, step in enumerate(steps):
            if step in linked:
                continue
            if i > 0:
                requirements.add(Requirement(must_finish=self.rng.choice(steps[:i]), can_begin=step))
            else:
                requirements.add(Requirement(must_finish=step, can_begin=self.rng.choice(steps[1:])))
            linked.add(step)

        return PrecedenceSet(requirements)
