from sequencer.simulator.events import Event, EventType
from sequencer.simulator.generator import ScenarioGenerator

__all__ = ["Event", "EventType", "ScenarioGenerator"]
