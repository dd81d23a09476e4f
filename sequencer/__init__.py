"""Sequencer — dependency-ordered step scheduling on a simulated workforce."""

__version__ = "0.1.0"
