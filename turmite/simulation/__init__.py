"""Simulation driver: fixed-length runs of a single automaton."""

from turmite.simulation.engine import run_simulation, run_steps, summarize

__all__ = [
    "run_simulation",
    "run_steps",
    "summarize",
]
