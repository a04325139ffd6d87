"""Turmite simulator: a Turing-machine-like automaton walking a 2D color grid."""

from turmite.domain import (
    Action,
    Grid,
    Heading,
    LoadError,
    NoRuleForSignal,
    OutOfBounds,
    RuleTable,
    Signal,
    Turmite,
    TurmiteError,
    Turn,
)
from turmite.io import load_rules, parse_rules
from turmite.simulation import run_simulation, run_steps

__all__ = [
    "Action",
    "Grid",
    "Heading",
    "LoadError",
    "NoRuleForSignal",
    "OutOfBounds",
    "RuleTable",
    "Signal",
    "Turmite",
    "TurmiteError",
    "Turn",
    "load_rules",
    "parse_rules",
    "run_simulation",
    "run_steps",
]
