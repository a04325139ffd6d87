"""Domain layer: headings, rule tables, the grid, and the automaton engine."""

from turmite.domain.errors import LoadError, NoRuleForSignal, OutOfBounds, TurmiteError
from turmite.domain.grid import Grid
from turmite.domain.heading import Heading, Turn
from turmite.domain.rules import (
    Action,
    RuleTable,
    Signal,
    ant_rule_table,
    state_from_letter,
    state_to_letter,
)
from turmite.domain.turmite import Turmite

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
    "ant_rule_table",
    "state_from_letter",
    "state_to_letter",
]
