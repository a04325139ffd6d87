"""I/O layer: rule-source parsing and final-grid persistence."""

from turmite.io.grid_store import read_grid, write_grid
from turmite.io.rule_file import load_rules, parse_rules

__all__ = [
    "load_rules",
    "parse_rules",
    "read_grid",
    "write_grid",
]
