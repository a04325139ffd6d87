"""Failure taxonomy for loading and running a turmite.

Every error is terminal for the run. Each carries enough context (line number,
step index, signal or position) to diagnose the rule file or pick a larger
grid.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from turmite.domain.rules import Signal


class TurmiteError(Exception):
    """Base class for all turmite load and run failures."""


class LoadError(TurmiteError, ValueError):
    """Rule source could not be read or contains an invalid rule."""

    def __init__(
        self, message: str, line_number: int | None = None, path: Path | None = None
    ) -> None:
        self.line_number = line_number
        self.path = path
        prefix = ""
        if path is not None:
            prefix = f"{path}:"
            if line_number is not None:
                prefix += f"{line_number}: "
            else:
                prefix += " "
        elif line_number is not None:
            prefix = f"line {line_number}: "
        super().__init__(prefix + message)


class NoRuleForSignal(TurmiteError, LookupError):
    """No rule matches the automaton's current (state, color) pair."""

    def __init__(self, signal: Signal, step: int | None = None) -> None:
        self.signal = signal
        self.step = step
        message = f"no rule for state {signal.letter!r} on color {signal.color}"
        if step is not None:
            message += f" at step {step}"
        super().__init__(message)


class OutOfBounds(TurmiteError, IndexError):
    """A grid access or automaton move left the grid."""

    def __init__(self, x: int, y: int, size: int, step: int | None = None) -> None:
        self.x = x
        self.y = y
        self.size = size
        self.step = step
        message = f"position ({x}, {y}) is outside the {size}x{size} grid"
        if step is not None:
            message += f" at step {step}"
        super().__init__(message)
