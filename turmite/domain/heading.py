"""Compass headings and relative turns on a 4-cycle.

Absolute headings and relative turns share the same integer space, so applying
a turn is plain modular addition: ``(heading + turn) % 4``. Movement uses
screen coordinates, with y increasing downward (south).
"""

from __future__ import annotations

from enum import IntEnum

from turmite.config.constants import NUM_HEADINGS


class Turn(IntEnum):
    """Rotation relative to the current heading, in clockwise quarter-turns."""

    FORWARD = 0
    RIGHT = 1
    BACKWARD = 2
    LEFT = 3

    @classmethod
    def from_word(cls, word: str) -> Turn:
        """Parse a turn word (case-insensitive)."""
        key = word.lower()
        if key not in _TURN_WORDS:
            valid = ", ".join(sorted(_TURN_WORDS))
            raise ValueError(f"Unknown turn {word!r}; expected one of: {valid}")
        return _TURN_WORDS[key]


_TURN_WORDS: dict[str, Turn] = {
    "forward": Turn.FORWARD,
    "f": Turn.FORWARD,
    "backward": Turn.BACKWARD,
    "back": Turn.BACKWARD,
    "left": Turn.LEFT,
    "l": Turn.LEFT,
    "right": Turn.RIGHT,
    "r": Turn.RIGHT,
}


class Heading(IntEnum):
    """Absolute facing of the automaton."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def rotate(self, turn: Turn | int) -> Heading:
        """Return the heading after turning ``turn`` quarter-turns clockwise."""
        return Heading((int(self) + int(turn)) % NUM_HEADINGS)

    def left(self) -> Heading:
        return self.rotate(Turn.LEFT)

    def right(self) -> Heading:
        return self.rotate(Turn.RIGHT)

    @property
    def delta(self) -> tuple[int, int]:
        """Unit movement vector ``(dx, dy)``."""
        return _DELTAS[self]


_DELTAS: dict[Heading, tuple[int, int]] = {
    Heading.NORTH: (0, -1),
    Heading.EAST: (1, 0),
    Heading.SOUTH: (0, 1),
    Heading.WEST: (-1, 0),
}
