"""Rule-table data model: signals, actions, and the exact-match lookup.

A rule table maps a :class:`Signal` (internal state, observed color) to an
:class:`Action` (next state, color to write, turn). Tables are built once and
never mutated during a run.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from turmite.config.constants import MAX_STATES
from turmite.domain.errors import NoRuleForSignal
from turmite.domain.heading import Turn


def state_from_letter(letter: str) -> int:
    """Map ``'a'`` -> 0, ``'b'`` -> 1, ... ``'z'`` -> 25."""
    if len(letter) != 1 or not "a" <= letter <= "z":
        raise ValueError(f"state must be a single lowercase letter, got {letter!r}")
    return ord(letter) - ord("a")


def state_to_letter(state: int) -> str:
    """Inverse of :func:`state_from_letter`."""
    if not 0 <= state < MAX_STATES:
        raise ValueError(f"state must be in [0, {MAX_STATES}), got {state}")
    return chr(ord("a") + state)


def _check_state_and_color(state: int, color: int) -> None:
    if not 0 <= state < MAX_STATES:
        raise ValueError(f"state must be in [0, {MAX_STATES}), got {state}")
    if color < 0:
        raise ValueError(f"color must be non-negative, got {color}")


@dataclass(frozen=True)
class Signal:
    """Lookup key: the automaton's state and the color under it."""

    state: int
    color: int

    def __post_init__(self) -> None:
        _check_state_and_color(self.state, self.color)

    @property
    def letter(self) -> str:
        """State letter, or the bare number for a state with no letter."""
        if 0 <= self.state < MAX_STATES:
            return state_to_letter(self.state)
        return str(self.state)


@dataclass(frozen=True)
class Action:
    """What a matching rule tells the automaton to do."""

    state: int
    color: int
    turn: Turn

    def __post_init__(self) -> None:
        _check_state_and_color(self.state, self.color)


class RuleTable(Mapping[Signal, Action]):
    """Read-only mapping from :class:`Signal` to :class:`Action`.

    Unlike a plain dict, :meth:`lookup` raises :class:`NoRuleForSignal`
    for an undefined signal instead of returning a default.
    """

    def __init__(self, rules: Mapping[Signal, Action]) -> None:
        self._rules: Mapping[Signal, Action] = MappingProxyType(dict(rules))

    def lookup(self, signal: Signal) -> Action:
        try:
            return self._rules[signal]
        except KeyError:
            raise NoRuleForSignal(signal) from None

    def __getitem__(self, signal: Signal) -> Action:
        return self._rules[signal]

    def __iter__(self) -> Iterator[Signal]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleTable({len(self)} rules)"

    def states(self) -> set[int]:
        """All internal states mentioned as input or output."""
        found = {signal.state for signal in self._rules}
        found.update(action.state for action in self._rules.values())
        return found

    def colors(self) -> set[int]:
        """All colors mentioned as input or output."""
        found = {signal.color for signal in self._rules}
        found.update(action.color for action in self._rules.values())
        return found


# Letters follow Golly's Langton's-ant generator: R right, L left, U u-turn, N no turn.
_ANT_TURNS: dict[str, Turn] = {
    "R": Turn.RIGHT,
    "L": Turn.LEFT,
    "U": Turn.BACKWARD,
    "N": Turn.FORWARD,
}


def ant_rule_table(spec: str) -> RuleTable:
    """Build a single-state Langton's-ant table from a turn string.

    On color ``i`` the ant turns by ``spec[i]`` and repaints the cell with color
    ``(i + 1) % len(spec)``. ``"RL"`` is the classic ant.
    """
    if not spec:
        raise ValueError("ant spec must not be empty")
    letters = spec.upper()
    unknown = sorted(set(letters) - set(_ANT_TURNS))
    if unknown:
        raise ValueError(f"Unknown ant turn letters {unknown}; expected R, L, U or N")
    n_colors = len(letters)
    return RuleTable(
        {
            Signal(state=0, color=i): Action(
                state=0, color=(i + 1) % n_colors, turn=_ANT_TURNS[letter]
            )
            for i, letter in enumerate(letters)
        }
    )
