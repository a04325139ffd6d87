"""The automaton engine: one read, one lookup, one write, one turn, one move."""

from __future__ import annotations

from dataclasses import dataclass

from turmite.domain.errors import NoRuleForSignal, OutOfBounds
from turmite.domain.grid import Grid
from turmite.domain.heading import Heading
from turmite.domain.rules import RuleTable, Signal


@dataclass
class Turmite:
    """A single automaton walking a :class:`Grid` it does not own.

    ``steps_taken`` counts completed steps and doubles as the zero-based index
    of the next step, which is what errors report.
    """

    rules: RuleTable
    x: int
    y: int
    heading: Heading = Heading.NORTH
    state: int = 0
    steps_taken: int = 0

    @classmethod
    def at_center(cls, rules: RuleTable, grid: Grid) -> Turmite:
        """Place a fresh automaton at the grid centre, facing north, in state 0."""
        x, y = grid.center
        return cls(rules=rules, x=x, y=y)

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    def step(self, grid: Grid) -> None:
        """Advance one step, mutating ``grid`` at the current cell.

        Raises :class:`NoRuleForSignal` before touching the grid when no rule
        matches. Raises :class:`OutOfBounds` when the move would leave the grid;
        the write, state change and turn of that step stay applied and the
        position stays on the last in-bounds cell.
        """
        step_index = self.steps_taken
        if not grid.contains(self.x, self.y):
            raise OutOfBounds(self.x, self.y, grid.size, step=step_index)

        signal = Signal(state=self.state, color=grid.get(self.x, self.y))
        try:
            action = self.rules.lookup(signal)
        except NoRuleForSignal:
            raise NoRuleForSignal(signal, step=step_index) from None

        grid.set(self.x, self.y, action.color)
        self.state = action.state
        self.heading = self.heading.rotate(action.turn)

        dx, dy = self.heading.delta
        nx, ny = self.x + dx, self.y + dy
        if not grid.contains(nx, ny):
            raise OutOfBounds(nx, ny, grid.size, step=step_index)
        self.x, self.y = nx, ny
        self.steps_taken += 1
