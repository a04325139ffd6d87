"""Driver loop: run an automaton for a fixed number of steps."""

from __future__ import annotations

import logging

from turmite.config.types import SimulationResult
from turmite.domain.grid import Grid
from turmite.domain.rules import RuleTable
from turmite.domain.turmite import Turmite

logger = logging.getLogger(__name__)


def run_steps(turmite: Turmite, grid: Grid, steps: int) -> None:
    """Call :meth:`Turmite.step` ``steps`` times.

    The first failure propagates immediately; ``grid`` is left as it was
    when the failing step raised.
    """
    if steps < 0:
        raise ValueError("steps must be >= 0")
    for _ in range(steps):
        turmite.step(grid)


def summarize(turmite: Turmite, grid: Grid) -> SimulationResult:
    """Build a :class:`SimulationResult` from the post-run state."""
    return SimulationResult(
        steps=turmite.steps_taken,
        rule_count=len(turmite.rules),
        final_x=turmite.x,
        final_y=turmite.y,
        final_heading=turmite.heading.name,
        final_state=turmite.state,
        color_counts=grid.histogram(),
    )


def run_simulation(
    rules: RuleTable, size: int, steps: int, grid: Grid | None = None
) -> tuple[Grid, SimulationResult]:
    """Run a fresh automaton from the grid centre and return the final grid.

    Pass ``grid`` to keep a handle on the partially written grid if the run
    fails; otherwise a new zeroed grid of ``size`` is created.
    """
    if grid is None:
        grid = Grid(size)
    elif grid.size != size:
        raise ValueError(f"grid size {grid.size} conflicts with size {size}")

    turmite = Turmite.at_center(rules, grid)
    logger.info(
        "Running %d steps on a %dx%d grid from (%d, %d)",
        steps,
        size,
        size,
        turmite.x,
        turmite.y,
    )
    run_steps(turmite, grid, steps)
    result = summarize(turmite, grid)
    logger.info(
        "Finished at (%d, %d) facing %s in state %d",
        result.final_x,
        result.final_y,
        result.final_heading,
        result.final_state,
    )
    return grid, result
