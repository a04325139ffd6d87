"""Configuration and result dataclasses for turmite runs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from turmite.config.constants import CELL_SCALE, GRID_SIZE, NUM_STEPS, OUTPUT_PATH, PROGRAM_PATH

__all__ = [
    "RunConfig",
    "SimulationResult",
]


# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SimulationResult:
    """Summary of one completed run."""

    steps: int
    rule_count: int
    final_x: int
    final_y: int
    final_heading: str
    final_state: int
    color_counts: dict[int, int]


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RunConfig:
    """Runtime parameters for a single turmite run.

    Exactly one of ``program`` (rule-source file) and ``ant`` (Langton's-ant
    turn string such as ``"RL"``) selects the rule table; ``ant`` wins when
    both are set.
    """

    program: Path = Path(PROGRAM_PATH)
    ant: str | None = None
    size: int = GRID_SIZE
    steps: int = NUM_STEPS
    output: Path = Path(OUTPUT_PATH)
    scale: int = CELL_SCALE
    theme: str = "default"
    grid_out: Path | None = None
    figure: Path | None = None
    render_partial: bool = False

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError("size must be >= 1")
        if self.steps < 0:
            raise ValueError("steps must be >= 0")
        if self.scale < 1:
            raise ValueError("scale must be >= 1")
        if self.ant is not None and not self.ant:
            raise ValueError("ant must be a non-empty turn string")
