"""Configuration layer: constants and typed config dataclasses."""

from turmite.config.constants import (
    CELL_SCALE,
    GRID_SIZE,
    MAX_STATES,
    NUM_HEADINGS,
    NUM_STEPS,
    OUTPUT_PATH,
    PALETTE_SIZE,
    PROGRAM_PATH,
)
from turmite.config.types import RunConfig, SimulationResult

__all__ = [
    "CELL_SCALE",
    "GRID_SIZE",
    "MAX_STATES",
    "NUM_HEADINGS",
    "NUM_STEPS",
    "OUTPUT_PATH",
    "PALETTE_SIZE",
    "PROGRAM_PATH",
    "RunConfig",
    "SimulationResult",
]
