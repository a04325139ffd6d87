"""Centralized defaults for turmite runs.

Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

GRID_SIZE = 100
"""Default edge length of the square grid, in cells."""

NUM_STEPS = 100_000
"""Default number of automaton steps per run."""

PROGRAM_PATH = "programs/example1.mite"
"""Default rule-source file."""

OUTPUT_PATH = "output.png"
"""Default raster output path."""

CELL_SCALE = 5
"""Pixels per cell edge in the rendered raster."""

PALETTE_SIZE = 6
"""Number of renderable color ids in the built-in palettes."""

NUM_HEADINGS = 4
"""Size of the heading / turn cycle."""

MAX_STATES = 26
"""Internal states are named by the lowercase letters a-z."""
