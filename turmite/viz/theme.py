"""Palette theme presets for grid renderers.

Themes are frozen dataclasses grouping all styling constants, so palettes can
be swapped via the ``--theme`` CLI argument or programmatically.
"""

from __future__ import annotations

from dataclasses import dataclass

from turmite.config.constants import PALETTE_SIZE

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class Theme:
    """Complete collection of rendering style tokens."""

    # Color id -> RGB; index 0 is the background
    palette: tuple[RGB, ...] = (
        (0, 0, 0),
        (125, 0, 0),
        (0, 125, 0),
        (0, 0, 125),
        (125, 0, 125),
        (255, 255, 255),
    )
    grid_line_color: str = "#333333"
    marker_color: str = "#FFC107"

    def __post_init__(self) -> None:
        if len(self.palette) != PALETTE_SIZE:
            raise ValueError(
                f"palette must have {PALETTE_SIZE} colors, got {len(self.palette)}"
            )
        for rgb in self.palette:
            if len(rgb) != 3 or not all(0 <= channel <= 255 for channel in rgb):
                raise ValueError(f"palette entry {rgb!r} is not an RGB triple in 0-255")

    @property
    def num_colors(self) -> int:
        return len(self.palette)

    def hex_colors(self) -> list[str]:
        return [f"#{r:02X}{g:02X}{b:02X}" for r, g, b in self.palette]


# ---------------------------------------------------------------------------
# Built-in presets
# ---------------------------------------------------------------------------

DEFAULT_THEME = Theme()

PAPER_THEME = Theme(
    palette=(
        (255, 255, 255),
        (214, 39, 40),
        (44, 160, 44),
        (31, 119, 180),
        (148, 103, 189),
        (0, 0, 0),
    ),
    grid_line_color="#E0E0E0",
    marker_color="#FF7F0E",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "paper": PAPER_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
