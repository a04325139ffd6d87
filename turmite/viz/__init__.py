"""Visualization layer: palette themes and grid renderers."""

from turmite.viz.render import grid_to_rgb, render_figure, render_grid
from turmite.viz.theme import DEFAULT_THEME, PAPER_THEME, REGISTERED_THEMES, Theme, get_theme

__all__ = [
    "DEFAULT_THEME",
    "PAPER_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "get_theme",
    "grid_to_rgb",
    "render_figure",
    "render_grid",
]
