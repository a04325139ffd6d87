"""Matplotlib-based rendering of turmite grids.

Both renderers take the grid array as stored (``cells[y, x]``) and draw it
with ``origin="upper"``: column ``x`` grows east, row ``y`` grows south,
matching the automaton's movement vectors.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
from matplotlib.colors import BoundaryNorm, ListedColormap  # noqa: E402
from matplotlib.patches import Patch  # noqa: E402

from turmite.domain.grid import Grid  # noqa: E402
from turmite.viz.theme import DEFAULT_THEME, Theme  # noqa: E402

if TYPE_CHECKING:
    from turmite.domain.turmite import Turmite

logger = logging.getLogger(__name__)

# Rotation of the heading marker (matplotlib markers "^", ">", "v", "<")
_HEADING_MARKERS = ("^", ">", "v", "<")


def _check_palette(cells: np.ndarray, theme: Theme) -> None:
    """Raise ValueError when a cell holds a color id the palette cannot draw."""
    if cells.size == 0:
        return
    lo, hi = int(cells.min()), int(cells.max())
    if lo < 0 or hi >= theme.num_colors:
        bad = sorted({int(v) for v in np.unique(cells) if not 0 <= v < theme.num_colors})
        raise ValueError(
            f"Grid contains color ids {bad} outside the palette (0-{theme.num_colors - 1})"
        )


def grid_to_rgb(cells: np.ndarray, theme: Theme = DEFAULT_THEME, scale: int = 1) -> np.ndarray:
    """Return a ``(H*scale, W*scale, 3)`` uint8 image of ``cells``.

    Pixel block ``[y*scale:(y+1)*scale, x*scale:(x+1)*scale]`` shows cell
    ``(x, y)``.
    """
    if scale < 1:
        raise ValueError("scale must be >= 1")
    cells = np.asarray(cells)
    _check_palette(cells, theme)
    lut = np.asarray(theme.palette, dtype=np.uint8)
    rgb = lut[cells]
    if scale > 1:
        rgb = np.repeat(np.repeat(rgb, scale, axis=0), scale, axis=1)
    return rgb


def render_grid(
    grid: Grid,
    output_path: Path,
    theme: Theme = DEFAULT_THEME,
    scale: int = 5,
) -> None:
    """Write the grid as a raster image, ``scale`` pixels per cell edge."""
    output_path = Path(output_path)
    rgb = grid_to_rgb(grid.cells, theme=theme, scale=scale)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    plt.imsave(output_path, rgb)
    logger.info("Wrote %dx%d image to %s", rgb.shape[1], rgb.shape[0], output_path)


def _palette_cmap(theme: Theme) -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete colormap with one bin per palette entry."""
    cmap = ListedColormap(theme.hex_colors())
    bounds = [i - 0.5 for i in range(theme.num_colors + 1)]
    norm = BoundaryNorm(bounds, cmap.N)
    return cmap, norm


def _build_legend_handles(colors: set[int], theme: Theme) -> list[Patch]:
    hex_colors = theme.hex_colors()
    return [
        Patch(facecolor=hex_colors[c], edgecolor="gray", label=f"Color {c}")
        for c in sorted(colors)
    ]


def render_figure(
    grid: Grid,
    output_path: Path,
    theme: Theme = DEFAULT_THEME,
    title: str | None = None,
    turmite: Turmite | None = None,
) -> None:
    """Render an annotated figure: palette legend and optional automaton marker."""
    output_path = Path(output_path)
    cells = grid.cells
    _check_palette(cells, theme)
    cmap, norm = _palette_cmap(theme)

    fig, ax = plt.subplots(figsize=(6, 6))
    ax.imshow(cells, cmap=cmap, norm=norm, origin="upper", aspect="equal")
    if grid.size <= 50:
        for i in range(grid.size + 1):
            ax.axvline(i - 0.5, color=theme.grid_line_color, linewidth=0.5)
            ax.axhline(i - 0.5, color=theme.grid_line_color, linewidth=0.5)
    ax.set_xticks([])
    ax.set_yticks([])

    if turmite is not None:
        ax.plot(
            turmite.x,
            turmite.y,
            marker=_HEADING_MARKERS[turmite.heading],
            color=theme.marker_color,
            markersize=8,
            markeredgecolor="black",
        )
    if title:
        ax.set_title(title)

    present = set(grid.histogram())
    ax.legend(
        handles=_build_legend_handles(present, theme),
        loc="upper left",
        bbox_to_anchor=(1.02, 1.0),
        fontsize=8,
    )
    fig.tight_layout()

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    logger.info("Wrote figure to %s", output_path)
