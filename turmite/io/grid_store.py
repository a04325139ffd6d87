"""Parquet export and import of a final grid."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import pyarrow as pa
import pyarrow.parquet as pq

from turmite.domain.grid import Grid
from turmite.io.schemas import (
    GRID_SCHEMA,
    GRID_SCHEMA_VERSION,
    METADATA_SIZE_KEY,
    METADATA_VERSION_KEY,
)

logger = logging.getLogger(__name__)


def write_grid(grid: Grid, path: Path, metadata: dict[str, object] | None = None) -> None:
    """Write every cell of ``grid`` as an ``(x, y, color)`` row."""
    path = Path(path)
    size = grid.size
    ys, xs = np.indices((size, size))
    table = pa.table(
        {
            "x": xs.ravel(),
            "y": ys.ravel(),
            "color": grid.cells.ravel(),
        },
        schema=GRID_SCHEMA,
    )
    schema_metadata: dict[bytes, bytes] = {
        METADATA_SIZE_KEY: str(size).encode(),
        METADATA_VERSION_KEY: str(GRID_SCHEMA_VERSION).encode(),
    }
    for key, value in (metadata or {}).items():
        schema_metadata[key.encode()] = str(value).encode()
    table = table.replace_schema_metadata(schema_metadata)

    path.parent.mkdir(parents=True, exist_ok=True)
    pq.write_table(table, path)
    logger.info("Wrote %dx%d grid to %s", size, size, path)


def read_grid(path: Path) -> Grid:
    """Restore a grid written by :func:`write_grid`."""
    table = pq.read_table(Path(path))
    metadata = table.schema.metadata or {}
    if METADATA_SIZE_KEY in metadata:
        size = int(metadata[METADATA_SIZE_KEY])
    elif table.num_rows:
        size = max(table.column("x").to_pylist() + table.column("y").to_pylist()) + 1
    else:
        raise ValueError(f"Cannot infer grid size: {path} is empty and has no size metadata")

    cells = np.zeros((size, size), dtype=np.int64)
    xs = table.column("x").to_numpy()
    ys = table.column("y").to_numpy()
    colors = table.column("color").to_numpy()
    cells[ys, xs] = colors
    return Grid.from_array(cells)
