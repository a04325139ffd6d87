"""Parquet schema for the exported final grid.

One row per cell. Run metadata (grid size, step count, rule count) travels
in the schema's key/value metadata.
"""

from __future__ import annotations

import pyarrow as pa

GRID_SCHEMA_VERSION = 1

GRID_SCHEMA = pa.schema(
    [
        ("x", pa.int64()),
        ("y", pa.int64()),
        ("color", pa.int64()),
    ]
)

METADATA_SIZE_KEY = b"grid_size"
METADATA_VERSION_KEY = b"schema_version"
