"""Parquet schema for the answers log written by ``advent2020 --out-dir``."""

from __future__ import annotations

import pyarrow as pa

ANSWERS_SCHEMA_VERSION = 1

ANSWERS_SCHEMA = pa.schema(
    [
        ("day", pa.int64()),
        ("part", pa.int64()),
        ("answer", pa.string()),
        ("elapsed_seconds", pa.float64()),
    ]
)
