"""Parquet persistence for computed answers."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from advent2020.config.types import DayAnswers
from advent2020.errors import OutputFileError
from advent2020.io.paths import answers_log_path
from advent2020.io.schemas import ANSWERS_SCHEMA


def answers_to_columns(
    results: list[tuple[DayAnswers, float]],
) -> dict[str, list[int | str | float]]:
    """Flatten ``(answers, elapsed_seconds)`` pairs into one row per part."""
    columns: dict[str, list[int | str | float]] = {name: [] for name in ANSWERS_SCHEMA.names}
    for answers, elapsed in results:
        for part, answer in answers.parts():
            columns["day"].append(answers.day)
            columns["part"].append(part)
            columns["answer"].append(str(answer))
            columns["elapsed_seconds"].append(elapsed)
    return columns


def write_answers(results: list[tuple[DayAnswers, float]], out_dir: Path) -> Path:
    """Write the answers log to ``<out_dir>/logs/answers.parquet`` and return its path."""
    path = answers_log_path(Path(out_dir))
    table = pa.Table.from_pydict(answers_to_columns(results), schema=ANSWERS_SCHEMA)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        pq.write_table(table, path)
    except OSError as exc:
        raise OutputFileError(f"could not write answers log {path}: {exc}") from exc
    return path
