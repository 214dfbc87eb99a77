"""Path construction helpers for run outputs."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def answers_log_path(out_dir: Path) -> Path:
    """Return path to the answers Parquet file."""
    return logs_dir(out_dir) / "answers.parquet"
