"""CLI entrypoint for running daily puzzle solutions.

This module owns argument parsing, config-file resolution and the run loop.
The puzzle logic lives in ``advent2020.days`` and the shared layers it uses:

- ``advent2020.io.reading``     – input files, lines and sections
- ``advent2020.config``         – puzzle constants and ``RunConfig``
- ``advent2020.io.persistence`` – optional Parquet answers log
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from pathlib import Path

from advent2020.config.constants import INPUT_DIR
from advent2020.config.types import DayAnswers, RunConfig
from advent2020.days import available_days, get_solver
from advent2020.errors import PuzzleError
from advent2020.io.persistence import write_answers
from advent2020.io.reading import read_text
from advent2020.io.schemas import ANSWERS_SCHEMA_VERSION

logger = logging.getLogger(__name__)

ALL_DAYS = "all"
"""Positional value that selects every implemented day."""

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_day(raw: object, key: str) -> int:
    """Coerce a single day number; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_days(raw: object, key: str) -> tuple[int, ...]:
    """Accept ``"all"``, a single day, a comma separated string or a list of days."""
    if isinstance(raw, str):
        if raw.strip().lower() == ALL_DAYS:
            return tuple(available_days())
        return tuple(_coerce_day(part, key) for part in raw.split(","))
    if isinstance(raw, list):
        return tuple(_coerce_day(part, key) for part in raw)
    return (_coerce_day(raw, key),)


def _coerce_path(raw: object, key: str) -> Path:
    """Coerce raw value to Path; only strings and paths are accepted."""
    if isinstance(raw, (str, Path)):
        return Path(raw)
    raise ValueError(f"{key} must be a path string")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    """CLI > file > default resolution for boolean flags."""
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _get_path(
    cli_val: Path | None, key: str, file_cfg: dict[str, object], default: Path | None
) -> Path | None:
    """CLI > file > default resolution for optional paths."""
    raw = _get_val(cli_val, key, file_cfg, default)
    return None if raw is None else _coerce_path(raw, key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Run Advent of Code 2020 solutions")
    parser.add_argument(
        "day",
        nargs="?",
        default=None,
        help=f"day number, comma separated days, or '{ALL_DAYS}'",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--input", type=Path, default=None, help="input file for a single day")
    parser.add_argument("--input-dir", type=Path, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument("--verbose", action=argparse.BooleanOptionalAction, default=None)
    return parser


def _load_config_file(parser: argparse.ArgumentParser, path: Path | None) -> dict[str, object]:
    if path is None:
        return {}
    try:
        file_cfg = json.loads(Path(path).read_text())
    except FileNotFoundError:
        parser.error(f"Config file not found: {path}")
    except json.JSONDecodeError as exc:
        parser.error(f"Config file is not valid JSON: {path}: {exc}")
    if not isinstance(file_cfg, dict):
        parser.error(f"Config file must contain a JSON object: {path}")
    return file_cfg


# ---------------------------------------------------------------------------
# Run loop
# ---------------------------------------------------------------------------


def run_day(day: int, config: RunConfig) -> tuple[DayAnswers, float]:
    """Read the input for ``day`` and solve it; returns answers and elapsed seconds."""
    solver = get_solver(day)
    path = config.input_for(day)
    logger.debug("day %d: reading %s", day, path)
    text = read_text(path)
    start = time.perf_counter()
    answers = solver(text)
    elapsed = time.perf_counter() - start
    logger.debug("day %d: solved in %.3fs", day, elapsed)
    return answers, elapsed


def format_answers(answers: DayAnswers) -> list[str]:
    return [f"Day {answers.day} part {part}: {answer}" for part, answer in answers.parts()]


def run(config: RunConfig) -> list[tuple[DayAnswers, float]]:
    """Solve every configured day in order, printing answers as they arrive."""
    results: list[tuple[DayAnswers, float]] = []
    for day in config.days:
        answers, elapsed = run_day(day, config)
        for line in format_answers(answers):
            print(line)
        results.append((answers, elapsed))
    return results


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint.

    Supports ``--config path/to/config.json`` with the keys ``day``,
    ``input``, ``input_dir``, ``out_dir`` and ``verbose``. CLI arguments
    override config-file values; config-file values override built-in
    defaults. Puzzle failures are logged and exit with status 1.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    file_cfg = _load_config_file(parser, args.config)

    try:
        verbose = _get_bool(args.verbose, "verbose", file_cfg, False)
        days = _coerce_days(_get_val(args.day, "day", file_cfg, ALL_DAYS), "day")
        input_dir = _get_path(args.input_dir, "input_dir", file_cfg, Path(INPUT_DIR))
        input_path = _get_path(args.input, "input", file_cfg, None)
        out_dir = _get_path(args.out_dir, "out_dir", file_cfg, None)
        for day in days:
            get_solver(day)
        config = RunConfig(
            days=days,
            input_dir=input_dir if input_dir is not None else Path(INPUT_DIR),
            input_path=input_path,
            out_dir=out_dir,
        )
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        results = run(config)
        log_path = None if config.out_dir is None else write_answers(results, config.out_dir)
    except PuzzleError as exc:
        logger.error("%s", exc)
        sys.exit(1)

    if log_path is not None:
        summary = {
            "schema_version": ANSWERS_SCHEMA_VERSION,
            "days": [answers.day for answers, _ in results],
            "parts": sum(len(answers.parts()) for answers, _ in results),
            "answers_log": str(log_path),
            "elapsed_seconds": round(sum(elapsed for _, elapsed in results), 6),
        }
        print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
