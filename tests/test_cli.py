"""Tests for advent2020.cli."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pyarrow.parquet as pq
import pytest

from advent2020.cli import _coerce_days, main
from advent2020.days import available_days

EXPENSES = "1721\n979\n366\n299\n675\n1456\n"
HANDSHAKE = "5764801\n17807724\n"


def _write_inputs(input_dir: Path) -> None:
    input_dir.mkdir(parents=True, exist_ok=True)
    (input_dir / "day1.txt").write_text(EXPENSES)
    (input_dir / "day25.txt").write_text(HANDSHAKE)


class TestCoerceDays:
    def test_all(self) -> None:
        assert _coerce_days("all", "day") == tuple(available_days())

    def test_comma_separated(self) -> None:
        assert _coerce_days("1,25", "day") == (1, 25)

    def test_list_from_config_file(self) -> None:
        assert _coerce_days([3, 11], "day") == (3, 11)

    def test_single_int(self) -> None:
        assert _coerce_days(7, "day") == (7,)

    @pytest.mark.parametrize("raw", [True, "one", 1.5, None])
    def test_rejects(self, raw: object) -> None:
        with pytest.raises(ValueError, match="day"):
            _coerce_days(raw, "day")


class TestMain:
    def test_single_day_with_explicit_input(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "expenses.txt"
        path.write_text(EXPENSES)
        main(["1", "--input", str(path)])
        assert capsys.readouterr().out.splitlines() == [
            "Day 1 part 1: 514579",
            "Day 1 part 2: 241861950",
        ]

    def test_single_part_day(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        _write_inputs(tmp_path)
        main(["25", "--input-dir", str(tmp_path)])
        assert capsys.readouterr().out.splitlines() == ["Day 25 part 1: 14897079"]

    def test_config_file_supplies_days_and_input_dir(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        _write_inputs(tmp_path / "inputs")
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"day": [1, 25], "input_dir": str(tmp_path / "inputs")}))
        main(["--config", str(config)])
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Day 1 part 1: 514579"
        assert lines[-1] == "Day 25 part 1: 14897079"

    def test_cli_overrides_config_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        _write_inputs(tmp_path)
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"day": 1, "input_dir": str(tmp_path)}))
        main(["25", "--config", str(config)])
        assert capsys.readouterr().out.splitlines() == ["Day 25 part 1: 14897079"]

    def test_out_dir_writes_answers_log(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        _write_inputs(tmp_path / "inputs")
        out_dir = tmp_path / "out"
        main(["1,25", "--input-dir", str(tmp_path / "inputs"), "--out-dir", str(out_dir)])
        output = capsys.readouterr().out
        summary = json.loads(output[output.index("{") :])
        assert summary["days"] == [1, 25]
        assert summary["parts"] == 3
        table = pq.read_table(out_dir / "logs" / "answers.parquet")
        assert table.column("answer").to_pylist() == ["514579", "241861950", "14897079"]

    def test_missing_input_exits_with_error(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.ERROR), pytest.raises(SystemExit) as exc_info:
            main(["1", "--input-dir", str(tmp_path)])
        assert exc_info.value.code == 1
        assert "could not read input file" in caplog.text

    def test_unwritable_out_dir_exits_with_error(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        _write_inputs(tmp_path / "inputs")
        blocker = tmp_path / "out"
        blocker.write_text("not a directory")
        argv = ["1", "--input-dir", str(tmp_path / "inputs"), "--out-dir", str(blocker)]
        with caplog.at_level(logging.ERROR), pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code == 1
        assert "could not write answers log" in caplog.text

    def test_parse_error_exits_with_error(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = tmp_path / "bad.txt"
        path.write_text("1721\nnot a number\n")
        with caplog.at_level(logging.ERROR), pytest.raises(SystemExit) as exc_info:
            main(["1", "--input", str(path)])
        assert exc_info.value.code == 1
        assert "expense entry" in caplog.text

    def test_unimplemented_day_is_a_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["14"])
        assert exc_info.value.code == 2

    def test_input_with_several_days_is_a_usage_error(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["1,25", "--input", str(tmp_path / "in.txt")])
        assert exc_info.value.code == 2

    def test_missing_config_file(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["1", "--config", str(tmp_path / "missing.json")])
        assert exc_info.value.code == 2

    def test_config_file_must_be_an_object(self, tmp_path: Path) -> None:
        config = tmp_path / "config.json"
        config.write_text("[1, 2]")
        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(config)])
        assert exc_info.value.code == 2
