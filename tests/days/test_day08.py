"""Tests for advent2020.days.day08."""

from __future__ import annotations

import pytest

from advent2020.days import day08
from advent2020.errors import InvariantError, ParseError

EXAMPLE = """\
nop +0
acc +1
jmp +4
acc +3
jmp -3
acc -99
acc +1
jmp -4
acc +6
"""


class TestInstruction:
    def test_parse(self) -> None:
        assert day08.Instruction.parse("jmp -3") == day08.Instruction(day08.Operation.JMP, -3)

    @pytest.mark.parametrize("line", ["jmp 3", "jump +3", "mul +2", "acc"])
    def test_rejects_malformed(self, line: str) -> None:
        with pytest.raises(ParseError):
            day08.Instruction.parse(line)

    def test_swapped(self) -> None:
        nop = day08.Instruction(day08.Operation.NOP, 5)
        assert nop.swapped() == day08.Instruction(day08.Operation.JMP, 5)
        assert day08.Instruction(day08.Operation.ACC, 1).swapped() is None


class TestRun:
    def test_loop_detected(self) -> None:
        result = day08.run(day08.parse(EXAMPLE))
        assert result == day08.RunResult(accumulator=5, terminated=False)

    def test_jump_out_of_range_does_not_terminate(self) -> None:
        assert not day08.run(day08.parse("jmp +5\n")).terminated

    def test_terminates_one_past_the_end(self) -> None:
        assert day08.run(day08.parse("acc +2\njmp +1\n")) == day08.RunResult(2, True)


def test_part1() -> None:
    assert day08.part1(day08.parse(EXAMPLE)) == 5


def test_part2() -> None:
    assert day08.part2(day08.parse(EXAMPLE)) == 8


def test_part2_without_repair() -> None:
    with pytest.raises(InvariantError):
        day08.part2(day08.parse("jmp +0\njmp +0\n"))
