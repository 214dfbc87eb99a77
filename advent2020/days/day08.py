"""Day 8: Handheld Halting - run boot code and repair the infinite loop.

The program is a list of ``(operation, argument)`` pairs. Running it either
terminates by stepping exactly one past the last instruction, or loops as soon
as an instruction is about to execute a second time.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from advent2020.config.types import DayAnswers
from advent2020.errors import InvariantError, ParseError
from advent2020.io.reading import parse_lines

DAY = 8

INSTRUCTION_RE = re.compile(r"(?P<op>[a-z]{3}) (?P<arg>[+-][0-9]+)")


class Operation(Enum):
    ACC = "acc"
    JMP = "jmp"
    NOP = "nop"


@dataclass(frozen=True)
class Instruction:
    operation: Operation
    argument: int

    @classmethod
    def parse(cls, line: str) -> Instruction:
        match = INSTRUCTION_RE.fullmatch(line.strip())
        if match is None:
            raise ParseError(f"invalid instruction {line.strip()!r}")
        try:
            operation = Operation(match["op"])
        except ValueError as exc:
            raise ParseError(f"unknown operation {match['op']!r}") from exc
        return cls(operation, int(match["arg"]))

    def swapped(self) -> Instruction | None:
        """``jmp`` and ``nop`` trade places; ``acc`` cannot be repaired."""
        if self.operation is Operation.JMP:
            return Instruction(Operation.NOP, self.argument)
        if self.operation is Operation.NOP:
            return Instruction(Operation.JMP, self.argument)
        return None


Program = list[Instruction]


@dataclass(frozen=True)
class RunResult:
    accumulator: int
    terminated: bool


def parse(text: str) -> Program:
    return parse_lines(text, Instruction.parse)


def run(program: Program) -> RunResult:
    """Execute until termination or the first repeated instruction."""
    accumulator = 0
    pointer = 0
    seen: set[int] = set()
    while pointer != len(program):
        if pointer in seen or not 0 <= pointer < len(program):
            return RunResult(accumulator, terminated=False)
        seen.add(pointer)
        instruction = program[pointer]
        if instruction.operation is Operation.ACC:
            accumulator += instruction.argument
            pointer += 1
        elif instruction.operation is Operation.JMP:
            pointer += instruction.argument
        else:
            pointer += 1
    return RunResult(accumulator, terminated=True)


def part1(program: Program) -> int:
    return run(program).accumulator


def part2(program: Program) -> int:
    """Flip exactly one ``jmp``/``nop`` so the program terminates."""
    for index, instruction in enumerate(program):
        replacement = instruction.swapped()
        if replacement is None:
            continue
        patched = [*program[:index], replacement, *program[index + 1 :]]
        result = run(patched)
        if result.terminated:
            return result.accumulator
    raise InvariantError("no single jmp/nop swap makes the program terminate")


def solve(text: str) -> DayAnswers:
    program = parse(text)
    return DayAnswers(DAY, part1(program), part2(program))
