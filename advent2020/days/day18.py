"""Day 18: Operation Order - evaluate arithmetic with unusual precedence.

Expressions use ``+``, ``*``, parentheses and non-negative integers. Operators
are left-associative; only their relative precedence changes between parts.
"""

from __future__ import annotations

import operator
import re
from collections.abc import Callable

from advent2020.config.types import DayAnswers
from advent2020.errors import ParseError

DAY = 18

TOKEN_RE = re.compile(r"\s*(?:(?P<number>[0-9]+)|(?P<symbol>[-+*()]))")

OPERATORS: dict[str, Callable[[int, int], int]] = {"+": operator.add, "*": operator.mul}

Precedence = dict[str, int]

SAME_PRECEDENCE: Precedence = {"+": 1, "*": 1}
ADDITION_FIRST: Precedence = {"+": 2, "*": 1}

Token = int | str


def tokenize(expression: str) -> list[Token]:
    tokens: list[Token] = []
    position = 0
    stripped = expression.rstrip()
    while position < len(stripped):
        match = TOKEN_RE.match(stripped, position)
        if match is None or match.end() == position:
            raise ParseError(f"unexpected character at {position} in {expression!r}")
        if match["number"] is not None:
            tokens.append(int(match["number"]))
        else:
            if match["symbol"] == "-":
                raise ParseError(f"subtraction is not supported in {expression!r}")
            tokens.append(match["symbol"])
        position = match.end()
    if not tokens:
        raise ParseError("empty expression")
    return tokens


class _Parser:
    """Precedence climbing over a token list."""

    def __init__(self, tokens: list[Token], precedence: Precedence) -> None:
        self.tokens = tokens
        self.precedence = precedence
        self.position = 0

    def _peek(self) -> Token | None:
        return self.tokens[self.position] if self.position < len(self.tokens) else None

    def _take(self) -> Token:
        token = self._peek()
        if token is None:
            raise ParseError("unexpected end of expression")
        self.position += 1
        return token

    def operand(self) -> int:
        token = self._take()
        if isinstance(token, int):
            return token
        if token == "(":
            value = self.expression(0)
            if self._take() != ")":
                raise ParseError("expected ')'")
            return value
        raise ParseError(f"unexpected token {token!r}")

    def expression(self, min_precedence: int) -> int:
        value = self.operand()
        while True:
            token = self._peek()
            if token not in OPERATORS or self.precedence[token] < min_precedence:
                return value
            self.position += 1
            rhs = self.expression(self.precedence[token] + 1)
            value = OPERATORS[token](value, rhs)

    def evaluate(self) -> int:
        value = self.expression(0)
        if self._peek() is not None:
            raise ParseError(f"unexpected token {self._peek()!r}")
        return value


def evaluate(expression: str, precedence: Precedence = SAME_PRECEDENCE) -> int:
    return _Parser(tokenize(expression), precedence).evaluate()


def parse(text: str) -> list[list[Token]]:
    return [tokenize(line) for line in text.splitlines() if line.strip()]


def part1(expressions: list[list[Token]]) -> int:
    return sum(_Parser(tokens, SAME_PRECEDENCE).evaluate() for tokens in expressions)


def part2(expressions: list[list[Token]]) -> int:
    return sum(_Parser(tokens, ADDITION_FIRST).evaluate() for tokens in expressions)


def solve(text: str) -> DayAnswers:
    expressions = parse(text)
    return DayAnswers(DAY, part1(expressions), part2(expressions))
