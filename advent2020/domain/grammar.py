"""Recursive message grammar with support for self-referential rules.

A pattern is a literal symbol, a reference to another rule, a sequence of
patterns, or an alternation of patterns. Matching maps a set of candidate
input suffixes to the set of suffixes left after consuming the pattern in
every possible way, so looping rules such as ``8: 42 | 42 8`` are explored
for all consumption lengths at once.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from advent2020.errors import InvariantError, ParseError
from advent2020.io.reading import split_once

ROOT_RULE = 0


@dataclass(frozen=True)
class Symbol:
    char: str


@dataclass(frozen=True)
class RuleRef:
    rule_id: int


@dataclass(frozen=True)
class Sequence:
    parts: tuple[Pattern, ...]


@dataclass(frozen=True)
class Alternation:
    options: tuple[Pattern, ...]


Pattern = Union[Symbol, RuleRef, Sequence, Alternation]

Rules = dict[int, Pattern]

LOOPING_RULES: dict[int, str] = {
    8: "42 | 42 8",
    11: "42 31 | 42 11 31",
}
"""Replacements that turn rules 8 and 11 into self-referential rules."""


def parse_term(token: str) -> Pattern:
    """Parse one whitespace-free token: ``"a"`` or a rule id."""
    if token.startswith('"'):
        if len(token) == 3 and token.endswith('"'):
            return Symbol(token[1])
        raise ParseError(f"unexpected symbol format in {token!r}")
    if token.isdigit():
        return RuleRef(int(token))
    raise ParseError(f"unknown pattern in {token!r}")


def parse_pattern(body: str) -> Pattern:
    """Parse a rule body: alternatives separated by ``|`` of space-separated terms."""
    options: list[Pattern] = []
    for alternative in body.split("|"):
        tokens = alternative.split()
        if not tokens:
            raise ParseError(f"empty alternative in rule body {body!r}")
        terms = tuple(parse_term(token) for token in tokens)
        options.append(terms[0] if len(terms) == 1 else Sequence(terms))
    return options[0] if len(options) == 1 else Alternation(tuple(options))


def parse_rules(text: str) -> Rules:
    """Parse ``id: body`` lines into a rule table."""
    rules: Rules = {}
    for line in text.strip().splitlines():
        raw_id, body = split_once(line, ": ")
        if not raw_id.strip().isdigit() or not body.strip():
            raise ParseError(f"could not parse rule from {line!r}")
        rule_id = int(raw_id)
        if rule_id in rules:
            raise ParseError(f"duplicate rule {rule_id}")
        rules[rule_id] = parse_pattern(body)
    return rules


def _references(pattern: Pattern) -> set[int]:
    if isinstance(pattern, RuleRef):
        return {pattern.rule_id}
    if isinstance(pattern, Sequence):
        return set().union(*(_references(p) for p in pattern.parts))
    if isinstance(pattern, Alternation):
        return set().union(*(_references(p) for p in pattern.options))
    return set()


class Grammar:
    """A validated rule table; rule 0 and every referenced rule exist."""

    def __init__(self, rules: Rules) -> None:
        if ROOT_RULE not in rules:
            raise InvariantError(f"no rule {ROOT_RULE}")
        for rule_id, pattern in rules.items():
            missing = _references(pattern) - rules.keys()
            if missing:
                raise InvariantError(
                    f"rule {rule_id} references undefined rule(s) {sorted(missing)}"
                )
        self.rules = dict(rules)

    @classmethod
    def parse(cls, text: str) -> Grammar:
        return cls(parse_rules(text))

    def with_looping_rules(self) -> Grammar:
        """Copy with rules 8 and 11 replaced by their self-referential versions."""
        rules = dict(self.rules)
        for rule_id, body in LOOPING_RULES.items():
            rules[rule_id] = parse_pattern(body)
        return Grammar(rules)

    def match_suffixes(self, pattern: Pattern, candidates: frozenset[str]) -> frozenset[str]:
        """Return every suffix left after ``pattern`` consumes a prefix of a candidate.

        Patterns must consume at least one symbol before recursing into the
        rule that contains them; left recursion does not terminate.
        """
        if not candidates:
            return candidates
        if isinstance(pattern, Symbol):
            return frozenset(s[1:] for s in candidates if s.startswith(pattern.char))
        if isinstance(pattern, RuleRef):
            return self.match_suffixes(self.rules[pattern.rule_id], candidates)
        if isinstance(pattern, Sequence):
            remaining = candidates
            for part in pattern.parts:
                remaining = self.match_suffixes(part, remaining)
                if not remaining:
                    break
            return remaining
        if isinstance(pattern, Alternation):
            result: set[str] = set()
            for option in pattern.options:
                result |= self.match_suffixes(option, candidates)
            return frozenset(result)
        raise TypeError(f"unsupported pattern {pattern!r}")

    def is_match(self, message: str, rule_id: int = ROOT_RULE) -> bool:
        """True if some way of matching ``rule_id`` consumes the whole message."""
        return "" in self.match_suffixes(RuleRef(rule_id), frozenset({message}))

    def count_matches(self, messages: list[str]) -> int:
        return sum(1 for message in messages if self.is_match(message))
