"""Run a compiled expression against input text."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from .nfa import State, StateKind, compile_postfix
from .parser import parse_char_classes, to_postfix
from .tokens import RegexError, Token, TokenType, tokenize

MAX_RESULT = 128

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Match:
    """A successful match.

    ``result`` is the matched text, ``start`` and ``end`` the indices of its
    first and last characters in the input, and ``tail`` the input from the
    last matched character onwards.
    """

    result: str
    start: int
    end: int
    tail: str

    def describe(self) -> str:
        """Return a multi-line summary of the match."""
        return "\n".join(
            (
                f"RESULT: {self.result}",
                f"START:  {self.start}",
                f"END:    {self.end}",
                f"ENDP:   {self.tail}",
            )
        )


def _follow(states: Iterable[State | None]) -> list[State]:
    """Expand split states into the consuming and match states they reach."""
    found: list[State] = []
    seen: set[State] = set()

    def add(state: State | None) -> None:
        if state is None or state in seen:
            return
        seen.add(state)
        if state.kind is StateKind.SPLIT:
            add(state.out)
            add(state.out1)
        else:
            found.append(state)

    for state in states:
        add(state)
    return found


def _step(current: list[State], c: str) -> list[State]:
    targets: list[State | None] = []
    for state in current:
        if state.kind is StateKind.MATCH or state.token is None:
            continue
        if state.token.matches(c):
            _log.debug("ACCEPTED: %s %s", state.token.type.name, state.token.describe())
            targets.extend((state.out, state.out1))
    return _follow(targets)


class Regex:
    """A compiled expression.

    Matching always begins at the first character of the input and stops at
    the shortest prefix that reaches the end of the expression.
    """

    def __init__(self, expr: str) -> None:
        self.expr = expr
        self.tokens: list[Token] = tokenize(expr)
        self.infix: list[Token] = parse_char_classes(self.tokens)
        self.postfix: list[Token] = to_postfix(self.infix)
        self.start: State = compile_postfix(self.postfix)

    @property
    def anchored(self) -> bool:
        """Whether the expression begins with ``^``."""
        token = self.start.token
        return token is not None and token.type is TokenType.CARET

    def match(self, text: str, max_length: int = MAX_RESULT) -> Match | None:
        """Match ``text`` from its start; return the match or ``None``.

        ``max_length`` bounds the result as a buffer of that size would,
        leaving room for a terminator; exceeding it raises ``RegexError``.
        """
        first = self.start.out if self.anchored else self.start
        current = _follow([first])

        for pos, c in enumerate(text):
            following = _step(current, c)
            if not following:
                break
            if pos >= max_length - 1:
                raise RegexError(f"Output buffer full: {pos}, max={max_length}")
            current = following
            if any(state.kind is StateKind.MATCH for state in current):
                return Match(text[: pos + 1], 0, pos, text[pos:])
        _log.debug("No Match")
        return None