"""Build a Thompson NFA from postfix tokens."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto

from .tokens import RegexError, Token, TokenType

MAX_STATES = 1024
MAX_GROUP_STACK = 256

_INDENT = 2


class StateKind(Enum):
    """What a state does when the machine reaches it."""

    NONE = auto()
    MATCH = auto()
    SPLIT = auto()


@dataclass(eq=False)
class State:
    """A node of the NFA.

    A ``NONE`` state consumes one character accepted by its token and moves
    on to ``out``. A ``SPLIT`` state consumes nothing and branches to both
    ``out`` and ``out1``. A ``MATCH`` state ends a successful run.
    """

    token: Token | None
    kind: StateKind = StateKind.NONE
    out: State | None = None
    out1: State | None = None


# A dangling exit of a fragment: the state and the name of the link to fill in.
_Exit = tuple[State, str]


@dataclass
class _Fragment:
    start: State
    exits: list[_Exit]

    def patch(self, target: State) -> None:
        for state, attr in self.exits:
            setattr(state, attr, target)


class _Builder:
    def __init__(self) -> None:
        self.count = 0
        self.stack: list[_Fragment] = []

    def new_state(
        self,
        token: Token | None,
        kind: StateKind,
        out: State | None = None,
        out1: State | None = None,
    ) -> State:
        if self.count >= MAX_STATES:
            raise RegexError(f"Max states reached: {MAX_STATES}")
        self.count += 1
        return State(token, kind, out, out1)

    def push(self, fragment: _Fragment) -> None:
        if len(self.stack) >= MAX_GROUP_STACK:
            raise RegexError(f"Group stack full, max={MAX_GROUP_STACK}")
        self.stack.append(fragment)

    def pop(self, token: Token | None = None) -> _Fragment:
        if not self.stack:
            what = f"'{token.describe()}'" if token is not None else "expression"
            raise RegexError(f"Missing operand for {what}")
        return self.stack.pop()


def compile_postfix(postfix: Iterable[Token]) -> State:
    """Compile postfix tokens into an NFA and return its start state."""
    builder = _Builder()

    for token in postfix:
        kind = token.type
        if kind is TokenType.CONCAT:
            second = builder.pop(token)
            first = builder.pop(token)
            first.patch(second.start)
            builder.push(_Fragment(first.start, second.exits))
        elif kind is TokenType.QUESTION:
            frag = builder.pop(token)
            split = builder.new_state(token, StateKind.SPLIT, frag.start)
            builder.push(_Fragment(split, frag.exits + [(split, "out1")]))
        elif kind is TokenType.PIPE:
            second = builder.pop(token)
            first = builder.pop(token)
            split = builder.new_state(token, StateKind.SPLIT, first.start, second.start)
            builder.push(_Fragment(split, first.exits + second.exits))
        elif kind is TokenType.STAR:
            frag = builder.pop(token)
            split = builder.new_state(token, StateKind.SPLIT, frag.start)
            frag.patch(split)
            builder.push(_Fragment(frag.start, [(split, "out1")]))
        elif kind is TokenType.PLUS:
            frag = builder.pop(token)
            split = builder.new_state(token, StateKind.SPLIT, frag.start)
            frag.patch(split)
            builder.push(_Fragment(split, [(split, "out1")]))
        else:
            state = builder.new_state(token, StateKind.NONE)
            builder.push(_Fragment(state, [(state, "out")]))

    frag = builder.pop()
    match_state = builder.new_state(None, StateKind.MATCH)
    frag.patch(match_state)
    return frag.start


def _label(token: Token | None) -> str:
    if token is None:
        return ""
    return f"{token.type.name} {token.describe()}"


def _describe(state: State | None, level: int, lines: list[str]) -> None:
    if state is None:
        return
    pad = " " * (level * _INDENT)
    if state.kind is StateKind.MATCH:
        lines.append(f"{pad}MATCH!")
        return
    if state.kind is StateKind.SPLIT:
        lines.append(f"{pad}SPLIT: {_label(state.token)}")
        # Following the loop back of a star or plus would never end.
        if state.token is not None and state.token.type in (TokenType.PLUS, TokenType.STAR):
            target = state.out.token if state.out is not None else None
            lines.append(f"{pad}  RECURSIVE: {_label(target)}")
            _describe(state.out1, level + 1, lines)
            return
    else:
        lines.append(f"{pad}State: {_label(state.token)}")
    _describe(state.out, level + 1, lines)
    _describe(state.out1, level + 1, lines)


def describe_nfa(start: State | None) -> str:
    """Return an indented outline of the NFA reachable from ``start``."""
    lines: list[str] = []
    _describe(start, 0, lines)
    return "\n".join(lines)