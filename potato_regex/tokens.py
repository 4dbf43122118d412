"""Tokens of a regular expression and the character tests they perform."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

CONCAT_SYM = "&"
SPACE_CHARS = " \t"
LINE_BREAK_CHARS = "\n\r"
MAX_TOKENS = 256


class RegexError(ValueError):
    """Raised when an expression cannot be parsed, compiled or matched."""


class TokenType(Enum):
    """Kinds of token. Quantifiers and operators come first, in order of precedence."""

    UNDEFINED = 0
    PLUS = auto()
    STAR = auto()
    QUESTION = auto()
    CONCAT = auto()
    PIPE = auto()
    CCLASS = auto()
    CCLASS_NEGATED = auto()
    RANGE_START = auto()
    RANGE_END = auto()
    GROUP_START = auto()
    GROUP_END = auto()
    CCLASS_START = auto()
    CCLASS_END = auto()
    CARET = auto()
    NEGATE = auto()
    BEGIN = auto()
    END = auto()
    BACKSLASH = auto()
    DOT = auto()
    CHAR = auto()
    DIGIT = auto()
    NON_DIGIT = auto()
    ALPHA_NUM = auto()
    NON_ALPHA_NUM = auto()
    SPACE = auto()
    NON_SPACE = auto()
    HYPHEN = auto()
    RANGE = auto()


_ESCAPES = {
    "d": TokenType.DIGIT,
    "D": TokenType.NON_DIGIT,
    "w": TokenType.ALPHA_NUM,
    "W": TokenType.ALPHA_NUM,
    "s": TokenType.SPACE,
    "S": TokenType.NON_SPACE,
}

_SINGLE = {
    "*": TokenType.STAR,
    "+": TokenType.PLUS,
    "?": TokenType.QUESTION,
    "{": TokenType.RANGE_START,
    "}": TokenType.RANGE_END,
    "(": TokenType.GROUP_START,
    ")": TokenType.GROUP_END,
    "[": TokenType.CCLASS_START,
    "]": TokenType.CCLASS_END,
    "|": TokenType.PIPE,
    "\\": TokenType.BACKSLASH,
    "^": TokenType.CARET,
    "$": TokenType.END,
    "-": TokenType.HYPHEN,
    ".": TokenType.DOT,
    CONCAT_SYM: TokenType.CONCAT,
}

_SYMBOLS = {
    TokenType.CONCAT: CONCAT_SYM,
    TokenType.GROUP_START: "(",
    TokenType.GROUP_END: ")",
    TokenType.STAR: "*",
    TokenType.PLUS: "+",
    TokenType.QUESTION: "?",
    TokenType.PIPE: "|",
    TokenType.ALPHA_NUM: "\\w",
    TokenType.DIGIT: "\\d",
    TokenType.SPACE: "\\s",
    TokenType.DOT: ".",
}


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_lower(c: str) -> bool:
    return "a" <= c <= "z"


def _is_alpha(c: str) -> bool:
    return _is_lower(c) or "A" <= c <= "Z"


def is_in_range(c: str, lo: str, hi: str) -> bool:
    """Tell whether ``c`` lies within ``lo``-``hi``; raise on a malformed range."""
    if _is_digit(lo) != _is_digit(hi):
        raise RegexError(f"Bad range: {lo}-{hi}")
    if _is_alpha(lo) and _is_lower(lo) != _is_lower(hi):
        raise RegexError(f"Bad alpha range: {lo}-{hi}")
    return lo <= c <= hi


@dataclass
class Token:
    """One element of a parsed expression.

    ``c0`` and ``c1`` hold the characters of a literal or range; a character
    class keeps the tokens it contains in ``members``.
    """

    type: TokenType
    c0: str = ""
    c1: str = ""
    members: list[Token] = field(default_factory=list)

    def matches(self, c: str) -> bool:
        """Tell whether this token accepts the character ``c``."""
        kind = self.type
        if kind is TokenType.RANGE:
            return is_in_range(c, self.c0, self.c1)
        if kind is TokenType.DOT:
            return c not in LINE_BREAK_CHARS
        if kind is TokenType.SPACE:
            return c in SPACE_CHARS
        if kind is TokenType.NON_SPACE:
            return c not in SPACE_CHARS
        if kind is TokenType.ALPHA_NUM:
            return _is_alpha(c)
        if kind is TokenType.NON_ALPHA_NUM:
            return not _is_alpha(c)
        if kind is TokenType.DIGIT:
            return _is_digit(c)
        if kind is TokenType.NON_DIGIT:
            return not _is_digit(c)
        if kind is TokenType.CCLASS:
            return any(member.matches(c) for member in self.members)
        if kind is TokenType.CCLASS_NEGATED:
            return not any(member.matches(c) for member in self.members)
        if kind is TokenType.CHAR:
            return self.c0 == c
        return False

    def describe(self) -> str:
        """Return a short text form of the token for diagnostics."""
        kind = self.type
        if kind in (TokenType.CCLASS, TokenType.CCLASS_NEGATED):
            return "[" + "->".join(m.describe() for m in self.members) + "]"
        if kind is TokenType.RANGE:
            return f"{self.c0}-{self.c1}"
        return _SYMBOLS.get(kind, self.c0)


def _read_token(expr: str, pos: int) -> tuple[Token, int]:
    rest = expr[pos:]
    first = rest[0]
    if len(rest) > 2 and rest[1] == "-":
        token = Token(TokenType.RANGE, first, rest[2])
        if not is_in_range(token.c0, token.c0, token.c1):
            raise RegexError(f"Bad range: {token.c0}-{token.c1}")
        return token, pos + 3
    if len(rest) > 1 and first == "\\":
        escaped = rest[1]
        return Token(_ESCAPES.get(escaped, TokenType.CHAR), escaped), pos + 2
    return Token(_SINGLE.get(first, TokenType.CHAR), first), pos + 1


def tokenize(expr: str) -> list[Token]:
    """Split an expression into tokens."""
    tokens: list[Token] = []
    pos = 0
    while pos < len(expr):
        if len(tokens) >= MAX_TOKENS:
            raise RegexError(f"List full, max={MAX_TOKENS}")
        token, pos = _read_token(expr, pos)
        tokens.append(token)
    return tokens