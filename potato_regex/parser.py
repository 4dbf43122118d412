"""Turn a token list into the postfix form the compiler consumes."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .tokens import CONCAT_SYM, MAX_TOKENS, RegexError, Token, TokenType

MAX_GROUP_DEPTH = 100

_QUANTIFIERS = frozenset({TokenType.STAR, TokenType.PLUS, TokenType.QUESTION})


def parse_char_classes(tokens: Iterable[Token]) -> list[Token]:
    """Fold the tokens between ``[`` and ``]`` into single class tokens.

    A ``^`` at the start of a class makes it negated. The tokens inside a
    class become its ``members``.
    """
    result: list[Token] = []
    current: Token | None = None
    size = 0
    for token in tokens:
        kind = token.type
        if kind is TokenType.CCLASS_START:
            current = Token(TokenType.CCLASS, "x")
            result.append(current)
        elif kind is TokenType.CCLASS_END:
            if current is None:
                raise RegexError("Malformed character class, unexpected ']'")
            current = None
            size = 0
        elif current is not None and size == 0 and kind is TokenType.CARET:
            current.type = TokenType.CCLASS_NEGATED
        elif current is not None:
            current.members.append(token)
            size += 1
        else:
            result.append(token)
    if current is not None:
        raise RegexError("Failed to find end of character class")
    return result


class _Output:
    """Postfix output with the size limit of a token list."""

    def __init__(self) -> None:
        self.tokens: list[Token] = []

    def add(self, token: Token) -> None:
        if len(self.tokens) >= MAX_TOKENS:
            raise RegexError(f"List full, max={MAX_TOKENS}")
        self.tokens.append(token)

    def concat(self, count: int = 1) -> None:
        for _ in range(count):
            self.add(Token(TokenType.CONCAT, CONCAT_SYM))

    def pipe(self, count: int) -> None:
        for _ in range(count):
            self.add(Token(TokenType.PIPE, "|"))


def to_postfix(tokens: Iterable[Token]) -> list[Token]:
    """Convert infix tokens to postfix, making concatenation explicit.

    Groups disappear; each is replaced by the concatenations and
    alternations of its contents.
    """
    out = _Output()
    saved: list[tuple[int, int]] = []
    nalt = 0
    natom = 0

    for token in tokens:
        kind = token.type
        if kind is TokenType.UNDEFINED:
            raise RegexError("Undefined token in expression")
        if kind is TokenType.GROUP_START:
            if natom > 1:
                natom -= 1
                out.concat()
            if len(saved) >= MAX_GROUP_DEPTH:
                raise RegexError("Failed to get group, pool empty")
            saved.append((nalt, natom))
            nalt = 0
            natom = 0
        elif kind is TokenType.PIPE:
            if natom == 0:
                raise RegexError("Alternation without a preceding atom")
            out.concat(natom - 1)
            natom = 0
            nalt += 1
        elif kind is TokenType.GROUP_END:
            if not saved:
                raise RegexError("Unexpected ')' found")
            if natom == 0:
                raise RegexError("Empty group")
            out.concat(natom - 1)
            out.pipe(nalt)
            nalt, natom = saved.pop()
            natom += 1
        elif kind in _QUANTIFIERS:
            if natom == 0:
                raise RegexError(f"Quantifier '{token.c0}' without a preceding atom")
            out.add(token)
        else:
            if natom > 1:
                natom -= 1
                out.concat()
            out.add(token)
            natom += 1

    if saved:
        raise RegexError("Group not closed")
    out.concat(max(natom - 1, 0))
    out.pipe(nalt)
    return out.tokens


def format_tokens(tokens: Sequence[Token]) -> str:
    """Return the tokens' short forms separated by spaces."""
    return " ".join(token.describe() for token in tokens)