"""Command line: match an expression against one input string."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .matcher import Regex
from .nfa import describe_nfa
from .parser import format_tokens
from .tokens import RegexError


def _debug(message: str) -> None:
    print(f"[DEBUG] {message}")


def _error(message: str) -> None:
    print(f"[ERROR] {message}", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Compile the first argument and match it against the second."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        _error("Missing expression")
        return 1
    if len(args) < 2:
        _error("Missing input string")
        return 1

    expr, text = args[0], args[1]
    _debug(f"Parsing: {expr}")

    try:
        regex = Regex(expr)
    except RegexError as exc:
        _error(str(exc))
        _error("Failed init")
        return 1

    _debug(f"TOKENIZED: {format_tokens(regex.tokens)}")
    _debug(f"INFIX: {format_tokens(regex.infix)}")
    _debug(f"POSTFIX: {format_tokens(regex.postfix)}")
    _debug("NFA:")
    print(describe_nfa(regex.start))
    _debug(f"INPUT STRING: {text}")

    try:
        match = regex.match(text)
    except RegexError as exc:
        _error(str(exc))
        return 1

    if match is None:
        _debug("No Match")
    else:
        for line in match.describe().splitlines():
            _debug(line)
    return 1


if __name__ == "__main__":
    sys.exit(main())