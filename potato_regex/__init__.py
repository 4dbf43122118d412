"""A small Thompson-NFA regular expression engine with a command-line matcher."""

__version__ = "0.1.0"
__all__ = ["tokens", "parser", "nfa", "matcher", "cli"]