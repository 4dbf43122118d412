import pytest

from potato_regex.matcher import MAX_RESULT, Match, Regex
from potato_regex.nfa import StateKind
from potato_regex.tokens import RegexError


def _check_invariants(match: Match, text: str) -> None:
    assert match.start == 0
    assert match.end == len(match.result) - 1
    assert text.startswith(match.result)
    assert match.tail == text[match.end:]


def test_literal_prefix():
    text = "abcdef"
    m = Regex("abc").match(text)
    assert m is not None
    assert m.result == "abc"
    _check_invariants(m, text)


def test_plus_takes_shortest():
    m = Regex("a+").match("aaa")
    assert m is not None
    assert m.result == "a"


def test_no_match_returns_none():
    assert Regex("abc").match("abx") is None


def test_match_only_at_start():
    assert Regex("b").match("ab") is None


def test_empty_input_no_match():
    assert Regex("a?").match("") is None


def test_anchor():
    regex = Regex("^ab")
    assert regex.anchored
    m = regex.match("abc")
    assert m is not None
    assert m.result == "ab"


def test_unanchored_flag():
    assert not Regex("ab").anchored


def test_alternation():
    m = Regex("cat|dog").match("dogs")
    assert m is not None
    assert m.result == "dog"
    assert Regex("cat|dog").match("cow") is None


def test_group_repeat():
    text = "ababc"
    m = Regex("(ab)+c").match(text)
    assert m is not None
    assert m.result == text
    _check_invariants(m, text)


def test_char_class():
    assert Regex("[abc]x").match("bx").result == "bx"
    assert Regex("[abc]x").match("dx") is None


def test_char_class_range():
    m = Regex("[0-9]+").match("42")
    assert m is not None
    assert m.result == "4"


def test_negated_class():
    assert Regex("[^abc]").match("d").result == "d"
    assert Regex("[^abc]").match("a") is None


def test_digit_escape():
    assert Regex("\\d\\d").match("12a").result == "12"
    assert Regex("\\d").match("x") is None


def test_dot_rejects_line_break():
    assert Regex("a.c").match("a\nc") is None
    assert Regex("a.c").match("abc").result == "abc"


def test_question():
    assert Regex("ab?c").match("ac").result == "ac"
    assert Regex("ab?c").match("abc").result == "abc"


def test_nested_optional_in_star_terminates():
    m = Regex("(a?)*b").match("b")
    assert m is not None
    assert m.result == "b"


def test_result_too_long_raises():
    with pytest.raises(RegexError):
        Regex("a+b").match("aaab", max_length=3)


def test_default_limit():
    text = "a" * (MAX_RESULT + 10) + "b"
    with pytest.raises(RegexError):
        Regex("a*b").match(text)
    short = "a" * 10 + "b"
    assert Regex("a*b").match(short).result == short


@pytest.mark.parametrize("expr", ["(ab", "a)", "*a", "[ab", "a]", "", "a-Z", "|a"])
def test_invalid_expression(expr):
    with pytest.raises(RegexError):
        Regex(expr)


def test_compiled_start_consumes():
    regex = Regex("abc")
    assert regex.start.kind is StateKind.NONE
    assert regex.start.token.c0 == "a"


def test_describe():
    m = Regex("abc").match("abcd")
    lines = m.describe().splitlines()
    assert lines[0] == "RESULT: abc"
    assert lines[1] == "START:  0"
    assert lines[2] == f"END:    {m.end}"
    assert lines[3] == f"ENDP:   {m.tail}"