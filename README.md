# potato_regex

A small regular expression engine. An expression is tokenized, character
classes are folded into single tokens, the token list is rewritten into
postfix form with explicit concatenation, and the result is compiled into a
Thompson NFA that is run against the input one character at a time.

## Supported syntax

| Syntax      | Meaning                                                  |
|-------------|----------------------------------------------------------|
| `a`         | literal character                                        |
| `\x`        | literal `x` for any character without a meaning below    |
| `.`         | any character except `\n` and `\r`                       |
| `a-z`       | character range (both ends digits, or letters of one case) |
| `[abc]`     | character class                                          |
| `[^abc]`    | negated character class                                  |
| `\d` `\D`   | ASCII digit / anything else                              |
| `\w` `\W`   | ASCII letter (both forms match letters)                  |
| `\s` `\S`   | space or tab / anything else                             |
| `*` `+` `?` | zero or more, one or more, zero or one                   |
| `a\|b`      | alternation                                              |
| `( )`       | grouping                                                 |
| `^`         | leading anchor                                           |

A malformed range such as `a-Z` or `1-z` raises `RegexError`, as do an
unclosed `[` or `(`, a stray `]` or `)`, an empty group, and a quantifier or
`|` with nothing before it.

## Matching

`Regex.match(text, max_length=128)` always starts at the first character of
`text` and returns at the first point where the NFA reaches its match state,
so the shortest matching prefix is reported. It returns a `Match` or `None`.
A `Match` has:

- `result` – the matched text
- `start` – index of its first character (always `0`)
- `end` – index of its last character
- `tail` – the input from the last matched character onwards
- `describe()` – a multi-line summary of the above

A match that would grow to `max_length - 1` characters or more raises
`RegexError`.

## Library use

```python
from potato_regex.matcher import Regex

regex = Regex("ab+c")
match = regex.match("abbbcd")
if match is not None:
    print(match.result, match.start, match.end)
    print(match.describe())
```

`Regex` keeps the stages of compilation as `tokens`, `infix`, `postfix` and
`start` (the first NFA state), and `anchored` tells whether the expression
begins with `^`. Errors raise `potato_regex.tokens.RegexError`, a subclass of
`ValueError`.

The stages are also available on their own:

```python
from potato_regex.tokens import tokenize
from potato_regex.parser import parse_char_classes, to_postfix, format_tokens
from potato_regex.nfa import compile_postfix, describe_nfa

tokens = parse_char_classes(tokenize("a(b|c)*"))
postfix = to_postfix(tokens)
print(format_tokens(postfix))
print(describe_nfa(compile_postfix(postfix)))
```

`Token.matches(c)` tests a single character against a token, and
`is_in_range(c, lo, hi)` tests a character against a range.

## Command line

```
potato-regex EXPRESSION INPUT
```

The command prints, as `[DEBUG]` lines on standard output, the tokenized,
infix and postfix forms of the expression, an outline of the NFA, the input,
and then either the match summary or `No Match`. Errors go to standard error
as `[ERROR]` lines. The exit status is 1 in every case.

## What it does not do

- It does not search: a match must begin at the first character of the input.
- It reports the shortest match, not the longest.
- `$`, `{` and `}` are read as tokens but match nothing, so there is no end
  anchor and no counted repetition.
- There are no capture groups or back-references.