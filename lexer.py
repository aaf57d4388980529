"""
lexer.py - Parser combinators and the lexical rules of the JSON grammar.

A parser here is any callable taking (text, pos) and returning
(result, new_pos). On mismatch it raises ParseError and the caller is free
to retry another parser at the same pos, which is all the backtracking the
grammar needs.
"""

import unicodedata
from typing import Any, Callable, Iterable, List, Tuple, Union

Parser = Callable[[str, int], Tuple[Any, int]]

WHITESPACE_CHARS = " \n\r\t"
SEPARATOR_CHARS = WHITESPACE_CHARS + ","
DIGITS = "0123456789"
HEX_DIGITS = "0123456789abcdefABCDEF"

# Escape letter -> decoded character. \b, \f and \u are not in this table.
ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


class ParseError(SyntaxError):
    """Raised by a parser that does not match at the given position."""


# ---------------------------------------------------------------------------
# PRIMITIVE COMBINATORS
# ---------------------------------------------------------------------------
def char(expected: str) -> Parser:
    def run(text: str, pos: int):
        if pos < len(text) and text[pos] == expected:
            return expected, pos + 1
        raise ParseError(f"expected {expected!r}")
    return run


def char_class(accepts: Union[str, Callable[[str], bool]], description: str) -> Parser:
    """Match one character that is in `accepts` (a string) or satisfies it (a predicate)."""
    test = accepts.__contains__ if isinstance(accepts, str) else accepts

    def run(text: str, pos: int):
        if pos < len(text) and test(text[pos]):
            return text[pos], pos + 1
        raise ParseError(f"expected {description}")
    return run


def literal(word: str) -> Parser:
    def run(text: str, pos: int):
        if text.startswith(word, pos):
            return word, pos + len(word)
        raise ParseError(f"expected {word!r}")
    return run


def choice(*alternatives: Parser, description: str = "one of several alternatives") -> Parser:
    """Ordered choice: the first alternative that matches wins."""
    def run(text: str, pos: int):
        for alternative in alternatives:
            try:
                return alternative(text, pos)
            except ParseError:
                continue
        raise ParseError(f"expected {description}")
    return run


def many(parser: Parser) -> Parser:
    """Zero or more repetitions. Never fails."""
    def run(text: str, pos: int):
        results: List[Any] = []
        while True:
            try:
                result, new_pos = parser(text, pos)
            except ParseError:
                break
            if new_pos == pos:
                break  # zero-width match would loop forever
            results.append(result)
            pos = new_pos
        return results, pos
    return run


def many1(parser: Parser) -> Parser:
    repeat = many(parser)

    def run(text: str, pos: int):
        first, pos = parser(text, pos)
        rest, pos = repeat(text, pos)
        return [first] + rest, pos
    return run


def optional(parser: Parser, default: Any = None) -> Parser:
    def run(text: str, pos: int):
        try:
            return parser(text, pos)
        except ParseError:
            return default, pos
    return run


def sequence(*parsers: Parser) -> Parser:
    def run(text: str, pos: int):
        results: List[Any] = []
        for parser in parsers:
            result, pos = parser(text, pos)
            results.append(result)
        return results, pos
    return run


def apply(parser: Parser, fn: Callable[[Any], Any]) -> Parser:
    def run(text: str, pos: int):
        result, pos = parser(text, pos)
        return fn(result), pos
    return run


def end_of_input() -> Parser:
    def run(text: str, pos: int):
        if pos == len(text):
            return None, pos
        raise ParseError("expected end of input")
    return run


def _join(chars: Iterable[str]) -> str:
    return "".join(chars)


# int() refuses strings longer than sys.get_int_max_str_digits(), whose floor
# is 640. Converting in chunks below that keeps arbitrary-length literals.
DIGIT_CHUNK = 500


def decimal_to_int(sign: str, digits: str) -> int:
    result = 0
    for start in range(0, len(digits), DIGIT_CHUNK):
        chunk = digits[start:start + DIGIT_CHUNK]
        result = result * 10 ** len(chunk) + int(chunk)
    return -result if sign == "-" else result


# ---------------------------------------------------------------------------
# LEXICAL RULES
# ---------------------------------------------------------------------------
whitespace = apply(many(char_class(WHITESPACE_CHARS, "whitespace")), _join)

# Lenient separator: any run of whitespace and commas, including none at all.
whitespace_or_comma = apply(many(char_class(SEPARATOR_CHARS, "whitespace or comma")), _join)


def _is_plain_string_char(ch: str) -> bool:
    return ch != '"' and ch != "\\" and unicodedata.category(ch) != "Cc"


_plain_char = char_class(_is_plain_string_char, "string character")

_escape = apply(
    sequence(char("\\"), char_class("".join(ESCAPES), "escape character")),
    lambda parts: ESCAPES[parts[1]],
)

string_literal = apply(
    sequence(char('"'), many(choice(_plain_char, _escape, description="string character")), char('"')),
    lambda parts: _join(parts[1]),
)

integer_literal = apply(
    sequence(optional(char("-"), ""), many1(char_class(DIGITS, "digit"))),
    lambda parts: decimal_to_int(parts[0], _join(parts[1])),
)

# Scans \uXXXX payloads. Not part of the escape choice above, so unicode
# escapes in strings are rejected.
hex4 = apply(
    sequence(*(char_class(HEX_DIGITS, "hex digit") for _ in range(4))),
    lambda digits: int(_join(digits), 16),
)

boolean_literal = choice(
    apply(literal("true"), lambda _: True),
    apply(literal("false"), lambda _: False),
    description="boolean",
)

null_literal = apply(literal("null"), lambda _: None)
