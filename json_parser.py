# json_parser.py
# Combinator-built recursive-descent parser for ordered JSON values
#
# =============================================================================
#  PARSER IMPLEMENTATION: RECURSIVE DESCENT FROM COMBINATORS
# =============================================================================
#
# The grammar is assembled from the primitives in lexer.py: character and
# literal matches, ordered choice, repetition and optional occurrence. Each
# structural rule is a plain function with the combinator signature
# (text, pos) -> (result, new_pos), so array and object recurse back into
# _parse_value directly [cs.rochester.edu, Recursive-Descent Parsing].
#
# Grammar:
#   value    := string | integer | boolean | null | array | object
#   array    := '[' ws (value ws_or_comma)* ws ']'
#   object   := '{' ws (string ws ':' ws value ws_or_comma)* ws '}'
#   document := ws value ws EOF
#
# Separators are deliberately lenient: "[1,,2]", "[1 2]" and "[1,2,]" are all
# the same two-element array. Alternatives in `value` are tried in the order
# listed and the first match wins.
#
# Failure is all-or-nothing. The public entry point returns Err with a short
# fixed message; the combinator detail only goes to the debug log.
#
# Nesting depth is bounded by the interpreter recursion limit alone. Hitting
# it yields Err("nesting too deep") rather than an uncaught RecursionError.
#
# =============================================================================
#  REFERENCES
# =============================================================================
# [1] cs.rochester.edu - Recursive-Descent Parsing
# [2] RFC 8259 - The JavaScript Object Notation (JSON) standard
# =============================================================================

import argparse
import logging
import sys
from typing import List, Tuple

from json_printer import render
from json_result import Err, Ok, Result
from json_value import NULL, Array, Bool, Entry, Int, Object, String, Value
from lexer import (
    ParseError,
    apply,
    boolean_literal,
    char,
    choice,
    end_of_input,
    integer_literal,
    null_literal,
    sequence,
    string_literal,
    whitespace,
    whitespace_or_comma,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# FAILURE MESSAGES
# ---------------------------------------------------------------------------
MALFORMED = "malformed JSON"
TRAILING = "trailing characters after JSON value"
TOO_DEEP = "nesting too deep"

# ---------------------------------------------------------------------------
# SCALARS
# ---------------------------------------------------------------------------
_string = apply(string_literal, String)
_integer = apply(integer_literal, Int)
_boolean = apply(boolean_literal, Bool)
_null = apply(null_literal, lambda _: NULL)

_open_bracket = char("[")
_close_bracket = char("]")
_open_brace = char("{")
_close_brace = char("}")
_colon = char(":")


# ---------------------------------------------------------------------------
# ARRAY PARSER
# ---------------------------------------------------------------------------
def _parse_array(text: str, pos: int) -> Tuple[Array, int]:
    _, pos = _open_bracket(text, pos)
    _, pos = whitespace(text, pos)
    items: List[Value] = []
    while True:
        try:
            item, pos = _parse_value(text, pos)
        except ParseError:
            break
        items.append(item)
        _, pos = whitespace_or_comma(text, pos)
    _, pos = whitespace(text, pos)
    _, pos = _close_bracket(text, pos)
    return Array(items), pos


# ---------------------------------------------------------------------------
# OBJECT PARSER
# ---------------------------------------------------------------------------
def _parse_object(text: str, pos: int) -> Tuple[Object, int]:
    """
    Entries are kept in source order. Duplicate keys are preserved as-is;
    no policy is applied to them here.
    """
    _, pos = _open_brace(text, pos)
    _, pos = whitespace(text, pos)
    entries: List[Entry] = []
    while True:
        try:
            key, pos = string_literal(text, pos)
        except ParseError:
            break
        _, pos = whitespace(text, pos)
        _, pos = _colon(text, pos)
        _, pos = whitespace(text, pos)
        item, pos = _parse_value(text, pos)
        entries.append((key, item))
        _, pos = whitespace_or_comma(text, pos)
    _, pos = whitespace(text, pos)
    _, pos = _close_brace(text, pos)
    return Object(entries), pos


# ---------------------------------------------------------------------------
# CORE VALUE PARSER
# ---------------------------------------------------------------------------
_parse_value = choice(
    _string,
    _integer,
    _boolean,
    _null,
    _parse_array,
    _parse_object,
    description="JSON value",
)

_document = sequence(whitespace, _parse_value, whitespace)
_end = end_of_input()


# ---------------------------------------------------------------------------
# PUBLIC API
# ---------------------------------------------------------------------------
def parse_value(text: str) -> Value:
    """
    Parse JSON text into a Value, raising ParseError on any mismatch.

    The whole input must be consumed; surrounding whitespace is allowed.
    """
    try:
        (_, value, _), pos = _document(text, 0)
    except RecursionError:
        raise ParseError(TOO_DEEP) from None
    except ParseError as exc:
        logger.debug("parse failed: %s", exc)
        raise ParseError(MALFORMED) from None
    try:
        _end(text, pos)
    except ParseError:
        logger.debug("parse stopped at offset %d of %d", pos, len(text))
        raise ParseError(TRAILING) from None
    return value


def parse(text: str) -> Result:
    """Parse JSON text into Ok(Value) or Err(message)."""
    try:
        return Ok(parse_value(text))
    except ParseError as exc:
        return Err(str(exc))


# ---------------------------------------------------------------------------
# CLI ENTRYPOINT
# ---------------------------------------------------------------------------
def _cli(argv: List[str]):
    """
    Command-line validator.

    0 on success, 1 on a parse failure, 2 when the file cannot be read.
    """
    ap = argparse.ArgumentParser(description="Ordered JSON validator")
    ap.add_argument("file", help="JSON file to verify")
    ap.add_argument("--debug", action="store_true", help="dump the parsed value tree")
    ap.add_argument("--echo", action="store_true", help="print the value rendered back to JSON")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        with open(args.file, "r", encoding="utf-8") as fh:
            data = fh.read()
    except OSError as exc:
        print(f"cannot read {args.file}: {exc.strerror}", file=sys.stderr)
        return 2

    try:
        value = parse_value(data)
    except SyntaxError as exc:
        print(f"SyntaxError: {exc}", file=sys.stderr)
        return 1

    if args.debug:
        print(repr(value))
    elif args.echo:
        print(render(value))
    else:
        print("OK")
    return 0


# ---------------------------------------------------------------------------
# MAIN GUARD
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    sys.exit(_cli(sys.argv[1:]))
