# json_codec.py
# Typed conversion between domain values and JSON text
#
# =============================================================================
#  CODEC PROTOCOL: ONE (to_value, from_value) PAIR PER TYPE
# =============================================================================
#
# A codec is two plain functions supplied at the call site:
#
#   to_value:   T -> Value             total, never fails
#   from_value: Value -> Result[T]     Ok(T) or Err("expected ...")
#
# There is no registry and no reflection. Lists get their codec by composing
# an element codec with list_codec(). Records write their own pair, building
# and destructuring Object entries in a fixed field order; object_fields()
# does the destructuring and rejects any key, order or count mismatch.
#
#   Point = Codec(
#       lambda p: Object([("x", Int(p.x)), ("y", Int(p.y))]),
#       lambda v: object_fields(v, ("x", "y")).and_then(...),
#   )
#
# =============================================================================

import logging
from typing import Any, Callable, List, NamedTuple, Sequence

from json_parser import parse
from json_printer import render
from json_result import Err, Ok, Result, collect
from json_value import NULL, Array, Bool, Int, Null, Object, String, Value

logger = logging.getLogger(__name__)

ToValue = Callable[[Any], Value]
FromValue = Callable[[Value], Result]


class Codec(NamedTuple):
    to_value: ToValue
    from_value: FromValue


# ---------------------------------------------------------------------------
# ENTRY POINTS
# ---------------------------------------------------------------------------
def serialize(value: Any, to_value: ToValue) -> str:
    return render(to_value(value))


def deserialize(text: str, from_value: FromValue) -> Result:
    """
    Parse `text` and decode it with `from_value`.

    A parse failure is returned unchanged; otherwise the decoder's own
    result is returned, success or failure.
    """
    result = parse(text).and_then(from_value)
    if result.is_err():
        logger.debug("deserialize failed: %s", result.message)
    return result


# ---------------------------------------------------------------------------
# PRIMITIVE CODECS
# ---------------------------------------------------------------------------
def _expect(kind: type, message: str) -> FromValue:
    def from_value(value: Value) -> Result:
        if isinstance(value, kind):
            return Ok(value.value)
        return Err(message)
    return from_value


def _from_null(value: Value) -> Result:
    if isinstance(value, Null):
        return Ok(None)
    return Err("expected null")


string_codec = Codec(String, _expect(String, "expected string"))
int_codec = Codec(lambda number: Int(int(number)), _expect(Int, "expected integer"))
bool_codec = Codec(lambda flag: Bool(bool(flag)), _expect(Bool, "expected boolean"))
unit_codec = Codec(lambda _: NULL, _from_null)


# ---------------------------------------------------------------------------
# COMPOSITE CODECS
# ---------------------------------------------------------------------------
def list_codec(element: Codec) -> Codec:
    """Codec for a list whose items all use the `element` codec."""
    def to_value(items: Sequence[Any]) -> Value:
        return Array(element.to_value(item) for item in items)

    def from_value(value: Value) -> Result:
        if not isinstance(value, Array):
            return Err("expected array")
        return collect(element.from_value(item) for item in value.elements)

    return Codec(to_value, from_value)


def object_fields(value: Value, keys: Sequence[str]) -> Result:
    """
    Destructure an Object whose entries carry exactly `keys`, in that order.

    Returns Ok(tuple of field values). Extra, missing or reordered keys fail.
    """
    if not isinstance(value, Object):
        return Err("expected object")
    found: List[str] = [key for key, _ in value.entries]
    if found != list(keys):
        return Err("expected fields " + ", ".join(keys))
    return Ok(tuple(item for _, item in value.entries))
