# json_printer.py
# Renders a JSON value tree back to compact text
#
# Output is single-line with ", " between elements and ": " after keys.
# String contents are emitted verbatim between quotes: no escaping is applied,
# so a string holding '"' or '\' renders to text that will not parse back to
# the same value.
#
# The tree is walked with an explicit stack, like json_value.value_equals, so
# nesting depth is bounded by memory rather than the recursion limit.

from typing import List, Union

from json_value import Array, Bool, Int, Null, Object, String, Value

# Kept below the 640-digit floor of sys.set_int_max_str_digits().
DIGIT_CHUNK = 500
_CHUNK_BASE = 10 ** DIGIT_CHUNK


def int_to_decimal(number: int) -> str:
    """Decimal text of an int of any size, regardless of the str() digit limit."""
    number = int(number)
    if number < 0:
        return "-" + int_to_decimal(-number)
    chunks: List[str] = []
    while number >= _CHUNK_BASE:
        number, low = divmod(number, _CHUNK_BASE)
        chunks.append(str(low).zfill(DIGIT_CHUNK))
    chunks.append(str(number))
    return "".join(reversed(chunks))


def render(value: Value) -> str:
    """Convert a Value to JSON text. Never fails."""
    out: List[str] = []
    # Items are either a Value still to render or text ready to emit.
    pending: List[Union[Value, str]] = [value]
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            out.append(item)
        elif isinstance(item, String):
            out.append(f'"{item.value}"')
        elif isinstance(item, Bool):
            out.append("true" if item.value else "false")
        elif isinstance(item, Int):
            out.append(int_to_decimal(item.value))
        elif isinstance(item, Null):
            out.append("null")
        elif isinstance(item, Array):
            parts: List[Union[Value, str]] = ["["]
            for index, element in enumerate(item.elements):
                if index:
                    parts.append(", ")
                parts.append(element)
            parts.append("]")
            pending.extend(reversed(parts))
        elif isinstance(item, Object):
            parts = ["{"]
            for index, (key, element) in enumerate(item.entries):
                parts.append(f', "{key}": ' if index else f'"{key}": ')
                parts.append(element)
            parts.append("}")
            pending.extend(reversed(parts))
        else:
            raise TypeError(f"not a JSON value: {item!r}")
    return "".join(out)
