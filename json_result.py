# json_result.py
# Success/failure result shared by the parser and the codec layer
#
# =============================================================================
#  RESULT: OK OR ERR, NOTHING ELSE
# =============================================================================
#
# Parsing and decoding both end in one of two shapes: a value, or a short
# plain-text message. There is no error code, no position and no cause
# chain. Callers that prefer exceptions call unwrap().
#
# Err never compares equal to anything, including another Err carrying the
# same message. Tests should check is_err() and the message text instead.
#
# =============================================================================

from typing import Any, Callable, Iterable, List, Union


class DecodeError(ValueError):
    """Raised by Result.unwrap() on an Err."""


class Ok:
    __slots__ = ("value",)

    def __init__(self, value: Any):
        self.value = value

    def __eq__(self, other):
        if isinstance(other, Ok):
            # 1 == True in Python; a decoded integer must not match a boolean.
            return type(self.value) is type(other.value) and self.value == other.value
        if isinstance(other, Err):
            return False
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"Ok({self.value!r})"

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, fn: Callable[[Any], Any]) -> "Result":
        return Ok(fn(self.value))

    def and_then(self, fn: Callable[[Any], "Result"]) -> "Result":
        return fn(self.value)

    def unwrap(self) -> Any:
        return self.value


class Err:
    __slots__ = ("message",)

    def __init__(self, message: str):
        self.message = message

    def __eq__(self, other):
        if isinstance(other, (Ok, Err)):
            return False
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"Err({self.message!r})"

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, fn: Callable[[Any], Any]) -> "Result":
        return self

    def and_then(self, fn: Callable[[Any], "Result"]) -> "Result":
        return self

    def unwrap(self) -> Any:
        raise DecodeError(self.message)


Result = Union[Ok, Err]


def collect(results: Iterable[Result]) -> Result:
    """
    Gather an iterable of results into Ok(list), or return the first Err.

    The iterable is consumed lazily, so later items are never evaluated once
    a failure has been seen.
    """
    values: List[Any] = []
    for result in results:
        if result.is_err():
            return result
        values.append(result.value)
    return Ok(values)
