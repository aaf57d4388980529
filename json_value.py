# json_value.py
# Immutable JSON value model with order-sensitive structural equality
#
# =============================================================================
#  VALUE MODEL: SIX-VARIANT TAGGED UNION
# =============================================================================
#
# Every JSON document is represented as a tree of exactly six node kinds:
# String, Int, Bool, Null, Array and Object [RFC 8259, Section 3].
#
# Notes on the representation:
# 1. Int only. There is no fractional or exponent component anywhere in the
#    model, so a float can never appear in a parsed tree.
# 2. Object is an ordered sequence of (key, value) pairs, not a dict.
#    Duplicate keys survive and entry order is part of the value's identity.
# 3. Nodes are frozen. Array and Object store tuples whatever iterable the
#    caller hands in, so a constructed tree can be shared freely.
#
# Equality walks both trees with an explicit stack instead of recursion, so
# comparing very deep documents is bounded by memory, not the call stack.
#
# =============================================================================

from dataclasses import dataclass, field
from typing import List, Tuple


class Value:
    """Base of the JSON value union. Not instantiated directly."""

    __slots__ = ()

    def __eq__(self, other):
        if not isinstance(other, Value):
            return NotImplemented
        return value_equals(self, other)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    # Ordered objects and arrays are not hashable; neither are the scalars.
    __hash__ = None


@dataclass(frozen=True, eq=False)
class String(Value):
    value: str


@dataclass(frozen=True, eq=False)
class Int(Value):
    value: int


@dataclass(frozen=True, eq=False)
class Bool(Value):
    value: bool


@dataclass(frozen=True, eq=False)
class Null(Value):
    pass


@dataclass(frozen=True, eq=False)
class Array(Value):
    elements: Tuple[Value, ...] = field(default=())

    def __post_init__(self):
        object.__setattr__(self, "elements", tuple(self.elements))


@dataclass(frozen=True, eq=False)
class Object(Value):
    """
    Ordered sequence of (key, value) entries.

    No lookup by key is offered here. Record decoders destructure the entry
    sequence positionally, see json_codec.object_fields.
    """

    entries: Tuple[Tuple[str, Value], ...] = field(default=())

    def __post_init__(self):
        object.__setattr__(self, "entries", tuple((k, v) for k, v in self.entries))


NULL = Null()

Entry = Tuple[str, Value]


# ---------------------------------------------------------------------------
# STRUCTURAL EQUALITY
# ---------------------------------------------------------------------------
def value_equals(left: Value, right: Value) -> bool:
    """
    Order-sensitive structural equality over two value trees.

    Different variants are never equal, so Int(1) != Bool(True) even though
    1 == True in Python.
    """
    pending: List[Tuple[Value, Value]] = [(left, right)]
    while pending:
        a, b = pending.pop()
        if type(a) is not type(b):
            return False
        if isinstance(a, Array):
            if len(a.elements) != len(b.elements):
                return False
            pending.extend(zip(a.elements, b.elements))
        elif isinstance(a, Object):
            if len(a.entries) != len(b.entries):
                return False
            for (key_a, val_a), (key_b, val_b) in zip(a.entries, b.entries):
                if key_a != key_b:
                    return False
                pending.append((val_a, val_b))
        elif isinstance(a, Null):
            continue
        elif a.value != b.value:
            return False
    return True

