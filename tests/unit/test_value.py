import dataclasses

import pytest
from json_value import NULL, Array, Bool, Int, Null, Object, String, value_equals


def test_object_equality_is_order_sensitive():
    ab = Object([("a", Int(1)), ("b", Int(2))])
    ba = Object([("b", Int(2)), ("a", Int(1))])
    assert ab != ba
    assert ab == Object([("a", Int(1)), ("b", Int(2))])


def test_length_mismatch_is_unequal():
    assert Object([("a", Int(1))]) != Object([("a", Int(1)), ("a", Int(1))])
    assert Array([Int(1)]) != Array([Int(1), Int(1)])


def test_array_equality_is_order_sensitive():
    assert Array([Int(1), Int(2)]) != Array([Int(2), Int(1)])


def test_variants_never_cross_compare():
    assert Int(1) != Bool(True)
    assert Int(0) != Bool(False)
    assert String("null") != Null()
    assert Array([]) != Object([])


def test_null_instances_are_equal():
    assert Null() == NULL


def test_non_values_are_not_equal():
    assert Int(1) != 1
    assert String("a") != "a"


def test_values_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Int(1).value = 2


def test_values_are_not_hashable():
    with pytest.raises(TypeError):
        hash(Array([]))


def test_sequences_stored_as_tuples():
    arr = Array([Int(1)])
    assert isinstance(arr.elements, tuple)
    assert isinstance(Object([["k", NULL]]).entries[0], tuple)


def test_deep_equality_does_not_recurse():
    left = right = Array([])
    for _ in range(20000):
        left = Array([left])
        right = Array([right])
    assert value_equals(left, right)
    assert not value_equals(left, Array([right]))
