"""Tests for the primitive assertions and guards."""

import pytest

from type_sentinel.assertions import (
    assert_is_array_of_strings,
    assert_is_boolean,
    assert_is_non_null_object,
    assert_is_number,
    assert_is_record_of_strings_to_strings,
    assert_is_string,
    is_array_of_strings,
    is_boolean,
    is_non_null_object,
    is_number,
    is_record_of_strings_to_strings,
    is_string,
)
from type_sentinel.errors import TypeAssertionError


@pytest.mark.parametrize(
    "assertion,value",
    [
        (assert_is_string, ""),
        (assert_is_string, "text"),
        (assert_is_number, 0),
        (assert_is_number, -3.5),
        (assert_is_boolean, False),
        (assert_is_non_null_object, {}),
        (assert_is_non_null_object, {"a": [1]}),
        (assert_is_record_of_strings_to_strings, {"a": "b"}),
        (assert_is_array_of_strings, ["a", "b"]),
    ],
)
def test_primitive_passes(assertion, value):
    assertion(value)


@pytest.mark.parametrize(
    "assertion,value,message",
    [
        (assert_is_string, 5, "Expected a string, found type int"),
        (assert_is_string, None, "Expected a string, found type NoneType"),
        (assert_is_number, "5", "Expected a number, found type str"),
        (assert_is_number, True, "Expected a number, found type bool"),
        (assert_is_boolean, 1, "Expected a boolean, found type int"),
        (assert_is_non_null_object, None, "Expected non-null object"),
        (assert_is_non_null_object, [1], "Expected an object, found type list"),
        (assert_is_non_null_object, "x", "Expected an object, found type str"),
        (assert_is_record_of_strings_to_strings, None, "Expected non-null object"),
        (assert_is_record_of_strings_to_strings, ["a"], "Expected an object, found type list"),
        (assert_is_record_of_strings_to_strings, {1: "a"}, "Expected key to be a string, found 1"),
        (
            assert_is_record_of_strings_to_strings,
            {"a": 1},
            "Expected value for key a to be a string, found 1",
        ),
        (assert_is_array_of_strings, ["a", 2], "For element 1: Expected a string, found type int"),
        (assert_is_array_of_strings, "ab", "Expected an array, found type str"),
    ],
)
def test_primitive_fails(assertion, value, message):
    with pytest.raises(TypeAssertionError) as exc_info:
        assertion(value)

    assert exc_info.value.message == message


@pytest.mark.parametrize(
    "guard,accepted,rejected",
    [
        (is_string, "x", 1),
        (is_number, 1.0, False),
        (is_boolean, True, "true"),
        (is_non_null_object, {"a": 1}, None),
        (is_record_of_strings_to_strings, {"a": "b"}, {"a": None}),
        (is_array_of_strings, ["a"], [None]),
    ],
)
def test_guards(guard, accepted, rejected):
    assert guard(accepted) is True
    assert guard(rejected) is False


def test_record_guard_absorbs_non_mapping_input():
    # a list is rejected as a non-object before any entries are read
    assert is_record_of_strings_to_strings(["a"]) is False
