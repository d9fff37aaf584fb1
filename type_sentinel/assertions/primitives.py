"""
Primitive type assertions and their guard twins.

These are the leaves that the combinators in engine.py compose. Each
assert_is_* raises TypeAssertionError; each is_* is the same check as a
guard, built with guard_from_assertion().
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..errors import TYPE_ASSERTION_ERROR, named_error
from ..formatting import type_name
from .bridge import guard_from_assertion
from .engine import assert_is_array_of


def assert_is_string(value: Any) -> None:
    """Assert that the value is a str."""
    if not isinstance(value, str):
        raise named_error(TYPE_ASSERTION_ERROR, f"Expected a string, found type {type_name(value)}")


def assert_is_number(value: Any) -> None:
    """Assert that the value is an int or float. Booleans are not numbers."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise named_error(TYPE_ASSERTION_ERROR, f"Expected a number, found type {type_name(value)}")


def assert_is_boolean(value: Any) -> None:
    """Assert that the value is a bool."""
    if not isinstance(value, bool):
        raise named_error(TYPE_ASSERTION_ERROR, f"Expected a boolean, found type {type_name(value)}")


def assert_is_non_null_object(data: Any) -> None:
    """
    Assert that the value is a real object: not None, and a mapping.

    Lists are not objects here; use assert_is_array_of for those.
    """
    if data is None:
        raise named_error(TYPE_ASSERTION_ERROR, "Expected non-null object")
    if not isinstance(data, Mapping):
        raise named_error(TYPE_ASSERTION_ERROR, f"Expected an object, found type {type_name(data)}")


def assert_is_record_of_strings_to_strings(data: Any) -> None:
    """Assert that the value is a mapping whose keys and values are all strings."""
    assert_is_non_null_object(data)
    for k, v in data.items():
        if not isinstance(k, str):
            raise named_error(
                TYPE_ASSERTION_ERROR,
                f"Expected key to be a string, found {k!s}",
                {"key": k},
            )
        if not isinstance(v, str):
            raise named_error(
                TYPE_ASSERTION_ERROR,
                f"Expected value for key {k} to be a string, found {v!s}",
                {"key": k, "value": v},
            )


def assert_is_array_of_strings(data: Any) -> None:
    assert_is_array_of(data, assert_is_string)


is_string = guard_from_assertion(assert_is_string)
is_number = guard_from_assertion(assert_is_number)
is_boolean = guard_from_assertion(assert_is_boolean)
is_non_null_object = guard_from_assertion(assert_is_non_null_object)
is_record_of_strings_to_strings = guard_from_assertion(assert_is_record_of_strings_to_strings)
is_array_of_strings = guard_from_assertion(assert_is_array_of_strings)
