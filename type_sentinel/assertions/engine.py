"""
Assertion combinators for validating untyped data.

This module provides the composition core: equality checks, element-wise
sequence checks, property chains, assertion composition, and check(), which
turns any assertion into an AssertionResult.

All checks are fail-fast. The first failure aborts the operation and is
wrapped with exactly one layer of location context per containing property
or element check before it propagates.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Never, NoReturn

from ..errors import TYPE_ASSERTION_ERROR, TypeAssertionError, error_message, named_error, wrap_error
from ..formatting import format_value, type_name
from .models import AssertionResult, TypeAssertion

_MISSING = object()


def assert_has_value(actual_value: Any, expected_value: Any) -> None:
    """
    Assert that a value is strictly equal to an expected value.

    Strict means the types must match exactly as well as the values, so
    1 does not match True or 1.0.
    """
    if type(actual_value) is not type(expected_value) or actual_value != expected_value:
        raise named_error(
            TYPE_ASSERTION_ERROR,
            f"Expected value to be {format_value(expected_value, None)} "
            f"but was {format_value(actual_value, None)}",
            {"expected": expected_value, "actual": actual_value},
        )


def value_asserter(expected_value: Any) -> TypeAssertion:
    """Create an assertion that checks for one specific value."""

    def assert_value(actual_value: Any) -> None:
        assert_has_value(actual_value, expected_value)

    return assert_value


def assert_is_array_of(data: Any, *element_assertions: TypeAssertion) -> None:
    """
    Assert that a value is a list or tuple whose every element passes the given assertions.

    Elements are checked in index order, and for each element the assertions
    run in the order given. The first failure stops everything: it is wrapped
    as "For element <i>: ..." with {"index", "element"} context and raised.
    Remaining elements and assertions are not evaluated.
    """
    if not isinstance(data, (list, tuple)):
        raise named_error(
            TYPE_ASSERTION_ERROR,
            f"Expected an array, found type {type_name(data)}",
            {"type": type_name(data)},
        )

    for idx, element in enumerate(data):
        for assertion in element_assertions:
            try:
                assertion(element)
            except Exception as e:
                raise wrap_error(
                    e,
                    None,
                    lambda c: f"For element {idx}: {error_message(c)}",
                    {"index": idx, "element": element},
                ) from e


def array_asserter(*element_assertions: TypeAssertion) -> TypeAssertion:
    """Create an assertion that applies assert_is_array_of with fixed element assertions."""

    def assert_array(data: Any) -> None:
        assert_is_array_of(data, *element_assertions)

    return assert_array


def _own_property(data: Any, field: Any) -> Any:
    """Read an own property, returning _MISSING when there is none."""
    if isinstance(data, Mapping):
        try:
            return data[field] if field in data else _MISSING
        except TypeError:
            # unhashable field
            return _MISSING
    try:
        own = vars(data)
    except TypeError:
        return _MISSING
    if not isinstance(field, str):
        return _MISSING
    return own.get(field, _MISSING)


def assert_object_has_own_property(data: Any, field: Any, *field_value_assertions: TypeAssertion) -> None:
    """
    Assert that an object has the specified own property, and that its value
    satisfies a chain of assertions.

    Own properties are the keys of a mapping, or the instance attributes
    (vars()) of any other object; class attributes do not count.

    The assertions form a chain: each one runs only if the previous one
    passed, so later assertions may rely on what earlier ones established.
    A chain failure is wrapped as 'For property "<field>": ...' with
    {"field", "field_value"} context. For a fixed pipeline that is reused in
    several places, pre-combine steps with compose_type_assertions().

    Args:
        data: The object to inspect
        field: Property name (or mapping key)
        *field_value_assertions: Assertions applied to the property value, in order

    Example:
        assert_object_has_own_property(
            payload, "status", assert_is_string, value_asserter("ok")
        )
    """
    field_value = _own_property(data, field)
    if field_value is _MISSING:
        raise named_error(
            TYPE_ASSERTION_ERROR,
            f'Expected object to have own property "{field}", but no such property was found.',
            {"field": field},
        )

    try:
        for assertion in field_value_assertions:
            assertion(field_value)
    except Exception as e:
        raise wrap_error(
            e,
            None,
            lambda c: f'For property "{field}": {error_message(c)}',
            {"field": field, "field_value": field_value},
        ) from e


def property_asserter(field: Any, *field_value_assertions: TypeAssertion) -> TypeAssertion:
    """Create an assertion that applies assert_object_has_own_property with a fixed field and chain."""

    def assert_property(data: Any) -> None:
        assert_object_has_own_property(data, field, *field_value_assertions)

    assert_property.__name__ = f"assert_has_{field}"
    return assert_property


def compose_type_assertions(first: TypeAssertion, second: TypeAssertion) -> TypeAssertion:
    """
    Combine two assertions into one that runs first, then second.

    No context is added: whichever failure happens first propagates as is.
    """

    def composed(value: Any, *args: Any) -> None:
        first(value, *args)
        second(value, *args)

    return composed


def type_check_exhaustion(param: Never) -> NoReturn:
    """
    Mark a branch that a type checker should prove unreachable.

    Call it in the final else of a chain that handles every member of a
    closed set (an Enum or a Literal union). If a member is later added
    without a branch, mypy/pyright reject the call. If it is somehow reached
    at runtime it raises TypeAssertionError.
    """
    raise named_error(
        TYPE_ASSERTION_ERROR,
        f"Unhandled case: {format_value(param)}",
        {"value": param},
    )


def check(assertion: TypeAssertion, value: Any, *args: Any) -> AssertionResult[Any]:
    """
    Run an assertion and report the outcome as a value instead of an exception.

    Unlike guard_from_assertion(), this keeps the difference between a value
    that was rejected (FAILED) and an assertion that broke (ERROR). A broken
    nested assertion is still an ERROR after a property or element check has
    wrapped it, since the root cause is not a TypeAssertionError.

    Example:
        result = check(array_asserter(assert_is_string), data)
        if result.passed:
            names = result.value
        else:
            print(result)
    """
    try:
        assertion(value, *args)
    except TypeAssertionError as e:
        root = e.root_cause
        if not isinstance(root, TypeAssertionError):
            return AssertionResult.error_result(
                value, f"{e.message} ({type(root).__name__})", e, {"error_type": type(root).__name__}
            )
        return AssertionResult.failed_result(value, e.message, e, dict(e.context or {}))
    except Exception as e:
        return AssertionResult.error_result(value, f"Assertion raised {type(e).__name__}: {e}", e)
    return AssertionResult.passed_result(value)
