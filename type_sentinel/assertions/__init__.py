"""
Type assertions, type guards, and the combinators that compose them.

An assertion returns normally when a value conforms and raises
TypeAssertionError otherwise. A guard returns a bool. The bridge converts
between the two, and the engine builds chains over object properties and
sequence elements.

Usage:
    from type_sentinel.assertions import (
        assert_object_has_own_property,
        array_asserter,
        assert_is_number,
        check,
    )

    data = {"scores": [1, 2, "three"]}

    # Raising form
    assert_object_has_own_property(data, "scores", array_asserter(assert_is_number))
    # TypeAssertionError: For property "scores": For element 2: Expected a number, found type str

    # Result form
    result = check(assert_object_has_own_property, data, "scores", array_asserter(assert_is_number))
    if not result.passed:
        print(result)
"""

# Models
from .models import AssertionResult, AssertionStatus, TypeAssertion, TypeGuardFn

# Bridge
from .bridge import assertion_from_guard, guard_from_assertion

# Engine
from .engine import (
    array_asserter,
    assert_has_value,
    assert_is_array_of,
    assert_object_has_own_property,
    check,
    compose_type_assertions,
    property_asserter,
    type_check_exhaustion,
    value_asserter,
)

# Primitives
from .primitives import (
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

__all__ = [
    # Models
    "AssertionResult",
    "AssertionStatus",
    "TypeAssertion",
    "TypeGuardFn",
    # Bridge
    "guard_from_assertion",
    "assertion_from_guard",
    # Engine
    "assert_has_value",
    "value_asserter",
    "assert_is_array_of",
    "array_asserter",
    "assert_object_has_own_property",
    "property_asserter",
    "compose_type_assertions",
    "type_check_exhaustion",
    "check",
    # Primitives
    "assert_is_string",
    "assert_is_number",
    "assert_is_boolean",
    "assert_is_non_null_object",
    "assert_is_record_of_strings_to_strings",
    "assert_is_array_of_strings",
    "is_string",
    "is_number",
    "is_boolean",
    "is_non_null_object",
    "is_record_of_strings_to_strings",
    "is_array_of_strings",
]
