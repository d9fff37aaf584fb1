"""
type-sentinel - runtime type assertions for untyped data

This package provides composable checks for data of unknown shape (parsed
JSON, YAML, request bodies) that either return normally or raise a single,
path-aware failure type.

Subpackages:
    - errors: TypeAssertionError and the context-wrapping engine
    - assertions: Guards, assertions, and the combinators that chain them
    - reporting: Rich rendering and wire-format decoding of failures
    - config: Rendering configuration

Usage:
    from type_sentinel import (
        assert_object_has_own_property,
        array_asserter,
        assert_is_string,
        guard_from_assertion,
        TypeAssertionError,
    )

    assert_tags = array_asserter(assert_is_string)

    try:
        assert_object_has_own_property(payload, "tags", assert_tags)
    except TypeAssertionError as e:
        print(e.message)    # For property "tags": For element 2: Expected a string, found type int
        print(e.json_path)  # $.tags.[2]

    has_tags = guard_from_assertion(lambda d: assert_object_has_own_property(d, "tags", assert_tags))
"""

__version__ = "0.1.1"

# Re-export errors for convenience
from .errors import (
    TYPE_ASSERTION_ERROR,
    TypeAssertionError,
    error_message,
    named_error,
    wrap_error,
)

# Re-export assertions for convenience
from .assertions import (
    # Models
    AssertionResult,
    AssertionStatus,
    TypeAssertion,
    TypeGuardFn,
    # Bridge
    assertion_from_guard,
    guard_from_assertion,
    # Engine
    array_asserter,
    assert_has_value,
    assert_is_array_of,
    assert_object_has_own_property,
    check,
    compose_type_assertions,
    property_asserter,
    type_check_exhaustion,
    value_asserter,
    # Primitives
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

# Re-export config for convenience
from .config import DEFAULT_RENDER_CONFIG, RenderConfig, load_render_config

# Re-export reporting for convenience
from .reporting import error_from_dict, print_error, render_error

__all__ = [
    # Package info
    "__version__",
    # Errors
    "TYPE_ASSERTION_ERROR",
    "TypeAssertionError",
    "error_message",
    "named_error",
    "wrap_error",
    # Assertions - Models
    "AssertionResult",
    "AssertionStatus",
    "TypeAssertion",
    "TypeGuardFn",
    # Assertions - Bridge
    "guard_from_assertion",
    "assertion_from_guard",
    # Assertions - Engine
    "assert_has_value",
    "value_asserter",
    "assert_is_array_of",
    "array_asserter",
    "assert_object_has_own_property",
    "property_asserter",
    "compose_type_assertions",
    "type_check_exhaustion",
    "check",
    # Assertions - Primitives
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
    # Config
    "DEFAULT_RENDER_CONFIG",
    "RenderConfig",
    "load_render_config",
    # Reporting
    "error_from_dict",
    "print_error",
    "render_error",
]
