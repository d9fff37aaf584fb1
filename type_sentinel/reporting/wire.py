"""
Decoding of serialized failure chains.

TypeAssertionError.to_dict() produces the wire format:

    {"kind": "TypeAssertionError", "message": str, "context"?: {...}, "cause"?: {...}}

error_from_dict() turns it back into a chain of exceptions. The payload is
validated with the package's own assertions, so a malformed document fails
with the same path-aware messages as any other data.
"""

from __future__ import annotations

from typing import Any, cast

from ..assertions import (
    assert_is_non_null_object,
    assert_is_string,
    assert_object_has_own_property,
    value_asserter,
)
from ..errors import TYPE_ASSERTION_ERROR, TypeAssertionError


class ForeignError(Exception):
    """Stand-in for a non-TypeAssertionError cause read back from the wire format."""

    def __init__(self, kind: str, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"ForeignError({self.kind!r}, {self.message!r})"


def assert_is_wire_error(data: Any) -> None:
    """Assert that a value has the shape of a serialized failure, at every level of its chain."""
    assert_is_non_null_object(data)
    assert_object_has_own_property(data, "kind", assert_is_string)
    assert_object_has_own_property(data, "message", assert_is_string)
    if "context" in data:
        assert_object_has_own_property(data, "context", assert_is_non_null_object)
    if "cause" in data:
        assert_object_has_own_property(data, "cause", assert_is_wire_error)


def _decode(data: dict[str, Any]) -> BaseException:
    if data["kind"] != TYPE_ASSERTION_ERROR:
        return ForeignError(data["kind"], data["message"])
    cause = _decode(data["cause"]) if "cause" in data else None
    context = dict(data["context"]) if "context" in data else None
    return TypeAssertionError(data["message"], context=context, cause=cause)


def error_from_dict(data: Any) -> TypeAssertionError:
    """
    Rebuild a failure chain from its wire format.

    Args:
        data: Parsed JSON/YAML document

    Returns:
        The outermost TypeAssertionError, with causes linked

    Raises:
        TypeAssertionError: If the document is not a serialized failure
    """
    assert_is_wire_error(data)
    assert_object_has_own_property(data, "kind", value_asserter(TYPE_ASSERTION_ERROR))
    return cast(TypeAssertionError, _decode(data))
