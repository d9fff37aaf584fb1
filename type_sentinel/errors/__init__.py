"""
Failure model and context engine.

Every assertion in type_sentinel raises TypeAssertionError. Containers wrap
nested failures with wrap_error() so that the final error reads like
'For property "items": For element 1: Expected a number, found type str'
while still pointing at the original leaf failure through .cause.

Usage:
    from type_sentinel.errors import TypeAssertionError, named_error, wrap_error

    raise named_error("TypeAssertionError", "Expected a widget", {"value": value})
"""

from .context import error_message, named_error, wrap_error
from .models import TYPE_ASSERTION_ERROR, TypeAssertionError

__all__ = [
    "TYPE_ASSERTION_ERROR",
    "TypeAssertionError",
    "error_message",
    "named_error",
    "wrap_error",
]
