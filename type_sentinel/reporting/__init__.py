"""
Reporting for type assertion failures.

This package renders failure chains for humans (Rich trees) and decodes
them from their serialized wire format.

Usage:
    from type_sentinel.reporting import print_error, error_from_dict

    try:
        assert_is_array_of(data, assert_is_number)
    except TypeAssertionError as e:
        print_error(e)
        payload = e.to_dict()

    # Later, or in another process
    error = error_from_dict(payload)
"""

# Renderer
from .renderer import print_error, render_error

# Wire format
from .wire import ForeignError, assert_is_wire_error, error_from_dict

__all__ = [
    # Renderer
    "render_error",
    "print_error",
    # Wire format
    "ForeignError",
    "assert_is_wire_error",
    "error_from_dict",
]
