"""
Construction and wrapping of type assertion failures.

Leaf checks create failures with named_error(). Containers (property and
element checks) catch a failure from a nested check and re-raise it through
wrap_error(), which prefixes location context and keeps the original as the
cause.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from .models import TYPE_ASSERTION_ERROR, TypeAssertionError

logger = logging.getLogger(__name__)


def named_error(
    kind: str,
    message: str,
    context: dict[str, Any] | None = None,
) -> TypeAssertionError:
    """
    Create a new failure of the given kind.

    Args:
        kind: Failure kind tag; only "TypeAssertionError" is defined
        message: Human-readable description
        context: Optional structured data about what failed

    Returns:
        The failure, ready to be raised
    """
    if kind != TYPE_ASSERTION_ERROR:
        raise ValueError(f"Unknown error kind {kind!r}, expected {TYPE_ASSERTION_ERROR!r}")
    return TypeAssertionError(message, context=context)


def error_message(error: BaseException) -> str:
    """Message of a failure, falling back to str() or the class name for foreign exceptions."""
    if isinstance(error, TypeAssertionError):
        return error.message
    return str(error) or type(error).__name__


def wrap_error(
    cause: BaseException,
    replacement_message: str | None,
    message_builder: Callable[[BaseException], str],
    context: Mapping[str, Any],
) -> TypeAssertionError:
    """
    Wrap a failure with an additional layer of context.

    Args:
        cause: The failure being wrapped (any exception)
        replacement_message: Message to use verbatim, or None to build one
        message_builder: Called with the cause when no replacement is given
        context: Context for the new layer; copied, never shared

    Returns:
        A new TypeAssertionError whose cause is the original failure

    Example:
        wrap_error(e, None, lambda c: f"For element 3: {error_message(c)}", {"index": 3})
    """
    message = replacement_message if replacement_message is not None else message_builder(cause)
    wrapped = TypeAssertionError(message, context=dict(context), cause=cause)
    logger.debug(f"Wrapped {type(cause).__name__} (depth {wrapped.depth}): {message}")
    return wrapped
