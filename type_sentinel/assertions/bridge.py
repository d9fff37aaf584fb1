"""
Conversion between type guards and type assertions.

A guard answers "does this value conform?" with a bool. An assertion
answers by returning or raising. The two are interchangeable:

    guard_from_assertion(A)(x) is True  <=>  A(x) does not raise

for every x, including values the assertion was never written for.
"""

from __future__ import annotations

import functools
import logging
from typing import Any

from ..errors import TYPE_ASSERTION_ERROR, TypeAssertionError, named_error
from .models import TypeAssertion, TypeGuardFn

logger = logging.getLogger(__name__)


def _callable_name(fn: Any) -> str | None:
    name = getattr(fn, "__name__", None)
    if not name or name == "<lambda>":
        return None
    return name


def guard_from_assertion(asserter: TypeAssertion) -> TypeGuardFn:
    """
    Create a type guard from a type assertion.

    The guard returns False when the assertion raises *any* Exception, not
    only TypeAssertionError. A guard built from a buggy assertion therefore
    reports False instead of surfacing the bug; the swallowed exception is
    logged at DEBUG level. Failure details are not preserved.

    Args:
        asserter: Assertion called as asserter(value, *args)

    Returns:
        Guard called as guard(value, *args)
    """

    @functools.wraps(asserter)
    def guard(data: Any, *args: Any) -> bool:
        try:
            asserter(data, *args)
        except TypeAssertionError as e:
            logger.debug(f"Guard {_callable_name(asserter)} rejected value: {e.message}")
            return False
        except Exception as e:
            logger.debug(
                f"Guard {_callable_name(asserter)} absorbed {type(e).__name__} "
                f"raised by its assertion: {e}"
            )
            return False
        return True

    return guard


def assertion_from_guard(guard: TypeGuardFn, message: str | None = None) -> TypeAssertion:
    """
    Create a type assertion from a type guard.

    Args:
        guard: Guard called as guard(value, *args)
        message: Failure message; defaults to one naming the guard

    Returns:
        Assertion that raises TypeAssertionError when the guard returns False
    """
    name = _callable_name(guard)

    @functools.wraps(guard)
    def asserter(data: Any, *args: Any) -> None:
        if not guard(data, *args):
            say_name = f' "{name}"' if name else ""
            raise named_error(
                TYPE_ASSERTION_ERROR,
                message if message is not None else f"Value did not satisfy type assertion{say_name}",
                {"guard": name} if name else None,
            )

    return asserter
