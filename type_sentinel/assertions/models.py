"""
Assertion types and result models.

This module defines the callable shapes used throughout the package and the
discriminated result returned by check(), which carries the narrowed value
on success and the failure on rejection.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, TypeVar

from ..formatting import format_value

T = TypeVar("T")

# A type assertion returns normally iff the value conforms, and raises
# TypeAssertionError otherwise. Extra positional args are forwarded.
TypeAssertion = Callable[..., None]

# A type guard returns True iff the value conforms and never raises for a
# failing check.
TypeGuardFn = Callable[..., bool]


class AssertionStatus(str, Enum):
    """Status of an assertion check."""
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"  # assertion raised something other than TypeAssertionError


@dataclass
class AssertionResult(Generic[T]):
    """
    Result of running one assertion against one value.

    Attributes:
        status: Whether the assertion passed, failed, or errored
        message: Human-readable description of the result
        value: The value that was checked (narrowed to T when passed)
        error: The exception raised by the assertion, if any
        details: Context payload of the failure, for debugging
    """
    status: AssertionStatus
    message: str
    value: T | None = None
    error: BaseException | None = None
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return self.status == AssertionStatus.PASSED

    @property
    def failed(self) -> bool:
        return self.status != AssertionStatus.PASSED

    def unwrap(self) -> T:
        """Return the checked value, or re-raise the failure."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def __str__(self) -> str:
        """Format as a human-readable string."""
        if self.status == AssertionStatus.PASSED:
            return f"✅ PASS: {self.message}"

        icon = "❌" if self.status == AssertionStatus.FAILED else "⚠️"
        lines = [f"{icon} {self.status.value.upper()}: {self.message}"]
        lines.append(f"   Value: {format_value(self.value)}")
        for key, value in self.details.items():
            lines.append(f"   {key}: {format_value(value)}")
        return "\n".join(lines)

    @classmethod
    def passed_result(cls, value: T, message: str = "Value satisfied assertion") -> AssertionResult[T]:
        """Create a passing result."""
        return cls(status=AssertionStatus.PASSED, message=message, value=value)

    @classmethod
    def failed_result(
        cls,
        value: Any,
        message: str,
        error: BaseException,
        details: dict[str, Any] | None = None,
    ) -> AssertionResult[T]:
        """Create a failing result."""
        return cls(
            status=AssertionStatus.FAILED,
            message=message,
            value=value,
            error=error,
            details=details or {},
        )

    @classmethod
    def error_result(
        cls,
        value: Any,
        message: str,
        error: BaseException,
        details: dict[str, Any] | None = None,
    ) -> AssertionResult[T]:
        """Create an error result (the assertion itself broke)."""
        return cls(
            status=AssertionStatus.ERROR,
            message=message,
            value=value,
            error=error,
            details=details or {"error_type": type(error).__name__},
        )
