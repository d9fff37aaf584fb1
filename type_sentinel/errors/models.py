"""
Failure model for type assertions.

This module defines the single exception type raised by every assertion
in the package, along with helpers for walking and serializing the causal
chain that builds up as a failure is wrapped with location context.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterator

from jsonpath_ng.jsonpath import Child, Fields, Index, JSONPath, Root


TYPE_ASSERTION_ERROR = "TypeAssertionError"


class TypeAssertionError(Exception):
    """
    Raised when a value does not conform to an asserted type.

    Every failure in the package has the same kind. Failures are told apart
    by their message and context, not by subclass.

    Attributes:
        kind: Always "TypeAssertionError"
        message: Human-readable description of the failure
        context: Structured data describing what failed (field, index, values)
        cause: The failure this one wraps, if any

    Example:
        try:
            assert_object_has_own_property(data, "items", array_asserter(assert_is_number))
        except TypeAssertionError as e:
            print(e.message)     # For property "items": For element 1: ...
            print(e.json_path)   # $.items.[1]
            print(e.root_cause)  # the leaf failure
    """

    kind = TYPE_ASSERTION_ERROR

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.context = context
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"

    def causes(self) -> Iterator[BaseException]:
        """Yield this error followed by each predecessor, outermost first."""
        current: BaseException | None = self
        while current is not None:
            yield current
            current = current.cause if isinstance(current, TypeAssertionError) else None

    @property
    def depth(self) -> int:
        """Number of links in the causal chain, including this error."""
        return sum(1 for _ in self.causes())

    @property
    def root_cause(self) -> BaseException:
        """The innermost failure in the chain."""
        *_, root = self.causes()
        return root

    def path_steps(self) -> list[tuple[str, Any]]:
        """
        Location of the offending value as ("field", key) / ("index", i) steps.

        Each wrap that recorded a "field" adds a field step and each one that
        recorded an "index" adds an index step, outermost first. Keys keep
        their original type, so {1: ...} is reached by the integer 1.
        """
        steps: list[tuple[str, Any]] = []
        for link in self.causes():
            if not isinstance(link, TypeAssertionError) or not link.context:
                continue
            if "field" in link.context and "field_value" in link.context:
                steps.append(("field", link.context["field"]))
            elif "index" in link.context and "element" in link.context:
                steps.append(("index", link.context["index"]))
        return steps

    @property
    def json_path(self) -> JSONPath:
        """
        JSONPath to the offending value, for display.

        JSONPath field names are strings, so a non-string mapping key is
        shown by its str(); use locate() to resolve the value itself.
        """
        expr: JSONPath = Root()
        for step, key in self.path_steps():
            if step == "field":
                expr = Child(expr, Fields(str(key)))
            else:
                expr = Child(expr, Index(key))
        return expr

    def locate(self, data: Any) -> list[Any]:
        """
        Follow path_steps() through a document and return the offending value.

        Returns a one-element list with the value, or an empty list when the
        document has no value at that location.
        """
        current = data
        for step, key in self.path_steps():
            try:
                if step == "index":
                    if not isinstance(current, (list, tuple)):
                        return []
                    current = current[key]
                elif isinstance(current, Mapping):
                    current = current[key]
                else:
                    current = vars(current)[key]
            except (KeyError, IndexError, TypeError):
                return []
        return [current]

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize the failure chain to its wire format.

        Returns:
            {"kind", "message", "context"?, "cause"?}; foreign causes are
            reduced to their class name and message.
        """
        result: dict[str, Any] = {"kind": self.kind, "message": self.message}
        if self.context is not None:
            result["context"] = dict(self.context)
        if self.cause is not None:
            if isinstance(self.cause, TypeAssertionError):
                result["cause"] = self.cause.to_dict()
            else:
                result["cause"] = {
                    "kind": getattr(self.cause, "kind", None) or type(self.cause).__name__,
                    "message": str(self.cause),
                }
        return result
