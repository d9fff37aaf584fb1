"""Value rendering shared by failure messages and the failure renderer."""

from __future__ import annotations

import json
from typing import Any


def format_value(value: Any, max_length: int | None = 100) -> str:
    """
    Format a value for display, truncating if too long.

    JSON-compatible values render as JSON (so strings keep their quotes and
    None is "null"); anything else falls back to repr().
    """
    try:
        formatted = json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError):
        formatted = repr(value)

    if max_length is not None and len(formatted) > max_length:
        return formatted[: max_length - 3] + "..."

    return formatted


def type_name(value: Any) -> str:
    """Runtime type name of a value, as used in failure messages."""
    return type(value).__name__
