"""
Typed configuration for type_sentinel.

Configuration only affects how failures are rendered; assertions themselves
have no configurable behavior.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderConfig:
    """
    Options for rendering failure chains.

    Attributes:
        max_value_length: Rendered values longer than this are truncated
        show_context: Whether to list each layer's context payload
        show_path: Whether to show the JSONPath of the offending value
    """
    max_value_length: int = 100
    show_context: bool = True
    show_path: bool = True


DEFAULT_RENDER_CONFIG = RenderConfig()
