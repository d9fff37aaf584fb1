"""
Rich rendering of failure chains.

A failure chain renders as a tree: the outermost failure at the top, each
cause nested under the failure that wrapped it, and each layer's context
listed beside it.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from ..config import DEFAULT_RENDER_CONFIG, RenderConfig
from ..errors import TypeAssertionError, error_message
from ..formatting import format_value


def _kind(error: BaseException) -> str:
    return getattr(error, "kind", None) or type(error).__name__


def render_error(error: TypeAssertionError, config: RenderConfig = DEFAULT_RENDER_CONFIG) -> Tree:
    """
    Build a Rich tree for a failure chain.

    Args:
        error: The outermost failure
        config: Rendering options

    Returns:
        Tree with one node per link in the causal chain
    """
    title = f"❌ [bold]{escape(error_message(error))}[/bold]"
    if config.show_path:
        title += f"\n   [cyan]at {escape(str(error.json_path))}[/cyan]"
    tree = Tree(title)

    node = tree
    for link in error.causes():
        node = node.add(f"[red]{escape(_kind(link))}[/red]: {escape(error_message(link))}")
        context = link.context if isinstance(link, TypeAssertionError) else None
        if config.show_context and context:
            for key, value in context.items():
                node.add(f"[dim]{escape(str(key))}[/dim] = {escape(format_value(value, config.max_value_length))}")

    return tree


def print_error(
    error: TypeAssertionError,
    console: Console | None = None,
    config: RenderConfig = DEFAULT_RENDER_CONFIG,
) -> None:
    """Print a failure chain to the console."""
    (console or Console()).print(render_error(error, config))
