#!/usr/bin/env python3
"""
type-sentinel CLI - inspect serialized type assertion failures

Usage:
    type-sentinel explain <failure.json> [OPTIONS]
    type-sentinel info
    type-sentinel --version
"""

import logging
from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .config import DEFAULT_RENDER_CONFIG, load_render_config
from .errors import TypeAssertionError
from .formatting import format_value
from .reporting import error_from_dict, print_error

app = typer.Typer(
    name="type-sentinel",
    help="🛡️ type-sentinel - runtime type assertions for untyped data",
    add_completion=False,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"🛡️ type-sentinel v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
):
    """
    Inspect failures serialized with TypeAssertionError.to_dict().

    --version is handled eagerly by version_callback, so the group itself
    has no options of its own to apply before a subcommand runs.
    """


@app.command()
def explain(
    failure_file: Path = typer.Argument(
        ...,
        help="Path to a serialized failure (JSON or YAML)",
        exists=True,
        readable=True,
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c",
        help="Path to a YAML render config",
    ),
    as_json: bool = typer.Option(
        False, "--json",
        help="Print the normalized failure as JSON instead of a tree"
    ),
    verbose: bool = typer.Option(
        False, "--verbose",
        help="Enable debug logging"
    ),
):
    """
    Explain a serialized failure.

    Decode the failure chain, then show each layer with its context and the
    JSONPath of the offending value.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )

    config = DEFAULT_RENDER_CONFIG
    if config_file is not None:
        try:
            config = load_render_config(config_file)
        except TypeAssertionError as e:
            console.print(f"[red]❌ Invalid config:[/red] {config_file}")
            print_error(e, console)
            raise typer.Exit(code=1)

    try:
        with open(failure_file) as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, OSError, UnicodeDecodeError) as e:
        console.print(f"[red]❌ Could not parse {failure_file}:[/red] {e}")
        raise typer.Exit(code=1)

    try:
        error = error_from_dict(data)
    except TypeAssertionError as e:
        console.print(f"[red]❌ Not a valid failure object:[/red] {failure_file}")
        print_error(e, console, config)
        raise typer.Exit(code=1)

    if as_json:
        console.print_json(data=error.to_dict(), default=str)
        raise typer.Exit(code=0)

    print_error(error, console, config)
    root = error.root_cause
    console.print(
        f"\n   Depth: {error.depth}  Root cause: "
        f"{format_value(getattr(root, 'message', str(root)), config.max_value_length)}"
    )


@app.command()
def info():
    """
    Show information about type-sentinel.
    """
    console.print(f"""
🛡️ [bold]type-sentinel[/bold] v{__version__}

Runtime type assertions for untyped data

[bold]Features:[/bold]
  • Guard/assertion bridge
  • Property chains and element-wise sequence checks
  • Path-aware failures with causal chains
  • Rich failure rendering and JSONPath locations

[bold]Quick Start:[/bold]
  type-sentinel explain failure.json
  type-sentinel explain failure.yaml --json
""")


if __name__ == "__main__":
    app()
