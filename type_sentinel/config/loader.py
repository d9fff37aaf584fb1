"""
Configuration loader.

Reads a YAML file of the form:

    render:
      max_value_length: 80
      show_context: true
      show_path: false

and validates it with type_sentinel's own assertions, so a bad value is
reported with its location, e.g.
'For property "render": For property "show_path": Expected a boolean, found type str'.
"""

from __future__ import annotations

import logging
from dataclasses import fields
from pathlib import Path
from typing import Any

import yaml

from ..assertions import (
    TypeAssertion,
    assert_is_boolean,
    assert_is_non_null_object,
    assert_is_number,
    assert_object_has_own_property,
    compose_type_assertions,
)
from ..errors import TYPE_ASSERTION_ERROR, named_error
from .models import DEFAULT_RENDER_CONFIG, RenderConfig

logger = logging.getLogger(__name__)

MIN_VALUE_LENGTH = 4


def _assert_is_length(value: Any) -> None:
    if not isinstance(value, int) or value < MIN_VALUE_LENGTH:
        raise named_error(
            TYPE_ASSERTION_ERROR,
            f"Expected an integer >= {MIN_VALUE_LENGTH}, found {value!r}",
            {"minimum": MIN_VALUE_LENGTH},
        )


RENDER_FIELD_ASSERTIONS: dict[str, TypeAssertion] = {
    "max_value_length": compose_type_assertions(assert_is_number, _assert_is_length),
    "show_context": assert_is_boolean,
    "show_path": assert_is_boolean,
}


def assert_is_render_section(section: Any) -> None:
    """Assert that a value is a valid 'render' configuration section."""
    assert_is_non_null_object(section)
    for name, assertion in RENDER_FIELD_ASSERTIONS.items():
        if name in section:
            assert_object_has_own_property(section, name, assertion)


def parse_render_config(data: Any) -> RenderConfig:
    """
    Build a RenderConfig from parsed YAML.

    An empty document or a missing 'render' section yields the defaults.
    Unknown keys are ignored with a warning.

    Raises:
        TypeAssertionError: If the document or any value has the wrong type
    """
    if data is None:
        return DEFAULT_RENDER_CONFIG

    assert_is_non_null_object(data)
    for key in data:
        if key != "render":
            logger.warning(f"Ignoring unknown config section '{key}'")
    if "render" not in data:
        return DEFAULT_RENDER_CONFIG

    assert_object_has_own_property(data, "render", assert_is_render_section)
    section = data["render"]

    known = {f.name for f in fields(RenderConfig)}
    for key in section:
        if key not in known:
            logger.warning(f"Ignoring unknown render option '{key}'")

    return RenderConfig(**{k: v for k, v in section.items() if k in known})


def load_render_config(path: str | Path) -> RenderConfig:
    """
    Load and validate render configuration from a YAML file.

    Args:
        path: Path to the YAML config file

    Returns:
        The parsed RenderConfig

    Raises:
        TypeAssertionError: If the file is missing, not valid YAML, or invalid
    """
    path = Path(path)

    if not path.exists():
        raise named_error(TYPE_ASSERTION_ERROR, f"Config file not found: {path}", {"path": str(path)})

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise named_error(
            TYPE_ASSERTION_ERROR, f"Invalid YAML syntax: {e}", {"path": str(path)}
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise named_error(
            TYPE_ASSERTION_ERROR, f"Could not read config file: {e}", {"path": str(path)}
        ) from e

    logger.debug(f"Loaded config from {path}")
    return parse_render_config(data)
