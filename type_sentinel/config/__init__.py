"""
Configuration for type_sentinel.

Usage:
    from type_sentinel.config import load_render_config

    config = load_render_config("type-sentinel.yaml")
    print_error(error, config=config)
"""

from .loader import assert_is_render_section, load_render_config, parse_render_config
from .models import DEFAULT_RENDER_CONFIG, RenderConfig

__all__ = [
    "DEFAULT_RENDER_CONFIG",
    "RenderConfig",
    "assert_is_render_section",
    "load_render_config",
    "parse_render_config",
]
