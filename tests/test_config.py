"""Tests for the configuration loader."""

import logging

import pytest

from type_sentinel.config import DEFAULT_RENDER_CONFIG, RenderConfig, load_render_config, parse_render_config
from type_sentinel.errors import TypeAssertionError


def _write(tmp_path, text):
    path = tmp_path / "type-sentinel.yaml"
    path.write_text(text)
    return path


def test_load_render_config(tmp_path):
    path = _write(tmp_path, "render:\n  max_value_length: 80\n  show_context: false\n")

    config = load_render_config(path)

    assert config == RenderConfig(max_value_length=80, show_context=False, show_path=True)


def test_empty_file_gives_defaults(tmp_path):
    assert load_render_config(_write(tmp_path, "")) == DEFAULT_RENDER_CONFIG


def test_missing_render_section_gives_defaults():
    assert parse_render_config({}) == DEFAULT_RENDER_CONFIG


def test_missing_file(tmp_path):
    with pytest.raises(TypeAssertionError, match="Config file not found"):
        load_render_config(tmp_path / "nope.yaml")


def test_invalid_yaml(tmp_path):
    with pytest.raises(TypeAssertionError) as exc_info:
        load_render_config(_write(tmp_path, "render: [unclosed\n"))

    assert exc_info.value.message.startswith("Invalid YAML syntax")


@pytest.mark.parametrize(
    "data,message",
    [
        (["render"], "Expected an object, found type list"),
        ({"render": "yes"}, 'For property "render": Expected an object, found type str'),
        (
            {"render": {"show_path": "nope"}},
            'For property "render": For property "show_path": Expected a boolean, found type str',
        ),
        (
            {"render": {"max_value_length": "80"}},
            'For property "render": For property "max_value_length": Expected a number, found type str',
        ),
        (
            {"render": {"max_value_length": 2}},
            'For property "render": For property "max_value_length": Expected an integer >= 4, found 2',
        ),
    ],
)
def test_invalid_values_report_their_location(data, message):
    with pytest.raises(TypeAssertionError) as exc_info:
        parse_render_config(data)

    assert exc_info.value.message == message


def test_unknown_keys_are_ignored_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="type_sentinel.config.loader"):
        config = parse_render_config({"render": {"colour": "red", "show_path": False}, "extra": 1})

    assert config == RenderConfig(show_path=False)
    assert "Ignoring unknown render option 'colour'" in caplog.text
    assert "Ignoring unknown config section 'extra'" in caplog.text


def test_undecodable_file(tmp_path):
    path = tmp_path / "type-sentinel.yaml"
    path.write_bytes(b"render: \xff\xfe\x00\n")

    with pytest.raises(TypeAssertionError):
        load_render_config(path)


def test_directory_instead_of_file(tmp_path):
    with pytest.raises(TypeAssertionError) as exc_info:
        load_render_config(tmp_path)

    assert exc_info.value.message.startswith("Could not read config file")
    assert exc_info.value.context == {"path": str(tmp_path)}
