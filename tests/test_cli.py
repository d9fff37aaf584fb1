"""Tests for the type-sentinel CLI."""

import json

from typer.testing import CliRunner

from type_sentinel import __version__
from type_sentinel.cli import app

runner = CliRunner()

FAILURE = {
    "kind": "TypeAssertionError",
    "message": 'For property "a": bad',
    "context": {"field": "a", "field_value": "x"},
    "cause": {"kind": "TypeAssertionError", "message": "bad"},
}


def _write_json(tmp_path, data, name="failure.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data))
    return path


def test_version():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert f"v{__version__}" in result.output


def test_info():
    result = runner.invoke(app, ["info"])

    assert result.exit_code == 0
    assert "type-sentinel" in result.output


def test_explain_renders_tree(tmp_path):
    result = runner.invoke(app, ["explain", str(_write_json(tmp_path, FAILURE))])

    assert result.exit_code == 0
    assert "TypeAssertionError" in result.output
    assert "bad" in result.output
    assert "Depth: 2" in result.output


def test_explain_json_output(tmp_path):
    result = runner.invoke(app, ["explain", str(_write_json(tmp_path, FAILURE)), "--json"])

    assert result.exit_code == 0
    assert json.loads(result.output) == FAILURE


def test_explain_accepts_yaml(tmp_path):
    path = tmp_path / "failure.yaml"
    path.write_text("kind: TypeAssertionError\nmessage: from yaml\n")

    result = runner.invoke(app, ["explain", str(path)])

    assert result.exit_code == 0
    assert "from yaml" in result.output


def test_explain_rejects_malformed_failure(tmp_path):
    path = _write_json(tmp_path, {"kind": "TypeAssertionError"})

    result = runner.invoke(app, ["explain", str(path)])

    assert result.exit_code == 1
    assert "Not a valid failure object" in result.output
    assert "message" in result.output


def test_explain_rejects_invalid_yaml(tmp_path):
    path = tmp_path / "failure.yaml"
    path.write_text("kind: [unclosed\n")

    result = runner.invoke(app, ["explain", str(path)])

    assert result.exit_code == 1
    assert "Could not parse" in result.output


def test_explain_rejects_undecodable_file(tmp_path):
    path = tmp_path / "failure.json"
    path.write_bytes(b"\xff\xfe\x00garbage")

    result = runner.invoke(app, ["explain", str(path)])

    assert result.exit_code == 1
    assert "Could not parse" in result.output


def test_explain_rejects_directory(tmp_path):
    result = runner.invoke(app, ["explain", str(tmp_path)])

    assert result.exit_code == 1
    assert "Could not parse" in result.output


def test_explain_with_config(tmp_path):
    config = tmp_path / "config.yaml"
    config.write_text("render:\n  show_context: false\n")

    result = runner.invoke(app, ["explain", str(_write_json(tmp_path, FAILURE)), "--config", str(config)])

    assert result.exit_code == 0
    assert "field_value" not in result.output


def test_explain_with_invalid_config(tmp_path):
    config = tmp_path / "config.yaml"
    config.write_text("render:\n  show_path: 3\n")

    result = runner.invoke(app, ["explain", str(_write_json(tmp_path, FAILURE)), "--config", str(config)])

    assert result.exit_code == 1
    assert "Invalid config" in result.output
