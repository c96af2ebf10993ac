from pathlib import Path

import pytest

from clarg import ArgumentKind
from clarg.config import ParserConfig, build_parser, load_parser
from clarg.exceptions import ConfigError, DuplicateShortNameError, InvalidArgumentError

YAML_CONFIG = """\
program: convert
description: Convert files.
arguments:
  - name: verbose
    kind: flag
    short: v
    help: Verbose output.
  - name: output
    kind: opt
    short: o
    required: true
  - name: input
    kind: positional
"""

TOML_CONFIG = """\
program = "convert"

[[arguments]]
name = "verbose"
kind = "flag"
short = "v"

[[arguments]]
name = "input"
kind = "arg"
required = true
"""


def write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="UTF-8")
    return path


def test_load_yaml(tmp_path):
    parser = load_parser(write(tmp_path, "convert.yaml", YAML_CONFIG))
    assert parser.program == "convert"
    assert parser.description == "Convert files."
    assert [arg.name for arg in parser.arguments] == ["verbose", "output", "input"]
    assert parser.get_argument("output").kind is ArgumentKind.OPTION
    assert parser.get_argument("output").required is True

    result = parser.parse(["-v", "-o", "out.txt", "in.txt"])
    assert result.flags == {"verbose"}
    assert result.options == {"output": "out.txt"}
    assert result.positionals == ["in.txt"]


def test_load_toml(tmp_path):
    parser = load_parser(str(write(tmp_path, "convert.toml", TOML_CONFIG)))
    assert parser.get_argument("input").is_positional
    assert parser.get_argument("input").required is True
    assert parser.parse(["a.txt"]).positionals == ["a.txt"]


def test_round_trip_definition_list(tmp_path):
    parser = load_parser(write(tmp_path, "convert.yml", YAML_CONFIG))
    rebuilt = build_parser(
        {"program": "convert", "arguments": parser.to_definition_list()}
    )
    assert rebuilt.arguments == parser.arguments


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_parser(tmp_path / "nope.yaml")


def test_bad_path_type():
    with pytest.raises(TypeError):
        load_parser(42)  # type: ignore[arg-type]


def test_unsupported_suffix(tmp_path):
    with pytest.raises(ConfigError):
        load_parser(write(tmp_path, "convert.json", "{}"))


def test_malformed_yaml(tmp_path):
    with pytest.raises(ConfigError):
        load_parser(write(tmp_path, "bad.yaml", "arguments: [unclosed"))


def test_not_a_mapping(tmp_path):
    with pytest.raises(ConfigError) as excinfo:
        load_parser(write(tmp_path, "list.yaml", "- a\n- b\n"))
    assert "Example:" in str(excinfo.value)


def test_invalid_kind():
    with pytest.raises(ConfigError):
        build_parser({"arguments": [{"name": "x", "kind": "bogus"}]})


def test_missing_name():
    with pytest.raises(ConfigError):
        build_parser({"arguments": [{"kind": "flag"}]})


def test_definition_conflicts_propagate():
    with pytest.raises(DuplicateShortNameError):
        build_parser(
            {
                "arguments": [
                    {"name": "a", "kind": "flag", "short": "x"},
                    {"name": "b", "kind": "flag", "short": "x"},
                ]
            }
        )
    with pytest.raises(InvalidArgumentError):
        build_parser({"arguments": [{"name": "v", "kind": "flag", "required": True}]})


def test_default_kind_is_option():
    config = ParserConfig.model_validate({"arguments": [{"name": "output"}]})
    assert config.arguments[0].kind is ArgumentKind.OPTION


def test_version_from_config():
    parser = build_parser({"program": "convert", "version": "2.0.1", "arguments": []})
    assert parser.version == "2.0.1"
    assert parser.generate_help().startswith("convert 2.0.1\n")
