from pathlib import Path

import pytest

from clarg.__main__ import main

CONFIG = """\
program: convert
arguments:
  - name: verbose
    kind: flag
    short: v
  - name: output
    kind: option
    short: o
    required: true
    help: Output file.
  - name: input
    kind: positional
"""


@pytest.fixture
def config_file(tmp_path) -> Path:
    path = tmp_path / "convert.yaml"
    path.write_text(CONFIG, encoding="UTF-8")
    return path


def test_main_prints_parsed_arguments(config_file, capsys):
    assert main([str(config_file), "-v", "-o", "out.txt", "in.txt"]) == 0
    captured = capsys.readouterr()
    assert "verbose" in captured.out
    assert "out.txt" in captured.out
    assert "in.txt" in captured.out


def test_main_help(config_file, capsys):
    assert main([str(config_file), "--help"]) == 0
    captured = capsys.readouterr()
    assert "Output file." in captured.out


def test_main_parse_error(config_file, capsys):
    assert main([str(config_file), "in.txt"]) == 2
    captured = capsys.readouterr()
    assert "Missing required argument 'output'" in captured.err


def test_main_missing_config(tmp_path, capsys):
    assert main([str(tmp_path / "missing.yaml")]) == 1
    captured = capsys.readouterr()
    assert "No such config file" in captured.err


def test_main_usage(capsys):
    assert main(["-h"]) == 0
    assert "usage:" in capsys.readouterr().out
    assert main([]) == 2
    assert "usage:" in capsys.readouterr().err
