import logging

import pytest
from pythonjsonlogger.json import JsonFormatter
from rich.logging import RichHandler

from clarg.utils import get_program_invocation, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Drop the handlers installed by setup_logging, keeping pytest's own."""
    root = logging.getLogger()
    level = root.level
    yield
    kept = []
    for handler in root.handlers:
        if type(handler).__module__.startswith("_pytest"):
            kept.append(handler)
        else:
            handler.close()
    root.handlers[:] = kept
    root.setLevel(level)


def test_setup_logging_cli_mode():
    setup_logging(mode="cli")
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RichHandler)
    assert handlers[0].level == logging.WARNING


def test_setup_logging_json_mode_with_file(tmp_path):
    log_file = tmp_path / "clarg.log"
    setup_logging(mode="json", log_filename=str(log_file), json_log_to_file=True)
    handlers = logging.getLogger().handlers
    assert len(handlers) == 2
    assert all(isinstance(handler.formatter, JsonFormatter) for handler in handlers)

    logging.getLogger("clarg").debug("hello from the parser")
    for handler in handlers:
        handler.flush()
    assert "hello from the parser" in log_file.read_text(encoding="UTF-8")


def test_setup_logging_env_mode(monkeypatch):
    monkeypatch.setenv("CLARG_LOG_MODE", "json")
    setup_logging()
    assert isinstance(logging.getLogger().handlers[0].formatter, JsonFormatter)


def test_setup_logging_invalid_mode():
    with pytest.raises(ValueError):
        setup_logging(mode="xml")


def test_get_program_invocation(monkeypatch):
    monkeypatch.setattr("sys.argv", ["/opt/tools/convert"])
    assert get_program_invocation() == "convert"
    monkeypatch.setattr("sys.argv", ["script.py"])
    assert get_program_invocation() == "python script.py"
