import json
import logging

import pytest
from rich.logging import RichHandler

from argwise import ArgumentParser, ParseMode
from argwise.utils import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_parse_logs_summary(caplog):
    with caplog.at_level(logging.DEBUG, logger="argwise"):
        ArgumentParser().parse(["a", "--b", "c"])
    assert "Parsed 3 tokens" in caplog.text
    assert "Unregistered option 'b' treated as flag" in caplog.text


def test_multiflag_expansion_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="argwise"):
        ArgumentParser().parse(["-xy"], mode=ParseMode.SINGLE_DASH_IS_MULTIFLAG)
    assert "Expanded bundle '-xy'" in caplog.text


def test_setup_logging_cli(tmp_path):
    log_file = tmp_path / "argwise.log"
    setup_logging(mode="cli", log_filename=str(log_file))
    root = logging.getLogger()
    assert any(isinstance(handler, RichHandler) for handler in root.handlers)
    logging.getLogger("argwise").debug("hello file")
    for handler in root.handlers:
        handler.flush()
    assert "hello file" in log_file.read_text()


def test_setup_logging_json_file(tmp_path):
    log_file = tmp_path / "argwise.json.log"
    setup_logging(mode="json", log_filename=str(log_file), json_log_to_file=True)
    logging.getLogger("argwise").info("structured")
    for handler in logging.getLogger().handlers:
        handler.flush()
    records = [json.loads(line) for line in log_file.read_text().splitlines()]
    assert any(record["message"] == "structured" for record in records)


def test_setup_logging_env_mode(monkeypatch):
    monkeypatch.setenv("ARGWISE_LOG_MODE", "json")
    setup_logging(log_filename=None)
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert not isinstance(handlers[0], RichHandler)


def test_setup_logging_invalid_mode():
    with pytest.raises(ValueError):
        setup_logging(mode="xml", log_filename=None)
