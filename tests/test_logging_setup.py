# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from taskpad.logging_setup import setup_logging


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_setup_logging_writes_debug_to_file(tmp_path: Path, restore_root_logging) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs", console_level=logging.WARNING)

    logging.getLogger("taskpad.test").debug("hello file")
    for h in logging.getLogger().handlers:
        h.flush()

    assert log_file == tmp_path / "logs" / "taskpad.log"
    assert "hello file" in log_file.read_text(encoding="utf-8")


def test_console_filter_hides_third_party_info(tmp_path: Path, restore_root_logging, capsys) -> None:
    setup_logging(log_dir=tmp_path, console_level=logging.INFO)

    logging.getLogger("taskpad.test").info("own message")
    logging.getLogger("somelib").info("library chatter")
    logging.getLogger("somelib").error("library failure")

    err = capsys.readouterr().err
    assert "own message" in err
    assert "library chatter" not in err
    assert "library failure" in err
