import logging

import pytest

from mentorship_api.app.core.logging_config import setup_logging


@pytest.fixture
def bare_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)


def test_setup_logging_with_file(bare_root_logger, tmp_path):
    logfile = tmp_path / "app.log"
    setup_logging("debug", str(logfile))
    assert bare_root_logger.level == logging.DEBUG
    assert len(bare_root_logger.handlers) == 2

    logging.getLogger("mentorship_api.test").info("hello")
    for handler in bare_root_logger.handlers:
        handler.flush()
    assert "hello" in logfile.read_text(encoding="utf-8")


def test_setup_logging_runs_once(bare_root_logger):
    setup_logging("INFO")
    setup_logging("INFO")
    assert len(bare_root_logger.handlers) == 1


def test_unknown_level_falls_back_to_info(bare_root_logger):
    setup_logging("chatty")
    assert bare_root_logger.level == logging.INFO
