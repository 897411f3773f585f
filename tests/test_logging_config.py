import logging

import pytest

from health_records_api.app.core.logging_config import setup_logging


@pytest.fixture
def logger_name():
    name = "health_records_api.tests.logging"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def test_level_name_is_case_insensitive(logger_name):
    logger = setup_logging("debug", logger_name=logger_name)
    assert logger.level == logging.DEBUG


def test_unknown_level_falls_back_to_info(logger_name):
    assert setup_logging("chatty", logger_name=logger_name).level == logging.INFO


def test_repeated_setup_does_not_stack_handlers(logger_name):
    setup_logging("INFO", logger_name=logger_name)
    logger = setup_logging("WARNING", logger_name=logger_name)
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING


def test_foreign_handlers_are_kept(logger_name):
    logger = logging.getLogger(logger_name)
    foreign = logging.NullHandler()
    logger.addHandler(foreign)
    setup_logging("INFO", logger_name=logger_name)
    setup_logging("INFO", logger_name=logger_name)
    assert foreign in logger.handlers
    assert len(logger.handlers) == 2


def test_logfile_receives_formatted_records(logger_name, tmp_path):
    logfile = tmp_path / "logs" / "service.log"
    logger = setup_logging("INFO", str(logfile), logger_name=logger_name)
    logger.info("created user id=%s", "abc")
    logger.debug("not written")
    for handler in logger.handlers:
        handler.flush()
    content = logfile.read_text(encoding="utf-8")
    assert f"[INFO] {logger_name}: created user id=abc" in content
    assert "not written" not in content
