"""Tests for the logging setup."""
import logging

from utils.logger import APP_LOGGER_NAME, get_logger, setup_logger


def test_get_logger_nests_under_application_root():
    assert get_logger("execution.plotter_driver").name == f"{APP_LOGGER_NAME}.execution.plotter_driver"
    assert get_logger().name == APP_LOGGER_NAME
    assert get_logger(f"{APP_LOGGER_NAME}.webapp").name == f"{APP_LOGGER_NAME}.webapp"


def test_setup_logger_attaches_handlers_once(tmp_path):
    name = "tests.setup_logger"
    log_file = tmp_path / "app.log"
    try:
        logger = setup_logger(name, level="debug", log_file=str(log_file))
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2

        again = setup_logger(name, level="warning", log_file=str(log_file))
        assert again is logger
        assert len(logger.handlers) == 2
        assert logger.level == logging.WARNING
    finally:
        for handler in list(logging.getLogger(name).handlers):
            handler.close()
            logging.getLogger(name).removeHandler(handler)


def test_setup_logger_without_file(tmp_path):
    name = "tests.setup_logger_console"
    try:
        logger = setup_logger(name, level="INFO", log_file="")
        assert [type(h) for h in logger.handlers] == [logging.StreamHandler]
    finally:
        for handler in list(logging.getLogger(name).handlers):
            logging.getLogger(name).removeHandler(handler)


def test_unwritable_log_file_keeps_console_logging(tmp_path, caplog):
    name = "tests.setup_logger_bad_file"
    caplog.set_level(logging.WARNING, logger=name)
    try:
        # A directory cannot be opened as a log file
        logger = setup_logger(name, level="INFO", log_file=str(tmp_path))
        assert [type(h) for h in logger.handlers] == [logging.StreamHandler]
        assert any("Could not set up file logging" in r.getMessage() for r in caplog.records)
    finally:
        for handler in list(logging.getLogger(name).handlers):
            logging.getLogger(name).removeHandler(handler)
