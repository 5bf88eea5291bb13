"""Tests for windowsmoother.logging_utils."""

import logging
import sys

from windowsmoother.config import LoggingSettings
from windowsmoother.logging_utils import setup_from_settings, setup_logger


def _file_handlers(logger):
    return [h for h in logger.handlers if isinstance(h, logging.FileHandler)]


def test_setup_logger_with_file(tmp_path):
    log_file = tmp_path / "sub" / "x.log"
    logger = setup_logger(name="t_logging_file", level="DEBUG", log_file=str(log_file))
    try:
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        assert logger.propagate is False
        assert log_file.parent.is_dir()

        stream_handlers = [h for h in logger.handlers if not isinstance(h, logging.FileHandler)]
        assert stream_handlers[0].stream is sys.stdout

        logger.debug("window filled")
        for handler in logger.handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "DEBUG t_logging_file window filled" in text
    finally:
        setup_logger(name="t_logging_file")


def test_setup_logger_without_file_has_stdout_only():
    logger = setup_logger(name="t_logging_stdout", level="WARNING")
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
    assert not _file_handlers(logger)


def test_setup_logger_closes_replaced_file_handler(tmp_path):
    log_file = tmp_path / "x.log"
    logger = setup_logger(name="t_logging_reopen", log_file=str(log_file))
    old_handler = _file_handlers(logger)[0]
    assert old_handler.stream is not None

    logger = setup_logger(name="t_logging_reopen", log_file=str(log_file))
    assert old_handler.stream is None
    assert old_handler not in logger.handlers
    assert len(_file_handlers(logger)) == 1

    setup_logger(name="t_logging_reopen")
    assert not _file_handlers(logger)


def test_setup_from_settings(tmp_path):
    settings = LoggingSettings(level="error", file=str(tmp_path / "s.log"))
    logger = setup_from_settings(settings, name="t_logging_settings")
    try:
        assert logger.level == logging.ERROR
        assert len(_file_handlers(logger)) == 1
    finally:
        setup_logger(name="t_logging_settings")
