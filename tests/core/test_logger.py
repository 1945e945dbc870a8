import logging

from fekit.logger.logger import logger, setup_logger


def test_default_logger():
    assert logger.name == "fekit"
    assert logger.propagate is False
    assert len(logger.handlers) == 1


def test_setup_logger_respects_level():
    custom = setup_logger("fekit.test_level", level="debug")
    assert custom.level == logging.DEBUG


def test_setup_logger_is_idempotent():
    first = setup_logger("fekit.test_idempotent", level="INFO")
    second = setup_logger("fekit.test_idempotent", level="ERROR")
    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.INFO


def test_default_format_uses_iso_timestamps():
    formatter = logger.handlers[0].formatter
    assert formatter.datefmt == "%Y-%m-%dT%H:%M:%S"
    record = logging.LogRecord("fekit", logging.INFO, __file__, 1, "hello", None, None)
    record.created = 0.25
    record.msecs = 250.0
    line = formatter.format(record)
    assert line.endswith(".250 - fekit - INFO - hello")
