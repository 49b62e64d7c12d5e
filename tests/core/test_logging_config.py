#!/usr/bin/env python3
import io
import logging

import pytest

from oaschema.core.logging_config import LOGGER_NAME, configure_logging, parse_level


@pytest.fixture(autouse=True)
def _restore_logger():
    logger = logging.getLogger(LOGGER_NAME)
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.mark.parametrize("raw,expected", [
    ("debug", logging.DEBUG),
    (" Warning ", logging.WARNING),
    ("ERROR", logging.ERROR),
    (logging.INFO, logging.INFO),
])
def test_parse_level(raw, expected):
    assert parse_level(raw) == expected


def test_parse_level_rejects_unknown():
    with pytest.raises(ValueError, match="Unknown log level"):
        parse_level("chatty")


def test_configure_logging_writes_package_records():
    stream = io.StringIO()
    configure_logging("INFO", stream=stream)
    logging.getLogger("oaschema.core.test").info("hello there")
    assert "INFO" in stream.getvalue()
    assert "oaschema.core.test: hello there" in stream.getvalue()


def test_configure_logging_respects_level():
    stream = io.StringIO()
    configure_logging("ERROR", stream=stream)
    logging.getLogger("oaschema.core.test").warning("quiet")
    assert stream.getvalue() == ""


def test_configure_logging_does_not_stack_handlers():
    configure_logging("INFO", stream=io.StringIO())
    configure_logging("INFO", stream=io.StringIO())
    ours = [h for h in logging.getLogger(LOGGER_NAME).handlers if getattr(h, "_oaschema_handler", False)]
    assert len(ours) == 1
