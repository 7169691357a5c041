import json
import logging

import pytest
from pythonjsonlogger import jsonlogger

from scout_browser.logging_config import LOG_FORMAT_ENV, PACKAGE_LOGGER, configure_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    package = logging.getLogger(PACKAGE_LOGGER)
    saved = (list(root.handlers), root.level, package.level)
    yield root
    root.handlers[:] = saved[0]
    root.setLevel(saved[1])
    package.setLevel(saved[2])


def test_json_is_default_and_tags_records(root_logger, monkeypatch):
    monkeypatch.delenv(LOG_FORMAT_ENV, raising=False)

    configure_logging()

    assert len(root_logger.handlers) == 1
    formatter = root_logger.handlers[0].formatter
    assert isinstance(formatter, jsonlogger.JsonFormatter)

    record = logging.LogRecord("scout_browser.core.group", logging.INFO, __file__, 1, "hello", None, None)
    payload = json.loads(formatter.format(record))
    assert payload["app"] == "scout_browser"
    assert payload["message"] == "hello"


def test_package_level_is_separate_from_libraries(root_logger):
    configure_logging(level=logging.DEBUG, force_format="plain")

    assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG
    assert root_logger.level == logging.WARNING
    assert logging.getLogger("scout_browser.core.group").isEnabledFor(logging.DEBUG)
    assert not logging.getLogger("some_library").isEnabledFor(logging.INFO)


def test_plain_from_env_and_repeat_calls_do_not_duplicate(root_logger, monkeypatch):
    monkeypatch.setenv(LOG_FORMAT_ENV, "PLAIN")

    configure_logging()
    configure_logging()

    assert len(root_logger.handlers) == 1
    assert not isinstance(root_logger.handlers[0].formatter, jsonlogger.JsonFormatter)


def test_force_format_wins_over_env(root_logger, monkeypatch):
    monkeypatch.setenv(LOG_FORMAT_ENV, "plain")

    configure_logging(force_format="json")

    assert isinstance(root_logger.handlers[0].formatter, jsonlogger.JsonFormatter)
