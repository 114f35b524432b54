import json
import logging

from srctracker.core.logging_util import JsonLinesFormatter, resolve_level, setup_logging


def test_resolve_level():
    assert resolve_level() == logging.WARNING
    assert resolve_level(verbose=True) == logging.DEBUG
    assert resolve_level(quiet=True) == logging.ERROR
    assert resolve_level(verbose=True, quiet=True) == logging.ERROR


def test_json_lines_formatter():
    record = logging.LogRecord("srctracker.core.stats", logging.WARNING, __file__, 1, "saved %d", (3,), None)
    payload = json.loads(JsonLinesFormatter().format(record))
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "srctracker.core.stats"
    assert payload["message"] == "saved 3"


def test_setup_logging_installs_single_handler():
    setup_logging(json_logs=True, verbose=True)
    setup_logging(json_logs=True, verbose=True)
    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JsonLinesFormatter)
    assert root.level == logging.DEBUG
