from __future__ import annotations

import json
import logging

from tableview.utils.logging import (
    CONSOLE_FORMAT,
    ConsoleFormatter,
    JsonFormatter,
    configure_logging,
    get_logger,
    record_extras,
)

EXPECTED_TOTAL_COUNT = 15


def _record(msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_json_formatter_promotes_extra_fields() -> None:
    record = _record()
    record.total_count = EXPECTED_TOTAL_COUNT
    record.operation = "set_query"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["total_count"] == EXPECTED_TOTAL_COUNT
    assert payload["operation"] == "set_query"
    assert "pathname" not in payload


def test_json_formatter_stringifies_unserializable_values() -> None:
    record = _record()
    record.sort = object()

    payload = json.loads(JsonFormatter().format(record))

    assert payload["sort"].startswith("<object object")


def test_console_formatter_appends_extras() -> None:
    record = _record("Recomputed table view")
    record.operation = "next_page"
    record.page = 2

    line = ConsoleFormatter(CONSOLE_FORMAT).format(record)

    assert line.endswith("| INFO | test.logger | Recomputed table view | operation=next_page page=2")


def test_console_formatter_without_extras_is_plain() -> None:
    line = ConsoleFormatter(CONSOLE_FORMAT).format(_record())
    assert line.endswith("| INFO | test.logger | hello")
    assert record_extras(_record()) == {}


def test_configure_logging_keeps_module_loggers_enabled() -> None:
    log = get_logger("tableview.controller")
    configure_logging(level="DEBUG", json_logs=True)
    assert not log.disabled
    assert logging.getLogger().level == logging.DEBUG
    assert isinstance(logging.getLogger().handlers[0].formatter, JsonFormatter)
    configure_logging(level="WARNING")
    assert isinstance(logging.getLogger().handlers[0].formatter, ConsoleFormatter)
