import json
import logging

from pagecheck.utils.logger import JsonFormatter, get_logger, log_with_context


def _format(adapter, msg):
    record = logging.LogRecord(adapter.logger.name, logging.INFO, __file__, 1, msg, None, None)
    record.extra = adapter.extra["extra"]
    return json.loads(JsonFormatter().format(record))


def test_scoped_context_reaches_json_lines():
    log = log_with_context(get_logger("pagecheck.test"), selector="div.form button.save")
    payload = _format(log, "resolving")

    assert payload["msg"] == "resolving"
    assert payload["logger"] == "pagecheck.test"
    assert payload["selector"] == "div.form button.save"


def test_nested_context_merges_without_leaking():
    base = get_logger("pagecheck.test")
    outer = log_with_context(base, suite="checkout")
    inner = log_with_context(outer, selector="li.item")

    assert _format(inner, "x")["suite"] == "checkout"
    assert "selector" not in _format(outer, "x")
    assert base.extra == {"extra": {}}


def test_get_logger_is_scoped_under_package():
    log = get_logger("pagecheck.core.element")
    assert log.logger.name == "pagecheck.core.element"
    assert logging.getLogger("pagecheck").handlers
