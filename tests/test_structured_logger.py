import json
import logging

from ops.structured_logger import JsonFormatter, setup_logging


def test_json_formatter_merges_extra():
    record = logging.LogRecord("msm.sender", logging.INFO, __file__, 1, "sms_send_result", None, None)
    record.extra = {"event": "sms_send_result", "ok": True, "dest": "...4567"}

    payload = json.loads(JsonFormatter().format(record))

    assert payload["severity"] == "INFO"
    assert payload["message"] == "sms_send_result"
    assert payload["logger"] == "msm.sender"
    assert payload["ok"] is True
    assert payload["dest"] == "...4567"


def test_setup_logging_quiets_httpx():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    try:
        setup_logging("debug")
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
