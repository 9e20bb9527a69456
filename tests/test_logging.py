import json
import logging
from types import SimpleNamespace

from meldcore import logging as meld_logging


def test_json_formatter_merges_extras(monkeypatch) -> None:
    monkeypatch.setattr(
        meld_logging,
        "get_settings",
        lambda: SimpleNamespace(service_name="meld-core", environment="test", log_level="DEBUG"),
    )
    record = logging.LogRecord("meldcore.records.parsers", logging.DEBUG, __file__, 1, "tool_call_dropped", (), None)
    record.index = 2
    record.reason = "tool_call.tool: missing"

    data = json.loads(meld_logging._JsonFormatter().format(record))
    assert data["message"] == "tool_call_dropped"
    assert data["level"] == "DEBUG"
    assert data["logger"] == "meldcore.records.parsers"
    assert data["service"] == "meld-core"
    assert data["environment"] == "test"
    assert data["index"] == 2
    assert data["reason"] == "tool_call.tool: missing"
    assert data["timestamp"].endswith("Z")


def test_parsers_log_dropped_entries(caplog) -> None:
    from meldcore.records import parse_tool_calls

    with caplog.at_level(logging.DEBUG, logger="meldcore.records.parsers"):
        parse_tool_calls([{"tool": "ok"}, {"args": {}}])
    dropped = [r for r in caplog.records if r.getMessage() == "tool_call_dropped"]
    assert len(dropped) == 1
    assert dropped[0].index == 1
