"""List parsers for the JSON-in-JSON columns of message rows.

``sources``, ``tool_calls`` and ``timeline`` may each arrive as a native list or
as a JSON-encoded string. They are decoded once by
:func:`~meldcore.records.fields.decode_json_list` and then validated entry by
entry. Bad entries are dropped and logged at DEBUG. Their valid siblings are kept.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, TypeVar

from meldcore.core.models import TimelineStep, ToolCallEvent
from meldcore.core.types import Result, is_error

from . import fields
from .validators import validate_timeline_step, validate_tool_call

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _source_ref(item: Any) -> str:
    if isinstance(item, str):
        return item.strip()
    source = fields.mapping(item)
    if source is None:
        return ""
    path = source.get("path") if isinstance(source.get("path"), str) else ""
    url = source.get("url") if isinstance(source.get("url"), str) else ""
    return (path or url).strip()


def parse_string_list(value: Any) -> Optional[List[str]]:
    """Ordered, trimmed, non-empty reference strings.

    Object entries contribute their ``path``, or their ``url`` when ``path`` is
    empty. Returns ``None`` when ``value`` is not a list in either encoding.
    """
    items = fields.decode_json_list(value)
    if items is None:
        return None
    return [ref for ref in (_source_ref(item) for item in items) if ref]


def _parse_records(
    value: Any, validate: Callable[[Any], Result[T]], event: str
) -> Optional[List[T]]:
    items = fields.decode_json_list(value)
    if items is None:
        return None
    parsed: List[T] = []
    for index, candidate in enumerate(items):
        result = validate(candidate)
        if is_error(result):
            logger.debug(event, extra={"index": index, "reason": str(result)})
            continue
        parsed.append(result)
    return parsed or None


def parse_tool_calls(value: Any) -> Optional[List[ToolCallEvent]]:
    """Tool-call log of a message, or ``None`` when no entry is usable."""
    return _parse_records(value, validate_tool_call, "tool_call_dropped")


def parse_timeline(value: Any) -> Optional[List[TimelineStep]]:
    """Execution timeline of a message, or ``None`` when no step is usable."""
    return _parse_records(value, validate_timeline_step, "timeline_step_dropped")


__all__ = ["parse_string_list", "parse_tool_calls", "parse_timeline"]
