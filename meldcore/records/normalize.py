"""Map raw backend rows onto domain entities."""

from __future__ import annotations

from typing import Any, List, Optional

from meldcore.core.models import Conversation, Message, TimelineStep, ToolCallEvent
from meldcore.core.types import RawRecord

from . import fields
from .parsers import parse_string_list, parse_timeline, parse_tool_calls
from .timestamps import normalize_timestamp, utc_now_iso

UNTITLED_CONVERSATION = "Untitled chat"
ROLES = ("user", "assistant", "tool")


def _record_id(value: Any) -> str:
    return "" if value is None else str(value)


def normalize_conversation(raw: RawRecord) -> Conversation:
    """Build a :class:`Conversation` from a conversation row.

    Missing timestamps become the current instant (``updated_at`` falls back to
    ``created_at``) and a blank title becomes ``"Untitled chat"``.
    """
    created_at = fields.text(raw.get("created_at")) or utc_now_iso()
    updated_at = fields.text(raw.get("updated_at")) or created_at
    message_count = fields.integer(raw.get("message_count"))

    return Conversation(
        id=_record_id(raw.get("id")),
        title=fields.trimmed(raw.get("title")) or UNTITLED_CONVERSATION,
        created_at=created_at,
        updated_at=updated_at,
        message_count=message_count if message_count and message_count > 0 else 0,
        archived=fields.flag(raw.get("archived")),
        pinned=fields.flag(raw.get("pinned")),
        sort_order=fields.number(raw.get("sort_order")),
        folder_id=fields.text(raw.get("folder_id")),
    )


def resolve_run_id(
    explicit: Any,
    timeline: Optional[List[TimelineStep]],
    tool_calls: Optional[List[ToolCallEvent]],
) -> Optional[str]:
    """Pick the run a message belongs to.

    An explicit ``run_id`` wins, then the first timeline step that carries one,
    then the first tool call that carries one.
    """
    run_id = fields.non_blank(explicit)
    if run_id is not None:
        return run_id
    for record in (*(timeline or ()), *(tool_calls or ())):
        if record.run_id:
            return record.run_id
    return None


def normalize_message(raw: RawRecord) -> Message:
    """Build a :class:`Message` from a message row, parsing its activity columns."""
    role = raw.get("role")
    tool_calls = parse_tool_calls(raw.get("tool_calls"))
    timeline = parse_timeline(raw.get("timeline"))
    content = raw.get("content")
    if not isinstance(content, str):
        content = "" if content is None else str(content)

    return Message(
        id=_record_id(raw.get("id")),
        role=role if role in ROLES else "user",
        content=content,
        timestamp=normalize_timestamp(
            fields.text(raw.get("created_at")) or fields.text(raw.get("timestamp"))
        ),
        run_id=resolve_run_id(raw.get("run_id"), timeline, tool_calls),
        thinking_summary=fields.trimmed(raw.get("thinking_summary")),
        sources=parse_string_list(raw.get("sources")),
        tool_calls=tool_calls,
        timeline_steps=timeline,
    )


def same_conversation(left: Any, right: Any) -> bool:
    """Compare conversation ids that may be ``None`` or of mixed types."""
    if left is None or right is None:
        return left is right
    return str(left) == str(right)


__all__ = [
    "UNTITLED_CONVERSATION",
    "ROLES",
    "normalize_conversation",
    "normalize_message",
    "resolve_run_id",
    "same_conversation",
]
