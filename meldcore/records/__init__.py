"""Normalization of raw conversation and message records."""

from .normalize import (
    UNTITLED_CONVERSATION,
    normalize_conversation,
    normalize_message,
    resolve_run_id,
    same_conversation,
)
from .parsers import parse_string_list, parse_timeline, parse_tool_calls
from .sources import (
    collect_sources_from_tool_results,
    extract_sources_from_tool_result,
    parse_sources,
)
from .timestamps import normalize_timestamp

__all__ = [
    "UNTITLED_CONVERSATION",
    "normalize_conversation",
    "normalize_message",
    "resolve_run_id",
    "same_conversation",
    "parse_string_list",
    "parse_timeline",
    "parse_tool_calls",
    "collect_sources_from_tool_results",
    "extract_sources_from_tool_result",
    "parse_sources",
    "normalize_timestamp",
]
