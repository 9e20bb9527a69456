"""Note paths and web URLs cited by an agent run.

Tool results are opaque payloads. Only the handful of shapes the knowledge-base
and web-search tools emit are inspected, and everything else contributes nothing.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional

from . import fields

# kb_search returns chunks by relevance; only the top few become citations.
MAX_SEARCH_SOURCES = 5
NOTE_TOOLS = ("kb_read", "kb_create", "kb_update")
NOTE_PATH_KEYS = ("path", "created", "edited")


def push_unique(target: List[str], source: Any) -> None:
    if not isinstance(source, str):
        return
    normalized = source.strip()
    if normalized and normalized not in target:
        target.append(normalized)


def _list_under(payload: Mapping[str, Any], key: str) -> Optional[List[Any]]:
    """``payload["result"][key]`` or ``payload[key]``, whichever is a list first."""
    nested = fields.mapping(payload.get("result"))
    if nested is not None and isinstance(nested.get(key), list):
        return nested[key]
    value = payload.get(key)
    return value if isinstance(value, list) else None


def extract_sources_from_tool_result(tool: str, result: Any) -> List[str]:
    """Citations carried by one decoded tool result."""
    payload = fields.mapping(result) or {}
    if not payload and not isinstance(result, list):
        return []

    sources: List[str] = []
    if tool == "kb_search":
        chunks = _list_under(payload, "chunks")
        if chunks is None and isinstance(result, list):
            chunks = result
        for chunk in chunks or ():
            if len(sources) >= MAX_SEARCH_SOURCES:
                break
            chunk = fields.mapping(chunk)
            if chunk is not None:
                push_unique(sources, chunk.get("file_path"))

    elif tool in NOTE_TOOLS:
        target = fields.mapping(payload.get("target"))
        if target is not None:
            push_unique(sources, target.get("resolved_path"))
        for key in NOTE_PATH_KEYS:
            push_unique(sources, payload.get(key))

    elif tool == "web_search":
        for item in _list_under(payload, "results") or ():
            item = fields.mapping(item)
            if item is not None:
                push_unique(sources, item.get("url"))

    return sources


def collect_sources_from_tool_results(entries: Iterable[Mapping[str, Any]]) -> List[str]:
    """De-duplicated citations across a run's tool results, in first-seen order.

    Each entry is a ``{"tool": ..., "result": ...}`` event. ``result`` may be
    JSON text or already decoded.
    """
    sources: List[str] = []
    for entry in entries:
        entry = fields.mapping(entry)
        if entry is None:
            continue
        tool = entry.get("tool")
        if not isinstance(tool, str):
            continue
        for source in extract_sources_from_tool_result(tool, fields.decode_json(entry.get("result"))):
            push_unique(sources, source)
    return sources


def parse_sources(value: Any) -> List[str]:
    """De-duplicated ``sources`` of a finished run.

    Unlike :func:`~meldcore.records.parsers.parse_string_list` this never
    reports absence: unusable input is an empty list.
    """
    sources: List[str] = []
    for item in fields.decode_json_list(value) or ():
        if isinstance(item, str):
            push_unique(sources, item)
            continue
        source = fields.mapping(item)
        if source is None:
            continue
        if isinstance(source.get("path"), str):
            push_unique(sources, source["path"])
        else:
            push_unique(sources, source.get("url"))
    return sources


__all__ = [
    "MAX_SEARCH_SOURCES",
    "extract_sources_from_tool_result",
    "collect_sources_from_tool_results",
    "parse_sources",
]
