"""Per-record validators for agent activity sub-records.

Each validator takes one decoded candidate and returns a :data:`Result`: the
domain model when the candidate is usable, otherwise a
:class:`~meldcore.core.exceptions.ValidationError` naming the first rule it broke.
Nothing here raises for bad input.
"""

from __future__ import annotations

from typing import Any, List, Optional

from meldcore.core.exceptions import ValidationError
from meldcore.core.models import FileChange, TimelineStep, ToolCallEvent
from meldcore.core.types import Result

from . import fields

FILE_ACTIONS = ("create", "edit")


def validate_tool_call(candidate: Any) -> Result[ToolCallEvent]:
    raw = fields.mapping(candidate)
    if raw is None:
        return ValidationError("tool_call", "*", "not an object")
    tool = fields.non_blank(raw.get("tool"))
    if tool is None:
        return ValidationError("tool_call", "tool")

    args_raw = raw.get("args")
    if isinstance(args_raw, str):
        args = args_raw
    else:
        args = fields.json_text({} if args_raw is None else args_raw)

    return ToolCallEvent(
        run_id=fields.non_blank(raw.get("run_id")),
        id=fields.non_blank(raw.get("id")),
        iteration=fields.integer(raw.get("iteration")),
        tool=tool,
        args=args,
    )


def validate_file_change(candidate: Any) -> Result[FileChange]:
    raw = fields.mapping(candidate)
    if raw is None:
        return ValidationError("file_change", "*", "not an object")
    path = fields.text(raw.get("path"))
    if path is None:
        return ValidationError("file_change", "path")
    action = raw.get("action")
    if action not in FILE_ACTIONS:
        return ValidationError("file_change", "action", f"unsupported action {action!r}")
    return FileChange(
        path=path,
        action=action,
        bytes=fields.number(raw.get("bytes")),
        hash_after=raw.get("hash_after") if isinstance(raw.get("hash_after"), str) else None,
    )


def _file_changes(value: Any) -> Optional[List[FileChange]]:
    # Only a native list is accepted here; the enclosing timeline was already decoded.
    if not isinstance(value, list):
        return None
    changes: List[FileChange] = []
    for candidate in value:
        result = validate_file_change(candidate)
        if isinstance(result, FileChange):
            changes.append(result)
    return changes


def validate_timeline_step(candidate: Any) -> Result[TimelineStep]:
    """Validate a timeline step.

    ``id``, ``ts`` and ``phase`` are all required. A step missing one of them is
    rejected as a whole; no placeholder values are filled in.
    """
    raw = fields.mapping(candidate)
    if raw is None:
        return ValidationError("timeline_step", "*", "not an object")
    required = {name: fields.text(raw.get(name)) for name in ("id", "ts", "phase")}
    for name, value in required.items():
        if value is None:
            return ValidationError("timeline_step", name)

    iteration = fields.integer(raw.get("iteration"))
    return TimelineStep(
        run_id=fields.non_blank(raw.get("run_id")),
        id=required["id"],
        ts=required["ts"],
        phase=required["phase"],
        iteration=0 if iteration is None else iteration,
        tool=raw.get("tool") if isinstance(raw.get("tool"), str) else None,
        args_preview=fields.mapping(raw.get("args_preview")),
        result_preview=(
            raw.get("result_preview") if isinstance(raw.get("result_preview"), str) else None
        ),
        file_changes=_file_changes(raw.get("file_changes")),
    )


__all__ = [
    "FILE_ACTIONS",
    "validate_tool_call",
    "validate_file_change",
    "validate_timeline_step",
]
