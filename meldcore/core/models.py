"""Pydantic models representing core domain entities.

All entities are frozen value objects: they are produced by the normalizers in
:mod:`meldcore.records` and never mutated afterwards. A fresh raw record means a
fresh entity.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["user", "assistant", "tool"]
FileAction = Literal["create", "edit"]
Number = Union[int, float]


class _ValueObject(BaseModel):
    model_config = ConfigDict(frozen=True)


class Conversation(_ValueObject):
    """Chat conversation as shown in the sidebar."""

    id: str
    title: str = Field(..., min_length=1)
    created_at: str = Field(..., description="ISO-8601 instant")
    updated_at: str = Field(..., description="ISO-8601 instant")
    message_count: int = Field(0, ge=0)
    archived: bool = False
    pinned: bool = False
    sort_order: Optional[Number] = None
    folder_id: Optional[str] = None


class ToolCallEvent(_ValueObject):
    """One tool invocation recorded against an assistant message."""

    run_id: Optional[str] = None
    id: Optional[str] = None
    iteration: Optional[int] = None
    tool: str = Field(..., min_length=1)
    # Always a string; native values are JSON-encoded.
    args: str = "{}"


class FileChange(_ValueObject):
    """File written by the agent during a timeline step."""

    path: str = Field(..., min_length=1)
    action: FileAction
    bytes: Optional[Number] = None
    hash_after: Optional[str] = None


class TimelineStep(_ValueObject):
    """Single step of an agent execution timeline."""

    run_id: Optional[str] = None
    id: str = Field(..., min_length=1)
    ts: str = Field(..., min_length=1)
    phase: str = Field(..., min_length=1)
    iteration: int = 0
    tool: Optional[str] = None
    args_preview: Optional[Dict[str, Any]] = None
    result_preview: Optional[str] = None
    file_changes: Optional[List[FileChange]] = None


class Message(_ValueObject):
    """Chat message with its optional agent activity."""

    id: str
    role: Role = "user"
    content: str = ""
    timestamp: int = Field(..., description="Epoch milliseconds")
    run_id: Optional[str] = None
    thinking_summary: Optional[str] = None
    sources: Optional[List[str]] = None
    tool_calls: Optional[List[ToolCallEvent]] = None
    timeline_steps: Optional[List[TimelineStep]] = None


class VaultFileEntry(_ValueObject):
    """File in the active vault. Owned by the vault listing, consumed here."""

    path: str
    relative_path: str
    updated_at: Optional[Number] = None


class VaultEntry(_ValueObject):
    """File or folder in the active vault."""

    kind: Literal["file", "folder"]
    path: str
    relative_path: str
    updated_at: Optional[Number] = None


__all__ = [
    "Role",
    "FileAction",
    "Conversation",
    "ToolCallEvent",
    "FileChange",
    "TimelineStep",
    "Message",
    "VaultFileEntry",
    "VaultEntry",
]
