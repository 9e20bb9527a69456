"""Core library exposing domain models, settings, exceptions and types."""

from .settings import Settings, get_settings
from .exceptions import DomainError, NotFoundError, ValidationError, Error
from .models import (
    Conversation,
    FileChange,
    Message,
    TimelineStep,
    ToolCallEvent,
    VaultEntry,
    VaultFileEntry,
)
from .types import Result, RawRecord, is_error

__all__ = [
    "Settings",
    "get_settings",
    "DomainError",
    "NotFoundError",
    "ValidationError",
    "Error",
    "Conversation",
    "FileChange",
    "Message",
    "TimelineStep",
    "ToolCallEvent",
    "VaultEntry",
    "VaultFileEntry",
    "Result",
    "RawRecord",
    "is_error",
]
