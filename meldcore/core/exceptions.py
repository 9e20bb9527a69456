"""Base exceptions for the domain layer."""

from __future__ import annotations


class DomainError(Exception):
    """Base class for all domain level exceptions."""


class NotFoundError(DomainError):
    """Raised when a vault note or directory cannot be located."""


class ValidationError(DomainError):
    """A raw record failed a validation rule.

    Validators hand these back as values instead of raising them so that a single
    bad sub-record never aborts the surrounding list.
    """

    def __init__(self, record: str, field: str, reason: str = "missing") -> None:
        super().__init__(f"{record}.{field}: {reason}")
        self.record = record
        self.field = field
        self.reason = reason


# Alias to keep a generic name for error type hints
Error = DomainError

__all__ = ["DomainError", "NotFoundError", "ValidationError", "Error"]
