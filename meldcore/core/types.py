"""Commonly used typing helpers."""

from __future__ import annotations

from typing import Any, Mapping, TypeAlias, TypeVar, Union

from .exceptions import Error

T = TypeVar("T")

# Result type: either a value of type ``T`` or an ``Error`` instance.
Result: TypeAlias = Union[T, Error]

# Decoded JSON object as delivered by the backend boundary.
RawRecord: TypeAlias = Mapping[str, Any]


def is_error(result: object) -> bool:
    """Return ``True`` when a :data:`Result` holds the failure branch."""
    return isinstance(result, Error)


__all__ = ["Result", "Error", "RawRecord", "is_error"]
