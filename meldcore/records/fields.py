"""Acceptance rules for individual raw fields.

Every validator in :mod:`meldcore.records.validators` goes through these helpers,
so each rule (what counts as a usable string, number, mapping) lives in one place.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Union


def decode_json(value: Any) -> Any:
    """Decode JSON text, handing back anything else (or undecodable text) unchanged."""
    if not isinstance(value, str):
        return value
    try:
        return json.loads(value)
    except (ValueError, RecursionError):
        return value


def decode_json_list(value: Any) -> Optional[List[Any]]:
    """Return ``value`` as a native list.

    The backend stores some columns as JSON text, so a list may arrive either
    natively or encoded as a string. Anything else, including text that does not
    decode to a list, yields ``None``.
    """
    if not isinstance(value, (list, str)):
        return None
    decoded = decode_json(value)
    return decoded if isinstance(decoded, list) else None


def text(value: Any) -> Optional[str]:
    """Non-empty string, kept as given."""
    if isinstance(value, str) and value:
        return value
    return None


def non_blank(value: Any) -> Optional[str]:
    """String with at least one non-whitespace character, kept as given."""
    if isinstance(value, str) and value.strip():
        return value
    return None


def trimmed(value: Any) -> Optional[str]:
    """Stripped string, or ``None`` when nothing is left."""
    if isinstance(value, str):
        return value.strip() or None
    return None


def number(value: Any) -> Optional[Union[int, float]]:
    """Int or float. Booleans are not numbers here."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    return None


def integer(value: Any) -> Optional[int]:
    """Numeric value with no fractional part, as ``int``."""
    num = number(value)
    if num is None:
        return None
    if isinstance(num, float):
        return int(num) if num.is_integer() else None
    return num


def flag(value: Any) -> bool:
    """Boolean column; SQLite hands these back as 0/1."""
    if isinstance(value, (bool, int)):
        return bool(value)
    return False


def mapping(value: Any) -> Optional[Dict[str, Any]]:
    if isinstance(value, dict):
        return value
    return None


def json_text(value: Any) -> str:
    """Encode ``value`` the way the frontend's ``JSON.stringify`` would."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)


__all__ = [
    "decode_json",
    "decode_json_list",
    "text",
    "non_blank",
    "trimmed",
    "number",
    "integer",
    "flag",
    "mapping",
    "json_text",
]
