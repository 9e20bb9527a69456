"""Timestamp normalization for message and conversation records."""

from __future__ import annotations

import time
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Optional


def now_ms() -> int:
    return int(time.time() * 1000)


def utc_now_iso() -> str:
    """Current instant as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _to_ms(dt: datetime) -> int:
    # Naive values come from SQLite's CURRENT_TIMESTAMP, which is UTC.
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return int(dt.timestamp() * 1000)


def parse_instant(value: str) -> Optional[int]:
    """Parse an ISO-8601 or RFC 2822 date string into epoch milliseconds."""
    candidate = value.strip()
    if not candidate:
        return None
    try:
        return _to_ms(datetime.fromisoformat(candidate))
    except (ValueError, OverflowError):
        pass
    try:
        return _to_ms(parsedate_to_datetime(candidate))
    except (TypeError, ValueError, IndexError, OverflowError):
        return None


def normalize_timestamp(value: Optional[str] = None) -> int:
    """Resolve a stored timestamp to epoch milliseconds.

    Tries regular date parsing first, then reads ``"YYYY-MM-DD HH:MM:SS"`` as a
    UTC instant. Falls back to the current time, so it never fails.
    """
    if not value or not isinstance(value, str):
        return now_ms()
    parsed = parse_instant(value)
    if parsed is not None:
        return parsed
    sqlite_style = parse_instant(value.strip().replace(" ", "T", 1) + "Z")
    return now_ms() if sqlite_style is None else sqlite_style


__all__ = ["normalize_timestamp", "parse_instant", "now_ms", "utc_now_iso"]
