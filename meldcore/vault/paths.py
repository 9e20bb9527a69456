"""Path canonicalization shared by the resolver and the wikilink helpers."""

from __future__ import annotations

import re
from typing import Optional

MARKDOWN_EXT = ".md"

_WEB_URL = re.compile(r"^https?://", re.IGNORECASE)
_WINDOWS_ABSOLUTE = re.compile(r"^[a-z]:/", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")
_UNDERSCORES = re.compile(r"_+")
_HYPHENS = re.compile(r"-+")


def forward_slashes(path: str) -> str:
    return path.replace("\\", "/")


def strip_fragment(path: str) -> str:
    """Drop a ``#heading`` suffix."""
    return path.split("#", 1)[0]


def is_web_url(value: str) -> bool:
    return bool(_WEB_URL.match(value.strip()))


def remove_md_suffix(value: str) -> str:
    return value[: -len(MARKDOWN_EXT)] if value.lower().endswith(MARKDOWN_EXT) else value


def basename(path: str) -> str:
    return path.rsplit("/", 1)[-1]


def with_md_extension(path: str) -> str:
    """Clean a requested note path and make sure it names a markdown file.

    Returns ``""`` when nothing is left after cleaning.
    """
    cleaned = forward_slashes(strip_fragment(path)).lstrip("/").strip()
    if not cleaned:
        return ""
    return cleaned if cleaned.lower().endswith(MARKDOWN_EXT) else cleaned + MARKDOWN_EXT


def loose_segment(value: str) -> str:
    """Slug form of one path segment: ``"My_Note  2"`` -> ``"my-note-2"``."""
    slug = _WHITESPACE.sub("-", value.strip().lower())
    slug = _UNDERSCORES.sub("-", slug)
    slug = _HYPHENS.sub("-", slug)
    return slug.strip("-")


def loose_path(path: str) -> str:
    """Slug form of a whole path, extension removed and empty segments skipped."""
    normalized = forward_slashes(strip_fragment(path)).lstrip("/").strip()
    if not normalized:
        return ""
    segments = (loose_segment(part) for part in remove_md_suffix(normalized).split("/"))
    return "/".join(part for part in segments if part)


def normalize_relative_note_path(note_path: str, vault_path: Optional[str] = None) -> str:
    """Turn a path printed by the agent into a vault-relative path.

    Absolute paths inside ``vault_path`` lose the vault prefix. Web URLs and
    absolute Windows paths outside the vault give ``""``.
    """
    trimmed = forward_slashes(note_path).strip()
    if not trimmed or is_web_url(trimmed):
        return ""

    source = strip_fragment(trimmed)
    vault = forward_slashes(vault_path).rstrip("/") if vault_path else ""
    if vault and source.lower().startswith(vault.lower() + "/"):
        return source[len(vault) + 1 :]
    if _WINDOWS_ABSOLUTE.match(source):
        return ""
    return source.lstrip("/")


__all__ = [
    "MARKDOWN_EXT",
    "forward_slashes",
    "strip_fragment",
    "is_web_url",
    "remove_md_suffix",
    "basename",
    "with_md_extension",
    "loose_segment",
    "loose_path",
    "normalize_relative_note_path",
]
