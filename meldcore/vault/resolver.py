"""Resolve agent-supplied note references against the vault listing.

Agent output refers to notes loosely: without the ``.md`` extension, with
backslashes, without leading folders, or by a slug of the title. The resolver
tries five tiers in a fixed order and the first tier with a hit wins:

1. ``exact``: whole relative path, case-insensitive
2. ``suffix``: the entry ends with ``/<request>``
3. ``basename``: same file name in any folder
4. ``loose_path``: slug forms of the whole path are equal
5. ``loose_basename``: slug forms of the file name are equal

Inside a tier, the first entry in listing order wins. There is no secondary
sort; callers that want a different tie-break must order the listing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence, Tuple

from meldcore.core.models import VaultFileEntry

from .paths import basename, forward_slashes, is_web_url, loose_path, with_md_extension

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoteRequest:
    """A requested note path in every form the tiers compare against."""

    lower: str
    base: str
    loose: str
    loose_base: str

    @classmethod
    def parse(cls, requested_path: str) -> Optional["NoteRequest"]:
        if not isinstance(requested_path, str) or is_web_url(requested_path):
            return None
        with_ext = with_md_extension(requested_path)
        if not with_ext:
            return None
        lower = with_ext.lower()
        loose = loose_path(with_ext)
        return cls(lower=lower, base=basename(lower), loose=loose, loose_base=basename(loose))


@dataclass(frozen=True)
class VaultNoteMatch:
    tier: str
    relative_path: str


def _exact(request: NoteRequest, candidate: str) -> bool:
    return candidate.lower() == request.lower


def _suffix(request: NoteRequest, candidate: str) -> bool:
    return candidate.lower().endswith("/" + request.lower)


def _basename(request: NoteRequest, candidate: str) -> bool:
    return basename(candidate.lower()) == request.base


def _loose_path(request: NoteRequest, candidate: str) -> bool:
    return bool(request.loose) and loose_path(candidate) == request.loose


def _loose_basename(request: NoteRequest, candidate: str) -> bool:
    return bool(request.loose_base) and basename(loose_path(candidate)) == request.loose_base


# Order matters: more specific tiers shadow the permissive ones.
TIERS: Tuple[Tuple[str, Callable[[NoteRequest, str], bool]], ...] = (
    ("exact", _exact),
    ("suffix", _suffix),
    ("basename", _basename),
    ("loose_path", _loose_path),
    ("loose_basename", _loose_basename),
)


def _first(
    request: NoteRequest,
    files: Iterable[VaultFileEntry],
    predicate: Callable[[NoteRequest, str], bool],
) -> Optional[str]:
    for entry in files:
        if predicate(request, forward_slashes(entry.relative_path)):
            return entry.relative_path
    return None


def resolve_vault_note(
    requested_path: str, files: Sequence[VaultFileEntry]
) -> Optional[VaultNoteMatch]:
    """Return the best match for ``requested_path`` and the tier that found it."""
    request = NoteRequest.parse(requested_path)
    if request is None:
        return None
    for tier, predicate in TIERS:
        found = _first(request, files, predicate)
        if found is not None:
            logger.debug("vault_note_resolved", extra={"tier": tier, "relative_path": found})
            return VaultNoteMatch(tier=tier, relative_path=found)
    return None


def find_existing_vault_note(
    requested_path: str, files: Sequence[VaultFileEntry]
) -> Optional[str]:
    """Relative path of the vault note ``requested_path`` refers to, if any."""
    match = resolve_vault_note(requested_path, files)
    return match.relative_path if match else None


__all__ = [
    "NoteRequest",
    "VaultNoteMatch",
    "TIERS",
    "resolve_vault_note",
    "find_existing_vault_note",
]
