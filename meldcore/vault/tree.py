"""Folder tree shown in the vault sidebar.

The tree is derived from a listing snapshot. :class:`VaultTreeCache` rebuilds it
only when the listing signature or the pinned set changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import AbstractSet, Dict, Iterable, List, Literal, Mapping, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict

from meldcore.core.models import VaultEntry

from .paths import forward_slashes
from .signature import build_vault_entries_signature


class TreeNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["file", "folder"]
    name: str
    path: str
    # Only folders have children.
    children: Optional[List["TreeNode"]] = None


def clean_relative_path(path: str) -> str:
    return forward_slashes(path).lstrip("/").strip()


def _parts(path: str) -> List[str]:
    return [part for part in clean_relative_path(path).split("/") if part]


def file_or_folder_name(path: str) -> str:
    parts = _parts(path)
    return parts[-1] if parts else clean_relative_path(path)


def parent_path(path: str) -> str:
    """Folder containing ``path``; ``""`` at the vault root."""
    return "/".join(_parts(path)[:-1])


def ancestors_of(path: str) -> List[str]:
    """Every enclosing folder, outermost first."""
    parts = _parts(path)
    return ["/".join(parts[:index]) for index in range(1, len(parts))]


@dataclass
class _Folder:
    name: str
    path: str
    folders: Dict[str, "_Folder"] = field(default_factory=dict)
    files: List[str] = field(default_factory=list)

    def descend(self, parts: Sequence[str]) -> "_Folder":
        cursor = self
        for part in parts:
            child = cursor.folders.get(part)
            if child is None:
                child_path = f"{cursor.path}/{part}" if cursor.path else part
                child = cursor.folders[part] = _Folder(name=part, path=child_path)
            cursor = child
        return cursor


def build_tree(
    entries: Iterable[VaultEntry],
    pinned_paths: AbstractSet[str] = frozenset(),
    updated_at_by_path: Optional[Mapping[str, float]] = None,
) -> List[TreeNode]:
    """Nest a flat listing into folders.

    Within each folder, subfolders come before files. Each group is ordered by
    pinned first, then most recently updated, then name (case-insensitive). A
    folder counts as updated when anything below it was. When
    ``updated_at_by_path`` is omitted, the entries' own ``updated_at`` is used.
    """
    entries = list(entries)
    if updated_at_by_path is None:
        updated_at_by_path = {
            clean_relative_path(e.relative_path): e.updated_at or 0 for e in entries
        }

    root = _Folder(name="", path="")
    folder_paths = [
        clean_relative_path(e.relative_path) for e in entries if e.kind == "folder"
    ]
    for folder in sorted(filter(None, folder_paths), key=len):
        root.descend(_parts(folder))
    for entry in entries:
        if entry.kind != "file":
            continue
        parts = _parts(entry.relative_path)
        if parts:
            root.descend(parts[:-1]).files.append("/".join(parts))

    folder_updated: Dict[str, float] = {}

    def updated(folder: _Folder) -> float:
        if folder.path not in folder_updated:
            latest = updated_at_by_path.get(folder.path, 0) if folder.path else 0
            for child in folder.folders.values():
                latest = max(latest, updated(child))
            for file_path in folder.files:
                latest = max(latest, updated_at_by_path.get(file_path, 0))
            folder_updated[folder.path] = latest
        return folder_updated[folder.path]

    def order(path: str, name: str, stamp: float) -> Tuple[bool, float, str]:
        return (path not in pinned_paths, -stamp, name.lower())

    def to_nodes(folder: _Folder) -> List[TreeNode]:
        folders = sorted(
            folder.folders.values(), key=lambda f: order(f.path, f.name, updated(f))
        )
        files = sorted(
            folder.files,
            key=lambda p: order(p, file_or_folder_name(p), updated_at_by_path.get(p, 0)),
        )
        return [
            TreeNode(kind="folder", name=f.name, path=f.path, children=to_nodes(f))
            for f in folders
        ] + [TreeNode(kind="file", name=file_or_folder_name(p), path=p) for p in files]

    return to_nodes(root)


class VaultTreeCache:
    """Keeps the last built tree until the listing or the pins change."""

    def __init__(self) -> None:
        self._key: Optional[Tuple[str, frozenset]] = None
        self._tree: List[TreeNode] = []

    def get(
        self, entries: Sequence[VaultEntry], pinned_paths: AbstractSet[str] = frozenset()
    ) -> List[TreeNode]:
        key = (build_vault_entries_signature(entries), frozenset(pinned_paths))
        if key != self._key:
            self._tree = build_tree(entries, pinned_paths)
            self._key = key
        return self._tree


__all__ = [
    "TreeNode",
    "clean_relative_path",
    "file_or_folder_name",
    "parent_path",
    "ancestors_of",
    "build_tree",
    "VaultTreeCache",
]
