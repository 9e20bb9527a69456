"""Order-independent fingerprints of vault listings.

The signature is only an equality check for deciding whether a view derived
from a listing must be rebuilt. It is not a digest.
"""

from __future__ import annotations

from typing import Any, Iterable

from meldcore.core.models import VaultEntry, VaultFileEntry

from .paths import forward_slashes


def _stamp(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return "0"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _join(lines: Iterable[str]) -> str:
    return "\n".join(sorted(lines))


def build_vault_files_signature(files: Iterable[VaultFileEntry]) -> str:
    return _join(
        f"{forward_slashes(entry.relative_path)}|{forward_slashes(entry.path)}|"
        f"{_stamp(entry.updated_at)}"
        for entry in files
    )


def build_vault_entries_signature(entries: Iterable[VaultEntry]) -> str:
    return _join(
        f"{entry.kind}|{forward_slashes(entry.relative_path)}|{forward_slashes(entry.path)}|"
        f"{_stamp(entry.updated_at)}"
        for entry in entries
    )


__all__ = ["build_vault_files_signature", "build_vault_entries_signature"]
