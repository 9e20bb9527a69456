"""File system listing of the active vault.

Produces the snapshots the resolver and the signature builders work on. The
listing is sorted by relative path so repeated scans of an unchanged vault give
the same order.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List

from meldcore.core.exceptions import NotFoundError
from meldcore.core.models import VaultEntry, VaultFileEntry

from .paths import MARKDOWN_EXT
from .signature import build_vault_entries_signature, build_vault_files_signature

logger = logging.getLogger(__name__)


class VaultListing:
    """Read-only view over a vault directory of Markdown notes."""

    def __init__(self, vault_path: Path) -> None:
        self.vault_path = Path(vault_path)

    # ------------------------------------------------------------------
    # public API
    def files(self) -> List[VaultFileEntry]:
        """Markdown notes in the vault."""

        return [
            VaultFileEntry(
                path=str(path),
                relative_path=rel,
                updated_at=self._mtime_ms(path),
            )
            for rel, path in self._walk()
            if path.is_file() and path.suffix.lower() == MARKDOWN_EXT
        ]

    def entries(self) -> List[VaultEntry]:
        """Every visible file and folder in the vault."""

        return [
            VaultEntry(
                kind="folder" if path.is_dir() else "file",
                path=str(path),
                relative_path=rel,
                updated_at=self._mtime_ms(path),
            )
            for rel, path in self._walk()
        ]

    def files_signature(self) -> str:
        return build_vault_files_signature(self.files())

    def entries_signature(self) -> str:
        return build_vault_entries_signature(self.entries())

    # ------------------------------------------------------------------
    # helpers
    def _walk(self) -> Iterator[tuple[str, Path]]:
        if not self.vault_path.is_dir():
            raise NotFoundError(f"Vault directory not found: {self.vault_path}")
        found = []
        for path in self.vault_path.rglob("*"):
            rel = path.relative_to(self.vault_path)
            if any(part.startswith(".") for part in rel.parts):
                continue
            found.append((rel.as_posix(), path))
        logger.debug("vault_listed", extra={"vault": str(self.vault_path), "entries": len(found)})
        yield from sorted(found, key=lambda item: item[0])

    @staticmethod
    def _mtime_ms(path: Path) -> int:
        return int(path.stat().st_mtime * 1000)


def list_vault_files(vault_dir: Path) -> List[VaultFileEntry]:
    return VaultListing(vault_dir).files()


def list_vault_entries(vault_dir: Path) -> List[VaultEntry]:
    return VaultListing(vault_dir).entries()


__all__ = ["VaultListing", "list_vault_files", "list_vault_entries"]
