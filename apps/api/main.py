from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query, status
from pydantic import BaseModel

from meldcore.core.exceptions import NotFoundError
from meldcore.core.models import Conversation, Message, VaultEntry, VaultFileEntry
from meldcore.core.settings import get_settings
from meldcore.logging import setup_logging
from meldcore.records import (
    collect_sources_from_tool_results,
    normalize_conversation,
    normalize_message,
)
from meldcore.vault import (
    TreeNode,
    VaultListing,
    VaultTreeCache,
    build_vault_files_signature,
    resolve_vault_note,
)


# ---------------------------------------------------------------------------
# Dependency factories


def get_listing() -> VaultListing:
    settings = get_settings()
    return VaultListing(Path(settings.vault_dir))


def _vault_files(listing: VaultListing) -> List[VaultFileEntry]:
    try:
        return listing.files()
    except NotFoundError as exc:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


def _vault_entries(listing: VaultListing) -> List[VaultEntry]:
    try:
        return listing.entries()
    except NotFoundError as exc:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


# ---------------------------------------------------------------------------
# Pydantic schemas


class ResolveRequest(BaseModel):
    requested_path: str
    # Snapshot held by the caller; the configured vault is listed when omitted.
    files: Optional[List[VaultFileEntry]] = None


class ResolveResponse(BaseModel):
    relative_path: str
    tier: str


class ToolResultsRequest(BaseModel):
    results: List[Dict[str, Any]]


class SignatureRequest(BaseModel):
    files: List[VaultFileEntry]


class VaultFilesResponse(BaseModel):
    files: List[VaultFileEntry]
    signature: str


# ---------------------------------------------------------------------------
# FastAPI application

app = FastAPI(title="Meld Core API")
_tree_cache = VaultTreeCache()


# Routes ---------------------------------------------------------------------


@app.post("/conversations/normalize")
def normalize_conversation_route(raw: Dict[str, Any]) -> Conversation:
    return normalize_conversation(raw)


@app.post("/messages/normalize")
def normalize_message_route(raw: Dict[str, Any]) -> Message:
    return normalize_message(raw)


@app.post("/sources/collect")
def collect_sources(req: ToolResultsRequest) -> Dict[str, List[str]]:
    return {"sources": collect_sources_from_tool_results(req.results)}


@app.post("/vault/resolve")
def resolve_note(
    req: ResolveRequest,
    listing: VaultListing = Depends(get_listing),
) -> ResolveResponse:
    files = req.files if req.files is not None else _vault_files(listing)
    match = resolve_vault_note(req.requested_path, files)
    if match is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found")
    return ResolveResponse(relative_path=match.relative_path, tier=match.tier)


@app.post("/vault/signature")
def vault_signature(req: SignatureRequest) -> Dict[str, str]:
    return {"signature": build_vault_files_signature(req.files)}


@app.get("/vault/files")
def vault_files(listing: VaultListing = Depends(get_listing)) -> VaultFilesResponse:
    files = _vault_files(listing)
    return VaultFilesResponse(files=files, signature=build_vault_files_signature(files))


@app.get("/vault/tree")
def vault_tree(
    pinned: List[str] = Query(default=[]),
    listing: VaultListing = Depends(get_listing),
) -> List[TreeNode]:
    return _tree_cache.get(_vault_entries(listing), set(pinned))


def main() -> None:  # pragma: no cover - process entry point
    import uvicorn

    setup_logging()
    uvicorn.run(app, host="0.0.0.0", port=8000, log_config=None)


if __name__ == "__main__":  # pragma: no cover
    main()


__all__ = ["app", "main"]
