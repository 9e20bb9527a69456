import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure project root on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from apps.api.main import app, get_listing
from meldcore.core.models import VaultFileEntry
from meldcore.vault import VaultListing


def make_files(*relative_paths: str) -> list[VaultFileEntry]:
    """Listing snapshot in the given order."""
    return [
        VaultFileEntry(path=f"/vault/{rel}", relative_path=rel, updated_at=1700000000000)
        for rel in relative_paths
    ]


@pytest.fixture()
def vault(tmp_path: Path) -> Path:
    """Small on-disk vault with a nested note."""

    root = tmp_path / "vault"
    (root / "Projects").mkdir(parents=True)
    (root / "Projects" / "Roadmap 2024.md").write_text("# Roadmap\n", encoding="utf-8")
    (root / "Inbox.md").write_text("inbox\n", encoding="utf-8")
    return root


@pytest.fixture()
def client(vault: Path):
    """FastAPI test client with the vault dependency overridden."""

    app.dependency_overrides[get_listing] = lambda: VaultListing(vault)

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
