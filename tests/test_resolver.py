import pytest

from conftest import make_files
from meldcore.vault import TIERS, find_existing_vault_note, resolve_vault_note
from meldcore.vault.resolver import NoteRequest


ROADMAP = make_files("Projects/Roadmap 2024.md")


def test_tier_order_is_fixed() -> None:
    assert [name for name, _ in TIERS] == [
        "exact",
        "suffix",
        "basename",
        "loose_path",
        "loose_basename",
    ]


def test_title_without_extension_or_folder() -> None:
    match = resolve_vault_note("Roadmap 2024", ROADMAP)
    assert match.relative_path == "Projects/Roadmap 2024.md"
    assert match.tier == "suffix"


def test_slugified_reference() -> None:
    match = resolve_vault_note("roadmap-2024.md", ROADMAP)
    assert match.relative_path == "Projects/Roadmap 2024.md"
    assert match.tier == "loose_basename"


def test_slugified_full_path() -> None:
    match = resolve_vault_note("projects/roadmap_2024", ROADMAP)
    assert match.relative_path == "Projects/Roadmap 2024.md"
    assert match.tier == "loose_path"


@pytest.mark.parametrize(
    "requested",
    [
        "Projects/Roadmap 2024.md",
        "projects/roadmap 2024",
        "Projects\\Roadmap 2024.md",
        "/Projects/Roadmap 2024.md",
        "Projects/Roadmap 2024#Goals",
        "Projects/Roadmap 2024.MD",
    ],
)
def test_exact_match_despite_formatting(requested: str) -> None:
    match = resolve_vault_note(requested, ROADMAP)
    assert match.tier == "exact"
    assert match.relative_path == "Projects/Roadmap 2024.md"


def test_listing_with_backslashes_returns_original_path() -> None:
    files = make_files("Projects\\Roadmap 2024.md")
    assert find_existing_vault_note("Projects/Roadmap 2024", files) == "Projects\\Roadmap 2024.md"


def test_exact_beats_suffix() -> None:
    files = make_files("Deep/Notes/todo.md", "Notes/todo.md")
    assert find_existing_vault_note("notes/TODO", files) == "Notes/todo.md"


def test_suffix_beats_basename() -> None:
    files = make_files("Other/b.md", "X/A/b.md")
    match = resolve_vault_note("A/b", files)
    assert match.relative_path == "X/A/b.md"
    assert match.tier == "suffix"


def test_basename_beats_loose_tiers() -> None:
    files = make_files("one/my-note.md", "two/My Note.md")
    match = resolve_vault_note("elsewhere/My Note", files)
    assert match.relative_path == "two/My Note.md"
    assert match.tier == "basename"


def test_ties_resolve_by_listing_order() -> None:
    # Ties inside a tier go to the first entry in listing order, not to the
    # alphabetically first or most recent entry. Kept deliberately; revisit if
    # callers start passing unordered listings.
    files = make_files("Projects/Roadmap 2024.md", "Archive/Roadmap 2024.md")
    assert find_existing_vault_note("Roadmap 2024.md", files) == "Projects/Roadmap 2024.md"
    assert find_existing_vault_note("Roadmap 2024.md", files[::-1]) == "Archive/Roadmap 2024.md"

    files = make_files("Zeta/Plan.md", "Alpha/Plan.md")
    assert find_existing_vault_note("plan", files) == "Zeta/Plan.md"


@pytest.mark.parametrize(
    "requested",
    ["https://example.com/x", "HTTP://example.com/Roadmap 2024", "", "   ", "#Goals", "/"],
)
def test_non_vault_references_do_not_match(requested: str) -> None:
    files = make_files("x.md", "Projects/Roadmap 2024.md", "example.com/x.md")
    assert resolve_vault_note(requested, files) is None


def test_missing_note() -> None:
    assert find_existing_vault_note("Budget", ROADMAP) is None
    assert find_existing_vault_note("Roadmap", []) is None


def test_loose_tiers_need_a_slug() -> None:
    files = make_files("_.md")
    assert find_existing_vault_note("-", files) is None


def test_listing_is_not_mutated() -> None:
    files = make_files("b.md", "a.md")
    snapshot = list(files)
    find_existing_vault_note("a", files)
    assert files == snapshot


def test_note_request_forms() -> None:
    request = NoteRequest.parse("Projects\\My_Plan#top")
    assert request.lower == "projects/my_plan.md"
    assert request.base == "my_plan.md"
    assert request.loose == "projects/my-plan"
    assert request.loose_base == "my-plan"
    assert NoteRequest.parse("  ") is None
