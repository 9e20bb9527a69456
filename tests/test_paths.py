import pytest

from meldcore.vault.paths import (
    loose_path,
    loose_segment,
    normalize_relative_note_path,
    with_md_extension,
)


@pytest.mark.parametrize(
    ("segment", "expected"),
    [
        ("Roadmap 2024", "roadmap-2024"),
        ("  My__Note   Draft ", "my-note-draft"),
        ("--a--b--", "a-b"),
        ("snake_case_name", "snake-case-name"),
        ("___", ""),
    ],
)
def test_loose_segment(segment: str, expected: str) -> None:
    assert loose_segment(segment) == expected


def test_loose_path() -> None:
    assert loose_path("Projects/Roadmap 2024.md") == "projects/roadmap-2024"
    assert loose_path("/A_B//C D.MD#x") == "a-b/c-d"
    assert loose_path("   ") == ""


def test_with_md_extension() -> None:
    assert with_md_extension("notes\\a#b") == "notes/a.md"
    assert with_md_extension("//a.Md") == "a.Md"
    assert with_md_extension("  ") == ""


@pytest.mark.parametrize(
    ("note_path", "vault_path", "expected"),
    [
        ("/Users/me/Vault/Notes/a.md", "/Users/me/Vault/", "Notes/a.md"),
        ("/users/me/vault/Notes/a.md#Intro", "/Users/me/Vault", "Notes/a.md"),
        ("C:\\Vault\\Notes\\a.md", "c:\\vault", "Notes/a.md"),
        ("D:\\Other\\a.md", "C:\\Vault", ""),
        ("https://x.com/a", None, ""),
        ("/Notes/a.md#h", None, "Notes/a.md"),
        ("  ", None, ""),
    ],
)
def test_normalize_relative_note_path(note_path, vault_path, expected) -> None:
    assert normalize_relative_note_path(note_path, vault_path) == expected
