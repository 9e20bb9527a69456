from meldcore.core.models import VaultEntry
from meldcore.vault import (
    VaultTreeCache,
    ancestors_of,
    build_tree,
    file_or_folder_name,
    parent_path,
)


def _entry(kind: str, rel: str, updated_at=None) -> VaultEntry:
    return VaultEntry(kind=kind, path=f"/v/{rel}", relative_path=rel, updated_at=updated_at)


ENTRIES = [
    _entry("folder", "Projects", 10),
    _entry("folder", "Archive", 5),
    _entry("folder", "Projects/Old", 1),
    _entry("folder", "Empty"),
    _entry("file", "Projects/B.md", 20),
    _entry("file", "Projects/a.md", 20),
    _entry("file", "Projects/Old/x.md", 3),
    _entry("file", "z.md", 1),
    _entry("file", "Inbox.md", 100),
]


def _shape(nodes):
    return [
        (n.name, _shape(n.children)) if n.kind == "folder" else n.name
        for n in nodes
    ]


def test_path_helpers() -> None:
    assert parent_path("a/b/c.md") == "a/b"
    assert parent_path("c.md") == ""
    assert parent_path("/a//c.md") == "a"
    assert file_or_folder_name("\\a\\b.md") == "b.md"
    assert file_or_folder_name("folder/") == "folder"
    assert ancestors_of("a/b/c.md") == ["a", "a/b"]
    assert ancestors_of("c.md") == []


def test_folders_before_files_by_recency_then_name() -> None:
    assert _shape(build_tree(ENTRIES)) == [
        ("Projects", [("Old", ["x.md"]), "a.md", "B.md"]),
        ("Archive", []),
        ("Empty", []),
        "Inbox.md",
        "z.md",
    ]


def test_pinned_entries_come_first() -> None:
    tree = build_tree(ENTRIES, pinned_paths={"Archive", "z.md"})
    assert [n.name for n in tree] == ["Archive", "Projects", "Empty", "z.md", "Inbox.md"]


def test_node_paths_and_implicit_folders() -> None:
    tree = build_tree([_entry("file", "Loose\\Deep/n.md")])
    (loose,) = tree
    assert (loose.kind, loose.path) == ("folder", "Loose")
    (deep,) = loose.children
    assert deep.path == "Loose/Deep"
    (note,) = deep.children
    assert (note.kind, note.name, note.path, note.children) == ("file", "n.md", "Loose/Deep/n.md", None)


def test_explicit_updated_at_map_overrides_entries() -> None:
    tree = build_tree(ENTRIES, updated_at_by_path={"z.md": 500})
    assert [n.name for n in tree if n.kind == "file"] == ["z.md", "Inbox.md"]


def test_cache_rebuilds_only_on_change() -> None:
    cache = VaultTreeCache()
    first = cache.get(ENTRIES)
    assert cache.get(list(reversed(ENTRIES))) is first

    touched = ENTRIES[:-1] + [_entry("file", "Inbox.md", 101)]
    second = cache.get(touched)
    assert second is not first
    assert cache.get(touched, {"z.md"}) is not second
