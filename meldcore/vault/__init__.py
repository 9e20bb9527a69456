"""Vault note resolution, listing signatures and wikilink helpers."""

from .listing import VaultListing, list_vault_entries, list_vault_files
from .paths import loose_path, loose_segment, normalize_relative_note_path, with_md_extension
from .resolver import TIERS, VaultNoteMatch, find_existing_vault_note, resolve_vault_note
from .signature import build_vault_entries_signature, build_vault_files_signature
from .tree import (
    TreeNode,
    VaultTreeCache,
    ancestors_of,
    build_tree,
    file_or_folder_name,
    parent_path,
)
from .wikilinks import (
    WikilinkReference,
    decode_wikilink_href,
    encode_wikilink_href,
    parse_wikilink,
    resolve_wikilink_path,
    transform_wikilinks,
)

__all__ = [
    "VaultListing",
    "list_vault_entries",
    "list_vault_files",
    "loose_path",
    "loose_segment",
    "normalize_relative_note_path",
    "with_md_extension",
    "TIERS",
    "VaultNoteMatch",
    "find_existing_vault_note",
    "resolve_vault_note",
    "build_vault_entries_signature",
    "build_vault_files_signature",
    "TreeNode",
    "VaultTreeCache",
    "ancestors_of",
    "build_tree",
    "file_or_folder_name",
    "parent_path",
    "WikilinkReference",
    "decode_wikilink_href",
    "encode_wikilink_href",
    "transform_wikilinks",
    "parse_wikilink",
    "resolve_wikilink_path",
]
