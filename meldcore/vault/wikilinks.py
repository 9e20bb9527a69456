"""Helpers for ``[[target|label]]`` links in assistant messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional
from urllib.parse import quote, unquote

from .paths import MARKDOWN_EXT, basename, forward_slashes, strip_fragment

WIKILINK_PREFIX = "wikilink:"
# Characters encodeURIComponent leaves alone.
_URI_COMPONENT_SAFE = "-_.!~*'()"


@dataclass(frozen=True)
class WikilinkReference:
    target: str
    label: str


def parse_wikilink(raw: str) -> Optional[WikilinkReference]:
    """Split the body of a wikilink into target and label."""
    body = raw.strip()
    if not body:
        return None
    target, sep, label = body.partition("|")
    target = target.strip()
    if not target:
        return None
    label = label.strip() if sep else target
    return WikilinkReference(target=target, label=label or target)


def decode_wikilink_href(href: Optional[str]) -> Optional[str]:
    """Recover the target from a ``wikilink:`` href, ``None`` for other hrefs."""
    if not href or not href.startswith(WIKILINK_PREFIX):
        return None
    encoded = href[len(WIKILINK_PREFIX) :]
    if not encoded.strip():
        return None
    try:
        return unquote(encoded, errors="strict")
    except UnicodeDecodeError:
        return encoded


def _link_line_outside_code(line: str) -> str:
    if "[[" not in line:
        return line
    out = []
    cursor = 0
    in_code = False
    while cursor < len(line):
        symbol = line[cursor]
        if symbol == "`":
            in_code = not in_code
        elif not in_code and line.startswith("[[", cursor):
            close = line.find("]]", cursor + 2)
            if close != -1:
                parsed = parse_wikilink(line[cursor + 2 : close])
                if parsed:
                    out.append(f"[{parsed.label}]({encode_wikilink_href(parsed.target)})")
                    cursor = close + 2
                    continue
        out.append(symbol)
        cursor += 1
    return "".join(out)


def encode_wikilink_href(target: str) -> str:
    return WIKILINK_PREFIX + quote(target, safe=_URI_COMPONENT_SAFE)


def transform_wikilinks(markdown: str) -> str:
    """Rewrite ``[[target|label]]`` as ``[label](wikilink:target)``.

    Fenced code blocks and inline code spans are left untouched.
    """
    if "[[" not in markdown:
        return markdown
    lines = []
    in_fence = False
    for line in markdown.split("\n"):
        if line.lstrip().startswith("```"):
            in_fence = not in_fence
            lines.append(line)
        elif in_fence:
            lines.append(line)
        else:
            lines.append(_link_line_outside_code(line))
    return "\n".join(lines)


def resolve_wikilink_path(
    target: str,
    sources: Iterable[str] = (),
    current_note_path: Optional[str] = None,
) -> str:
    """Guess the vault path a wikilink points at.

    The message's ``sources`` are searched first, by path suffix or by file
    name. A bare target is also tried relative to the folder of the note
    being viewed, which is the fallback when no source matches.
    """
    without_header = strip_fragment(target).strip()
    if not without_header:
        return ""

    normalized = forward_slashes(without_header)
    with_ext = normalized if normalized.endswith(MARKDOWN_EXT) else normalized + MARKDOWN_EXT
    has_directory = "/" in with_ext
    current_folder = ""
    if current_note_path:
        current_folder = forward_slashes(current_note_path).lstrip("/").rpartition("/")[0]

    candidates = [with_ext]
    if not has_directory and current_folder:
        candidates.append(f"{current_folder}/{with_ext}")

    sources = list(sources)
    for candidate in candidates:
        wanted = candidate.lower()
        wanted_leaf = basename(wanted)
        for source in sources:
            normalized_source = forward_slashes(source).lower()
            if normalized_source.endswith(wanted) or basename(normalized_source) == wanted_leaf:
                return source

    if not has_directory and current_folder:
        return f"{current_folder}/{with_ext}"
    return with_ext


__all__ = [
    "WIKILINK_PREFIX",
    "WikilinkReference",
    "parse_wikilink",
    "decode_wikilink_href",
    "encode_wikilink_href",
    "transform_wikilinks",
    "resolve_wikilink_path",
]
