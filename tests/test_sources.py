import json

from meldcore.records import (
    collect_sources_from_tool_results,
    extract_sources_from_tool_result,
    parse_sources,
)


def test_kb_search_takes_top_five_chunks() -> None:
    chunks = [{"file_path": f"Notes/{i}.md"} for i in range(8)]
    assert extract_sources_from_tool_result("kb_search", {"result": {"chunks": chunks}}) == [
        f"Notes/{i}.md" for i in range(5)
    ]


def test_kb_search_chunk_shapes() -> None:
    flat = {"chunks": [{"file_path": "a.md"}, {"file_path": "a.md"}, "junk", {"text": "x"}]}
    assert extract_sources_from_tool_result("kb_search", flat) == ["a.md"]
    bare = [{"file_path": " b.md "}]
    assert extract_sources_from_tool_result("kb_search", bare) == ["b.md"]


def test_note_tools_report_touched_paths() -> None:
    result = {
        "target": {"resolved_path": "Projects/Roadmap.md"},
        "path": "Projects/Roadmap.md",
        "created": "Inbox/New.md",
        "edited": 3,
    }
    assert extract_sources_from_tool_result("kb_update", result) == [
        "Projects/Roadmap.md",
        "Inbox/New.md",
    ]


def test_web_search_urls() -> None:
    nested = {"result": {"results": [{"url": "https://a.dev"}, {"title": "no url"}]}}
    assert extract_sources_from_tool_result("web_search", nested) == ["https://a.dev"]
    flat = {"results": [{"url": "https://b.dev"}]}
    assert extract_sources_from_tool_result("web_search", flat) == ["https://b.dev"]


def test_unknown_tools_and_shapes_contribute_nothing() -> None:
    assert extract_sources_from_tool_result("shell", {"path": "a.md"}) == []
    assert extract_sources_from_tool_result("kb_read", "plain text") == []
    assert extract_sources_from_tool_result("kb_read", None) == []


def test_collect_dedupes_across_results() -> None:
    entries = [
        {"tool": "kb_search", "result": json.dumps({"chunks": [{"file_path": "a.md"}, {"file_path": "b.md"}]})},
        {"tool": "kb_read", "result": {"path": "a.md"}},
        {"tool": "web_search", "result": "not json"},
        {"tool": "web_search", "result": "[" * 100000},
        {"result": {"path": "c.md"}},
        "junk",
        {"tool": "web_search", "result": {"results": [{"url": "https://x.dev"}]}},
    ]
    assert collect_sources_from_tool_results(entries) == ["a.md", "b.md", "https://x.dev"]


def test_parse_sources_dedupes_and_never_reports_absence() -> None:
    raw = ["a.md", " a.md ", {"path": "b.md"}, {"url": "https://x.dev"}, {"path": "", "url": "skipped"}, 4]
    assert parse_sources(raw) == ["a.md", "b.md", "https://x.dev"]
    assert parse_sources(json.dumps(raw)) == parse_sources(raw)
    assert parse_sources(None) == []
    assert parse_sources("{}") == []
