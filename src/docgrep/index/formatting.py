"""Rendering search results as records or a plain-text report."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from docgrep.models import SearchResult

SEPARATOR = "-" * 40
SNIPPET_END = "   ..."


def to_records(results: Sequence[SearchResult]) -> List[Dict[str, Any]]:
    """Structured output, one JSON-ready mapping per result."""
    return [result.to_dict() for result in results]


def format_text(results: Sequence[SearchResult], query: str, *, max_contexts: int = 3) -> str:
    """Numbered report showing at most ``max_contexts`` snippets per file."""
    if not results:
        return f"No matches found for '{query}'."

    lines = [
        f"Search Results for '{query}'",
        f"Found matches in {len(results)} files.",
        "",
    ]
    for position, result in enumerate(results, start=1):
        lines.append(f"{position}. {result.file}")
        lines.append(f"   Matches: {result.match_count} | Source: {result.source_url}")
        lines.append(f"   Fetched: {result.fetched_at}")
        lines.append(SEPARATOR)
        for context in result.contexts[:max_contexts]:
            lines.append(context)
            lines.append(SNIPPET_END)
        hidden = len(result.contexts) - max_contexts
        if hidden > 0:
            lines.append(f"   (+{hidden} more snippets)")
        lines.append("")
    return "\n".join(lines).rstrip("\n")
