"""Context snippet extraction around query hits."""

from __future__ import annotations

from typing import List, Sequence

HIT_PREFIX = "> "
CONTEXT_PREFIX = "  "


def find_hit_lines(lines: Sequence[str], tokens: Sequence[str]) -> List[int]:
    """Indices of lines containing any token, case-insensitively."""
    if not tokens:
        return []
    lowered_tokens = [token.lower() for token in tokens]
    return [
        index
        for index, line in enumerate(lines)
        if any(token in line.lower() for token in lowered_tokens)
    ]


def cluster_hits(hits: Sequence[int], context_lines: int = 2) -> List[List[int]]:
    """Group sorted hit indices whose context windows would overlap or touch."""
    if not hits:
        return []
    max_gap = 2 * context_lines + 1
    clusters = [[hits[0]]]
    for previous, current in zip(hits, hits[1:]):
        if current - previous > max_gap:
            clusters.append([current])
        else:
            clusters[-1].append(current)
    return clusters


def build_snippets(body: str, tokens: Sequence[str], context_lines: int = 2) -> List[str]:
    """Render one snippet per cluster of hit lines.

    Hit lines are prefixed with ``"> "`` and surrounding context lines with
    two spaces. Every cluster is returned; callers decide how many to show.
    """
    lines = body.split("\n")
    hits = find_hit_lines(lines, tokens)
    snippets: List[str] = []
    for cluster in cluster_hits(hits, context_lines):
        start = max(0, cluster[0] - context_lines)
        end = min(len(lines), cluster[-1] + context_lines + 1)
        members = set(cluster)
        snippets.append(
            "\n".join(
                (HIT_PREFIX if index in members else CONTEXT_PREFIX) + lines[index]
                for index in range(start, end)
            )
        )
    return snippets
