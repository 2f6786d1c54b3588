"""Query tokenization and keyword occurrence scoring."""

from __future__ import annotations

from typing import List, Sequence


def tokenize(query: str) -> List[str]:
    """Lowercase ``query`` and split it on whitespace runs."""
    return query.lower().split()


def count_occurrences(haystack: str, token: str) -> int:
    """Count occurrences of ``token``, resuming the scan after each match.

    The scan skips ahead by the token length, so self-overlapping hits are
    not counted twice: ``"aa"`` occurs once in ``"aaa"``.
    """
    if not token:
        return 0
    count = 0
    position = haystack.find(token)
    while position != -1:
        count += 1
        position = haystack.find(token, position + len(token))
    return count


def score(body: str, tokens: Sequence[str]) -> int:
    """Total occurrences of all ``tokens`` in ``body``, case-insensitively."""
    if not tokens:
        return 0
    lowered = body.lower()
    return sum(count_occurrences(lowered, token.lower()) for token in tokens)
