"""Core docgrep data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Any, Dict, List

UNKNOWN = "Unknown"


@dataclass(slots=True, frozen=True)
class DocumentRecord:
    """A corpus document split into frontmatter metadata and body text."""

    path: str
    metadata: Dict[str, Any]
    body: str

    @property
    def title(self) -> str:
        return _as_text(self.metadata.get("title")) or PurePosixPath(self.path).stem

    @property
    def source_url(self) -> str:
        return _as_text(self.metadata.get("source_url")) or UNKNOWN

    @property
    def fetched_at(self) -> str:
        return _as_text(self.metadata.get("fetched_at")) or UNKNOWN


@dataclass(slots=True, frozen=True)
class SearchResult:
    """A matching document with its hit count and context snippets."""

    file: str
    match_count: int
    contexts: List[str] = field(default_factory=list)
    source_url: str = UNKNOWN
    fetched_at: str = UNKNOWN

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file": self.file,
            "matches": self.match_count,
            "contexts": list(self.contexts),
            "source_url": self.source_url,
            "fetched_at": self.fetched_at,
        }


def _as_text(value: Any) -> str:
    """Render a decoded metadata scalar as display text."""
    if value is None:
        return ""
    # YAML turns unquoted timestamps into date/datetime objects
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)
