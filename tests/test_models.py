"""Tests for core data models."""

from __future__ import annotations

import dataclasses
import datetime

import pytest

from docgrep.models import UNKNOWN, DocumentRecord, SearchResult


class TestDocumentRecord:
    """Test DocumentRecord dataclass."""

    def test_metadata_fields(self) -> None:
        """Should expose source_url and fetched_at from metadata."""
        record = DocumentRecord(
            path="references/a.md",
            metadata={"title": "A", "source_url": "https://x/y", "fetched_at": "2024-01-01"},
            body="text",
        )

        assert record.title == "A"
        assert record.source_url == "https://x/y"
        assert record.fetched_at == "2024-01-01"

    def test_defaults_to_unknown(self) -> None:
        """Should fall back to Unknown when metadata lacks the fields."""
        record = DocumentRecord(path="references/guide.md", metadata={}, body="")

        assert record.source_url == UNKNOWN == "Unknown"
        assert record.fetched_at == "Unknown"
        assert record.title == "guide"

    def test_datetime_rendered_iso(self) -> None:
        """Should render decoded timestamps as ISO strings."""
        fetched = datetime.datetime(2024, 5, 1, 10, 0, tzinfo=datetime.timezone.utc)
        record = DocumentRecord(path="a.md", metadata={"fetched_at": fetched}, body="")

        assert record.fetched_at == "2024-05-01T10:00:00+00:00"

    def test_immutable(self) -> None:
        """Should not allow mutation after construction."""
        record = DocumentRecord(path="a.md", metadata={}, body="")

        with pytest.raises(dataclasses.FrozenInstanceError):
            record.body = "changed"  # type: ignore[misc]


class TestSearchResult:
    """Test SearchResult dataclass."""

    def test_to_dict(self) -> None:
        """Should produce the structured output shape."""
        result = SearchResult(
            file="references/a.md",
            match_count=3,
            contexts=["> hit"],
            source_url="https://x/y",
            fetched_at="2024-01-01",
        )

        assert result.to_dict() == {
            "file": "references/a.md",
            "matches": 3,
            "contexts": ["> hit"],
            "source_url": "https://x/y",
            "fetched_at": "2024-01-01",
        }

    def test_defaults(self) -> None:
        """Should default source fields to Unknown."""
        result = SearchResult(file="a.md", match_count=1)

        assert result.contexts == []
        assert result.source_url == "Unknown"
        assert result.fetched_at == "Unknown"
