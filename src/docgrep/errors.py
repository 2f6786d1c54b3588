"""Error types raised and reported by the search engine."""

from __future__ import annotations

from pathlib import Path


class DocgrepError(Exception):
    """Base class for docgrep errors."""


class CorpusNotFound(DocgrepError, FileNotFoundError):
    def __init__(self, root: Path) -> None:
        super().__init__(f"References directory not found: {root}")
        self.root = root


class FileReadFailure(DocgrepError, OSError):
    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(f"Error reading {path}: {reason}")
        self.path = path


class MetadataDecodeFailure(DocgrepError, ValueError):
    """Raised by frontmatter decoders when the metadata block is malformed."""


class InvalidQueryParameter(DocgrepError, ValueError):
    """Raised before a scan when a search parameter is out of range."""
