"""Loading reference documents from disk."""

from __future__ import annotations

import logging
from pathlib import Path

from docgrep.errors import FileReadFailure
from docgrep.ingestion.frontmatter import Decoder, parse_frontmatter, yaml_decoder
from docgrep.models import DocumentRecord

LOGGER = logging.getLogger(__name__)


def display_path(path: Path, relative_to: Path) -> str:
    """Return ``path`` relative to ``relative_to`` with POSIX separators."""
    try:
        return path.relative_to(relative_to).as_posix()
    except ValueError:
        return path.as_posix()


def load_document(
    path: Path,
    *,
    relative_to: Path,
    decoder: Decoder = yaml_decoder,
    logger: logging.Logger | None = None,
) -> DocumentRecord | None:
    """Read and split a document, or return ``None`` if it cannot be read."""
    log = logger or LOGGER
    try:
        with path.open("r", encoding="utf-8") as handle:
            content = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        log.warning("%s", FileReadFailure(path, exc))
        return None

    metadata, body = parse_frontmatter(content, decoder, logger=log)
    return DocumentRecord(
        path=display_path(path, relative_to),
        metadata=metadata,
        body=body,
    )
