"""Discovering the documentation site a corpus was crawled from."""

from __future__ import annotations

from urllib.parse import urlsplit

from docgrep.index.search import Searcher
from docgrep.models import UNKNOWN


def base_url(source_url: str) -> str | None:
    """Strip the last path segment: ``https://x/docs/a.html`` -> ``https://x/docs``."""
    parts = urlsplit(source_url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        return None
    directory = parts.path.rsplit("/", 1)[0] if "/" in parts.path else ""
    return f"{parts.scheme}://{parts.netloc}{directory}"


def find_source_base_url(searcher: Searcher) -> str | None:
    """Base URL of the first document that records where it was fetched from."""
    for document in searcher.iter_documents():
        source_url = document.source_url
        if source_url == UNKNOWN:
            continue
        url = base_url(source_url)
        if url is not None:
            searcher.logger.debug("Source URL taken from %s", document.path)
            return url
        searcher.logger.debug("Ignoring unusable source_url %r in %s", source_url, document.path)
    return None
