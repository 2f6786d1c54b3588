"""Keyword search over a references directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence

from docgrep.errors import CorpusNotFound, InvalidQueryParameter
from docgrep.index.context import build_snippets
from docgrep.ingestion.frontmatter import Decoder, yaml_decoder
from docgrep.ingestion.markdown_loader import load_document
from docgrep.models import DocumentRecord, SearchResult
from docgrep.utils.files import iter_document_paths
from docgrep.utils.text import score, tokenize

LOGGER = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".md",)


def validate_max_results(max_results: object) -> int:
    if isinstance(max_results, bool) or not isinstance(max_results, int) or max_results < 1:
        raise InvalidQueryParameter(
            f"max_results must be a positive integer, got {max_results!r}"
        )
    return max_results


def rank(results: Iterable[SearchResult], max_results: int) -> List[SearchResult]:
    """Order results by match count, keeping discovery order on ties."""
    ordered = sorted(results, key=lambda result: result.match_count, reverse=True)
    return ordered[:max_results]


class Searcher:
    """Scans every document under ``references_dir`` on each query.

    Nothing is cached between calls: each search re-reads the corpus, so
    edits on disk are visible immediately.
    """

    def __init__(
        self,
        references_dir: Path,
        *,
        relative_to: Path | None = None,
        extensions: Sequence[str] | None = DEFAULT_EXTENSIONS,
        context_lines: int = 2,
        decoder: Decoder = yaml_decoder,
        logger: logging.Logger | None = None,
    ) -> None:
        self.references_dir = Path(references_dir)
        self.relative_to = Path(relative_to) if relative_to is not None else None
        self.extensions = extensions
        self.context_lines = context_lines
        self.decoder = decoder
        self.logger = logger or LOGGER

    def corpus_exists(self) -> bool:
        return self.references_dir.is_dir()

    def iter_documents(self) -> Iterator[DocumentRecord]:
        """Yield parsed documents in walk order, skipping unreadable files."""
        if not self.corpus_exists():
            self.logger.error("%s", CorpusNotFound(self.references_dir))
            return

        base = self.references_dir.resolve()
        relative_to = (self.relative_to or base.parent).resolve()
        for path in iter_document_paths(base, self.extensions, logger=self.logger):
            document = load_document(
                path, relative_to=relative_to, decoder=self.decoder, logger=self.logger
            )
            if document is not None:
                yield document

    def search(self, query: str, *, max_results: int = 10) -> List[SearchResult]:
        validate_max_results(max_results)
        tokens = tokenize(query)
        if not tokens:
            self.logger.debug("Empty query, nothing to search")
            return []

        results: List[SearchResult] = []
        for document in self.iter_documents():
            match_count = score(document.body, tokens)
            if match_count <= 0:
                continue
            results.append(
                SearchResult(
                    file=document.path,
                    match_count=match_count,
                    contexts=build_snippets(document.body, tokens, self.context_lines),
                    source_url=document.source_url,
                    fetched_at=document.fetched_at,
                )
            )
        self.logger.debug("%d documents matched %r", len(results), query)
        return rank(results, max_results)
