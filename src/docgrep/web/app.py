"""FastAPI application exposing docgrep search over HTTP."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from docgrep import __version__
from docgrep.config import AppConfig
from docgrep.errors import InvalidQueryParameter
from docgrep.index.formatting import to_records
from docgrep.index.search import Searcher

LOGGER = logging.getLogger(__name__)

MAX_RESULTS_LIMIT = 50

app = FastAPI(title="docgrep", version=__version__)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


class SearchPayload(BaseModel):
    query: str
    root: Path | None = None
    max_results: int = 10
    context_lines: int = 2


def _resolve_root(request: Request, root: Path | None) -> Path:
    if root is None:
        root = getattr(request.app.state, "references_dir", None)
    config = AppConfig(references_dir=root)
    return config.resolve_references_dir(Path.cwd())


@app.on_event("startup")
async def startup_event() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


@app.post("/search")
async def search_documents(payload: SearchPayload, request: Request) -> Dict[str, List[Dict[str, Any]]]:
    query = payload.query.strip()
    if not query:
        raise HTTPException(status_code=400, detail="Empty query")

    max_results = max(1, min(payload.max_results, MAX_RESULTS_LIMIT))
    if payload.context_lines < 0:
        raise HTTPException(status_code=400, detail="context_lines must not be negative")

    references_dir = _resolve_root(request, payload.root)
    if not references_dir.is_dir():
        raise HTTPException(
            status_code=404,
            detail=f"References directory not found at {references_dir}.",
        )

    searcher = Searcher(references_dir, context_lines=payload.context_lines, logger=LOGGER)
    try:
        results = await asyncio.to_thread(searcher.search, query, max_results=max_results)
    except InvalidQueryParameter as exc:  # pragma: no cover - clamped above
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"results": to_records(results)}


@app.get("/documents")
async def list_documents(request: Request, root: Path | None = None) -> Dict[str, Any]:
    """List every document in the references directory."""
    references_dir = _resolve_root(request, root)
    if not references_dir.is_dir():
        return {"documents": [], "count": 0}

    searcher = Searcher(references_dir, logger=LOGGER)
    documents = await asyncio.to_thread(
        lambda: [
            {
                "file": document.path,
                "title": document.title,
                "source_url": document.source_url,
                "fetched_at": document.fetched_at,
            }
            for document in searcher.iter_documents()
        ]
    )
    return {"documents": documents, "count": len(documents)}
