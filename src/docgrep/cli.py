"""Command line interface for docgrep."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import typer
from rich.console import Console
from rich.markup import escape

from docgrep.config import AppConfig
from docgrep.errors import InvalidQueryParameter
from docgrep.index.formatting import format_text, to_records
from docgrep.index.search import Searcher
from docgrep.index.sources import find_source_base_url
from docgrep.web.app import app as web_app


console = Console()
app = typer.Typer(help="docgrep - keyword search over crawled documentation")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _resolve_root(root: Path | None) -> Path:
    config = AppConfig(references_dir=root)
    return config.resolve_references_dir(Path.cwd())


@app.command()
def search(
    query: List[str] = typer.Argument(..., help="Query keywords"),
    max_results: int = typer.Option(
        AppConfig().max_results, "--max-results", "-n", help="Maximum number of results"
    ),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
    root: Path = typer.Option(None, "--root", help="References directory"),
    context_lines: int = typer.Option(
        AppConfig().context_lines, min=0, help="Lines of context around each hit"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Search the documentation references."""
    _setup_logging(verbose)
    config = AppConfig(references_dir=root, max_results=max_results, context_lines=context_lines)
    references_dir = config.resolve_references_dir(Path.cwd())
    text = " ".join(query)

    searcher = Searcher(
        references_dir,
        extensions=config.extensions,
        context_lines=config.context_lines,
    )
    if not searcher.corpus_exists():
        console.print(f"[red]Error: {escape(str(references_dir))} not found.[/red]", soft_wrap=True)

    try:
        results = searcher.search(text, max_results=config.max_results)
    except InvalidQueryParameter as exc:
        raise typer.BadParameter(str(exc), param_hint="'--max-results'") from exc

    if as_json:
        console.print_json(data=to_records(results))
        return

    console.print(
        format_text(results, text, max_contexts=config.max_contexts),
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


@app.command()
def update(
    root: Path = typer.Option(None, "--root", help="References directory"),
) -> None:
    """Show how to refresh the references from their source site."""
    references_dir = _resolve_root(root)
    source_url = find_source_base_url(Searcher(references_dir))
    if source_url is None:
        console.print("[red]Error: Could not determine source URL from existing docs.[/red]")
        console.print("Please re-run the documentation crawler manually to update.")
        raise typer.Exit(code=1)

    console.print(f"Source URL: {source_url}", markup=False, soft_wrap=True)
    console.print("To update, re-run the documentation crawler with the source URL.")


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
    root: Path = typer.Option(None, "--root", help="References directory"),
) -> None:
    """Start the HTTP search API."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - defensive
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    references_dir = _resolve_root(root)
    if not references_dir.is_dir():
        console.print("[yellow]Warning: references directory not found, searches will be empty.[/yellow]")

    web_app.state.references_dir = references_dir
    console.print(
        f"Starting web interface on http://{host}:{port} (references: {references_dir})",
        soft_wrap=True,
    )
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )
