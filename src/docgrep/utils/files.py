"""Utility helpers for walking a references directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Set, Tuple

LOGGER = logging.getLogger(__name__)


def normalize_extensions(extensions: Optional[Iterable[str]]) -> Optional[Tuple[str, ...]]:
    """Return lowercase dotted suffixes; ``md`` and ``.md`` are equivalent."""
    if extensions is None:
        return None
    return tuple("." + ext.strip().lstrip(".").lower() for ext in extensions if ext.strip())


def iter_document_paths(
    root: Path,
    extensions: Optional[Iterable[str]] = None,
    *,
    logger: logging.Logger | None = None,
) -> Iterator[Path]:
    """Yield absolute file paths under ``root`` in sorted, depth-first order.

    Entries are visited by name within each directory, so an unchanged tree
    always enumerates identically. Anything that resolves outside ``root``
    (a symlink pointing elsewhere, for instance) is skipped with a warning.
    Calling the function again restarts the walk from scratch.
    """
    log = logger or LOGGER
    suffixes = normalize_extensions(extensions)
    base = Path(root).resolve()
    yield from _walk(base, base, suffixes, set(), log)


def _walk(
    directory: Path,
    base: Path,
    suffixes: Optional[Tuple[str, ...]],
    seen: Set[Path],
    log: logging.Logger,
) -> Iterator[Path]:
    seen.add(directory.resolve())
    try:
        entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
    except OSError as exc:
        log.warning("Cannot list %s: %s", directory, exc)
        return

    for entry in entries:
        try:
            resolved = entry.resolve()
        except (OSError, RuntimeError) as exc:
            log.warning("Cannot resolve %s: %s", entry, exc)
            continue
        if not resolved.is_relative_to(base):
            log.warning("Skipping %s: resolves outside %s", entry, base)
            continue

        if entry.is_dir():
            if resolved in seen:
                log.debug("Skipping already visited directory %s", entry)
                continue
            yield from _walk(entry, base, suffixes, seen, log)
        elif entry.is_file():
            if suffixes is not None and entry.suffix.lower() not in suffixes:
                continue
            yield entry
