"""Frontmatter splitting with pluggable metadata decoders.

A document may start with a ``---`` delimited block of metadata written by
the conversion pipeline (``title``, ``source_url``, ``fetched_at``...).
Splitting the block from the body never depends on the block decoding
cleanly: a malformed block yields empty metadata and the body is still
returned for indexing.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Dict, Tuple

import yaml

from docgrep.errors import MetadataDecodeFailure

LOGGER = logging.getLogger(__name__)

FRONTMATTER_RE = re.compile(r"^---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)(.*)", re.DOTALL)

Decoder = Callable[[str], Dict[str, Any]]


def yaml_decoder(text: str) -> Dict[str, Any]:
    """Decode a frontmatter block as YAML."""
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise MetadataDecodeFailure(f"Invalid YAML frontmatter: {exc}") from exc
    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise MetadataDecodeFailure(
            f"Frontmatter must be a mapping, got {type(parsed).__name__}"
        )
    return parsed


def simple_decoder(text: str) -> Dict[str, Any]:
    """Decode ``key: value`` lines, ignoring anything without a colon."""
    metadata: Dict[str, Any] = {}
    for line in text.splitlines():
        if ":" not in line:
            continue
        key, value = line.split(":", 1)
        key = key.strip()
        if key:
            metadata[key] = value.strip().strip('"')
    return metadata


def parse_frontmatter(
    raw_text: str,
    decoder: Decoder = yaml_decoder,
    *,
    logger: logging.Logger | None = None,
) -> Tuple[Dict[str, Any], str]:
    """Split ``raw_text`` into ``(metadata, body)``.

    Without a leading delimited block the metadata is empty and the body is
    the unchanged input.
    """
    match = FRONTMATTER_RE.match(raw_text)
    if match is None:
        return {}, raw_text

    block, body = match.group(1), match.group(2)
    try:
        metadata = decoder(block)
    except MetadataDecodeFailure as exc:
        (logger or LOGGER).warning("Ignoring frontmatter: %s", exc)
        metadata = {}
    return metadata, body
