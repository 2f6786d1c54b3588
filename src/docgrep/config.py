"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

DEFAULT_REFERENCES_DIR = Path("references")


@dataclass(slots=True)
class AppConfig:
    references_dir: Path | None = None
    max_results: int = 10
    context_lines: int = 2
    max_contexts: int = 3
    extensions: Tuple[str, ...] = (".md",)

    def __post_init__(self) -> None:
        if self.references_dir is None:
            self.references_dir = DEFAULT_REFERENCES_DIR

    def resolve_references_dir(self, base_dir: Path | None = None) -> Path:
        if self.references_dir is None:
            self.references_dir = DEFAULT_REFERENCES_DIR
        if Path(self.references_dir).is_absolute() or base_dir is None:
            return Path(self.references_dir)
        return base_dir / self.references_dir
