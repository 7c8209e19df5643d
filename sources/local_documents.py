from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional
from urllib.parse import parse_qs, urlparse

from config.settings import Settings
from sources.registry import register


logger = logging.getLogger(__name__)


def reference_name(reference: str) -> str:
    """File name a document reference points at.

    Plain paths keep their base name; Drive links resolve to the file id.
    """
    ref = reference.strip()
    parsed = urlparse(ref)
    if parsed.scheme in ("http", "https"):
        ids = parse_qs(parsed.query).get("id")
        if ids:
            return ids[0]
        parts = [p for p in parsed.path.split("/") if p]
        # .../file/d/<id>/view
        if "d" in parts and parts.index("d") + 1 < len(parts):
            return parts[parts.index("d") + 1]
        return parts[-1] if parts else ""
    return Path(ref).name


class LocalDocumentSource:
    """Reads exported document text from a local directory."""

    source_name = "local"

    def __init__(self, documents_dir: str | Path) -> None:
        self.documents_dir = Path(documents_dir)

    def _resolve(self, reference: str) -> Optional[Path]:
        name = reference_name(reference)
        if not name:
            return None
        for candidate in (self.documents_dir / name, self.documents_dir / f"{name}.txt"):
            if candidate.is_file():
                return candidate
        return None

    def fetch(self, reference: str) -> str:
        path = self._resolve(reference)
        if path is None:
            logger.info(f"No local document for {reference!r} in {self.documents_dir}")
            return ""
        return path.read_text(encoding="utf-8", errors="replace")


def _factory(settings: Settings, documents_dir: Optional[str] = None) -> LocalDocumentSource:
    return LocalDocumentSource(documents_dir or settings.documents_dir)


register(LocalDocumentSource.source_name, _factory)
