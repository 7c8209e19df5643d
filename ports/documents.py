from __future__ import annotations

from typing import Protocol


class DocumentSourcePort(Protocol):
    source_name: str

    def fetch(self, reference: str) -> str:
        """Return the text of a referenced document, "" when it is missing."""
        ...
