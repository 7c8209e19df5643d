from __future__ import annotations

import csv
from pathlib import Path
from typing import List, Optional

from models.sheet_columns import SheetColumns


class SheetCsvSource:
    """Rows of an applicant sheet exported as CSV (header row first)."""

    def __init__(self, path: str | Path, sheet_name: str, sheet_id: Optional[str] = None) -> None:
        self.path = Path(path)
        self.sheet_name = sheet_name
        self.sheet_id = sheet_id or self.path.stem
        header, *body = self._read()
        self.columns = SheetColumns.from_header(header)
        self._rows = body

    def _read(self) -> List[List[str]]:
        with self.path.open("r", encoding="utf-8-sig", newline="") as f:
            rows = [row for row in csv.reader(f)]
        if not rows:
            raise ValueError(f"Sheet export is empty: {self.path}")
        return rows

    def rows(self) -> List[List[str]]:
        """Body rows in sheet order; blank rows come back as [] so numbering holds."""
        # Sheets exports pad short rows with empty cells; trim them back
        trimmed = []
        for row in self._rows:
            end = len(row)
            while end and not row[end - 1].strip():
                end -= 1
            trimmed.append(row[:end])
        return trimmed
