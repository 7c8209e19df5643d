from __future__ import annotations

from typing import List, Protocol

from models.sheet_columns import SheetColumns


class RowSourcePort(Protocol):
    sheet_name: str
    sheet_id: str
    columns: SheetColumns

    def rows(self) -> List[List[str]]:
        ...
