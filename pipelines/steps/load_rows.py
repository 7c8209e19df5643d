from __future__ import annotations

from pipelines.runner import RunContext
from ports.rows import RowSourcePort


class LoadSheetRows:
    def __init__(self, source: RowSourcePort) -> None:
        self.source = source

    def run(self, ctx: RunContext) -> RunContext:
        ctx.sheet_name = self.source.sheet_name
        ctx.sheet_id = self.source.sheet_id
        ctx.columns = self.source.columns
        # Header is sheet row 1
        ctx.rows = [
            (number, row)
            for number, row in enumerate(self.source.rows(), start=2)
            if row
        ]
        ctx.meta["rows_total"] = len(ctx.rows)
        return ctx
