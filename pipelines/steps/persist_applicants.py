from __future__ import annotations

from typing import Callable, Optional

from pipelines.runner import RunContext
from ports.sink import ApplicantSinkPort


class PersistApplicants:
    def __init__(
        self,
        sink: ApplicantSinkPort,
        on_processed: Optional[Callable[[int, int, str], None]] = None,
    ) -> None:
        self.sink = sink
        self.on_processed = on_processed

    def run(self, ctx: RunContext) -> RunContext:
        total = len(ctx.applicants)
        processed = 0
        for record in ctx.applicants:
            self.sink.accept(record)
            processed += 1
            if self.on_processed:
                self.on_processed(processed, total, record.email)
        ctx.meta["processed_applicants"] = processed
        return ctx
