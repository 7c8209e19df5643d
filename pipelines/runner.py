from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Tuple

from utils.logging_setup import init_logging


@dataclass
class RunContext:
    sheet_name: Optional[str] = None
    sheet_id: Optional[str] = None
    columns: Optional[object] = None
    # (row_number, cells); row numbers are 1-based sheet rows, header = 1
    rows: List[Tuple[int, List[str]]] = field(default_factory=list)
    applicants: list = field(default_factory=list)
    failures: List[Tuple[int, str]] = field(default_factory=list)
    meta: dict = field(default_factory=dict)


class Step(Protocol):
    def run(self, ctx: RunContext) -> RunContext:
        ...


class Pipeline:
    def __init__(self, steps: List[Step]):
        self.steps = steps

    def run(self, ctx: RunContext) -> RunContext:
        # Make logging idempotent for any direct runner use
        init_logging()
        for step in self.steps:
            ctx = step.run(ctx)
        return ctx
