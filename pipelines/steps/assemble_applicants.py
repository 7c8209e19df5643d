from __future__ import annotations

import concurrent.futures as _fut
import logging
from typing import List, Optional

from config.settings import Settings, get_settings
from models.applicant_record import ApplicantRecord
from pipelines.runner import RunContext
from ports.documents import DocumentSourcePort
from services.applicant_builder import build_applicant
from utils.errors import ApplicantRowError


logger = logging.getLogger(__name__)


class AssembleApplicants:
    """Build an ApplicantRecord per loaded row.

    Rows are assembled in parallel (document fetches dominate) and kept in
    sheet order. A row with a bad timestamp or missing identity is recorded in
    ``ctx.failures`` and skipped; the rest of the batch continues.
    """

    def __init__(
        self,
        document_source: DocumentSourcePort,
        settings: Optional[Settings] = None,
        max_workers: Optional[int] = None,
    ) -> None:
        self.document_source = document_source
        self.settings = settings or get_settings()
        self.max_workers = max(1, max_workers or self.settings.assemble_concurrency)

    def run(self, ctx: RunContext) -> RunContext:
        if ctx.columns is None:
            raise RuntimeError("AssembleApplicants needs sheet columns; run LoadSheetRows first")

        def _build(row):
            return build_applicant(
                row,
                ctx.columns,
                ctx.sheet_name or "",
                ctx.sheet_id or "",
                self.document_source,
                settings=self.settings,
            )

        with _fut.ThreadPoolExecutor(max_workers=self.max_workers) as ex:
            futures = [(number, ex.submit(_build, row)) for number, row in ctx.rows]

        applicants: List[ApplicantRecord] = []
        for number, fut in futures:
            try:
                applicants.append(fut.result())
            except ApplicantRowError as e:
                e.row_number = number
                ctx.failures.append((number, str(e)))
                logger.error(
                    f"Skipping applicant row: {e}",
                    extra={
                        "step": "assemble_applicants",
                        "status": "failed",
                        "sheet": ctx.sheet_name,
                        "row": number,
                        "error": type(e).__name__,
                    },
                )

        ctx.applicants = applicants
        ctx.meta["applicants_assembled"] = len(applicants)
        ctx.meta["rows_failed"] = len(ctx.failures)
        return ctx
