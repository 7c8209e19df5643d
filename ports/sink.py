from __future__ import annotations

from typing import Protocol

from models.applicant_record import ApplicantRecord


class ApplicantSinkPort(Protocol):
    def accept(self, record: ApplicantRecord) -> int:
        ...
