from __future__ import annotations

from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, computed_field, model_validator


class ApplicantRecord(BaseModel):
    """Canonical applicant assembled from one sheet row and its documents."""

    # Identity
    name: str
    email: str
    role: str
    sheet_id: str
    submitted_time: datetime

    # Contact
    phone: str = ""
    country_code: str
    location: str = ""

    # Profile links
    github: str = ""
    gitlab: str = ""
    linkedin: str = ""
    portfolio: str = ""
    website: str = ""

    # Triage
    status: str
    sent_email_received: bool = True

    # Values picked on the form
    value_reflected: str = ""
    value_violated: str = ""
    values_in_tension: tuple[str, ...] = ()

    # Documents
    resume: str = ""
    materials: str = ""
    resume_contents: str = ""
    materials_contents: str = ""

    # Sections extracted from the materials document
    work_samples: str = ""
    writing_samples: str = ""
    analysis_samples: str = ""
    presentation_samples: str = ""
    exploratory_samples: str = ""
    question_technically_challenging: str = ""
    question_proud_of: str = ""
    question_happiest: str = ""
    question_unhappiest: str = ""
    question_value_reflected: str = ""
    question_value_violated: str = ""
    question_values_in_tension: str = ""
    question_why_company: str = ""

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def _one_code_host(self) -> "ApplicantRecord":
        if self.github and self.gitlab:
            raise ValueError("github and gitlab handles are mutually exclusive")
        if not self.country_code:
            raise ValueError("country_code must be set")
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def github_url(self) -> str:
        return f"https://github.com/{self.github.lstrip('@')}" if self.github else ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def gitlab_url(self) -> str:
        return f"https://gitlab.com/{self.gitlab.lstrip('@')}" if self.gitlab else ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def first_name(self) -> str:
        parts = self.name.split()
        return parts[0] if parts else ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def last_name(self) -> str:
        parts = self.name.split()
        return " ".join(parts[1:])

    def to_row(self) -> Dict[str, Any]:
        """Flatten into storable column values (used by the SQLite sink)."""
        row = self.model_dump()
        row["submitted_time"] = self.submitted_time.isoformat()
        row["values_in_tension"] = ", ".join(self.values_in_tension)
        row["sent_email_received"] = 1 if self.sent_email_received else 0
        return row
