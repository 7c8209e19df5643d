from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, ConfigDict


# Header substrings per field, checked in order against each lowercased header
# cell. A cell belongs to the first field it matches, so the specific entries
# come before generic ones like "name" ("GitHub username").
_HEADER_MATCHERS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("timestamp", ("timestamp",)),
    ("sent_email_received", ("sent email that we received",)),
    ("email", ("email address",)),
    ("value_reflected", ("value reflected",)),
    ("value_violated", ("value violated",)),
    ("value_in_tension_1", ("value in tension [1]", "values in tension [1]")),
    ("value_in_tension_2", ("value in tension [2]", "values in tension [2]")),
    ("github", ("github",)),
    ("linkedin", ("linkedin",)),
    ("portfolio", ("portfolio",)),
    ("website", ("website",)),
    ("resume", ("resume",)),
    ("materials", ("materials",)),
    ("phone", ("phone",)),
    ("location", ("location",)),
    ("status", ("status",)),
    ("name", ("name",)),
)

REQUIRED_COLUMNS = ("timestamp", "name", "email")


def _match_header(cell: str) -> str | None:
    text = cell.strip().lower()
    if not text:
        return None
    for field, needles in _HEADER_MATCHERS:
        if any(needle in text for needle in needles):
            return field
    return None


class SheetColumns(BaseModel):
    """Zero-based column positions for one applicant sheet.

    Position 0 always holds the form timestamp, so 0 doubles as "not present"
    for every optional column.
    """

    timestamp: int = 0
    name: int = 0
    email: int = 0
    location: int = 0
    phone: int = 0
    github: int = 0
    resume: int = 0
    materials: int = 0
    status: int = 0
    linkedin: int = 0
    portfolio: int = 0
    website: int = 0
    sent_email_received: int = 0
    value_reflected: int = 0
    value_violated: int = 0
    value_in_tension_1: int = 0
    value_in_tension_2: int = 0

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_header(cls, header: Sequence[str]) -> "SheetColumns":
        """Locate each field in a sheet's header row; the first matching cell wins."""
        positions: dict[str, int] = {}
        for index, cell in enumerate(header):
            field = _match_header(cell or "")
            if field and field not in positions:
                positions[field] = index

        missing = [c for c in REQUIRED_COLUMNS if c not in positions]
        if missing:
            raise ValueError(f"Sheet header is missing required columns: {', '.join(missing)}")
        return cls(**positions)
