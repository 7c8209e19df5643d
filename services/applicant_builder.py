from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional, Sequence

from config.field_rules import FIELD_RULES
from config.settings import Settings, get_settings
from models.applicant_record import ApplicantRecord
from models.field_extraction_rule import FieldExtractionRule
from models.sheet_columns import SheetColumns
from ports.documents import DocumentSourcePort
from services.field_extractor import extract_all
from services.handle_normalizer import normalize_handle
from services.phone_normalizer import normalize_phone
from utils.errors import InvalidTimestampError, MissingIdentityError


logger = logging.getLogger(__name__)

DEFAULT_STATUS = "Needs to be triaged"

# Substring -> canonical status, first match wins
STATUS_BUCKETS: tuple[tuple[str, str], ...] = (
    ("next steps", "Next steps"),
    ("deferred", "Deferred"),
    ("declined", "Declined"),
    ("hired", "Hired"),
)


def optional_cell(row: Sequence[str], index: int) -> str:
    """Trimmed cell value, or "" for an absent (0) or out-of-range column."""
    if index == 0 or index >= len(row):
        return ""
    return (row[index] or "").strip()


def normalize_status(raw: Optional[str]) -> str:
    status = (raw or "").strip().lower()
    if not status:
        return DEFAULT_STATUS
    for needle, canonical in STATUS_BUCKETS:
        if needle in status:
            return canonical
    return status


def parse_submitted_time(raw: str, utc_offset: str, time_format: str) -> datetime:
    """Parse the sheet's local timestamp with its fixed offset and return UTC."""
    value = (raw or "").strip()
    try:
        local = datetime.strptime(f"{value} {utc_offset}", f"{time_format} %z")
    except ValueError as e:
        raise InvalidTimestampError(f"Unparseable submission timestamp {value!r}: {e}") from e
    return local.astimezone(timezone.utc)


def _identity_cell(row: Sequence[str], index: int, label: str) -> str:
    if index >= len(row) or not (row[index] or "").strip():
        raise MissingIdentityError(f"Row has no {label} in column {index}")
    return row[index].strip()


def _fetch_text(document_source: DocumentSourcePort, reference: str) -> str:
    if not reference:
        return ""
    try:
        return document_source.fetch(reference) or ""
    except Exception as e:
        logger.warning(
            f"Could not fetch document {reference}: {e}",
            extra={"step": "fetch_document", "status": "empty", "error": type(e).__name__},
        )
        return ""


def build_applicant(
    row: Sequence[str],
    columns: SheetColumns,
    sheet_name: str,
    sheet_id: str,
    document_source: DocumentSourcePort,
    *,
    settings: Optional[Settings] = None,
    rules: Sequence[FieldExtractionRule] = FIELD_RULES,
) -> ApplicantRecord:
    """Assemble one applicant record from a sheet row.

    Optional columns fall back to empty values. A missing or malformed
    timestamp, name or email raises an ``ApplicantRowError`` subclass so the
    caller can skip the row and keep going.
    """
    settings = settings or get_settings()

    if columns.timestamp >= len(row):
        raise InvalidTimestampError(f"Row has no timestamp in column {columns.timestamp}")
    submitted_time = parse_submitted_time(
        row[columns.timestamp],
        settings.submission_utc_offset,
        settings.submission_time_format,
    )
    name = _identity_cell(row, columns.name, "name")
    email = _identity_cell(row, columns.email, "email")

    status = normalize_status(optional_cell(row, columns.status))
    location = optional_cell(row, columns.location)
    phone, country_code, _valid = normalize_phone(
        optional_cell(row, columns.phone), location, settings.home_country
    )
    github, gitlab = normalize_handle(optional_cell(row, columns.github))

    values_in_tension = tuple(
        value
        for value in (
            optional_cell(row, columns.value_in_tension_1).lower(),
            optional_cell(row, columns.value_in_tension_2).lower(),
        )
        if value
    )

    resume = optional_cell(row, columns.resume)
    materials = optional_cell(row, columns.materials)
    resume_contents = _fetch_text(document_source, resume)
    materials_contents = _fetch_text(document_source, materials)
    sections = extract_all(materials_contents, rules)

    return ApplicantRecord(
        name=name,
        email=email,
        role=sheet_name,
        sheet_id=sheet_id,
        submitted_time=submitted_time,
        phone=phone,
        country_code=country_code,
        location=location,
        github=github,
        gitlab=gitlab,
        linkedin=optional_cell(row, columns.linkedin).lower(),
        portfolio=optional_cell(row, columns.portfolio).lower(),
        website=optional_cell(row, columns.website).lower(),
        status=status,
        sent_email_received="false" not in optional_cell(row, columns.sent_email_received).lower(),
        value_reflected=optional_cell(row, columns.value_reflected).lower(),
        value_violated=optional_cell(row, columns.value_violated).lower(),
        values_in_tension=values_in_tension,
        resume=resume,
        materials=materials,
        resume_contents=resume_contents,
        materials_contents=materials_contents,
        **sections,
    )
