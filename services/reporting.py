from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from models.applicant_record import ApplicantRecord


def print_summary(
    sheet_name: str,
    applicants: List[ApplicantRecord],
    failures: Iterable[Tuple[int, str]],
    persisted: Optional[int] = None,
) -> None:
    """Print summary of one ingest run."""
    failures = list(failures)
    missing_phone = sum(1 for a in applicants if not a.phone)
    no_materials = sum(1 for a in applicants if a.materials and not a.materials_contents)

    print("\n" + "=" * 60)
    print("APPLICANT INTAKE - SUMMARY")
    print("=" * 60)
    print(f"Sheet: {sheet_name}")
    print(f"Applicants Assembled: {len(applicants)}")
    print(f"Rows Skipped: {len(failures)}")
    if persisted is not None:
        print(f"Applicants Persisted: {persisted}")
    print()
    print("Field Statistics:")
    print(f"  Missing Phone: {missing_phone}")
    print(f"  Unreadable Materials: {no_materials}")
    if failures:
        print()
        print("Skipped Rows:")
        # Messages already carry their sheet row number
        for _row_number, message in failures:
            print(f"  {message}")
    print("=" * 60)


def format_applicant(row: dict) -> str:
    """Render one stored applicant row for the report-applicant command."""
    lines = [
        f"{row.get('name', '')} <{row.get('email', '')}>",
        f"  role: {row.get('role', '')}",
        f"  status: {row.get('status', '')}",
        f"  submitted: {row.get('submitted_time', '')}",
        f"  phone: {row.get('phone') or '-'} ({row.get('country_code', '')})",
        f"  location: {row.get('location') or '-'}",
    ]
    for key in ("github", "gitlab", "linkedin", "portfolio", "website"):
        if row.get(key):
            lines.append(f"  {key}: {row[key]}")
    return "\n".join(lines)
