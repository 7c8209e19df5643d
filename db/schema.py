from __future__ import annotations

import sqlite3


# Long-text columns written from ApplicantRecord.to_row(); kept in one place so
# the table and the repo cannot drift apart.
TEXT_COLUMNS: tuple[str, ...] = (
    "name",
    "email",
    "role",
    "sheet_id",
    "submitted_time",
    "phone",
    "country_code",
    "location",
    "github",
    "gitlab",
    "linkedin",
    "portfolio",
    "website",
    "status",
    "value_reflected",
    "value_violated",
    "values_in_tension",
    "resume",
    "materials",
    "resume_contents",
    "materials_contents",
    "work_samples",
    "writing_samples",
    "analysis_samples",
    "presentation_samples",
    "exploratory_samples",
    "question_technically_challenging",
    "question_proud_of",
    "question_happiest",
    "question_unhappiest",
    "question_value_reflected",
    "question_value_violated",
    "question_values_in_tension",
    "question_why_company",
)


def bootstrap(conn: sqlite3.Connection) -> None:
    """Create the applicants table, indexes and views (idempotent)."""
    cur = conn.cursor()

    columns_sql = ",\n".join(f"  {name} TEXT" for name in TEXT_COLUMNS)
    cur.execute(
        (
            "CREATE TABLE IF NOT EXISTS applicants (\n"
            "  id INTEGER PRIMARY KEY AUTOINCREMENT,\n"
            f"{columns_sql},\n"
            "  sent_email_received INTEGER NOT NULL DEFAULT 1,\n"
            "  ingested_at TEXT NOT NULL DEFAULT (datetime('now')),\n"
            "  UNIQUE(sheet_id, email)\n"
            ")"
        )
    )
    cur.execute("CREATE INDEX IF NOT EXISTS idx_applicants_status ON applicants(status);")
    cur.execute("CREATE INDEX IF NOT EXISTS idx_applicants_submitted ON applicants(submitted_time);")

    # Triage view: what the hiring channel looks at
    cur.execute("DROP VIEW IF EXISTS v_applicant_triage;")
    cur.execute(
        (
            "CREATE VIEW v_applicant_triage AS\n"
            "SELECT\n"
            "  id AS applicant_id,\n"
            "  name,\n"
            "  email,\n"
            "  role,\n"
            "  status,\n"
            "  submitted_time,\n"
            "  location,\n"
            "  country_code,\n"
            "  phone,\n"
            "  github,\n"
            "  gitlab\n"
            "FROM applicants;"
        )
    )

    conn.commit()
