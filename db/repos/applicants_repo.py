from __future__ import annotations

import sqlite3
from typing import Any, Dict, List, Optional

from db.schema import TEXT_COLUMNS
from models.applicant_record import ApplicantRecord


_COLUMNS = TEXT_COLUMNS + ("sent_email_received",)


class ApplicantsRepo:
    """SQLite consumer for assembled applicants, keyed by (sheet_id, email)."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def upsert_applicant(self, record: ApplicantRecord) -> int:
        """Insert or refresh an applicant; returns the row id."""
        row = record.to_row()
        placeholders = ", ".join("?" for _ in _COLUMNS)
        updates = ", ".join(
            f"{col} = excluded.{col}" for col in _COLUMNS if col not in ("sheet_id", "email")
        )
        sql = (
            f"INSERT INTO applicants ({', '.join(_COLUMNS)}) VALUES ({placeholders}) "
            f"ON CONFLICT(sheet_id, email) DO UPDATE SET {updates} "
            "RETURNING id;"
        )
        cur = self.conn.cursor()
        cur.execute(sql, tuple(row[col] for col in _COLUMNS))
        applicant_id = int(cur.fetchone()[0])
        self.conn.commit()
        return applicant_id

    # Sink protocol
    accept = upsert_applicant

    def get_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        cur = self.conn.cursor()
        cur.execute(
            f"SELECT id, {', '.join(_COLUMNS)} FROM applicants WHERE lower(email) = lower(?) "
            "ORDER BY submitted_time DESC LIMIT 1",
            (email.strip(),),
        )
        row = cur.fetchone()
        if not row:
            return None
        return dict(zip(("id",) + _COLUMNS, row))

    def list_recent(self, limit: int = 5, status: Optional[str] = None) -> List[Dict[str, Any]]:
        sql = "SELECT applicant_id, name, email, role, status, submitted_time, country_code, github, gitlab FROM v_applicant_triage"
        params: list = []
        if status:
            sql += " WHERE status = ?"
            params.append(status)
        sql += " ORDER BY submitted_time DESC LIMIT ?"
        params.append(limit)
        cur = self.conn.cursor()
        cur.execute(sql, params)
        keys = ("applicant_id", "name", "email", "role", "status", "submitted_time", "country_code", "github", "gitlab")
        return [dict(zip(keys, r)) for r in cur.fetchall()]
