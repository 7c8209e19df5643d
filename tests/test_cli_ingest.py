from __future__ import annotations

import json
import sqlite3
import sys
from typing import List


def _run_cli_with_args(args_list: List[str]) -> None:
    """Run cli.py main() with provided argv in-process (no subprocess)."""
    # Import fresh to ensure clean parser each time
    if "cli" in sys.modules:
        del sys.modules["cli"]
    import cli  # type: ignore
    try:
        cli.main(args_list)  # type: ignore[attr-defined]
    except SystemExit as e:
        code = int(getattr(e, "code", 0) or 0)
        if code not in (0, None):
            raise


def _write_sheet(tmp_path):
    sheet = tmp_path / "engineering.csv"
    sheet.write_text(
        "Timestamp,Name,Email Address,Location,Phone number,GitHub username,Candidate materials,Status\n"
        "1/15/2021 10:30:00,Ada Lovelace,ada@example.com,\"London, UK\",+44 20 7946 0958,"
        "https://gitlab.com/adal/,https://drive.google.com/open?id=mat-ada,\n"
        "garbage,Bad Row,bad@example.com,,,,,\n",
        encoding="utf-8",
    )
    docs = tmp_path / "documents"
    docs.mkdir()
    (docs / "mat-ada.txt").write_text(
        "Work sample(s): Did the thing.\n\nWriting samples: none\n", encoding="utf-8"
    )
    return sheet, docs


def test_cli_ingest_writes_db(tmp_path, capsys):
    sheet, docs = _write_sheet(tmp_path)
    db_path = tmp_path / "cli_ingest.db"

    _run_cli_with_args(["--db", str(db_path), "bootstrap"])
    _run_cli_with_args([
        "--db", str(db_path),
        "ingest",
        "--sheet", str(sheet),
        "--role", "Engineering",
        "--sheet-id", "eng-2021",
        "--documents-dir", str(docs),
        "--document-source", "local",
        "--write-db",
        "--progress",
    ])
    out = capsys.readouterr().out
    assert "[1/1] Persisted applicant ada@example.com" in out
    assert "Applicants Assembled: 1" in out
    assert "row 3:" in out

    conn = sqlite3.connect(str(db_path))
    try:
        cur = conn.cursor()
        cur.execute("SELECT email, role, sheet_id, country_code, gitlab, github, work_samples FROM applicants")
        rows = cur.fetchall()
        assert rows == [("ada@example.com", "Engineering", "eng-2021", "gb", "@adal", "", "Did the thing.")]
    finally:
        conn.close()

    _run_cli_with_args(["--db", str(db_path), "report-applicant", "--email", "ada@example.com"])
    out = capsys.readouterr().out
    assert "Ada Lovelace <ada@example.com>" in out
    assert "gitlab: @adal" in out

    _run_cli_with_args(["--db", str(db_path), "report-recent", "--limit", "5"])
    recent = json.loads(capsys.readouterr().out)
    assert [r["email"] for r in recent] == ["ada@example.com"]


def test_cli_ingest_writes_json_output(tmp_path):
    sheet, docs = _write_sheet(tmp_path)
    output = tmp_path / "applicants.json"
    _run_cli_with_args([
        "--db", str(tmp_path / "unused.db"),
        "ingest",
        "--sheet", str(sheet),
        "--role", "Engineering",
        "--documents-dir", str(docs),
        "--document-source", "local",
        "--output", str(output),
    ])
    data = json.loads(output.read_text(encoding="utf-8"))
    assert len(data) == 1
    assert data[0]["sheet_id"] == "engineering"
    assert data[0]["gitlab_url"] == "https://gitlab.com/adal"
    assert not (tmp_path / "unused.db").exists()
