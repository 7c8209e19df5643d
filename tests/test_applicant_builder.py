from __future__ import annotations

import logging
from datetime import datetime, timezone

import pytest

from models.sheet_columns import SheetColumns
from services.applicant_builder import (
    DEFAULT_STATUS,
    build_applicant,
    normalize_status,
    optional_cell,
    parse_submitted_time,
)
from utils.errors import ApplicantRowError, InvalidTimestampError, MissingIdentityError


COLUMNS = SheetColumns(
    timestamp=0,
    name=1,
    email=2,
    location=3,
    phone=4,
    github=5,
    resume=6,
    materials=7,
    status=8,
    linkedin=9,
    sent_email_received=10,
    value_reflected=11,
    value_in_tension_1=12,
    value_in_tension_2=13,
)

MATERIALS = "Work sample(s): Did the thing.\n\nWriting samples: ..."


def _row(overrides=None):
    cells = {
        0: "1/15/2021 10:30:00",
        1: "Ada Lovelace",
        2: "ada@example.com",
        3: "London, UK",
        4: "+44 20 7946 0958",
        5: "https://github.com/AdaL/",
        6: "resume.pdf",
        7: "materials.txt",
        8: "",
        9: "HTTPS://LinkedIn.com/in/Ada",
        10: "TRUE",
        11: "Humility",
        12: "Candor",
        13: "Rigor",
    }
    cells.update(overrides or {})
    return [cells[i] for i in range(max(cells) + 1)]


def _build(row, docs, settings, columns=COLUMNS):
    return build_applicant(row, columns, "Engineering", "sheet-1", docs, settings=settings)


def test_empty_status_needs_triage(settings, stub_documents):
    record = _build(_row(), stub_documents(), settings)
    assert record.status == DEFAULT_STATUS == "Needs to be triaged"


def test_declined_status_is_bucketed(settings, stub_documents):
    record = _build(_row({8: "Status: DECLINED - not a fit"}), stub_documents(), settings)
    assert record.status == "Declined"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Next steps: phone screen", "Next steps"),
        ("deferred until spring", "Deferred"),
        ("HIRED!", "Hired"),
        ("On hold", "on hold"),
        ("   ", "Needs to be triaged"),
        (None, "Needs to be triaged"),
    ],
)
def test_normalize_status(raw, expected):
    assert normalize_status(raw) == expected


def test_full_record(settings, stub_documents):
    docs = stub_documents({"resume.pdf": "resume text", "materials.txt": MATERIALS})
    record = _build(_row(), docs, settings)

    assert record.name == "Ada Lovelace"
    assert record.first_name == "Ada" and record.last_name == "Lovelace"
    assert record.role == "Engineering" and record.sheet_id == "sheet-1"
    assert record.submitted_time == datetime(2021, 1, 15, 18, 30, tzinfo=timezone.utc)
    assert record.country_code == "gb"
    assert record.phone == "+44 20 7946 0958"
    assert record.github == "@adal" and record.gitlab == ""
    assert record.github_url == "https://github.com/adal"
    assert record.linkedin == "https://linkedin.com/in/ada"
    assert record.sent_email_received is True
    assert record.value_reflected == "humility"
    assert record.values_in_tension == ("candor", "rigor")
    assert record.resume_contents == "resume text"
    assert record.work_samples == "Did the thing."
    assert record.question_why_company == ""


def test_gitlab_url_in_github_column(settings, stub_documents):
    record = _build(_row({5: "https://gitlab.com/octocat/"}), stub_documents(), settings)
    assert record.github == ""
    assert record.gitlab == "@octocat"
    assert record.gitlab_url == "https://gitlab.com/octocat"


def test_sent_email_false(settings, stub_documents):
    record = _build(_row({10: "FALSE"}), stub_documents(), settings)
    assert record.sent_email_received is False


def test_short_row_uses_defaults(settings, stub_documents):
    row = ["1/15/2021 10:30:00", "Ada Lovelace", "ada@example.com"]
    docs = stub_documents()
    record = _build(row, docs, settings)
    assert record.status == "Needs to be triaged"
    assert record.phone == "" and record.country_code == "us"
    assert record.github == "" and record.gitlab == ""
    assert record.values_in_tension == ()
    assert record.sent_email_received is True
    assert record.materials_contents == "" and record.work_samples == ""
    # No references, so the source is never asked
    assert docs.calls == []


def test_absent_optional_column_is_not_read_from_timestamp(settings, stub_documents):
    columns = SheetColumns(timestamp=0, name=1, email=2)
    record = _build(_row(), stub_documents(), settings, columns=columns)
    assert record.status == "Needs to be triaged"
    assert record.location == ""


def test_failing_document_fetch_yields_empty_text(settings, stub_documents):
    docs = stub_documents({"resume.pdf": "resume text"}, fail_on=("materials.txt",))
    record = _build(_row(), docs, settings)
    assert record.resume_contents == "resume text"
    assert record.materials_contents == ""
    assert record.work_samples == ""


def test_bad_timestamp_raises(settings, stub_documents):
    with pytest.raises(InvalidTimestampError):
        _build(_row({0: "yesterday"}), stub_documents(), settings)


def test_missing_identity_raises(settings, stub_documents):
    with pytest.raises(MissingIdentityError):
        _build(_row({2: "  "}), stub_documents(), settings)
    with pytest.raises(ApplicantRowError):
        _build(["1/15/2021 10:30:00", "Ada Lovelace"], stub_documents(), settings)


def test_build_is_idempotent(settings, stub_documents):
    docs = stub_documents({"materials.txt": MATERIALS})
    assert _build(_row(), docs, settings) == _build(_row(), docs, settings)


def test_parse_submitted_time_converts_to_utc():
    ts = parse_submitted_time(" 12/31/2020 20:00:00 ", "-08:00", "%m/%d/%Y %H:%M:%S")
    assert ts == datetime(2021, 1, 1, 4, 0, tzinfo=timezone.utc)


def test_optional_cell():
    row = ["ts", " a ", ""]
    assert optional_cell(row, 0) == ""
    assert optional_cell(row, 1) == "a"
    assert optional_cell(row, 5) == ""


def test_row_error_carries_row_number():
    err = MissingIdentityError("Row has no email in column 2", row_number=7)
    assert str(err) == "row 7: Row has no email in column 2"
    assert isinstance(err, ValueError)


def test_failing_document_fetch_logs_warning(settings, stub_documents, caplog):
    docs = stub_documents(fail_on=("materials.txt",))
    with caplog.at_level(logging.WARNING, logger="services.applicant_builder"):
        _build(_row(), docs, settings)
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "materials.txt" in warnings[0].getMessage()
    assert warnings[0].step == "fetch_document"
    assert warnings[0].status == "empty"
    assert warnings[0].error == "OSError"
