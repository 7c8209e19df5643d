from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Dict, Optional

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'services.field_extractor'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


@pytest.fixture
def settings(tmp_path):
    from config.settings import Settings

    return Settings(
        home_country="US",
        submission_utc_offset="-08:00",
        submission_time_format="%m/%d/%Y %H:%M:%S",
        db_path=str(tmp_path / "applicants.db"),
        documents_dir=str(tmp_path / "documents"),
        document_source="local",
        request_timeout_seconds=5,
        max_retries=2,
        assemble_concurrency=2,
        log_level="INFO",
        run_env="test",
    )


class StubDocuments:
    """In-memory document source; references not in ``docs`` read as missing."""

    source_name = "stub"

    def __init__(self, docs: Optional[Dict[str, str]] = None, fail_on: tuple = ()) -> None:
        self.docs = dict(docs or {})
        self.fail_on = fail_on
        self.calls: list = []

    def fetch(self, reference: str) -> str:
        self.calls.append(reference)
        if reference in self.fail_on:
            raise OSError(f"cannot read {reference}")
        return self.docs.get(reference, "")


@pytest.fixture
def stub_documents():
    return StubDocuments
