from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

import phonenumbers
from dotenv import load_dotenv


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


@dataclass(frozen=True)
class Settings:
    # Phone normalization baseline when no location rule matches
    home_country: str

    # The intake spreadsheet records local time without an offset
    submission_utc_offset: str
    submission_time_format: str

    db_path: str
    documents_dir: str
    document_source: str  # local | http

    request_timeout_seconds: int
    max_retries: int
    assemble_concurrency: int

    log_level: str
    run_env: str


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    home_country = os.getenv("HOME_COUNTRY", "US").strip().upper()
    if home_country not in phonenumbers.SUPPORTED_REGIONS:
        raise RuntimeError(
            f"HOME_COUNTRY={home_country!r} is not a region known to phonenumbers"
        )
    return Settings(
        home_country=home_country,
        submission_utc_offset=os.getenv("SUBMISSION_UTC_OFFSET", "-08:00"),
        submission_time_format=os.getenv("SUBMISSION_TIME_FORMAT", "%m/%d/%Y %H:%M:%S"),
        db_path=os.getenv("DB_PATH", "applicants.db"),
        documents_dir=os.getenv("DOCUMENTS_DIR", "documents"),
        document_source=os.getenv("DOCUMENT_SOURCE", "local"),
        request_timeout_seconds=int(os.getenv("REQUEST_TIMEOUT", "30")),
        max_retries=int(os.getenv("MAX_RETRIES", "3")),
        assemble_concurrency=int(os.getenv("ASSEMBLE_CONCURRENCY", "4")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
    )
