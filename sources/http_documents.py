"""
HTTP document source for resumes and candidate materials.
"""
from __future__ import annotations

import logging
import time
from typing import Optional

import requests

from config.settings import Settings
from sources.local_documents import reference_name
from sources.registry import register


DRIVE_DOWNLOAD_URL = "https://drive.google.com/uc"


def download_url(reference: str) -> str:
    """Rewrite Google Drive share links to their direct download form."""
    ref = reference.strip()
    if "drive.google.com" in ref:
        file_id = reference_name(ref)
        if file_id:
            return f"{DRIVE_DOWNLOAD_URL}?export=download&id={file_id}"
    return ref


class HttpDocumentSource:
    """Fetches document text over HTTP with retries and exponential backoff."""

    source_name = "http"

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        self.settings = settings
        self.session = session or requests.Session()

    def fetch(self, reference: str) -> str:
        url = download_url(reference)
        if not url.startswith(("http://", "https://")):
            logging.warning(f"Not an HTTP document reference: {reference}")
            return ""

        for attempt in range(self.settings.max_retries):
            try:
                response = self.session.get(url, timeout=self.settings.request_timeout_seconds)
                if response.status_code == 200:
                    return response.text
                if response.status_code == 404:
                    logging.warning(f"Document not found: {url}")
                    return ""
                logging.error(f"Document request failed with status {response.status_code}: {url}")
            except requests.exceptions.RequestException as e:
                logging.error(f"Request error on attempt {attempt + 1} for {url}: {e}")
            if attempt < self.settings.max_retries - 1:
                time.sleep(2 ** attempt)  # Exponential backoff

        return ""


def _factory(settings: Settings, **_ignored) -> HttpDocumentSource:
    return HttpDocumentSource(settings)


register(HttpDocumentSource.source_name, _factory)
