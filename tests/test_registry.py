from __future__ import annotations

import pytest


def test_builtin_sources_registered(settings, tmp_path):
    # Import package to trigger registration
    import sources  # noqa: F401
    from sources.registry import available_sources, get_document_source

    names = available_sources().keys()
    assert "local" in names
    assert "http" in names

    src = get_document_source("local", settings, documents_dir=str(tmp_path))
    assert src.source_name == "local"
    assert src.documents_dir == tmp_path
    assert get_document_source("http", settings).source_name == "http"


def test_unknown_source_raises(settings):
    from sources.registry import get_document_source
    with pytest.raises(KeyError):
        get_document_source("does_not_exist", settings)
