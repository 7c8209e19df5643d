from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class FieldExtractionRule(BaseModel):
    """A named long-text field and its boundary pattern pairs, most specific first."""

    name: str
    candidates: tuple[tuple[str, str], ...]

    model_config = ConfigDict(frozen=True)
