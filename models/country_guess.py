from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CountryGuess(BaseModel):
    """One row of the country inference table used by the phone normalizer."""

    region: str
    keywords: tuple[str, ...]
    required_prefix: str = ""

    model_config = ConfigDict(frozen=True)

    def matches(self, location: str, digits: str) -> bool:
        """``location`` must already be lowercased; ``digits`` already stripped."""
        if not any(keyword in location for keyword in self.keywords):
            return False
        return digits.startswith(self.required_prefix)
