from __future__ import annotations

from typing import Optional


class ApplicantRowError(ValueError):
    """A sheet row that cannot be turned into an applicant record."""

    def __init__(self, message: str, row_number: Optional[int] = None) -> None:
        super().__init__(message)
        self.row_number = row_number

    def __str__(self) -> str:
        message = super().__str__()
        if self.row_number is None:
            return message
        return f"row {self.row_number}: {message}"


class InvalidTimestampError(ApplicantRowError):
    """Submission timestamp missing or not in the sheet's format."""


class MissingIdentityError(ApplicantRowError):
    """Name or email column missing from the row."""
