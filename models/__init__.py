from .applicant_record import ApplicantRecord
from .country_guess import CountryGuess
from .field_extraction_rule import FieldExtractionRule
from .sheet_columns import SheetColumns

__all__ = [
    "ApplicantRecord",
    "CountryGuess",
    "FieldExtractionRule",
    "SheetColumns",
]
