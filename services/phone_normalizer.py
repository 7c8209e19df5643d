from __future__ import annotations

import logging
import re
from typing import Optional, Sequence, Tuple

import phonenumbers
from phonenumbers import NumberParseException, PhoneNumberFormat

from config.country_rules import COUNTRY_RULES
from config.settings import get_settings
from models.country_guess import CountryGuess


logger = logging.getLogger(__name__)

_FORMATTING_CHARS = re.compile(r"[\s\-+()]")


def strip_phone(raw_phone: Optional[str]) -> str:
    """Remove spaces, hyphens, plus signs and parentheses."""
    return _FORMATTING_CHARS.sub("", raw_phone or "")


def infer_country(
    location_text: Optional[str],
    digits: str,
    default_region: Optional[str] = None,
    rules: Sequence[CountryGuess] = COUNTRY_RULES,
) -> str:
    """Return the uppercase region of the first matching rule, else the default."""
    location = (location_text or "").lower()
    for rule in rules:
        if rule.matches(location, digits):
            return rule.region
    return (default_region or get_settings().home_country).upper()


def normalize_phone(
    raw_phone: Optional[str],
    location_text: Optional[str],
    default_region: Optional[str] = None,
) -> Tuple[str, str, bool]:
    """Normalize a free-text phone number against the applicant's location.

    Returns (formatted_phone, country_code, is_valid). ``country_code`` is the
    inferred region in lowercase and is set even when the number is missing or
    unparseable. Numbers that parse but fail validation are kept as formatted
    and only logged.
    """
    digits = strip_phone(raw_phone)
    region = infer_country(location_text, digits, default_region)
    country_code = region.lower()

    if not digits:
        return "", country_code, False

    try:
        number = phonenumbers.parse(digits, region)
    except NumberParseException as e:
        logger.info(f"Could not parse phone number {digits!r} for {region}: {e}")
        return digits, country_code, False

    is_valid = phonenumbers.is_valid_number(number)
    if not is_valid:
        logger.warning(
            f"Phone number is invalid: {digits}",
            extra={"step": "normalize_phone", "status": "invalid"},
        )
    formatted = phonenumbers.format_number(number, PhoneNumberFormat.INTERNATIONAL)
    return formatted, country_code, is_valid
