# ============================================================================
# src/medical_document_ai/utils/text_normalizer.py
# ============================================================================
"""
Text Normalization Utilities

Small helpers shared by the extractors:
- Digit-only normalization for identifiers (CPF, CEP)
- Whitespace collapsing for captured snippets
- Best-effort day-first date parsing (Brazilian dd/mm/yyyy)
"""

import re
import logging
from datetime import date
from typing import Optional

logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r"\D")
_WHITESPACE = re.compile(r"\s+")
_DATE_PARTS = re.compile(r"^\s*(\d{1,2})[/.\-](\d{1,2})[/.\-](\d{2,4})\s*$")

# Two-digit years below this pivot are read as 20xx, the rest as 19xx
TWO_DIGIT_YEAR_PIVOT = 50


def digits_only(value: str) -> str:
    """Strip every non-digit character ("123.456.789-10" -> "12345678910")."""
    return _NON_DIGITS.sub("", value or "")


def collapse_whitespace(value: str) -> str:
    """Collapse runs of whitespace (including newlines) into single spaces."""
    return _WHITESPACE.sub(" ", value or "").strip()


def parse_day_first_date(value: str, min_year: int = 1) -> Optional[date]:
    """
    Parse a dd/mm/yyyy style string into a date.

    Separators may be '/', '-' or '.'. Two-digit years are expanded around
    TWO_DIGIT_YEAR_PIVOT. Returns None for anything that is not a real
    calendar date (31/02/2024, 00/13/2020) or that falls before min_year.
    """
    match = _DATE_PARTS.match(value or "")
    if not match:
        return None

    day, month, year = (int(part) for part in match.groups())
    if len(match.group(3)) == 2:
        year += 2000 if year < TWO_DIGIT_YEAR_PIVOT else 1900
    elif len(match.group(3)) == 3:
        logger.debug(f"Dropping date with 3-digit year: {value!r}")
        return None

    if year < min_year:
        return None

    try:
        return date(year, month, day)
    except ValueError:
        logger.debug(f"Dropping invalid calendar date: {value!r}")
        return None
