# ============================================================================
# src/medical_document_ai/registration/extractor.py
# ============================================================================
"""
Registration Extractor

Demographic fields from patient registration forms ("ficha cadastral"),
using the registration.* pattern groups of the same pattern library the
clinical pipeline uses.

Normalizations:
- CPF to digits
- Birth date parsed day-first and validated (real date, year > 1900)
- Sex to M / F / OUTRO by first letter
- Blood type to ABO plus Rh sign ("O positivo" -> "O+")
- Allergies and medications split on "," and ";"
- Emergency contact split into name, relationship (in parentheses), phone
"""

import logging
import re
from typing import List, Optional

from ..extractors.field_extractor import find_all, first_match
from ..patterns.library import PatternLibrary, get_default_library
from ..utils.text_normalizer import collapse_whitespace, digits_only, parse_day_first_date
from .models import Address, EmergencyContact, RegistrationData, UNIDENTIFIED_NAME

logger = logging.getLogger(__name__)

REGISTRATION_GROUPS = (
    "registration.name",
    "registration.cpf",
    "registration.rg",
    "registration.birth_date",
    "registration.sex",
    "registration.phone",
    "registration.mobile",
    "registration.phone_number",
    "registration.email",
    "registration.street",
    "registration.number",
    "registration.complement",
    "registration.neighborhood",
    "registration.city",
    "registration.state",
    "registration.postal_code",
    "registration.blood_type",
    "registration.allergies",
    "registration.insurance",
    "registration.emergency_contact",
    "registration.current_medications",
    "registration.occupation",
)

# Birth years up to this one are rejected
MIN_BIRTH_YEAR_EXCLUSIVE = 1900

_LIST_SEPARATORS = re.compile(r"[,;]")
_RELATIONSHIP = re.compile(r"\(([^)]*)\)")
_CONTACT_NAME_END = re.compile(r"[(,\d]|\s[-–]\s")


class RegistrationExtractor:
    """
    Usage:
        extractor = RegistrationExtractor(library)
        data = extractor.extract(form_text)
    """

    def __init__(self, library: Optional[PatternLibrary] = None):
        self.library = library or get_default_library()
        # Fail at construction, not halfway through a form
        for name in REGISTRATION_GROUPS:
            self.library.group(name)

    def extract(self, text: str) -> RegistrationData:
        data = RegistrationData(
            name=self._value(text, "registration.name") or UNIDENTIFIED_NAME,
            cpf=self._cpf(text),
            rg=self._value(text, "registration.rg"),
            birth_date=self._birth_date(text),
            sex=self._sex(text),
            phone=self._value(text, "registration.phone"),
            mobile=self._value(text, "registration.mobile"),
            email=self._value(text, "registration.email"),
            address=self._address(text),
            blood_type=self._blood_type(text),
            allergies=self._list(text, "registration.allergies"),
            current_medications=self._list(text, "registration.current_medications"),
            insurance=self._value(text, "registration.insurance"),
            emergency_contact=self._emergency_contact(text),
            occupation=self._value(text, "registration.occupation"),
            observations=self._observations(text),
        )
        logger.debug(f"Registration fields extracted for {'named' if data.has_name else 'unnamed'} patient")
        return data

    def _value(self, text: str, group_name: str) -> Optional[str]:
        match = first_match(text, self.library.group(group_name))
        if match is None:
            return None
        return collapse_whitespace(match.value) or None

    def _cpf(self, text: str) -> Optional[str]:
        value = self._value(text, "registration.cpf")
        return digits_only(value) if value else None

    def _birth_date(self, text: str):
        value = self._value(text, "registration.birth_date")
        if value is None:
            return None
        parsed = parse_day_first_date(value, min_year=MIN_BIRTH_YEAR_EXCLUSIVE + 1)
        if parsed is None:
            logger.debug(f"Dropping invalid birth date {value!r}")
        return parsed

    def _sex(self, text: str) -> Optional[str]:
        value = self._value(text, "registration.sex")
        if not value:
            return None
        initial = value[0].upper()
        if initial in ("M", "F"):
            return initial
        return "OUTRO"

    def _address(self, text: str) -> Optional[Address]:
        street = self._value(text, "registration.street")
        if not street:
            return None
        return Address(
            street=street,
            number=self._value(text, "registration.number"),
            complement=self._value(text, "registration.complement"),
            neighborhood=self._value(text, "registration.neighborhood"),
            city=self._value(text, "registration.city"),
            state=self._value(text, "registration.state"),
            postal_code=self._value(text, "registration.postal_code"),
        )

    def _blood_type(self, text: str) -> Optional[str]:
        value = self._value(text, "registration.blood_type")
        if not value:
            return None
        lowered = value.lower()
        group = re.match(r"ab|a|b|o", lowered).group(0).upper()
        if "+" in value or "positivo" in lowered:
            return group + "+"
        if "-" in value or "negativo" in lowered:
            return group + "-"
        return group

    def _list(self, text: str, group_name: str) -> List[str]:
        value = self._value(text, group_name)
        if not value:
            return []
        items = (item.strip(" .") for item in _LIST_SEPARATORS.split(value))
        return [item for item in items if item]

    def _emergency_contact(self, text: str) -> Optional[EmergencyContact]:
        value = self._value(text, "registration.emergency_contact")
        if not value:
            return None

        relationship_match = _RELATIONSHIP.search(value)
        phone = first_match(value, self.library.group("registration.phone_number"))

        end = _CONTACT_NAME_END.search(value)
        name = value[:end.start()] if end else value
        name = name.strip(" -–,:")

        if not name and phone is None:
            return None
        relationship = None
        if relationship_match:
            relationship = relationship_match.group(1).strip() or None
        return EmergencyContact(
            name=name or None,
            relationship=relationship,
            phone=phone.value if phone else None,
        )

    def _observations(self, text: str) -> Optional[str]:
        matches = find_all(text, self.library.group("clinical.observation"))
        return ". ".join(m.value for m in matches) if matches else None
