# ============================================================================
# src/medical_document_ai/extractors/identity_extractor.py
# ============================================================================
"""
Patient-Identity Extractor

Runs on the original-case text regardless of document type (proper nouns
need their capitalization). Four independent sub-fields, each adding a
fixed weight to the identity confidence:

- name            "Paciente:" / "Nome:" label, then a capitalized name line
- cpf             label-anchored, separators stripped to digits
- birth_date      label-anchored dd/mm/yyyy family, kept raw
- medical_record  prontuário / registro number
"""

import logging
from typing import Optional

from ..config import ScoringSettings, scoring_settings
from ..core.models import PatientIdentityGuess
from ..patterns.library import PatternLibrary, get_default_library
from ..utils.text_normalizer import digits_only
from .field_extractor import first_match

logger = logging.getLogger(__name__)


class IdentityExtractor:

    def __init__(
        self,
        library: Optional[PatternLibrary] = None,
        settings: Optional[ScoringSettings] = None
    ):
        self.library = library or get_default_library()
        self.settings = settings or scoring_settings

    def extract(self, text: str) -> PatientIdentityGuess:
        """
        Extract the patient identity guess.

        Confidence is the clamped sum of the weights of the sub-fields
        found, rounded to 4 places.
        """
        s = self.settings
        confidence = 0.0

        name = self._extract_name(text)
        if name:
            confidence += s.IDENTITY_NAME_WEIGHT

        cpf = None
        match = first_match(text, self.library.group("identity.cpf"))
        if match:
            cpf = digits_only(match.value)
            confidence += s.IDENTITY_CPF_WEIGHT

        birth_date = None
        match = first_match(text, self.library.group("identity.birth_date"))
        if match:
            birth_date = match.value
            confidence += s.IDENTITY_BIRTH_DATE_WEIGHT

        medical_record = None
        match = first_match(text, self.library.group("identity.medical_record"))
        if match:
            medical_record = match.value
            confidence += s.IDENTITY_RECORD_WEIGHT

        confidence = round(min(max(confidence, 0.0), 1.0), 4)
        logger.debug(
            f"Identity fields: name={name is not None}, cpf={cpf is not None}, "
            f"birth_date={birth_date is not None}, record={medical_record is not None}"
        )

        return PatientIdentityGuess(
            name=name,
            cpf=cpf,
            birth_date=birth_date,
            medical_record=medical_record,
            confidence=confidence,
        )

    def _extract_name(self, text: str) -> Optional[str]:
        match = first_match(
            text,
            self.library.group("identity.name"),
            min_length=self.settings.IDENTITY_MIN_NAME_LENGTH
        )
        return " ".join(match.value.split()) if match else None
