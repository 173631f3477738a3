# ============================================================================
# src/medical_document_ai/registration/service.py
# ============================================================================
"""
Patient Registration Service

Turns a registration form into a created or updated patient:

1. EXTRACT   registration fields + completeness confidence
2. MATCH     last CPF digits first, then first name (case-insensitive)
3. UPSERT    matched -> merge (extracted value wins only when present)
             no match -> create, with a placeholder email if none was found

The upsert is one read followed by one write with no locking; callers
importing the same person concurrently must serialize per patient.
"""

import logging
import uuid
from dataclasses import replace
from typing import Any, Dict, Optional

from ..config import (
    ExtractionSettings,
    ScoringSettings,
    extraction_settings,
    scoring_settings,
)
from .confidence import registration_confidence
from .extractor import RegistrationExtractor
from .models import (
    PatientRecord,
    RegistrationAction,
    RegistrationData,
    RegistrationOutcome,
)
from .patient_store import PatientStore

logger = logging.getLogger(__name__)


def format_medical_history(data: RegistrationData) -> Optional[str]:
    """'label: value' lines for the clinically relevant registration fields."""
    history = []
    if data.blood_type:
        history.append(f"Tipo sanguíneo: {data.blood_type}")
    if data.allergies:
        history.append(f"Alergias: {', '.join(data.allergies)}")
    if data.current_medications:
        history.append(f"Medicamentos em uso: {', '.join(data.current_medications)}")
    if data.insurance:
        history.append(f"Convênio: {data.insurance}")
    if data.observations:
        history.append(f"Observações: {data.observations}")
    return "\n".join(history) or None


class PatientRegistrationService:
    """
    Usage:
        service = PatientRegistrationService(SQLitePatientStore(path))
        outcome = service.register(form_text)
    """

    def __init__(
        self,
        store: PatientStore,
        extractor: Optional[RegistrationExtractor] = None,
        scoring: Optional[ScoringSettings] = None,
        extraction: Optional[ExtractionSettings] = None,
    ):
        self.store = store
        self.extractor = extractor or RegistrationExtractor()
        self.scoring = scoring or scoring_settings
        self.extraction = extraction or extraction_settings

    def register(self, text: str) -> RegistrationOutcome:
        data = self.extractor.extract(text)
        confidence = registration_confidence(data, self.scoring)
        fields = self._record_fields(data)

        existing = self.find_existing(data)
        if existing is not None:
            present = {key: value for key, value in fields.items() if value}
            patient = self.store.update(replace(existing, **present))
            action = RegistrationAction.UPDATED
        else:
            email = fields.pop("email") or self._placeholder_email()
            fields.pop("name")
            patient = self.store.create(PatientRecord(
                id=uuid.uuid4().hex,
                name=data.name,
                email=email,
                **fields
            ))
            action = RegistrationAction.CREATED

        logger.info(f"Registration {action.value} patient {patient.id} (confidence {confidence:.2f})")
        return RegistrationOutcome(patient=patient, action=action, confidence=confidence)

    def find_existing(self, data: RegistrationData) -> Optional[PatientRecord]:
        if data.cpf:
            suffix = data.cpf[-self.extraction.CPF_MATCH_SUFFIX_LENGTH:]
            patient = self.store.find_by_cpf_suffix(suffix)
            if patient is not None:
                logger.debug(f"Matched patient {patient.id} by CPF suffix")
                return patient

        if data.has_name:
            first_name = data.name.split()[0]
            patient = self.store.find_by_first_name(first_name)
            if patient is not None:
                logger.debug(f"Matched patient {patient.id} by first name")
                return patient

        return None

    def _record_fields(self, data: RegistrationData) -> Dict[str, Any]:
        """Extracted values in PatientRecord terms; None where nothing was found."""
        return {
            "name": data.name if data.has_name else None,
            "email": data.email,
            "cpf": data.cpf,
            "rg": data.rg,
            "phone": data.contact_phone,
            "birth_date": data.birth_date,
            "gender": data.gender,
            "address": data.address.format() if data.address else None,
            "allergies": list(data.allergies),
            "current_medications": list(data.current_medications),
            "emergency_contact": data.emergency_contact.to_dict() if data.emergency_contact else None,
            "medical_history": format_medical_history(data),
            "occupation": data.occupation,
        }

    def _placeholder_email(self) -> str:
        return f"patient_{uuid.uuid4().hex}@{self.extraction.PLACEHOLDER_EMAIL_DOMAIN}"
