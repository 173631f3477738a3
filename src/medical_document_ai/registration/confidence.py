# ============================================================================
# src/medical_document_ai/registration/confidence.py
# ============================================================================
"""
Registration completeness score: fixed points per field on a
REGISTRATION_MAX_SCORE scale, capped and normalized to [0, 1].
"""

from typing import Optional

from ..config import ScoringSettings, scoring_settings
from ..core.confidence import clamp
from .models import RegistrationData


def registration_confidence(
    data: RegistrationData,
    settings: Optional[ScoringSettings] = None
) -> float:
    s = settings or scoring_settings
    score = 0

    if data.has_name:
        score += s.REGISTRATION_NAME_POINTS
    if data.cpf:
        score += s.REGISTRATION_CPF_POINTS
    if data.birth_date:
        score += s.REGISTRATION_BIRTH_DATE_POINTS
    if data.contact_phone:
        score += s.REGISTRATION_PHONE_POINTS
    if data.email:
        score += s.REGISTRATION_EMAIL_POINTS
    if data.address and data.address.street:
        score += s.REGISTRATION_ADDRESS_POINTS
    if data.blood_type:
        score += s.REGISTRATION_BLOOD_TYPE_POINTS
    if data.allergies:
        score += s.REGISTRATION_ALLERGIES_POINTS

    return clamp(min(score, s.REGISTRATION_MAX_SCORE) / s.REGISTRATION_MAX_SCORE)
