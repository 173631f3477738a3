# ============================================================================
# src/medical_document_ai/registration/__init__.py
# ============================================================================
"""
Patient-registration pipeline: registration form text -> created or
updated patient record.
"""

from .models import (
    Address,
    EmergencyContact,
    RegistrationData,
    PatientRecord,
    RegistrationAction,
    RegistrationOutcome,
    UNIDENTIFIED_NAME,
)
from .extractor import RegistrationExtractor
from .confidence import registration_confidence
from .patient_store import PatientStore, SQLitePatientStore
from .service import PatientRegistrationService, format_medical_history

__all__ = [
    'Address',
    'EmergencyContact',
    'RegistrationData',
    'PatientRecord',
    'RegistrationAction',
    'RegistrationOutcome',
    'UNIDENTIFIED_NAME',
    'RegistrationExtractor',
    'registration_confidence',
    'PatientStore',
    'SQLitePatientStore',
    'PatientRegistrationService',
    'format_medical_history',
]
