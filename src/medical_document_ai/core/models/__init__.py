# ============================================================================
# src/medical_document_ai/core/models/__init__.py
# ============================================================================
"""
Data records produced and consumed by the analysis core.
"""

from .document import RawDocument
from .clinical_data import (
    PatientIdentityGuess,
    VitalSigns,
    Medication,
    ExamResultEntry,
    ExtractedClinicalData,
)
from .analysis_result import SuggestedAction, AnalysisResult

__all__ = [
    'RawDocument',
    'PatientIdentityGuess',
    'VitalSigns',
    'Medication',
    'ExamResultEntry',
    'ExtractedClinicalData',
    'SuggestedAction',
    'AnalysisResult',
]
