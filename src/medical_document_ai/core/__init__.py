# ============================================================================
# src/medical_document_ai/core/__init__.py
# ============================================================================
"""
Core records and scoring. The analyzer lives in core.analyzer and is
re-exported from the package root.
"""

from .models import (
    RawDocument,
    PatientIdentityGuess,
    VitalSigns,
    Medication,
    ExamResultEntry,
    ExtractedClinicalData,
    SuggestedAction,
    AnalysisResult,
)
from .confidence import ConfidenceAggregator, ConfidenceThresholds, clamp

__all__ = [
    'RawDocument',
    'PatientIdentityGuess',
    'VitalSigns',
    'Medication',
    'ExamResultEntry',
    'ExtractedClinicalData',
    'SuggestedAction',
    'AnalysisResult',
    'ConfidenceAggregator',
    'ConfidenceThresholds',
    'clamp',
]
