# ============================================================================
# src/medical_document_ai/__init__.py
# ============================================================================
"""
Medical Document AI

Rule-based analysis of Portuguese (pt-BR) clinical documents: classifies a
document, extracts patient identity and clinical fields, scores confidence
and proposes reviewable record-creation actions.
"""

__version__ = "0.1.0"

from .constants import ActionKind, DocumentType, SourceFileType
from .core.models import (
    RawDocument,
    PatientIdentityGuess,
    VitalSigns,
    Medication,
    ExamResultEntry,
    ExtractedClinicalData,
    SuggestedAction,
    AnalysisResult,
)
from .core.analyzer import MedicalDocumentAnalyzer
from .patterns import PatternLibrary, load_pattern_library
from .utils.exceptions import (
    MedicalDocumentAIError,
    DocumentAnalysisError,
    EmptyDocumentError,
    PatternLibraryError,
)

__all__ = [
    'ActionKind',
    'DocumentType',
    'SourceFileType',
    'RawDocument',
    'PatientIdentityGuess',
    'VitalSigns',
    'Medication',
    'ExamResultEntry',
    'ExtractedClinicalData',
    'SuggestedAction',
    'AnalysisResult',
    'MedicalDocumentAnalyzer',
    'PatternLibrary',
    'load_pattern_library',
    'MedicalDocumentAIError',
    'DocumentAnalysisError',
    'EmptyDocumentError',
    'PatternLibraryError',
]
