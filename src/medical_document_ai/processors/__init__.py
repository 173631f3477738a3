# ============================================================================
# src/medical_document_ai/processors/__init__.py
# ============================================================================
"""
Type-dispatched sub-extractors.
"""

from .base_processor import BaseProcessor
from .prescription import PrescriptionProcessor
from .lab import LabProcessor
from .progress_note import SymptomProcessor, DiagnosisProcessor

__all__ = [
    'BaseProcessor',
    'PrescriptionProcessor',
    'LabProcessor',
    'SymptomProcessor',
    'DiagnosisProcessor',
]
