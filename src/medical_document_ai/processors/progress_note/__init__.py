# ============================================================================
# src/medical_document_ai/processors/progress_note/__init__.py
# ============================================================================
"""
Progress-note and intake-history processing module.
"""

from .processor import SymptomProcessor, DiagnosisProcessor

__all__ = ['SymptomProcessor', 'DiagnosisProcessor']
