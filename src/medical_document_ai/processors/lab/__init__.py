# ============================================================================
# src/medical_document_ai/processors/lab/__init__.py
# ============================================================================
"""
Exam-result processing module.
"""

from .processor import LabProcessor

__all__ = ['LabProcessor']
