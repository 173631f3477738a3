# ============================================================================
# src/medical_document_ai/processors/prescription/__init__.py
# ============================================================================
"""
Prescription processing module.
"""

from .processor import PrescriptionProcessor

__all__ = ['PrescriptionProcessor']
