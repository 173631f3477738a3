# ============================================================================
# src/medical_document_ai/reporting/__init__.py
# ============================================================================
from .report_renderer import ReportRenderer, format_percent

__all__ = ['ReportRenderer', 'format_percent']
