# ============================================================================
# src/medical_document_ai/utils/__init__.py
# ============================================================================
"""
Utility modules for the medical document analysis engine.
"""

from .exceptions import (
    MedicalDocumentAIError,
    DocumentAnalysisError,
    EmptyDocumentError,
    PatternLibraryError,
    ConfigurationError,
    PatientStoreError,
    ActionDispatchError,
)

from .logging import (
    setup_logging,
    configure_from_settings,
    get_logger,
    log_performance,
    JsonFormatter,
)

from .text_normalizer import (
    digits_only,
    collapse_whitespace,
    parse_day_first_date,
)

__all__ = [
    # Exceptions
    'MedicalDocumentAIError',
    'DocumentAnalysisError',
    'EmptyDocumentError',
    'PatternLibraryError',
    'ConfigurationError',
    'PatientStoreError',
    'ActionDispatchError',
    # Logging
    'setup_logging',
    'configure_from_settings',
    'get_logger',
    'log_performance',
    'JsonFormatter',
    # Text
    'digits_only',
    'collapse_whitespace',
    'parse_day_first_date',
]
