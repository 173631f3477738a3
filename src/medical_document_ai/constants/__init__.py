# ============================================================================
# src/medical_document_ai/constants/__init__.py
# ============================================================================
"""
Convenient imports for all constants
"""

from .document_types import (
    DocumentType,
    SourceFileType,
    ExtractionTarget,
    TYPE_PRIORITY,
    EXTRACTION_MAPPING,
)
from .action_kinds import ActionKind
