# ============================================================================
# src/medical_document_ai/extractors/__init__.py
# ============================================================================
"""
Field-level extraction.

- field_extractor: matching primitives shared by every extractor
- identity_extractor: patient identity guess
- clinical_data_extractor: always-on and type-dispatched clinical fields

Only the primitives are re-exported here; the processors import them, and
the clinical data extractor imports the processors.
"""

from .field_extractor import FieldMatch, first_match, find_all, find_terms, count_terms

__all__ = [
    'FieldMatch',
    'first_match',
    'find_all',
    'find_terms',
    'count_terms',
]
