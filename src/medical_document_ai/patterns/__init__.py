# ============================================================================
# src/medical_document_ai/patterns/__init__.py
# ============================================================================
"""
Pattern library: classification cues, label-anchored regex groups and
vocabularies, loaded from versioned JSON.
"""

from .library import (
    PatternGroup,
    ClassificationRule,
    PatternLibrary,
    load_pattern_library,
    get_default_library,
    DEFAULT_LIBRARY_PATH,
)

__all__ = [
    'PatternGroup',
    'ClassificationRule',
    'PatternLibrary',
    'load_pattern_library',
    'get_default_library',
    'DEFAULT_LIBRARY_PATH',
]
