# ============================================================================
# src/medical_document_ai/actions/__init__.py
# ============================================================================
"""
Suggested actions: recommendation and dispatch.
"""

from .recommender import ActionRecommender, ActionRule, PRIMARY_RULES
from .dispatcher import ActionDispatcher, ImportResult

__all__ = [
    'ActionRecommender',
    'ActionRule',
    'PRIMARY_RULES',
    'ActionDispatcher',
    'ImportResult',
]
