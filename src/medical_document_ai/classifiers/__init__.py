# ============================================================================
# src/medical_document_ai/classifiers/__init__.py
# ============================================================================
from .document_classifier import DocumentClassifier, ClassificationResult

__all__ = ['DocumentClassifier', 'ClassificationResult']
