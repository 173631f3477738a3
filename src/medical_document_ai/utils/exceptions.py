# ============================================================================
# src/medical_document_ai/utils/exceptions.py
# ============================================================================
"""
Custom exceptions for the medical document analysis engine.

Soft misses (a pattern that does not match) are never exceptions; they only
leave the corresponding field empty. Exceptions are reserved for conditions
the caller must handle.
"""


class MedicalDocumentAIError(Exception):
    """Base exception for all medical document analysis errors."""
    pass


class DocumentAnalysisError(MedicalDocumentAIError):
    """Error during document analysis."""
    pass


class EmptyDocumentError(DocumentAnalysisError):
    """Document has no usable text content."""
    def __init__(self, message: str, document_id: str = None):
        super().__init__(message)
        self.document_id = document_id


class PatternLibraryError(MedicalDocumentAIError):
    """Pattern library could not be loaded or is inconsistent."""
    def __init__(self, message: str, source: str = None):
        super().__init__(message)
        self.source = source


class ConfigurationError(MedicalDocumentAIError):
    """Invalid configuration."""
    pass


class PatientStoreError(MedicalDocumentAIError):
    """Error reading or writing the patient store."""
    pass


class ActionDispatchError(MedicalDocumentAIError):
    """Suggested action cannot be dispatched."""
    def __init__(self, message: str, action: str = None):
        super().__init__(message)
        self.action = action
