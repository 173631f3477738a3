# ============================================================================
# src/medical_document_ai/constants/document_types.py
# ============================================================================
"""
Document Types and Extraction Mappings
- Clinical document types assigned by the classifier
- Fixed type priority used to break classification ties
- Maps document type -> type-specific extraction targets
"""

from enum import Enum


class DocumentType(str, Enum):
    """
    Clinical genre assigned to each document. Exactly one per document.
    """
    PROGRESS_NOTE = "progress_note"          # evolução
    EXAM_RESULT = "exam_result"              # resultado de exame
    PRESCRIPTION = "prescription"            # prescrição / receita médica
    INTAKE_HISTORY = "intake_history"        # anamnese
    CERTIFICATE = "certificate"              # atestado médico
    PRESCRIPTION_COPY = "prescription_copy"  # segunda via de receita
    REPORT = "report"                        # laudo médico
    OTHER = "other"


class SourceFileType(str, Enum):
    """Binary format the plain text was recovered from."""
    DOCX = "docx"
    PDF = "pdf"
    TXT = "txt"
    RTF = "rtf"


class ExtractionTarget(str, Enum):
    """Type-dispatched sub-extractions."""
    MEDICATIONS = "medications"
    EXAM_RESULTS = "exam_results"
    SYMPTOMS = "symptoms"
    DIAGNOSIS = "diagnosis"


# Earlier wins: literal-rule declaration order and term-frequency tie-break
TYPE_PRIORITY = (
    DocumentType.EXAM_RESULT,
    DocumentType.PRESCRIPTION_COPY,
    DocumentType.PRESCRIPTION,
    DocumentType.CERTIFICATE,
    DocumentType.REPORT,
    DocumentType.INTAKE_HISTORY,
    DocumentType.PROGRESS_NOTE,
)

EXTRACTION_MAPPING = {
    DocumentType.PRESCRIPTION: (ExtractionTarget.MEDICATIONS,),
    DocumentType.PRESCRIPTION_COPY: (ExtractionTarget.MEDICATIONS,),
    DocumentType.EXAM_RESULT: (ExtractionTarget.EXAM_RESULTS,),
    DocumentType.PROGRESS_NOTE: (ExtractionTarget.SYMPTOMS, ExtractionTarget.DIAGNOSIS),
    DocumentType.INTAKE_HISTORY: (ExtractionTarget.SYMPTOMS,),
}
