# ============================================================================
# src/medical_document_ai/processors/progress_note/processor.py
# ============================================================================
"""
Progress Note Processors

- SymptomProcessor: presence of each symptom stem from the vocabulary
  (word-boundary, case-insensitive); reports vocabulary terms, not free text
- DiagnosisProcessor: "Diagnóstico:", "Hipótese diagnóstica:", "CID",
  "Conclusão:" label lines, collected verbatim in document order
"""

from typing import List

from ...constants import ExtractionTarget
from ...extractors.field_extractor import find_all, find_terms
from ...utils.text_normalizer import collapse_whitespace
from ..base_processor import BaseProcessor


class SymptomProcessor(BaseProcessor):

    target = ExtractionTarget.SYMPTOMS

    def get_name(self) -> str:
        return "SymptomProcessor"

    def extract(self, text: str) -> List[str]:
        return find_terms(text, self.library.vocabulary("symptoms"))


class DiagnosisProcessor(BaseProcessor):

    target = ExtractionTarget.DIAGNOSIS

    def get_name(self) -> str:
        return "DiagnosisProcessor"

    def extract(self, text: str) -> List[str]:
        matches = find_all(text, self.library.group("progress_note.diagnosis"))
        return [collapse_whitespace(match.text) for match in matches]
