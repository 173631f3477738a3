# ============================================================================
# src/medical_document_ai/processors/lab/processor.py
# ============================================================================
"""
Lab Processor

Exam-result list for EXAM_RESULT documents: one pattern capturing
exam name, numeric result, optional unit and optional parenthesized
reference range, accumulated across the whole text in document order.
Label lines that look like results ("Idade: 45") are excluded by the
pattern group's exclude list. Header words sharing the line with a result
("Resultado de Exame Hemoglobina 13.8") are stripped from the exam name.
"""

from typing import List

from ...constants import ExtractionTarget
from ...core.models import ExamResultEntry
from ...extractors.field_extractor import find_all
from ...utils.text_normalizer import collapse_whitespace
from ..base_processor import BaseProcessor


class LabProcessor(BaseProcessor):

    target = ExtractionTarget.EXAM_RESULTS

    def get_name(self) -> str:
        return "LabProcessor"

    def extract(self, text: str) -> List[ExamResultEntry]:
        stopwords = {w.casefold() for w in self.library.vocabulary("exam_name_stopwords")}

        results = []
        for match in find_all(text, self.library.group("exam.result")):
            exam_type = self._clean_exam_type(match.value, stopwords)
            if not exam_type:
                self.logger.debug(f"Dropping exam result without a name: {match.text!r}")
                continue

            results.append(ExamResultEntry(
                exam_type=exam_type,
                result=match.get("result", ""),
                reference_range=match.get("reference"),
                unit=match.get("unit"),
            ))

        self.logger.debug(f"Found {len(results)} exam results")
        return results

    def _clean_exam_type(self, raw_name: str, stopwords) -> str:
        words = collapse_whitespace(raw_name).split(" ")
        while words and words[0].casefold() in stopwords:
            words.pop(0)
        return " ".join(words)
