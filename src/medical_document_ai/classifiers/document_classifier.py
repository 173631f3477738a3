# ============================================================================
# src/medical_document_ai/classifiers/document_classifier.py
# ============================================================================
"""
Document Classifier

Assigns exactly one DocumentType to a document:

1. LITERAL RULES (high precision)
   - Ordered, named rules from the pattern library
   - First rule whose phrases occur in the lowercased text wins

2. TERM FREQUENCY (fallback)
   - Count every per-type cue term, sum per type
   - Strictly highest score wins; ties go to the type whose literal rule
     comes first, then to TYPE_PRIORITY for types without a rule

3. DEFAULT
   - No cue at all -> OTHER

Ties follow the library's rule order, so a document carrying cues for two
types resolves the same way in both steps, overridden rules included.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from ..constants import DocumentType, TYPE_PRIORITY
from ..extractors.field_extractor import count_terms
from ..patterns.library import PatternLibrary, get_default_library

logger = logging.getLogger(__name__)

METHOD_LITERAL_RULE = "literal_rule"
METHOD_TERM_FREQUENCY = "term_frequency"
METHOD_DEFAULT = "default"


@dataclass(frozen=True)
class ClassificationResult:
    """Classification outcome with the evidence behind it."""
    document_type: DocumentType
    method: str
    rule: Optional[str] = None
    scores: Dict[DocumentType, int] = field(default_factory=dict, compare=False)
    confidence: float = 0.0


class DocumentClassifier:
    """
    Rule-based document classifier.

    Usage:
        classifier = DocumentClassifier(library)
        doc_type = classifier.classify(text)
    """

    def __init__(self, library: Optional[PatternLibrary] = None):
        self.library = library or get_default_library()
        self.tie_order = tie_order(self.library)

    def classify(self, text: str) -> DocumentType:
        return self.classify_with_details(text).document_type

    def classify_with_details(self, text: str) -> ClassificationResult:
        lowered = (text or "").lower()

        for rule in self.library.rules:
            if rule.matches(lowered):
                logger.debug(f"Classified as {rule.document_type.name} by rule '{rule.name}'")
                return ClassificationResult(
                    document_type=rule.document_type,
                    method=METHOD_LITERAL_RULE,
                    rule=rule.name,
                    confidence=1.0,
                )

        scores = self.score(lowered)
        best_type = None
        best_score = 0
        for doc_type in self.tie_order:
            if scores.get(doc_type, 0) > best_score:
                best_type = doc_type
                best_score = scores[doc_type]

        if best_type is None:
            logger.debug("No classification cues found, defaulting to OTHER")
            return ClassificationResult(
                document_type=DocumentType.OTHER,
                method=METHOD_DEFAULT,
                scores=scores,
            )

        total = sum(scores.values())
        logger.debug(f"Classified as {best_type.name} by term frequency: {best_score}/{total}")
        return ClassificationResult(
            document_type=best_type,
            method=METHOD_TERM_FREQUENCY,
            scores=scores,
            confidence=round(best_score / total, 4),
        )

    def score(self, lowered_text: str) -> Dict[DocumentType, int]:
        """Cue-term hit count per document type."""
        return {
            doc_type: count_terms(lowered_text, terms)
            for doc_type, terms in self.library.cue_terms.items()
        }


def tie_order(library: PatternLibrary) -> Tuple[DocumentType, ...]:
    """Document types in literal-rule order, then the rest in TYPE_PRIORITY order."""
    ordered = []
    for doc_type in [rule.document_type for rule in library.rules] + list(TYPE_PRIORITY):
        if doc_type not in ordered:
            ordered.append(doc_type)
    for doc_type in library.cue_terms:
        if doc_type not in ordered:
            ordered.append(doc_type)
    return tuple(ordered)
