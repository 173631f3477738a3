# ============================================================================
# src/medical_document_ai/core/analyzer.py
# ============================================================================
"""
Medical Document Analyzer

Runs the full rule-based analysis of one document:

    text ──> DocumentClassifier ──> type ──> ClinicalDataExtractor ──┐
      └────> IdentityExtractor ─────────────────────────────────────┤
                                                                     v
                 ActionRecommender + ConfidenceAggregator ──> AnalysisResult

Pure and synchronous: no I/O, no clock, no shared mutable state. The same
text always yields the same AnalysisResult, and one analyzer may be used
from any number of threads.
"""

import logging
from typing import Optional

from ..actions.recommender import ActionRecommender
from ..classifiers.document_classifier import DocumentClassifier
from ..config import ExtractionSettings, ScoringSettings, extraction_settings, scoring_settings
from ..extractors.clinical_data_extractor import ClinicalDataExtractor
from ..extractors.identity_extractor import IdentityExtractor
from ..patterns.library import PatternLibrary, get_default_library
from ..reporting.report_renderer import ReportRenderer
from ..utils.exceptions import EmptyDocumentError
from ..utils.logging import log_performance
from .confidence import ConfidenceAggregator
from .models import AnalysisResult, RawDocument

logger = logging.getLogger(__name__)


class MedicalDocumentAnalyzer:
    """
    Entry point of the analysis core.

    Usage:
        analyzer = MedicalDocumentAnalyzer()
        result = analyzer.analyze(document)
        print(analyzer.render_report(result))
    """

    def __init__(
        self,
        library: Optional[PatternLibrary] = None,
        scoring: Optional[ScoringSettings] = None,
        extraction: Optional[ExtractionSettings] = None,
        renderer: Optional[ReportRenderer] = None,
    ):
        self.library = library or get_default_library()
        self.scoring = scoring or scoring_settings
        self.extraction = extraction or extraction_settings

        self.classifier = DocumentClassifier(self.library)
        self.identity_extractor = IdentityExtractor(self.library, self.scoring)
        self.clinical_extractor = ClinicalDataExtractor(self.library, self.extraction)
        self.recommender = ActionRecommender(self.scoring)
        self.aggregator = ConfidenceAggregator(self.scoring)
        self.renderer = renderer or ReportRenderer()

    def analyze(self, document: RawDocument) -> AnalysisResult:
        """
        Analyze a document.

        Raises:
            EmptyDocumentError: document has no usable text
        """
        return self.analyze_text(document.content, document_id=document.id)

    @log_performance(logger, "Document analysis")
    def analyze_text(self, text: str, document_id: Optional[str] = None) -> AnalysisResult:
        """
        Analyze plain text.

        Args:
            text: Original-case document text
            document_id: Carried into the result for correlation

        Raises:
            EmptyDocumentError: text is empty or shorter than MIN_CONTENT_CHARS
        """
        self._validate(text, document_id)

        classification = self.classifier.classify_with_details(text)
        document_type = classification.document_type

        identity = self.identity_extractor.extract(text)
        extracted_data = self.clinical_extractor.extract(text, document_type)
        actions = self.recommender.suggest(document_type, extracted_data, identity)
        confidence = self.aggregator.aggregate(document_type, identity, extracted_data)

        logger.info(
            f"Analyzed document {document_id or '<unsaved>'}: {document_type.name} "
            f"({classification.method}), confidence {confidence:.2f}, "
            f"{len(actions)} suggested actions"
        )

        return AnalysisResult(
            confidence=confidence,
            document_type=document_type,
            patient_info=identity,
            extracted_data=extracted_data,
            suggested_actions=actions,
            document_id=document_id,
        )

    def render_report(self, result: AnalysisResult) -> str:
        return self.renderer.render(result)

    def _validate(self, text: Optional[str], document_id: Optional[str]) -> None:
        stripped = (text or "").strip()
        if not stripped:
            raise EmptyDocumentError("Document has no text content", document_id=document_id)
        if len(stripped) < self.extraction.MIN_CONTENT_CHARS:
            raise EmptyDocumentError(
                f"Document has {len(stripped)} characters, "
                f"minimum is {self.extraction.MIN_CONTENT_CHARS}",
                document_id=document_id
            )
