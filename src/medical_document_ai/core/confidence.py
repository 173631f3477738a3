# ============================================================================
# src/medical_document_ai/core/confidence.py
# ============================================================================
"""
Confidence Scoring and Aggregation

Provides utilities for:
- Aggregating type, identity and extraction breadth into one score
- Determining confidence levels
- Deciding when a result needs human review

The overall score rewards breadth: a document yielding several different
kinds of facts scores higher than one yielding many facts of one kind.
"""

from dataclasses import dataclass
from typing import Optional

from ..config import ScoringSettings, scoring_settings, threshold_settings
from ..constants import DocumentType
from ..utils.exceptions import ConfigurationError
from .models import ExtractedClinicalData, PatientIdentityGuess


def clamp(score: float, low: float = 0.0, high: float = 1.0) -> float:
    """Clamp to [low, high] and round to 4 places."""
    return round(min(max(score, low), high), 4)


@dataclass
class ConfidenceThresholds:
    """Confidence level thresholds"""
    high: float = 0.85
    medium: float = 0.70
    low: float = 0.0

    @classmethod
    def from_settings(cls, settings=None) -> "ConfidenceThresholds":
        settings = settings or threshold_settings
        if settings.HIGH_CONFIDENCE_THRESHOLD < settings.HUMAN_REVIEW_THRESHOLD:
            raise ConfigurationError(
                f"HIGH_CONFIDENCE_THRESHOLD ({settings.HIGH_CONFIDENCE_THRESHOLD}) is below "
                f"HUMAN_REVIEW_THRESHOLD ({settings.HUMAN_REVIEW_THRESHOLD})"
            )
        return cls(
            high=settings.HIGH_CONFIDENCE_THRESHOLD,
            medium=settings.HUMAN_REVIEW_THRESHOLD,
        )

    def get_level(self, score: float) -> str:
        """
        Get confidence level from score.

        Args:
            score: Confidence score (0.0-1.0)

        Returns:
            Level string: "high", "medium", or "low"
        """
        if score >= self.high:
            return "high"
        elif score >= self.medium:
            return "medium"
        else:
            return "low"

    def requires_review(self, score: float) -> bool:
        return score < self.medium


class ConfidenceAggregator:
    """
    Overall analysis confidence.

        0.3                                    if type != OTHER
      + identity.confidence * 0.4
      + min(0.05 * non-empty clinical fields, 0.3)

    clamped to [0, 1]. Weights come from ScoringSettings.
    """

    def __init__(self, settings: Optional[ScoringSettings] = None):
        self.settings = settings or scoring_settings

    def aggregate(
        self,
        document_type: DocumentType,
        identity: PatientIdentityGuess,
        extracted_data: ExtractedClinicalData,
    ) -> float:
        s = self.settings
        score = 0.0

        if document_type != DocumentType.OTHER:
            score += s.TYPE_BASE_CONFIDENCE

        score += identity.confidence * s.IDENTITY_CONFIDENCE_FACTOR

        breadth = extracted_data.count_non_empty() * s.PER_FIELD_CONFIDENCE
        score += min(breadth, s.FIELD_CONFIDENCE_CAP)

        return clamp(score)
