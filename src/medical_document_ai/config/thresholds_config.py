# ============================================================================
# src/medical_document_ai/config/thresholds_config.py
# ============================================================================
"""
Confidence Thresholds
- Confidence level bands shown to reviewers
- Human review escalation
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ThresholdSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    HIGH_CONFIDENCE_THRESHOLD: float = Field(
        default=0.85,
        ge=0.0, le=1.0,
        description="At or above this overall confidence a result is reported as 'high'"
    )
    HUMAN_REVIEW_THRESHOLD: float = Field(
        default=0.70,
        ge=0.0, le=1.0,
        description="Below this overall confidence a result is flagged for careful human review"
    )


threshold_settings = ThresholdSettings()
