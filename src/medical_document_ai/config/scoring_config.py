# ============================================================================
# src/medical_document_ai/config/scoring_config.py
# ============================================================================
"""
Scoring Model
- Patient-identity sub-field weights
- Suggested-action confidences
- Overall confidence aggregation weights
- Registration completeness point table

Every fixed number of the scoring model lives here so it can be tuned
(or overridden through the environment) without touching extraction code.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScoringSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ----- Patient identity (sums to 1.0) -----
    IDENTITY_NAME_WEIGHT: float = Field(default=0.3, ge=0.0, le=1.0)
    IDENTITY_CPF_WEIGHT: float = Field(default=0.4, ge=0.0, le=1.0)
    IDENTITY_BIRTH_DATE_WEIGHT: float = Field(default=0.2, ge=0.0, le=1.0)
    IDENTITY_RECORD_WEIGHT: float = Field(default=0.1, ge=0.0, le=1.0)
    IDENTITY_MIN_NAME_LENGTH: int = Field(
        default=6,
        ge=1,
        description="Shortest accepted patient name (after trimming)"
    )

    # ----- Suggested actions -----
    CREATE_PRESCRIPTION_CONFIDENCE: float = Field(default=0.90, ge=0.0, le=1.0)
    ADD_EXAM_RESULT_CONFIDENCE: float = Field(default=0.85, ge=0.0, le=1.0)
    CREATE_CONSULTATION_CONFIDENCE: float = Field(default=0.80, ge=0.0, le=1.0)
    CREATE_MEDICAL_RECORD_CONFIDENCE: float = Field(default=0.90, ge=0.0, le=1.0)
    UPDATE_PATIENT_THRESHOLD: float = Field(
        default=0.5,
        ge=0.0, le=1.0,
        description="Identity confidence must be strictly above this to suggest UPDATE_PATIENT"
    )

    # ----- Overall confidence -----
    TYPE_BASE_CONFIDENCE: float = Field(
        default=0.3,
        ge=0.0, le=1.0,
        description="Added when the document type is anything but OTHER"
    )
    IDENTITY_CONFIDENCE_FACTOR: float = Field(default=0.4, ge=0.0, le=1.0)
    PER_FIELD_CONFIDENCE: float = Field(default=0.05, ge=0.0, le=1.0)
    FIELD_CONFIDENCE_CAP: float = Field(default=0.3, ge=0.0, le=1.0)

    # ----- Registration completeness (points out of REGISTRATION_MAX_SCORE) -----
    REGISTRATION_NAME_POINTS: int = Field(default=2, ge=0)
    REGISTRATION_CPF_POINTS: int = Field(default=2, ge=0)
    REGISTRATION_BIRTH_DATE_POINTS: int = Field(default=1, ge=0)
    REGISTRATION_PHONE_POINTS: int = Field(default=1, ge=0)
    REGISTRATION_EMAIL_POINTS: int = Field(default=1, ge=0)
    REGISTRATION_ADDRESS_POINTS: int = Field(default=1, ge=0)
    REGISTRATION_BLOOD_TYPE_POINTS: int = Field(default=1, ge=0)
    REGISTRATION_ALLERGIES_POINTS: int = Field(default=1, ge=0)
    REGISTRATION_MAX_SCORE: int = Field(default=10, ge=1)


scoring_settings = ScoringSettings()
