# ============================================================================
# src/medical_document_ai/config/extraction_config.py
# ============================================================================
"""
Extraction Settings
- Pattern library location
- Medication duration search window
- Input acceptance
- Registration upsert parameters
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ExtractionSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    PATTERN_LIBRARY_PATH: Optional[Path] = Field(
        default=None,
        description="JSON pattern library to load instead of the packaged pt_br.json"
    )
    DURATION_WINDOW_BEFORE: int = Field(
        default=50,
        ge=0,
        description="Characters before a medication match searched for a treatment duration"
    )
    DURATION_WINDOW_AFTER: int = Field(
        default=100,
        ge=0,
        description="Characters from a medication match start searched for a treatment duration"
    )
    MIN_CONTENT_CHARS: int = Field(
        default=1,
        ge=1,
        description="Documents with fewer non-blank characters are rejected as empty"
    )
    CPF_MATCH_SUFFIX_LENGTH: int = Field(
        default=4,
        ge=1, le=11,
        description="Trailing CPF digits used to match an existing patient"
    )
    PLACEHOLDER_EMAIL_DOMAIN: str = Field(
        default="temp.com",
        description="Domain for the placeholder email given to patients registered without one"
    )


extraction_settings = ExtractionSettings()
