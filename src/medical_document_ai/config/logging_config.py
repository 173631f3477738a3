# ============================================================================
# src/medical_document_ai/config/logging_config.py
# ============================================================================
"""
Logging Settings
- Log level
- Output format
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )
    LOG_JSON: bool = Field(
        default=False,
        description="Emit log records as JSON lines instead of plain text"
    )


logging_settings = LoggingSettings()
