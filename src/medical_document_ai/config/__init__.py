# ============================================================================
# src/medical_document_ai/config/__init__.py
# ============================================================================
"""
Convenient imports for all settings
"""

from .scoring_config import ScoringSettings, scoring_settings
from .extraction_config import ExtractionSettings, extraction_settings
from .thresholds_config import ThresholdSettings, threshold_settings
from .logging_config import LoggingSettings, logging_settings
