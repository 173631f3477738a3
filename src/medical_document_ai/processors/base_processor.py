# ============================================================================
# src/medical_document_ai/processors/base_processor.py
# ============================================================================
"""
Base Processor Class

Type-specific sub-extractors (medications, exam results, symptoms,
diagnosis) inherit from this. The clinical data extractor picks which
processors run from EXTRACTION_MAPPING, so a processor never decides
whether it applies to a document; it only extracts.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
import logging

from ..config import ExtractionSettings, extraction_settings
from ..constants import ExtractionTarget
from ..patterns.library import PatternLibrary, get_default_library


class BaseProcessor(ABC):
    """
    Abstract base class for type-dispatched sub-extractors.

    Subclasses must implement:
    - get_name(): Processor identifier
    - extract(): List of records found in the text (empty list when none)

    and set `target` to the ExtractionTarget they fill.
    """

    target: ExtractionTarget

    def __init__(
        self,
        library: Optional[PatternLibrary] = None,
        settings: Optional[ExtractionSettings] = None
    ):
        self.library = library or get_default_library()
        self.settings = settings or extraction_settings
        self.logger = logging.getLogger(f"{__name__}.{self.get_name()}")

    @abstractmethod
    def get_name(self) -> str:
        """Return processor name (e.g., 'PrescriptionProcessor')"""
        pass

    @abstractmethod
    def extract(self, text: str) -> List:
        """
        Extract every record of this processor's target.

        Args:
            text: Original-case document text

        Returns:
            Records in document order
        """
        pass
