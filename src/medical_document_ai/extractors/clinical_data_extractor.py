# ============================================================================
# src/medical_document_ai/extractors/clinical_data_extractor.py
# ============================================================================
"""
Structured-Data Extractor

Always-on extractions (every document type):
- date          first date in the text, parsed day-first; invalid -> dropped
- doctor        "Dr./Dra." or "Médico:" followed by a capitalized name run
- vital signs   one independent pattern per sign
- observations  "Observação:" / "Obs:" lines joined with ". "

Type-dispatched extractions (EXTRACTION_MAPPING):
- PRESCRIPTION, PRESCRIPTION_COPY -> medications
- EXAM_RESULT                     -> exam results
- PROGRESS_NOTE                   -> symptoms, diagnosis
- INTAKE_HISTORY                  -> symptoms

Fields of targets that did not run stay None, so an exam result never
carries a medication list and a prescription never carries exam results.
"""

import logging
from typing import Dict, Optional

from ..config import ExtractionSettings, extraction_settings
from ..constants import DocumentType, ExtractionTarget, EXTRACTION_MAPPING
from ..core.models import ExtractedClinicalData
from ..patterns.library import PatternLibrary, get_default_library
from ..processors import (
    BaseProcessor,
    PrescriptionProcessor,
    LabProcessor,
    SymptomProcessor,
    DiagnosisProcessor,
)
from ..utils.text_normalizer import collapse_whitespace, parse_day_first_date
from .field_extractor import find_all, first_match
from .vital_signs import extract_vital_signs

logger = logging.getLogger(__name__)


class ClinicalDataExtractor:
    """
    Clinical fields for one document, given its type.

    Usage:
        extractor = ClinicalDataExtractor(library)
        data = extractor.extract(text, DocumentType.PRESCRIPTION)
    """

    def __init__(
        self,
        library: Optional[PatternLibrary] = None,
        settings: Optional[ExtractionSettings] = None
    ):
        self.library = library or get_default_library()
        self.settings = settings or extraction_settings

        processors = (
            PrescriptionProcessor(self.library, self.settings),
            LabProcessor(self.library, self.settings),
            SymptomProcessor(self.library, self.settings),
            DiagnosisProcessor(self.library, self.settings),
        )
        self.processors: Dict[ExtractionTarget, BaseProcessor] = {
            p.target: p for p in processors
        }

    def extract(self, text: str, document_type: DocumentType) -> ExtractedClinicalData:
        vital_signs = extract_vital_signs(text, self.library)

        fields = {
            "date": self._extract_date(text),
            "doctor": self._extract_doctor(text),
            "vital_signs": None if vital_signs.is_empty else vital_signs,
            "observations": self._extract_observations(text),
        }

        for target in EXTRACTION_MAPPING.get(document_type, ()):
            fields[target.value] = self.processors[target].extract(text)

        return ExtractedClinicalData(**fields)

    def _extract_date(self, text: str):
        match = first_match(text, self.library.group("clinical.date"))
        if match is None:
            return None
        parsed = parse_day_first_date(match.value)
        if parsed is None:
            logger.debug(f"Dropping unparseable document date {match.value!r}")
        return parsed

    def _extract_doctor(self, text: str) -> Optional[str]:
        match = first_match(text, self.library.group("clinical.doctor"))
        return collapse_whitespace(match.value) if match else None

    def _extract_observations(self, text: str) -> Optional[str]:
        matches = find_all(text, self.library.group("clinical.observation"))
        if not matches:
            return None
        return ". ".join(match.value for match in matches)
