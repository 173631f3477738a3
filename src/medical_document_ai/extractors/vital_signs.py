# ============================================================================
# src/medical_document_ai/extractors/vital_signs.py
# ============================================================================
"""
Vital-sign extraction. Each sign has its own pattern group and is stored
as the raw matched substring ("PA: 120x80 mmHg"), without unit conversion.
"""

from ..core.models import VitalSigns
from ..patterns.library import PatternLibrary
from .field_extractor import first_match

VITAL_SIGN_GROUPS = {
    "blood_pressure": "vital_signs.blood_pressure",
    "heart_rate": "vital_signs.heart_rate",
    "temperature": "vital_signs.temperature",
    "weight": "vital_signs.weight",
    "height": "vital_signs.height",
}


def extract_vital_signs(text: str, library: PatternLibrary) -> VitalSigns:
    found = {}
    for sign, group_name in VITAL_SIGN_GROUPS.items():
        match = first_match(text, library.group(group_name))
        if match:
            found[sign] = match.value
    return VitalSigns(**found)
