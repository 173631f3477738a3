# ============================================================================
# src/medical_document_ai/core/models/clinical_data.py
# ============================================================================
"""
Extracted clinical records
- Patient identity guess with additive confidence
- Vital signs, medications, exam results (raw matched strings)
- ExtractedClinicalData: the union of always-on and type-dispatched fields

All strings are kept verbatim from the document; no unit conversion or
vocabulary mapping happens at this layer.
"""

from dataclasses import dataclass, fields
import datetime
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class PatientIdentityGuess:
    name: Optional[str] = None
    cpf: Optional[str] = None             # digits only
    birth_date: Optional[str] = None      # raw, not calendar-validated
    medical_record: Optional[str] = None
    confidence: float = 0.0

    @property
    def is_empty(self) -> bool:
        return not any((self.name, self.cpf, self.birth_date, self.medical_record))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "cpf": self.cpf,
            "birth_date": self.birth_date,
            "medical_record": self.medical_record,
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class VitalSigns:
    blood_pressure: Optional[str] = None
    heart_rate: Optional[str] = None
    temperature: Optional[str] = None
    weight: Optional[str] = None
    height: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class Medication:
    name: str
    dosage: str
    frequency: str = ""
    duration: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "name": self.name,
            "dosage": self.dosage,
            "frequency": self.frequency,
            "duration": self.duration,
        }


@dataclass(frozen=True)
class ExamResultEntry:
    exam_type: str
    result: str
    reference_range: Optional[str] = None
    unit: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "exam_type": self.exam_type,
            "result": self.result,
            "reference_range": self.reference_range,
            "unit": self.unit,
        }


@dataclass(frozen=True)
class ExtractedClinicalData:
    """
    Clinical fields found in one document.

    List fields are None when their sub-extractor did not run for the
    document type, and an empty list when it ran and found nothing.
    """
    date: Optional[datetime.date] = None
    doctor: Optional[str] = None
    vital_signs: Optional[VitalSigns] = None
    medications: Optional[List[Medication]] = None
    exam_results: Optional[List[ExamResultEntry]] = None
    symptoms: Optional[List[str]] = None
    diagnosis: Optional[List[str]] = None
    observations: Optional[str] = None

    def count_non_empty(self) -> int:
        """Fields that carry at least one extracted fact (observations excluded)."""
        candidates = (
            self.date,
            self.doctor,
            self.medications,
            self.exam_results,
            self.symptoms,
            None if self.vital_signs is None or self.vital_signs.is_empty else self.vital_signs,
            self.diagnosis,
        )
        return sum(1 for value in candidates if value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date.isoformat() if self.date else None,
            "doctor": self.doctor,
            "vital_signs": self.vital_signs.to_dict() if self.vital_signs else None,
            "medications": _list_to_dicts(self.medications),
            "exam_results": _list_to_dicts(self.exam_results),
            "symptoms": list(self.symptoms) if self.symptoms is not None else None,
            "diagnosis": list(self.diagnosis) if self.diagnosis is not None else None,
            "observations": self.observations,
        }


def _list_to_dicts(items):
    if items is None:
        return None
    return [item.to_dict() for item in items]
