# ============================================================================
# src/medical_document_ai/core/models/analysis_result.py
# ============================================================================
"""
Analysis output
- SuggestedAction: proposed downstream write, never committed by the core
- AnalysisResult: everything one analysis produced, JSON-serializable
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ...constants import ActionKind, DocumentType
from .clinical_data import ExtractedClinicalData, PatientIdentityGuess


@dataclass(frozen=True)
class SuggestedAction:
    action: ActionKind
    confidence: float
    payload: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "action": self.action.name,
            "confidence": self.confidence,
            "payload": self.payload,
        }


@dataclass(frozen=True)
class AnalysisResult:
    confidence: float
    document_type: DocumentType
    patient_info: PatientIdentityGuess
    extracted_data: ExtractedClinicalData
    suggested_actions: List[SuggestedAction] = field(default_factory=list)
    document_id: Optional[str] = None

    @property
    def primary_action(self) -> Optional[SuggestedAction]:
        """Highest-ranked action (actions are ordered by rank)."""
        return self.suggested_actions[0] if self.suggested_actions else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "document_id": self.document_id,
            "confidence": self.confidence,
            "document_type": self.document_type.name,
            "patient_info": self.patient_info.to_dict(),
            "extracted_data": self.extracted_data.to_dict(),
            "suggested_actions": [a.to_dict() for a in self.suggested_actions],
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        """Canonical JSON; identical analyses serialize identically."""
        return json.dumps(self.to_dict(), sort_keys=True, ensure_ascii=False, indent=indent)
