# ============================================================================
# src/medical_document_ai/actions/recommender.py
# ============================================================================
"""
Action Recommender

Ordered rule table, one primary rule per document type:

| DocumentType   | Action                | Confidence | Guard                  |
|----------------|-----------------------|------------|------------------------|
| PRESCRIPTION   | CREATE_PRESCRIPTION   | 0.90       | medications non-empty  |
| EXAM_RESULT    | ADD_EXAM_RESULT       | 0.85       | exam results non-empty |
| PROGRESS_NOTE  | CREATE_CONSULTATION   | 0.80       | always                 |
| INTAKE_HISTORY | CREATE_MEDICAL_RECORD | 0.90       | always                 |

Then one secondary rule, always checked: UPDATE_PATIENT when identity
confidence > 0.5, carrying the identity itself. Primary action first,
identity update last; callers treat the order as the ranking.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from ..config import ScoringSettings, scoring_settings
from ..constants import ActionKind, DocumentType
from ..core.confidence import clamp
from ..core.models import ExtractedClinicalData, PatientIdentityGuess, SuggestedAction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionRule:
    document_type: DocumentType
    action: ActionKind
    confidence_setting: str
    guard: Callable[[ExtractedClinicalData], bool]
    payload: Callable[[ExtractedClinicalData], Dict[str, Any]]


def _list_payload(items) -> List[Dict[str, Any]]:
    return [item.to_dict() for item in items or []]


def _date(data: ExtractedClinicalData) -> Optional[str]:
    return data.date.isoformat() if data.date else None


def _prescription_payload(data: ExtractedClinicalData) -> Dict[str, Any]:
    return {
        "medications": _list_payload(data.medications),
        "doctor": data.doctor,
        "date": _date(data),
    }


def _exam_payload(data: ExtractedClinicalData) -> Dict[str, Any]:
    return {
        "results": _list_payload(data.exam_results),
        "date": _date(data),
    }


def _consultation_payload(data: ExtractedClinicalData) -> Dict[str, Any]:
    return {
        "type": "follow_up",
        "symptoms": list(data.symptoms or []),
        "diagnosis": list(data.diagnosis or []),
        "vital_signs": data.vital_signs.to_dict() if data.vital_signs else None,
        "observations": data.observations,
        "date": _date(data),
        "doctor": data.doctor,
    }


def _medical_record_payload(data: ExtractedClinicalData) -> Dict[str, Any]:
    return {
        "type": "anamnesis",
        "content": data.observations,
        "symptoms": list(data.symptoms or []),
        "date": _date(data),
    }


PRIMARY_RULES = (
    ActionRule(
        document_type=DocumentType.PRESCRIPTION,
        action=ActionKind.CREATE_PRESCRIPTION,
        confidence_setting="CREATE_PRESCRIPTION_CONFIDENCE",
        guard=lambda data: bool(data.medications),
        payload=_prescription_payload,
    ),
    ActionRule(
        document_type=DocumentType.EXAM_RESULT,
        action=ActionKind.ADD_EXAM_RESULT,
        confidence_setting="ADD_EXAM_RESULT_CONFIDENCE",
        guard=lambda data: bool(data.exam_results),
        payload=_exam_payload,
    ),
    ActionRule(
        document_type=DocumentType.PROGRESS_NOTE,
        action=ActionKind.CREATE_CONSULTATION,
        confidence_setting="CREATE_CONSULTATION_CONFIDENCE",
        guard=lambda data: True,
        payload=_consultation_payload,
    ),
    ActionRule(
        document_type=DocumentType.INTAKE_HISTORY,
        action=ActionKind.CREATE_MEDICAL_RECORD,
        confidence_setting="CREATE_MEDICAL_RECORD_CONFIDENCE",
        guard=lambda data: True,
        payload=_medical_record_payload,
    ),
)


class ActionRecommender:
    """
    Maps (document type, extracted data, identity) to ranked actions.

    Usage:
        recommender = ActionRecommender()
        actions = recommender.suggest(doc_type, data, identity)
    """

    def __init__(self, settings: Optional[ScoringSettings] = None):
        self.settings = settings or scoring_settings

    def suggest(
        self,
        document_type: DocumentType,
        extracted_data: ExtractedClinicalData,
        identity: PatientIdentityGuess,
    ) -> List[SuggestedAction]:
        actions = []

        for rule in PRIMARY_RULES:
            if rule.document_type != document_type:
                continue
            if rule.guard(extracted_data):
                actions.append(SuggestedAction(
                    action=rule.action,
                    confidence=clamp(getattr(self.settings, rule.confidence_setting)),
                    payload=rule.payload(extracted_data),
                ))
            else:
                logger.debug(f"{rule.action.name} guard not met for {document_type.name}")
            break

        if identity.confidence > self.settings.UPDATE_PATIENT_THRESHOLD:
            actions.append(SuggestedAction(
                action=ActionKind.UPDATE_PATIENT,
                confidence=clamp(identity.confidence),
                payload=identity.to_dict(),
            ))

        return actions
