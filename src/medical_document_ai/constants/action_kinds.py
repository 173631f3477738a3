# ============================================================================
# src/medical_document_ai/constants/action_kinds.py
# ============================================================================
"""
Suggested action kinds. Each kind is consumed by one downstream
record-creation collaborator.
"""

from enum import Enum


class ActionKind(str, Enum):
    CREATE_CONSULTATION = "create_consultation"
    ADD_EXAM_RESULT = "add_exam_result"
    CREATE_PRESCRIPTION = "create_prescription"
    UPDATE_PATIENT = "update_patient"
    CREATE_MEDICAL_RECORD = "create_medical_record"
