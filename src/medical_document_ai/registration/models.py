# ============================================================================
# src/medical_document_ai/registration/models.py
# ============================================================================
"""
Registration records
- RegistrationData: demographic fields extracted from a registration form
- PatientRecord: the stored patient, as the patient store sees it
- RegistrationOutcome: result of one upsert
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, List, Optional

UNIDENTIFIED_NAME = "Nome não identificado"

GENDER_BY_SEX = {
    "M": "MALE",
    "F": "FEMALE",
    "OUTRO": "OTHER",
}


class RegistrationAction(str, Enum):
    CREATED = "created"
    UPDATED = "updated"


@dataclass(frozen=True)
class Address:
    street: Optional[str] = None
    number: Optional[str] = None
    complement: Optional[str] = None
    neighborhood: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None

    def format(self) -> str:
        """Comma-joined single line, empty parts skipped."""
        parts = [
            self.street,
            self.number,
            self.complement,
            self.neighborhood,
            self.city,
            self.state,
            self.postal_code,
        ]
        return ", ".join(part for part in parts if part)


@dataclass(frozen=True)
class EmergencyContact:
    name: Optional[str] = None
    relationship: Optional[str] = None
    phone: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {"name": self.name, "relationship": self.relationship, "phone": self.phone}


@dataclass(frozen=True)
class RegistrationData:
    name: str = UNIDENTIFIED_NAME
    cpf: Optional[str] = None           # digits only
    rg: Optional[str] = None
    birth_date: Optional[date] = None
    sex: Optional[str] = None           # M, F or OUTRO
    phone: Optional[str] = None
    mobile: Optional[str] = None
    email: Optional[str] = None
    address: Optional[Address] = None
    blood_type: Optional[str] = None    # ABO with Rh sign when given ("O+")
    allergies: List[str] = field(default_factory=list)
    current_medications: List[str] = field(default_factory=list)
    insurance: Optional[str] = None
    emergency_contact: Optional[EmergencyContact] = None
    occupation: Optional[str] = None
    observations: Optional[str] = None

    @property
    def has_name(self) -> bool:
        return bool(self.name) and self.name != UNIDENTIFIED_NAME

    @property
    def gender(self) -> Optional[str]:
        return GENDER_BY_SEX.get(self.sex) if self.sex else None

    @property
    def contact_phone(self) -> Optional[str]:
        return self.phone or self.mobile


@dataclass(frozen=True)
class PatientRecord:
    id: str
    name: str
    email: str
    cpf: Optional[str] = None
    rg: Optional[str] = None
    phone: Optional[str] = None
    birth_date: Optional[date] = None
    gender: Optional[str] = None        # MALE, FEMALE or OTHER
    address: Optional[str] = None
    allergies: List[str] = field(default_factory=list)
    current_medications: List[str] = field(default_factory=list)
    emergency_contact: Optional[Dict[str, Optional[str]]] = None
    medical_history: Optional[str] = None
    occupation: Optional[str] = None


@dataclass(frozen=True)
class RegistrationOutcome:
    patient: PatientRecord
    action: RegistrationAction
    confidence: float
