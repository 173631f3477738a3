# ============================================================================
# src/medical_document_ai/registration/patient_store.py
# ============================================================================
"""
Patient Store

The registration pipeline's only stateful collaborator. PatientStore is
the interface the integrating system implements; SQLitePatientStore is a
reference implementation: raw sqlite3, JSON for list and nested fields,
one connection per operation.
"""

import json
import logging
import sqlite3
from abc import ABC, abstractmethod
from contextlib import contextmanager
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Iterator, Optional

from ..utils.exceptions import PatientStoreError
from .models import PatientRecord

logger = logging.getLogger(__name__)


class PatientStore(ABC):
    """Lookup and persistence of patient records."""

    @abstractmethod
    def find_by_cpf_suffix(self, suffix: str) -> Optional[PatientRecord]:
        """First patient whose CPF ends with the given digits."""
        pass

    @abstractmethod
    def find_by_first_name(self, first_name: str) -> Optional[PatientRecord]:
        """First patient whose name contains the given text, case-insensitively."""
        pass

    @abstractmethod
    def get(self, patient_id: str) -> Optional[PatientRecord]:
        pass

    @abstractmethod
    def create(self, record: PatientRecord) -> PatientRecord:
        pass

    @abstractmethod
    def update(self, record: PatientRecord) -> PatientRecord:
        """Replace an existing record. Raises PatientStoreError if it does not exist."""
        pass


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SQLitePatientStore(PatientStore):
    """
    SQLite-backed patient store.

    Names are also stored case-folded (name_search) so that first-name
    matching is case-insensitive for accented names too.
    """

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)
        self._init_database()

    # ------------------------------------------------------------------
    # Schema
    # ------------------------------------------------------------------
    def _init_database(self):
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        with self._connect() as cur:
            cur.execute("""
                CREATE TABLE IF NOT EXISTS patients (
                    id                  TEXT PRIMARY KEY,
                    name                TEXT NOT NULL,
                    name_search         TEXT NOT NULL,
                    email               TEXT NOT NULL,
                    cpf                 TEXT,
                    rg                  TEXT,
                    phone               TEXT,
                    birth_date          TEXT,
                    gender              TEXT,
                    address             TEXT,
                    allergies           TEXT NOT NULL DEFAULT '[]',
                    current_medications TEXT NOT NULL DEFAULT '[]',
                    emergency_contact   TEXT,
                    medical_history     TEXT,
                    occupation          TEXT,
                    created_at          TEXT NOT NULL,
                    updated_at          TEXT NOT NULL
                )
            """)
            cur.execute("""
                CREATE INDEX IF NOT EXISTS idx_patients_cpf
                ON patients (cpf)
            """)
        logger.info(f"Patient store initialized: {self.db_path}")

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Cursor]:
        try:
            conn = sqlite3.connect(str(self.db_path))
        except sqlite3.Error as e:
            raise PatientStoreError(f"Cannot open patient store {self.db_path}: {e}") from e

        conn.row_factory = sqlite3.Row
        try:
            yield conn.cursor()
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise PatientStoreError(f"Patient store operation failed: {e}") from e
        finally:
            conn.close()

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------
    def find_by_cpf_suffix(self, suffix: str) -> Optional[PatientRecord]:
        if not suffix:
            return None
        return self._fetch_one(
            "SELECT * FROM patients WHERE cpf LIKE ? ESCAPE '\\' ORDER BY created_at, id LIMIT 1",
            ("%" + _escape_like(suffix),)
        )

    def find_by_first_name(self, first_name: str) -> Optional[PatientRecord]:
        if not first_name:
            return None
        return self._fetch_one(
            "SELECT * FROM patients WHERE name_search LIKE ? ESCAPE '\\' ORDER BY created_at, id LIMIT 1",
            ("%" + _escape_like(first_name.casefold()) + "%",)
        )

    def get(self, patient_id: str) -> Optional[PatientRecord]:
        return self._fetch_one("SELECT * FROM patients WHERE id = ?", (patient_id,))

    def count(self) -> int:
        with self._connect() as cur:
            cur.execute("SELECT COUNT(*) FROM patients")
            return cur.fetchone()[0]

    def _fetch_one(self, query: str, params: tuple) -> Optional[PatientRecord]:
        with self._connect() as cur:
            cur.execute(query, params)
            row = cur.fetchone()
        return self._row_to_record(row) if row else None

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------
    def create(self, record: PatientRecord) -> PatientRecord:
        now = datetime.now(timezone.utc).isoformat()
        with self._connect() as cur:
            cur.execute("""
                INSERT INTO patients
                    (id, name, name_search, email, cpf, rg, phone, birth_date,
                     gender, address, allergies, current_medications,
                     emergency_contact, medical_history, occupation,
                     created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """, self._record_values(record) + (now, now))
        logger.info(f"Created patient {record.id}")
        return record

    def update(self, record: PatientRecord) -> PatientRecord:
        now = datetime.now(timezone.utc).isoformat()
        values = self._record_values(record)
        with self._connect() as cur:
            cur.execute("""
                UPDATE patients SET
                    name = ?, name_search = ?, email = ?, cpf = ?, rg = ?,
                    phone = ?, birth_date = ?, gender = ?, address = ?,
                    allergies = ?, current_medications = ?,
                    emergency_contact = ?, medical_history = ?, occupation = ?,
                    updated_at = ?
                WHERE id = ?
            """, values[1:] + (now, record.id))
            updated = cur.rowcount
        if not updated:
            raise PatientStoreError(f"Patient {record.id} does not exist")
        logger.info(f"Updated patient {record.id}")
        return record

    # ------------------------------------------------------------------
    # Mapping
    # ------------------------------------------------------------------
    @staticmethod
    def _record_values(record: PatientRecord) -> tuple:
        return (
            record.id,
            record.name,
            record.name.casefold(),
            record.email,
            record.cpf,
            record.rg,
            record.phone,
            record.birth_date.isoformat() if record.birth_date else None,
            record.gender,
            record.address,
            json.dumps(record.allergies, ensure_ascii=False),
            json.dumps(record.current_medications, ensure_ascii=False),
            json.dumps(record.emergency_contact, ensure_ascii=False) if record.emergency_contact else None,
            record.medical_history,
            record.occupation,
        )

    @staticmethod
    def _row_to_record(row: sqlite3.Row) -> PatientRecord:
        return PatientRecord(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            cpf=row["cpf"],
            rg=row["rg"],
            phone=row["phone"],
            birth_date=date.fromisoformat(row["birth_date"]) if row["birth_date"] else None,
            gender=row["gender"],
            address=row["address"],
            allergies=json.loads(row["allergies"]),
            current_medications=json.loads(row["current_medications"]),
            emergency_contact=json.loads(row["emergency_contact"]) if row["emergency_contact"] else None,
            medical_history=row["medical_history"],
            occupation=row["occupation"],
        )
