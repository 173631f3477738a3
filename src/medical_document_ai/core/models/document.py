# ============================================================================
# src/medical_document_ai/core/models/document.py
# ============================================================================
"""
Input document
- Plain text already recovered from its binary format
- Never mutated by the analysis core
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...constants import SourceFileType


@dataclass(frozen=True)
class RawDocument:
    id: str
    file_name: str
    content: str
    upload_date: datetime
    file_type: SourceFileType = SourceFileType.TXT
    patient_id: Optional[str] = None  # set when uploaded against a known patient

    @property
    def has_content(self) -> bool:
        return bool(self.content and self.content.strip())
