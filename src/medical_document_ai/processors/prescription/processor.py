# ============================================================================
# src/medical_document_ai/processors/prescription/processor.py
# ============================================================================
"""
Prescription Processor

Extracts the medication list from prescriptions:

1. MATCH
   - Full pattern: name + dosage + frequency
   - Short pattern: name + dosage (only where the full pattern did not match)
   - Non-overlapping, returned in document order

2. CLEAN NAME
   - Leading instruction words ("Tomar", "Uso oral") are stripped
   - A match with nothing left of its name is dropped

3. DURATION
   - Searched in a window around the match start, never the whole document:
     first forward (DURATION_WINDOW_AFTER chars), then backward
     (DURATION_WINDOW_BEFORE chars)
   - Windows stop at neighbouring medications
"""

from typing import List, Optional, Tuple

from ...constants import ExtractionTarget
from ...core.models import Medication
from ...extractors.field_extractor import FieldMatch, find_all, first_match
from ..base_processor import BaseProcessor


class PrescriptionProcessor(BaseProcessor):
    """
    Medication list extraction.

    Usage:
        processor = PrescriptionProcessor(library)
        medications = processor.extract(text)
    """

    target = ExtractionTarget.MEDICATIONS

    def get_name(self) -> str:
        return "PrescriptionProcessor"

    def extract(self, text: str) -> List[Medication]:
        matches = self._find_medication_matches(text)
        stopwords = {w.casefold() for w in self.library.vocabulary("medication_name_stopwords")}

        medications = []
        # End of the text already attributed to earlier medications
        claimed_until = 0
        for index, match in enumerate(matches):
            upper_bound = matches[index + 1].start if index + 1 < len(matches) else len(text)
            duration, duration_end = self._find_duration(
                text, match.start, (claimed_until, upper_bound)
            )
            claimed_until = max(match.end, duration_end or 0)

            name = self._clean_name(match.get("name", ""), stopwords)
            if not name:
                self.logger.debug(f"Dropping medication match without a name: {match.text!r}")
                continue

            medications.append(Medication(
                name=name,
                dosage=match.get("dosage", ""),
                frequency=match.get("frequency", ""),
                duration=duration,
            ))

        self.logger.debug(f"Found {len(medications)} medications")
        return medications

    def _find_medication_matches(self, text: str) -> List[FieldMatch]:
        """Full-pattern matches first, then short-pattern matches in the gaps."""
        claimed: List[FieldMatch] = []
        for group_name in ("prescription.medication_full", "prescription.medication_short"):
            for match in find_all(text, self.library.group(group_name)):
                if any(match.start < c.end and c.start < match.end for c in claimed):
                    continue
                claimed.append(match)
        return sorted(claimed, key=lambda m: m.start)

    def _clean_name(self, raw_name: str, stopwords) -> str:
        words = raw_name.split()
        while words and words[0].casefold() in stopwords:
            words.pop(0)
        return " ".join(words)

    def _find_duration(
        self,
        text: str,
        start: int,
        bounds: Tuple[int, int]
    ) -> Tuple[Optional[str], Optional[int]]:
        """
        Duration near a medication starting at `start`.

        Returns:
            (duration, absolute end offset of the duration match), or
            (None, None) when neither window holds one
        """
        group = self.library.group("prescription.duration")
        lower_bound, upper_bound = bounds

        after_end = min(start + self.settings.DURATION_WINDOW_AFTER, upper_bound)
        match = first_match(text[start:after_end], group)
        if match:
            return match.value, start + match.end

        before_start = max(start - self.settings.DURATION_WINDOW_BEFORE, lower_bound)
        if before_start < start:
            before = find_all(text[before_start:start], group)
            if before:
                # Closest to the medication
                return before[-1].value, before_start + before[-1].end
        return None, None
