# ============================================================================
# src/medical_document_ai/extractors/field_extractor.py
# ============================================================================
"""
Field Extractor

Pure matching primitives shared by every extractor:
- first_match: single-valued fields, first pattern that matches wins
- find_all: list-valued fields, non-overlapping, document order
- find_terms / count_terms: vocabulary presence and cue counting

Nothing here knows about clinical semantics; that lives in the pattern
groups and in the extractors that call these functions.
"""

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, Iterable, List, Optional, Tuple

from ..patterns.library import PatternGroup


@dataclass(frozen=True)
class FieldMatch:
    """One accepted regex match."""
    value: str
    start: int
    end: int
    text: str
    groups: Dict[str, Optional[str]] = field(default_factory=dict, compare=False)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Named capture, stripped; default when absent or empty."""
        captured = self.groups.get(name)
        if captured is None:
            return default
        captured = captured.strip()
        return captured or default


def _accept(match: re.Match, group: PatternGroup, min_length: int) -> Optional[FieldMatch]:
    captures = match.groupdict()
    value = captures.get(group.value_group)
    if value is None:
        value = match.group(0)
    value = value.strip()

    if not value or len(value) < min_length:
        return None
    if group.is_excluded(value):
        return None

    return FieldMatch(
        value=value,
        start=match.start(),
        end=match.end(),
        text=match.group(0),
        groups=captures,
    )


def first_match(
    text: str,
    group: PatternGroup,
    min_length: Optional[int] = None
) -> Optional[FieldMatch]:
    """
    First acceptable match for a single-valued field.

    Patterns are tried in declaration order; within one pattern, matches
    are tried in document order. A match is acceptable when its value is
    at least min_length characters (group default when None) and contains
    none of the group's excluded words.
    """
    if not text:
        return None
    required = group.min_length if min_length is None else min_length

    for pattern in group.patterns:
        for match in pattern.finditer(text):
            accepted = _accept(match, group, required)
            if accepted is not None:
                return accepted
    return None


def find_all(text: str, group: PatternGroup) -> List[FieldMatch]:
    """
    All acceptable matches of all patterns in a group.

    Earlier-declared patterns claim their spans first; a later pattern's
    match overlapping a claimed span is dropped. Results are returned in
    document order.
    """
    if not text:
        return []

    claimed: List[Tuple[int, int]] = []
    results: List[FieldMatch] = []

    for pattern in group.patterns:
        for match in pattern.finditer(text):
            start, end = match.span()
            if any(start < c_end and c_start < end for c_start, c_end in claimed):
                continue
            accepted = _accept(match, group, group.min_length)
            if accepted is None:
                continue
            claimed.append((start, end))
            results.append(accepted)

    results.sort(key=lambda m: m.start)
    return results


@lru_cache(maxsize=512)
def _term_pattern(term: str) -> re.Pattern:
    return re.compile(r"\b" + re.escape(term) + r"\w*\b", re.IGNORECASE)


def find_terms(text: str, terms: Iterable[str]) -> List[str]:
    """
    Vocabulary terms present in the text, in vocabulary order.

    A term matches as a word-initial stem ("náusea" matches "náuseas"),
    case-insensitively.
    """
    if not text:
        return []
    return [term for term in terms if _term_pattern(term).search(text)]


def count_terms(text: str, terms: Iterable[str]) -> int:
    """Total non-overlapping substring occurrences of the terms in lowercased text."""
    if not text:
        return 0
    lowered = text.lower()
    return sum(lowered.count(term.lower()) for term in terms if term)
