# ============================================================================
# src/medical_document_ai/patterns/library.py
# ============================================================================
"""
Pattern Library

Immutable, versioned collection of everything the extractors match against:
- Ordered literal classification rules ("resultado" AND "exame" -> EXAM_RESULT)
- Per-type cue terms for term-frequency scoring
- Named pattern groups ("label cue -> capture" regexes)
- Vocabularies (symptom stems, medication-name and exam-name stopwords)

Content lives in JSON (pt_br.json ships with the package) so it can be
audited and versioned without touching extraction code. Every regex is
compiled once at load time; a library that fails to load is fatal.
"""

import copy
import json
import logging
import re
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Pattern, Tuple

from ..constants import DocumentType
from ..utils.exceptions import PatternLibraryError

logger = logging.getLogger(__name__)

DEFAULT_LIBRARY_PATH = Path(__file__).parent / "pt_br.json"

_FLAG_NAMES = {
    "IGNORECASE": re.IGNORECASE,
    "MULTILINE": re.MULTILINE,
    "DOTALL": re.DOTALL,
}

# Groups and vocabularies the extractors look up by name
REQUIRED_GROUPS = (
    "identity.name",
    "identity.cpf",
    "identity.birth_date",
    "identity.medical_record",
    "clinical.date",
    "clinical.doctor",
    "clinical.observation",
    "vital_signs.blood_pressure",
    "vital_signs.heart_rate",
    "vital_signs.temperature",
    "vital_signs.weight",
    "vital_signs.height",
    "prescription.medication_full",
    "prescription.medication_short",
    "prescription.duration",
    "exam.result",
    "progress_note.diagnosis",
)
REQUIRED_VOCABULARIES = ("symptoms", "medication_name_stopwords", "exam_name_stopwords")


@dataclass(frozen=True)
class PatternGroup:
    """
    Ordered alternatives for one extraction target.

    Attributes:
        name: Dotted group name ("identity.cpf")
        patterns: Compiled regexes, tried in declaration order
        value_group: Named capture holding the field value
        min_length: Shortest accepted value (after strip)
        exclude: Words that disqualify a match when found in its value
    """
    name: str
    patterns: Tuple[Pattern, ...]
    value_group: str = "value"
    min_length: int = 0
    exclude: Tuple[str, ...] = ()
    exclude_regex: Optional[Pattern] = field(default=None, compare=False, repr=False)

    @classmethod
    def from_spec(cls, name: str, spec: Mapping[str, Any]) -> "PatternGroup":
        sources = spec.get("patterns")
        if not sources or not isinstance(sources, list):
            raise PatternLibraryError(f"Pattern group '{name}' has no patterns")

        flags = 0
        for flag_name in spec.get("flags", []):
            if flag_name not in _FLAG_NAMES:
                raise PatternLibraryError(
                    f"Pattern group '{name}' uses unknown flag '{flag_name}'"
                )
            flags |= _FLAG_NAMES[flag_name]

        compiled = []
        for source in sources:
            try:
                compiled.append(re.compile(source, flags))
            except re.error as e:
                raise PatternLibraryError(
                    f"Pattern group '{name}' has an invalid pattern: {e}"
                ) from e

        exclude = tuple(word.casefold() for word in spec.get("exclude", []))
        exclude_regex = None
        if exclude:
            exclude_regex = re.compile(
                r"\b(?:" + "|".join(re.escape(word) for word in exclude) + r")\b"
            )

        return cls(
            name=name,
            patterns=tuple(compiled),
            value_group=spec.get("value_group", "value"),
            min_length=int(spec.get("min_length", 0)),
            exclude=exclude,
            exclude_regex=exclude_regex,
        )

    def is_excluded(self, value: str) -> bool:
        """True when the value contains one of the group's excluded words."""
        if self.exclude_regex is None:
            return False
        return self.exclude_regex.search(value.casefold()) is not None


@dataclass(frozen=True)
class ClassificationRule:
    """
    Named literal-override rule. Matches when every `all_of` phrase and at
    least one `any_of` phrase (if any are given) occur in lowercased text.
    """
    name: str
    document_type: DocumentType
    all_of: Tuple[str, ...] = ()
    any_of: Tuple[str, ...] = ()

    def matches(self, lowered_text: str) -> bool:
        if not all(phrase in lowered_text for phrase in self.all_of):
            return False
        if self.any_of and not any(phrase in lowered_text for phrase in self.any_of):
            return False
        return True


@dataclass(frozen=True)
class PatternLibrary:
    """
    Read-only pattern library. Build with load_pattern_library() or
    PatternLibrary.from_dict(); derive variants with with_overrides().
    """
    version: str
    locale: str
    rules: Tuple[ClassificationRule, ...]
    cue_terms: Dict[DocumentType, Tuple[str, ...]]
    groups: Dict[str, PatternGroup]
    vocabularies: Dict[str, Tuple[str, ...]]
    source: str = "<memory>"
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], source: str = "<memory>") -> "PatternLibrary":
        """
        Validate and compile a library from its JSON structure.

        Raises:
            PatternLibraryError: missing sections, unknown document types,
                required groups absent, or a pattern that does not compile
        """
        if not isinstance(data, Mapping):
            raise PatternLibraryError("Pattern library must be a JSON object", source=source)

        try:
            classification = data["classification"]
            raw_rules = classification["rules"]
            raw_cues = classification["cue_terms"]
            raw_groups = data["pattern_groups"]
        except (KeyError, TypeError) as e:
            raise PatternLibraryError(f"Pattern library is missing section {e}", source=source) from e

        rules = tuple(_build_rule(spec, source) for spec in raw_rules)

        cue_terms = {}
        for type_name, terms in raw_cues.items():
            cue_terms[_document_type(type_name, source)] = tuple(t.lower() for t in terms)

        groups = {}
        for name, spec in raw_groups.items():
            try:
                groups[name] = PatternGroup.from_spec(name, spec)
            except PatternLibraryError as e:
                e.source = source
                raise

        missing = [name for name in REQUIRED_GROUPS if name not in groups]
        if missing:
            raise PatternLibraryError(
                f"Pattern library lacks required groups: {', '.join(missing)}",
                source=source
            )

        vocabularies = {
            name: tuple(words) for name, words in data.get("vocabularies", {}).items()
        }
        missing = [name for name in REQUIRED_VOCABULARIES if name not in vocabularies]
        if missing:
            raise PatternLibraryError(
                f"Pattern library lacks required vocabularies: {', '.join(missing)}",
                source=source
            )

        return cls(
            version=str(data.get("version", "unversioned")),
            locale=str(data.get("locale", "")),
            rules=rules,
            cue_terms=cue_terms,
            groups=groups,
            vocabularies=vocabularies,
            source=source,
            raw=copy.deepcopy(dict(data)),
        )

    def group(self, name: str) -> PatternGroup:
        """Return a named pattern group."""
        try:
            return self.groups[name]
        except KeyError:
            raise PatternLibraryError(f"Unknown pattern group '{name}'", source=self.source)

    def vocabulary(self, name: str) -> Tuple[str, ...]:
        try:
            return self.vocabularies[name]
        except KeyError:
            raise PatternLibraryError(f"Unknown vocabulary '{name}'", source=self.source)

    def group_names(self, prefix: str = "") -> List[str]:
        return sorted(name for name in self.groups if name.startswith(prefix))

    def with_overrides(
        self,
        pattern_groups: Optional[Mapping[str, Mapping[str, Any]]] = None,
        cue_terms: Optional[Mapping[Any, List[str]]] = None,
        rules: Optional[List[Mapping[str, Any]]] = None,
        vocabularies: Optional[Mapping[str, List[str]]] = None,
    ) -> "PatternLibrary":
        """
        Return a new library with entries replaced.

        Pattern groups, cue lists and vocabularies are replaced per key
        (same JSON shape as the library file); rules replace the whole
        ordered rule list. The receiver is left untouched.

        Example:
            >>> clinic = library.with_overrides(
            ...     vocabularies={"symptoms": ["dor", "febre", "prurido"]})
        """
        data = copy.deepcopy(dict(self.raw))
        data.setdefault("pattern_groups", {})
        data.setdefault("classification", {}).setdefault("cue_terms", {})
        data.setdefault("vocabularies", {})

        if pattern_groups:
            data["pattern_groups"].update(copy.deepcopy(dict(pattern_groups)))
        if cue_terms:
            for key, terms in cue_terms.items():
                type_name = key.name if isinstance(key, DocumentType) else key
                data["classification"]["cue_terms"][type_name] = list(terms)
        if rules is not None:
            data["classification"]["rules"] = copy.deepcopy(list(rules))
        if vocabularies:
            data["vocabularies"].update({k: list(v) for k, v in vocabularies.items()})

        logger.debug(f"Deriving pattern library from {self.source}")
        return PatternLibrary.from_dict(data, source=f"{self.source} (overridden)")


def _document_type(type_name: str, source: str) -> DocumentType:
    try:
        return DocumentType[type_name]
    except KeyError:
        raise PatternLibraryError(f"Unknown document type '{type_name}'", source=source)


def _build_rule(spec: Mapping[str, Any], source: str) -> ClassificationRule:
    name = spec.get("name")
    all_of = tuple(p.lower() for p in spec.get("all_of", []))
    any_of = tuple(p.lower() for p in spec.get("any_of", []))
    if not name or not (all_of or any_of):
        raise PatternLibraryError(
            f"Classification rule {spec!r} needs a name and at least one phrase",
            source=source
        )
    return ClassificationRule(
        name=name,
        document_type=_document_type(spec.get("document_type", ""), source),
        all_of=all_of,
        any_of=any_of,
    )


def load_pattern_library(path: Optional[Path] = None) -> PatternLibrary:
    """
    Load a pattern library from JSON.

    Args:
        path: Library file. Defaults to PATTERN_LIBRARY_PATH from the
            extraction settings, then to the packaged pt_br.json.

    Raises:
        PatternLibraryError: file missing, not valid JSON, or invalid content
    """
    if path is None:
        from ..config import extraction_settings
        path = extraction_settings.PATTERN_LIBRARY_PATH or DEFAULT_LIBRARY_PATH
    path = Path(path)

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise PatternLibraryError(f"Pattern library not found: {path}", source=str(path)) from e
    except json.JSONDecodeError as e:
        raise PatternLibraryError(f"Pattern library is not valid JSON: {e}", source=str(path)) from e

    library = PatternLibrary.from_dict(data, source=str(path))
    logger.info(
        f"Loaded pattern library {library.version} ({library.locale}) "
        f"with {len(library.groups)} groups from {path.name}"
    )
    return library


@lru_cache(maxsize=1)
def get_default_library() -> PatternLibrary:
    """Shared default library. Safe to share: the library is immutable."""
    return load_pattern_library()
