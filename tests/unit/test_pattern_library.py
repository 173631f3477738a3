# ============================================================================
# FILE: tests/unit/test_pattern_library.py
# ============================================================================
"""
Unit tests for the pattern library: loading, validation and overrides
"""

import copy
import json

import pytest

from medical_document_ai.constants import DocumentType
from medical_document_ai.patterns import (
    PatternLibrary,
    load_pattern_library,
    get_default_library,
)
from medical_document_ai.patterns.library import DEFAULT_LIBRARY_PATH, REQUIRED_GROUPS
from medical_document_ai.utils.exceptions import PatternLibraryError


@pytest.fixture
def raw_library():
    with open(DEFAULT_LIBRARY_PATH, encoding="utf-8") as f:
        return json.load(f)


# ============================================================================
# LOADING
# ============================================================================

def test_packaged_library_loads(library):
    """Test the packaged library loads with version and locale"""
    assert library.version == "2024.06"
    assert library.locale == "pt-BR"
    for name in REQUIRED_GROUPS:
        assert library.group(name).patterns


def test_rules_follow_type_priority(library):
    """Test literal rules are declared in tie-break priority order"""
    rule_types = [rule.document_type for rule in library.rules]
    assert rule_types == [
        DocumentType.EXAM_RESULT,
        DocumentType.PRESCRIPTION_COPY,
        DocumentType.PRESCRIPTION,
        DocumentType.CERTIFICATE,
        DocumentType.REPORT,
        DocumentType.INTAKE_HISTORY,
        DocumentType.PROGRESS_NOTE,
    ]


def test_default_library_is_shared():
    """Test the default library is loaded once"""
    assert get_default_library() is get_default_library()


def test_group_names_by_prefix(library):
    """Test listing groups under a prefix"""
    names = library.group_names("vital_signs.")
    assert names == [
        "vital_signs.blood_pressure",
        "vital_signs.heart_rate",
        "vital_signs.height",
        "vital_signs.temperature",
        "vital_signs.weight",
    ]


# ============================================================================
# VALIDATION
# ============================================================================

def test_missing_file_raises(tmp_path):
    """Test a missing library file is fatal"""
    with pytest.raises(PatternLibraryError) as exc_info:
        load_pattern_library(tmp_path / "missing.json")
    assert exc_info.value.source.endswith("missing.json")


def test_invalid_json_raises(tmp_path):
    """Test a corrupt library file is fatal"""
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(PatternLibraryError):
        load_pattern_library(path)


def test_missing_required_group_raises(raw_library):
    """Test a library without a required group is rejected"""
    del raw_library["pattern_groups"]["identity.cpf"]

    with pytest.raises(PatternLibraryError, match="identity.cpf"):
        PatternLibrary.from_dict(raw_library)


def test_missing_vocabulary_raises(raw_library):
    """Test a library without the symptom vocabulary is rejected"""
    del raw_library["vocabularies"]["symptoms"]

    with pytest.raises(PatternLibraryError, match="symptoms"):
        PatternLibrary.from_dict(raw_library)


def test_invalid_regex_raises(library):
    """Test an uncompilable pattern is rejected at load time"""
    with pytest.raises(PatternLibraryError, match="identity.cpf"):
        library.with_overrides(pattern_groups={"identity.cpf": {"patterns": ["(unclosed"]}})


def test_unknown_flag_raises(library):
    """Test an unknown regex flag name is rejected"""
    with pytest.raises(PatternLibraryError):
        library.with_overrides(pattern_groups={
            "identity.cpf": {"patterns": ["\\d+"], "flags": ["VERBOSE_PLEASE"]}
        })


def test_unknown_document_type_raises(raw_library):
    """Test cue terms for an unknown document type are rejected"""
    raw_library["classification"]["cue_terms"]["DISCHARGE_SUMMARY"] = ["alta"]

    with pytest.raises(PatternLibraryError, match="DISCHARGE_SUMMARY"):
        PatternLibrary.from_dict(raw_library)


def test_rule_without_phrases_raises(library):
    """Test a rule with no phrases is rejected"""
    with pytest.raises(PatternLibraryError):
        library.with_overrides(rules=[{"name": "empty", "document_type": "REPORT"}])


def test_unknown_group_lookup_raises(library):
    """Test looking up a group that does not exist"""
    with pytest.raises(PatternLibraryError):
        library.group("identity.passport")

    with pytest.raises(PatternLibraryError):
        library.vocabulary("procedures")


# ============================================================================
# OVERRIDES
# ============================================================================

def test_vocabulary_override_leaves_original_untouched(library):
    """Test deriving a library with an extra symptom"""
    symptoms = list(library.vocabulary("symptoms")) + ["prurido"]
    derived = library.with_overrides(vocabularies={"symptoms": symptoms})

    assert "prurido" in derived.vocabulary("symptoms")
    assert "prurido" not in library.vocabulary("symptoms")
    assert derived.source.endswith("(overridden)")
    assert derived.version == library.version


def test_cue_term_override_accepts_enum_keys(library):
    """Test cue terms can be replaced by DocumentType key"""
    derived = library.with_overrides(cue_terms={DocumentType.REPORT: ["parecer"]})

    assert derived.cue_terms[DocumentType.REPORT] == ("parecer",)
    assert derived.cue_terms[DocumentType.EXAM_RESULT] == library.cue_terms[DocumentType.EXAM_RESULT]


def test_rules_override_replaces_rule_list(library):
    """Test rules are replaced as a whole"""
    derived = library.with_overrides(rules=[
        {"name": "declaration", "document_type": "CERTIFICATE", "any_of": ["Declaração"]},
    ])

    assert len(derived.rules) == 1
    assert derived.rules[0].any_of == ("declaração",)
    assert derived.rules[0].matches("declaração de comparecimento")


def test_from_dict_does_not_keep_caller_reference(raw_library):
    """Test mutating the source dict after loading has no effect"""
    original = copy.deepcopy(raw_library)
    built = PatternLibrary.from_dict(raw_library)
    raw_library["vocabularies"]["symptoms"].append("prurido")

    assert built.raw["vocabularies"]["symptoms"] == original["vocabularies"]["symptoms"]


def test_group_exclusion_is_word_based(library):
    """Test excluded words only match whole words"""
    group = library.group("exam.result")
    assert group.is_excluded("Data")
    assert group.is_excluded("Idade do paciente")
    assert not group.is_excluded("Hemoglobina")
    assert not group.is_excluded("Dados")
