# ============================================================================
# FILE: tests/unit/test_document_classifier.py
# ============================================================================
"""
Unit tests for rule-based document classification
"""

from itertools import combinations

import pytest

from medical_document_ai.classifiers import DocumentClassifier
from medical_document_ai.classifiers.document_classifier import (
    METHOD_DEFAULT,
    METHOD_LITERAL_RULE,
    METHOD_TERM_FREQUENCY,
)
from medical_document_ai.constants import DocumentType, TYPE_PRIORITY


# One literal-rule cue per type, each triggering only its own rule
RULE_CUES = {
    DocumentType.EXAM_RESULT: "resultado de exame",
    DocumentType.PRESCRIPTION_COPY: "segunda via",
    DocumentType.PRESCRIPTION: "prescrição",
    DocumentType.CERTIFICATE: "atestado médico",
    DocumentType.REPORT: "laudo médico",
    DocumentType.INTAKE_HISTORY: "anamnese",
    DocumentType.PROGRESS_NOTE: "evolução",
}


@pytest.fixture
def classifier(library):
    return DocumentClassifier(library)


# ============================================================================
# LITERAL RULES
# ============================================================================

@pytest.mark.parametrize("doc_type", list(RULE_CUES))
def test_single_rule_cue(classifier, doc_type):
    """Test each literal rule on its own"""
    result = classifier.classify_with_details(f"Documento: {RULE_CUES[doc_type]}")

    assert result.document_type == doc_type
    assert result.method == METHOD_LITERAL_RULE
    assert result.confidence == 1.0


@pytest.mark.parametrize(
    "winner,loser",
    list(combinations(TYPE_PRIORITY, 2)),
    ids=lambda t: t.name,
)
def test_rule_precedence(classifier, winner, loser):
    """Test the earlier rule wins whatever the order of cues in the text"""
    text = f"{RULE_CUES[loser].upper()}\n...\n{RULE_CUES[winner]}"
    assert classifier.classify(text) == winner


def test_prescription_beats_progress_note(classifier):
    """Test a prescription mentioning evolução stays a prescription"""
    text = "Evolução do tratamento\nPrescrição: Amoxicilina 500mg"
    assert classifier.classify(text) == DocumentType.PRESCRIPTION


def test_exam_rule_needs_both_words(classifier):
    """Test 'resultado' alone does not trigger the exam rule"""
    result = classifier.classify_with_details("Resultado da cirurgia: sem intercorrências")
    assert result.method != METHOD_LITERAL_RULE


def test_rules_are_case_insensitive(classifier):
    """Test upper-case documents are classified the same"""
    assert classifier.classify("RECEITA MÉDICA") == DocumentType.PRESCRIPTION


# ============================================================================
# TERM FREQUENCY
# ============================================================================

def test_term_frequency_fallback(classifier):
    """Test cue counting when no literal rule applies"""
    result = classifier.classify_with_details("Hemograma e glicemia em jejum")

    assert result.document_type == DocumentType.EXAM_RESULT
    assert result.method == METHOD_TERM_FREQUENCY
    assert result.scores[DocumentType.EXAM_RESULT] == 2


def test_term_frequency_strictly_highest(classifier):
    """Test the type with the most cues wins"""
    text = "Antecedentes familiares e queixa principal; faz uso de dipirona"
    assert classifier.classify(text) == DocumentType.INTAKE_HISTORY


def test_term_frequency_tie_uses_priority(classifier):
    """Test ties resolve to the type listed first in the priority"""
    assert classifier.classify("hemograma dipirona") == DocumentType.EXAM_RESULT
    assert classifier.classify("dipirona; antecedentes") == DocumentType.PRESCRIPTION


def test_default_tie_order_matches_priority(classifier):
    """Test the packaged rules give the documented priority"""
    assert classifier.tie_order[:len(TYPE_PRIORITY)] == TYPE_PRIORITY


def test_tie_order_follows_overridden_rules(library):
    """Test reordered literal rules also reorder term-frequency ties"""
    derived = library.with_overrides(rules=[
        {"name": "prescription", "document_type": "PRESCRIPTION", "any_of": ["prescrição"]},
        {"name": "exam_result", "document_type": "EXAM_RESULT", "all_of": ["resultado", "exame"]},
    ])
    classifier = DocumentClassifier(derived)

    assert classifier.tie_order[:2] == (DocumentType.PRESCRIPTION, DocumentType.EXAM_RESULT)
    assert classifier.classify("hemograma dipirona") == DocumentType.PRESCRIPTION


def test_term_frequency_confidence_is_share(classifier):
    """Test the fallback confidence is the winner's share of all cues"""
    result = classifier.classify_with_details("hemograma hemograma dipirona")
    assert result.confidence == pytest.approx(2 / 3, abs=1e-4)


# ============================================================================
# DEFAULT
# ============================================================================

def test_no_cues_is_other(classifier, unrelated_text):
    """Test a text without cues is OTHER"""
    result = classifier.classify_with_details(unrelated_text)

    assert result.document_type == DocumentType.OTHER
    assert result.method == METHOD_DEFAULT
    assert result.rule is None


def test_empty_text_is_other(classifier):
    """Test empty input is tolerated by the classifier"""
    assert classifier.classify("") == DocumentType.OTHER
    assert classifier.classify(None) == DocumentType.OTHER


def test_fixture_documents(classifier, prescription_text, exam_text,
                           progress_note_text, intake_text):
    """Test the sample documents classify as expected"""
    assert classifier.classify(prescription_text) == DocumentType.PRESCRIPTION
    assert classifier.classify(exam_text) == DocumentType.EXAM_RESULT
    assert classifier.classify(progress_note_text) == DocumentType.PROGRESS_NOTE
    assert classifier.classify(intake_text) == DocumentType.INTAKE_HISTORY
