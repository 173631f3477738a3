# ============================================================================
# FILE: tests/unit/test_clinical_data_extractor.py
# ============================================================================
"""
Unit tests for always-on and type-dispatched clinical extraction
"""

from datetime import date

import pytest

from medical_document_ai.config import ExtractionSettings
from medical_document_ai.constants import DocumentType
from medical_document_ai.core.models import Medication
from medical_document_ai.extractors.clinical_data_extractor import ClinicalDataExtractor
from medical_document_ai.processors import (
    DiagnosisProcessor,
    LabProcessor,
    PrescriptionProcessor,
    SymptomProcessor,
)


@pytest.fixture
def extractor(library):
    return ClinicalDataExtractor(library)


@pytest.fixture
def prescriptions(library):
    return PrescriptionProcessor(library)


# ============================================================================
# ALWAYS-ON FIELDS
# ============================================================================

def test_date_and_doctor(extractor, prescription_text):
    """Test the first date is parsed and the prescriber captured"""
    data = extractor.extract(prescription_text, DocumentType.PRESCRIPTION)

    assert data.date == date(2024, 3, 15)
    assert data.doctor == "Carlos Mendes"


def test_invalid_date_is_dropped(extractor):
    """Test an impossible first date leaves the date empty"""
    data = extractor.extract("Atendimento em 31/02/2024", DocumentType.OTHER)
    assert data.date is None


def test_two_digit_year(extractor):
    """Test two-digit years are expanded"""
    data = extractor.extract("Data 05/06/23", DocumentType.OTHER)
    assert data.date == date(2023, 6, 5)


def test_doctor_after_medico_label(extractor):
    """Test the 'Médico responsável:' label with a title"""
    data = extractor.extract("Médico responsável: Dra. Fernanda Lima", DocumentType.OTHER)
    assert data.doctor == "Fernanda Lima"


def test_vital_signs(extractor, progress_note_text):
    """Test each vital sign is kept as the raw matched text"""
    signs = extractor.extract(progress_note_text, DocumentType.PROGRESS_NOTE).vital_signs

    assert signs.blood_pressure == "PA: 120x80 mmHg"
    assert signs.heart_rate == "FC: 88 bpm"
    assert signs.temperature == "Temperatura: 38,2 °C"
    assert signs.weight == "Peso: 70 kg"
    assert signs.height is None


def test_no_vital_signs_is_none(extractor, prescription_text):
    """Test an empty vital-signs record is not attached"""
    data = extractor.extract(prescription_text, DocumentType.PRESCRIPTION)
    assert data.vital_signs is None


def test_observations_joined(extractor, progress_note_text):
    """Test observation lines are joined in document order"""
    data = extractor.extract(progress_note_text, DocumentType.PROGRESS_NOTE)
    assert data.observations == "retorno em 7 dias. manter hidratação"


# ============================================================================
# DISPATCH
# ============================================================================

def test_prescription_dispatch(extractor, prescription_text):
    """Test only the medication list runs for prescriptions"""
    data = extractor.extract(prescription_text, DocumentType.PRESCRIPTION)

    assert data.medications == [
        Medication(name="Ciprofloxacino", dosage="500mg", frequency="de 12/12h", duration="7 dias"),
        Medication(name="Dipirona", dosage="500mg", frequency="", duration=None),
    ]
    assert data.exam_results is None
    assert data.symptoms is None
    assert data.diagnosis is None


def test_prescription_copy_extracts_medications(extractor):
    """Test prescription copies share the medication extraction"""
    data = extractor.extract("Segunda via\nAmoxicilina 875mg", DocumentType.PRESCRIPTION_COPY)
    assert [m.name for m in data.medications] == ["Amoxicilina"]


def test_exam_dispatch(extractor, exam_text):
    """Test exam results are extracted and medications never are"""
    data = extractor.extract(exam_text, DocumentType.EXAM_RESULT)

    assert data.medications is None
    assert [(e.exam_type, e.result, e.unit, e.reference_range) for e in data.exam_results] == [
        ("Hemoglobina", "13.8", "g/dL", "12.0 a 16.0"),
        ("Glicemia de jejum", "92", "mg/dL", "70 a 99"),
        ("Leucócitos", "7500", "/mm³", None),
    ]
    assert data.date == date(2024, 3, 20)


def test_progress_note_dispatch(extractor, progress_note_text):
    """Test symptoms and diagnosis run for progress notes"""
    data = extractor.extract(progress_note_text, DocumentType.PROGRESS_NOTE)

    assert data.symptoms == ["febre", "tosse", "cefaleia"]
    assert data.diagnosis == [
        "Diagnóstico: Infecção de vias aéreas superiores",
        "CID J06.9",
    ]
    assert data.medications is None
    assert data.exam_results is None


def test_intake_history_dispatch(extractor, intake_text):
    """Test intake histories get symptoms but no diagnosis"""
    data = extractor.extract(intake_text, DocumentType.INTAKE_HISTORY)

    assert data.symptoms == ["dor", "náusea"]
    assert data.diagnosis is None
    assert data.observations == "paciente ansioso"


@pytest.mark.parametrize("doc_type", [
    DocumentType.CERTIFICATE,
    DocumentType.REPORT,
    DocumentType.OTHER,
])
def test_types_without_dispatch(extractor, prescription_text, doc_type):
    """Test types with no mapping only get the always-on fields"""
    data = extractor.extract(prescription_text, doc_type)

    assert data.medications is None
    assert data.exam_results is None
    assert data.symptoms is None
    assert data.diagnosis is None
    assert data.date == date(2024, 3, 15)


def test_empty_lists_when_nothing_found(extractor):
    """Test a dispatched extraction that finds nothing yields an empty list"""
    data = extractor.extract("Receita médica\nRepouso relativo", DocumentType.PRESCRIPTION)
    assert data.medications == []


# ============================================================================
# PRESCRIPTION PROCESSOR
# ============================================================================

def test_single_medication_scenario(prescriptions):
    """Test the canonical prescription line"""
    text = "Prescrição: Ciprofloxacino 500mg 1 comprimido de 12/12h Por 7 dias"
    medications = prescriptions.extract(text)

    assert len(medications) == 1
    assert medications[0].name == "Ciprofloxacino"
    assert medications[0].dosage == "500mg"
    assert "12/12h" in medications[0].frequency
    assert medications[0].duration == "7 dias"


def test_leading_instruction_words_stripped(prescriptions):
    """Test instruction verbs are not part of the medication name"""
    medications = prescriptions.extract("Tomar Paracetamol 750mg de 6/6h")

    assert medications[0].name == "Paracetamol"
    assert medications[0].frequency == "de 6/6h"


def test_match_without_name_dropped(prescriptions):
    """Test a dosage with only instruction words before it is dropped"""
    assert prescriptions.extract("tomar 1 comprimido ao deitar") == []


def test_short_pattern_fills_gaps(prescriptions):
    """Test medications without frequency still appear"""
    medications = prescriptions.extract("Receita médica\nAmoxicilina 875mg\nUso oral")

    assert medications == [Medication(name="Amoxicilina", dosage="875mg")]


def test_frequency_stays_on_its_own_line(prescriptions):
    """Test a medication without frequency does not take the next line's"""
    medications = prescriptions.extract(
        "Receita médica\nDipirona 500mg\nParacetamol 1 comprimido de 8/8h\n"
    )

    assert medications == [
        Medication(name="Dipirona", dosage="500mg"),
        Medication(name="Paracetamol", dosage="1 comprimido", frequency="de 8/8h"),
    ]


def test_drop_dosage_next_line_kept(prescriptions):
    """Test a drop-count dosage on the next line starts its own medication"""
    medications = prescriptions.extract("Prescrição\nLosartana 50mg\nNovalgina 20 gotas de 6/6h\n")

    assert [(m.name, m.dosage, m.frequency) for m in medications] == [
        ("Losartana", "50mg", ""),
        ("Novalgina", "20 gotas", "de 6/6h"),
    ]


def test_frequency_stops_at_next_medication_on_line(prescriptions):
    """Test two medications on one line keep their own frequencies"""
    medications = prescriptions.extract("Dipirona 500mg, Paracetamol 1 comprimido de 8/8h")

    assert [(m.name, m.frequency) for m in medications] == [
        ("Dipirona", ""),
        ("Paracetamol", "de 8/8h"),
    ]


def test_duration_stays_with_its_medication(prescriptions):
    """Test each medication takes the duration on its own line"""
    text = (
        "Amoxicilina 500mg de 8/8h por 7 dias\n"
        "Ibuprofeno 600mg de 12/12h por 5 dias\n"
    )
    medications = prescriptions.extract(text)

    assert [(m.name, m.duration) for m in medications] == [
        ("Amoxicilina", "7 dias"),
        ("Ibuprofeno", "5 dias"),
    ]


def test_duration_before_medication(prescriptions):
    """Test a duration written before the medication is found"""
    medications = prescriptions.extract("Por 10 dias: Azitromicina 500mg 1x ao dia")

    assert medications[0].name == "Azitromicina"
    assert medications[0].frequency == "1x ao dia"
    assert medications[0].duration == "10 dias"


def test_duration_window_is_configurable(library):
    """Test a duration beyond the forward window is not attached"""
    settings = ExtractionSettings(DURATION_WINDOW_AFTER=20, DURATION_WINDOW_BEFORE=0)
    processor = PrescriptionProcessor(library, settings)
    medications = processor.extract("Amoxicilina 500mg de 8/8h durante 7 dias")

    assert medications[0].duration is None


# ============================================================================
# OTHER PROCESSORS
# ============================================================================

def test_exam_exclusions(library):
    """Test identifiers that look like results are not exam results"""
    text = "Resultado de exame\nIdade: 45 anos\nCreatinina: 0.9 mg/dL"
    results = LabProcessor(library).extract(text)

    assert [(r.exam_type, r.result) for r in results] == [("Creatinina", "0.9")]


def test_exam_name_without_header_words(library):
    """Test a header sharing the line with a result is not part of the exam name"""
    results = LabProcessor(library).extract("Resultado de Exame Hemoglobina 13.8 g/dL")

    assert [(r.exam_type, r.result, r.unit) for r in results] == [("Hemoglobina", "13.8", "g/dL")]


def test_symptom_processor_empty(library, unrelated_text):
    """Test no symptoms yields an empty list"""
    assert SymptomProcessor(library).extract(unrelated_text) == []


def test_diagnosis_collapses_whitespace(library):
    """Test multi-space diagnosis text is normalized"""
    results = DiagnosisProcessor(library).extract("Hipótese diagnóstica:   Pneumonia   comunitária")
    assert results == ["Hipótese diagnóstica: Pneumonia comunitária"]


def test_processor_names(library):
    """Test processors identify themselves"""
    names = {p.get_name() for p in (
        PrescriptionProcessor(library),
        LabProcessor(library),
        SymptomProcessor(library),
        DiagnosisProcessor(library),
    )}
    assert len(names) == 4
