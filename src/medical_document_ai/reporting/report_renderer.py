# ============================================================================
# src/medical_document_ai/reporting/report_renderer.py
# ============================================================================
"""
Report Renderer

Deterministic plain-text review report, in Portuguese like the documents
it describes. Sections appear only when they have content; an empty
section is omitted rather than rendered as a placeholder.

Sections, in order:
- Header: document type, overall confidence, level, review flag
- Patient (identity confidence > 0)
- Vital signs
- Medications
- Exam results
- Diagnosis
- Suggested actions, in rank order
"""

from typing import List, Optional

from ..core.confidence import ConfidenceThresholds
from ..core.models import AnalysisResult

LEVEL_LABELS = {"high": "alta", "medium": "média", "low": "baixa"}

VITAL_SIGN_LABELS = (
    ("blood_pressure", "Pressão arterial"),
    ("heart_rate", "Frequência cardíaca"),
    ("temperature", "Temperatura"),
    ("weight", "Peso"),
    ("height", "Altura"),
)


def format_percent(score: float) -> str:
    return f"{score * 100:.1f}%"


class ReportRenderer:

    def __init__(self, thresholds: Optional[ConfidenceThresholds] = None):
        self.thresholds = thresholds or ConfidenceThresholds.from_settings()

    def render(self, result: AnalysisResult) -> str:
        sections = [self._header(result)]

        for build in (
            self._patient_section,
            self._vital_signs_section,
            self._medications_section,
            self._exam_results_section,
            self._diagnosis_section,
            self._actions_section,
        ):
            lines = build(result)
            if lines:
                sections.append(lines)

        return "\n\n".join("\n".join(lines) for lines in sections)

    def _header(self, result: AnalysisResult) -> List[str]:
        level = self.thresholds.get_level(result.confidence)
        lines = [
            "RELATÓRIO DE ANÁLISE - DOCUMENTO MÉDICO",
            "=" * 48,
            f"Tipo identificado: {result.document_type.name}",
            f"Confiança geral: {format_percent(result.confidence)} ({LEVEL_LABELS[level]})",
        ]
        if self.thresholds.requires_review(result.confidence):
            lines.append("Revisão humana recomendada")
        return lines

    def _patient_section(self, result: AnalysisResult) -> List[str]:
        patient = result.patient_info
        if patient.confidence <= 0:
            return []

        lines = ["INFORMAÇÕES DO PACIENTE:"]
        if patient.name:
            lines.append(f"   Nome: {patient.name}")
        if patient.cpf:
            lines.append(f"   CPF: {patient.cpf}")
        if patient.birth_date:
            lines.append(f"   Nascimento: {patient.birth_date}")
        if patient.medical_record:
            lines.append(f"   Prontuário: {patient.medical_record}")
        lines.append(f"   Confiança: {format_percent(patient.confidence)}")
        return lines

    def _vital_signs_section(self, result: AnalysisResult) -> List[str]:
        signs = result.extracted_data.vital_signs
        if signs is None or signs.is_empty:
            return []

        lines = ["SINAIS VITAIS:"]
        for attribute, label in VITAL_SIGN_LABELS:
            value = getattr(signs, attribute)
            if value:
                lines.append(f"   {label}: {value}")
        return lines

    def _medications_section(self, result: AnalysisResult) -> List[str]:
        medications = result.extracted_data.medications
        if not medications:
            return []

        lines = ["MEDICAÇÕES IDENTIFICADAS:"]
        for med in medications:
            parts = [med.name, med.dosage] + ([med.frequency] if med.frequency else [])
            lines.append("   - " + " - ".join(parts))
            if med.duration:
                lines.append(f"     Duração: {med.duration}")
        return lines

    def _exam_results_section(self, result: AnalysisResult) -> List[str]:
        exams = result.extracted_data.exam_results
        if not exams:
            return []

        lines = ["RESULTADOS DE EXAMES:"]
        for exam in exams:
            value = f"{exam.result} {exam.unit}" if exam.unit else exam.result
            lines.append(f"   - {exam.exam_type}: {value}")
            if exam.reference_range:
                lines.append(f"     Valores de referência: {exam.reference_range}")
        return lines

    def _diagnosis_section(self, result: AnalysisResult) -> List[str]:
        diagnosis = result.extracted_data.diagnosis
        if not diagnosis:
            return []
        return ["DIAGNÓSTICO:"] + [f"   - {entry}" for entry in diagnosis]

    def _actions_section(self, result: AnalysisResult) -> List[str]:
        if not result.suggested_actions:
            return []

        lines = ["AÇÕES SUGERIDAS:"]
        for action in result.suggested_actions:
            lines.append(f"   - {action.action.name} ({format_percent(action.confidence)} confiança)")
        return lines
