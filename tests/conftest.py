# ============================================================================
# FILE: tests/conftest.py
# ============================================================================
"""
Pytest configuration and shared fixtures for testing.
"""

import pytest
from datetime import datetime

from medical_document_ai.core.models import RawDocument
from medical_document_ai.patterns import load_pattern_library


@pytest.fixture(scope="session")
def library():
    """Packaged pt-BR pattern library"""
    return load_pattern_library()


@pytest.fixture
def prescription_text():
    """Prescription with two medications, patient header and prescriber"""
    return (
        "Prescrição Médica\n"
        "Paciente: Maria da Silva Souza\n"
        "CPF: 123.456.789-10\n"
        "Data: 15/03/2024\n"
        "\n"
        "Ciprofloxacino 500mg 1 comprimido de 12/12h Por 7 dias\n"
        "Dipirona 500mg\n"
        "\n"
        "Dr. Carlos Mendes CRM 12345\n"
    )


@pytest.fixture
def exam_text():
    """Laboratory result with three analytes"""
    return (
        "Laboratório Central\n"
        "Resultado de Exame\n"
        "Paciente: João Pereira Lima\n"
        "Data: 20/03/2024\n"
        "Data de nascimento: 10/05/1980\n"
        "Prontuário: 4521\n"
        "\n"
        "Hemoglobina: 13.8 g/dL (VR: 12.0 a 16.0)\n"
        "Glicemia de jejum: 92 mg/dL (70 a 99)\n"
        "Leucócitos: 7500 /mm³\n"
    )


@pytest.fixture
def progress_note_text():
    """Progress note with symptoms, vital signs, diagnosis and observations"""
    return (
        "Evolução Clínica\n"
        "Paciente: Ana Beatriz Costa\n"
        "Data: 02/04/2024\n"
        "\n"
        "Paciente apresenta febre e tosse seca há 3 dias, com cefaleia leve.\n"
        "PA: 120x80 mmHg  FC: 88 bpm  Temperatura: 38,2 °C\n"
        "Peso: 70 kg\n"
        "\n"
        "Diagnóstico: Infecção de vias aéreas superiores\n"
        "CID J06.9\n"
        "Obs: retorno em 7 dias\n"
        "Observação: manter hidratação\n"
    )


@pytest.fixture
def intake_text():
    """Intake history (anamnese)"""
    return (
        "Anamnese\n"
        "Nome: Pedro Henrique Alves\n"
        "Queixa principal: dor abdominal e náuseas há dois dias.\n"
        "Obs: paciente ansioso\n"
    )


@pytest.fixture
def unrelated_text():
    """Text without any clinical cue"""
    return "Bom dia, segue o cardápio da semana: arroz, feijão e salada."


@pytest.fixture
def registration_text():
    """Complete patient registration form (ficha cadastral)"""
    return (
        "Ficha Cadastral\n"
        "Nome completo: Maria Aparecida Santos\n"
        "CPF: 987.654.321-00\n"
        "RG: 12.345.678-9 SSP/SP\n"
        "Data de nascimento: 15/08/1975\n"
        "Sexo: Feminino\n"
        "Telefone: (11) 3333-4444\n"
        "Celular: (11) 98888-7777\n"
        "E-mail: maria.santos@example.com\n"
        "Endereço: Rua das Flores, 123\n"
        "Complemento: Apto 45\n"
        "Bairro: Jardim Paulista\n"
        "Cidade: São Paulo\n"
        "Estado: SP\n"
        "CEP: 01234-567\n"
        "Tipo sanguíneo: O positivo\n"
        "Alergias: Penicilina, Dipirona; Frutos do mar\n"
        "Convênio: Unimed\n"
        "Contato de emergência: José Santos (esposo) (11) 97777-6666\n"
        "Profissão: Professora\n"
    )


@pytest.fixture
def make_document():
    """Factory for RawDocument instances"""
    def _make(content, doc_id="doc-001", file_name="documento.txt"):
        return RawDocument(
            id=doc_id,
            file_name=file_name,
            content=content,
            upload_date=datetime(2024, 3, 15, 10, 30),
        )
    return _make
