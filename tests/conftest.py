"""
Shared test fixtures for the audit engine test suite.
"""
import json

import pytest

from src.models.statement import CostCategory, FinancialStatement


# ==========================================================================
# Categories
# ==========================================================================

@pytest.fixture
def balanced_categories():
    """Cost centers summing to 100% and to the statement's expenses."""
    return (
        CostCategory(nome="Pessoal", valor=4000.0, percentual=50.0),
        CostCategory(nome="Manutenção", valor=2000.0, percentual=25.0),
        CostCategory(nome="Consumo", valor=1200.0, percentual=15.0),
        CostCategory(nome="Administrativa", valor=800.0, percentual=10.0),
    )


@pytest.fixture
def skewed_categories():
    """Ten small cost centers and one far beyond 3σ of the rest."""
    small = tuple(CostCategory(nome=f"Item {i}", valor=100.0) for i in range(10))
    return small + (CostCategory(nome="Obra emergencial", valor=10000.0),)


# ==========================================================================
# Statements
# ==========================================================================

@pytest.fixture
def perfect_statement(balanced_categories):
    return FinancialStatement(
        receitas=10000.0,
        despesas=8000.0,
        saldo_anterior=2000.0,
        saldo_final=4000.0,
        categorias=balanced_categories,
        cnpj="11.222.333/0001-81",
        data_inicio="2024-01-01",
        data_fim="2024-01-31",
    )


@pytest.fixture
def minimal_statement():
    """Only the four balance fields."""
    return FinancialStatement(
        receitas=10000.0,
        despesas=8000.0,
        saldo_anterior=2000.0,
        saldo_final=4000.0,
    )


@pytest.fixture
def empty_statement():
    return FinancialStatement()


# ==========================================================================
# Extraction payload
# ==========================================================================

@pytest.fixture
def extraction_payload():
    return {
        "total_receitas": 45230.50,
        "total_despesas": 38750.25,
        "saldo_anterior": 2800.30,
        "saldo_final": 9280.55,
        "despesas_por_categoria": [
            {"categoria": "Pessoal", "valor": 18500.00, "percentual": 47.74},
            {"categoria": "Manutenção", "valor": 8200.00, "percentual": 21.16},
            {"categoria": "Consumo", "valor": 6500.25, "percentual": 16.77},
            {"categoria": "Administrativa", "valor": 5550.00, "percentual": 14.33},
        ],
        "receitas_por_categoria": [
            {"categoria": "Taxa condominial", "valor": 42000.00},
            {"categoria": "Multas", "valor": 3230.50},
        ],
        "inconsistencias": [
            {
                "tipo": "Conferência manual",
                "descricao": "Nota fiscal de manutenção ilegível",
                "nivel_criticidade": "baixo",
            },
        ],
        "metadata": {
            "extraction_method": "llm",
            "processing_time_ms": 5230,
            "file_size_bytes": 184320,
            "confidence_score": 0.92,
            "warnings": [],
        },
        "cnpj": "11.222.333/0001-81",
        "data_inicio": "2024-03-01",
        "data_fim": "2024-03-31",
    }


@pytest.fixture
def extraction_payload_json(extraction_payload):
    return json.dumps(extraction_payload, ensure_ascii=False)
