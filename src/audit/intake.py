"""
Extraction Intake — turns the PDF extraction payload into a FinancialStatement.

Stages:
    1. JSON parse
    2. Envelope conformance (jsonschema)
    3. Key mapping (extraction snake_case or statement camelCase)
    4. Advisory blocks (metadata, reported inconsistencies) via pydantic

Numeric values are mapped as received; the audit engine re-validates them.
"""
import json
import logging
from typing import List

from jsonschema import ValidationError as SchemaValidationError
from jsonschema import validate
from pydantic import ValidationError as PydanticValidationError

from src.config.schemas import EXTRACTION_PAYLOAD_SCHEMA
from src.models.extraction_io import (
    ExtractionMetadata,
    ExtractionPayload,
    ReportedInconsistency,
)
from src.models.statement import CostCategory, FinancialStatement

logger = logging.getLogger(__name__)

# Extraction-layer key → statement contract key
EXTRACTION_KEY_MAP: dict = {
    "total_receitas": "receitas",
    "total_despesas": "despesas",
    "saldo_anterior": "saldoAnterior",
    "saldo_final": "saldoFinal",
    "data_inicio": "dataInicio",
    "data_fim": "dataFim",
}


class IntakeError(ValueError):
    """Raised when an extraction payload cannot be turned into a statement."""

    def __init__(self, errors: List[str]) -> None:
        self.errors = errors
        super().__init__(f"Extraction payload rejected: {errors}")


def _load(payload: str | dict) -> dict:
    if isinstance(payload, dict):
        return payload
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise IntakeError([f"Invalid JSON: {e}"]) from e
    if not isinstance(data, dict):
        raise IntakeError([f"Payload must be a JSON object, got {type(data).__name__}"])
    return data


def _categories(data: dict) -> tuple:
    """
    Expense breakdown, from ``despesas_por_categoria`` when present,
    otherwise from ``categorias``.

    Revenue breakdowns are not cost centers and are not audited.
    """
    lines = data.get("despesas_por_categoria")
    if lines is None:
        lines = data.get("categorias") or []
    return tuple(CostCategory.from_dict(line) for line in lines)


def statement_from_dict(data: dict) -> FinancialStatement:
    """Map an already-validated payload dict to a FinancialStatement."""
    contract = {k: v for k, v in data.items() if k in FinancialStatement.FIELD_NAMES}
    for source_key, contract_key in EXTRACTION_KEY_MAP.items():
        if data.get(source_key) is not None:
            contract[contract_key] = data[source_key]
    contract["categorias"] = _categories(data)
    return FinancialStatement.from_dict(contract)


def parse_extraction_payload(payload: str | dict) -> ExtractionPayload:
    """
    Parse an extraction payload into a statement plus advisory blocks.

    Raises:
        IntakeError: malformed JSON, envelope violation or invalid
            metadata/inconsistency blocks.
    """
    data = _load(payload)

    try:
        validate(instance=data, schema=EXTRACTION_PAYLOAD_SCHEMA)
    except SchemaValidationError as e:
        raise IntakeError([f"Schema violation: {e.message}"]) from e

    errors: List[str] = []

    inconsistencias: List[ReportedInconsistency] = []
    for i, item in enumerate(data.get("inconsistencias", [])):
        try:
            inconsistencias.append(ReportedInconsistency(**item))
        except PydanticValidationError as e:
            errors.append(f"inconsistencias[{i}]: {e.errors()[0]['msg']}")

    metadata = None
    if data.get("metadata") is not None:
        try:
            metadata = ExtractionMetadata(**data["metadata"])
        except PydanticValidationError as e:
            errors.append(f"metadata: {e.errors()[0]['msg']}")

    if errors:
        raise IntakeError(errors)

    parsed = ExtractionPayload(
        statement=statement_from_dict(data),
        inconsistencias=tuple(inconsistencias),
        metadata=metadata,
    )

    if parsed.is_sample_data:
        logger.warning(
            "Extraction used '%s' method — figures may not come from the PDF",
            metadata.extraction_method,
        )

    return parsed


def statement_from_payload(payload: str | dict) -> FinancialStatement:
    """Shortcut returning only the statement of an extraction payload."""
    return parse_extraction_payload(payload).statement
