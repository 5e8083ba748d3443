"""
JSON Schemas for the extraction payload and the validation result contract.

Two schemas:
1. EXTRACTION_PAYLOAD_SCHEMA — envelope produced by the PDF extraction layer
2. VALIDATION_RESULT_SCHEMA  — ValidationResult as read by the presentation layer

Numeric fields of the extraction payload are left untyped here; the
structural check reports a malformed value as CALCULATION_ERROR.
"""
from src.models.validation import ErrorType, OverallHealth, Severity, WarningType

_CATEGORY_LINE: dict = {
    "type": "object",
    "properties": {
        "categoria": {"type": "string"},
        "nome": {"type": "string"},
        "valor": {},
        "percentual": {},
    },
}

# =============================================================================
# 1. Extraction Payload Schema (envelope only)
# =============================================================================
EXTRACTION_PAYLOAD_SCHEMA: dict = {
    "type": "object",
    "properties": {
        # Extraction-layer keys
        "total_receitas": {},
        "total_despesas": {},
        "saldo_anterior": {},
        "saldo_final": {},
        "despesas_por_categoria": {"type": "array", "items": _CATEGORY_LINE},
        "receitas_por_categoria": {"type": "array", "items": _CATEGORY_LINE},
        "inconsistencias": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["tipo", "descricao", "nivel_criticidade"],
            },
        },
        "metadata": {"type": "object"},
        # Statement keys
        "receitas": {},
        "despesas": {},
        "saldoAnterior": {},
        "saldoFinal": {},
        "categorias": {"type": "array", "items": _CATEGORY_LINE},
        "cnpj": {"type": ["string", "null"]},
        "dataInicio": {"type": ["string", "null"]},
        "dataFim": {"type": ["string", "null"]},
        "data_inicio": {"type": ["string", "null"]},
        "data_fim": {"type": ["string", "null"]},
    },
}


# =============================================================================
# 2. Validation Result Schema (contract with the presentation layer)
# =============================================================================
VALIDATION_RESULT_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": ["isValid", "score", "errors", "warnings", "summary"],
    "properties": {
        "isValid": {"type": "boolean"},
        "score": {"type": "integer", "minimum": 0, "maximum": 100},
        "errors": {
            "type": "array",
            "items": {
                "type": "object",
                "additionalProperties": False,
                "required": ["type", "message", "severity"],
                "properties": {
                    "type": {"type": "string", "enum": [t.value for t in ErrorType]},
                    "message": {"type": "string"},
                    "severity": {"type": "string", "enum": [s.value for s in Severity]},
                    "field": {"type": "string"},
                    "expectedValue": {"type": "number"},
                    "actualValue": {"type": "number"},
                    "difference": {"type": "number", "minimum": 0},
                },
            },
        },
        "warnings": {
            "type": "array",
            "items": {
                "type": "object",
                "additionalProperties": False,
                "required": ["type", "message"],
                "properties": {
                    "type": {"type": "string", "enum": [t.value for t in WarningType]},
                    "message": {"type": "string"},
                    "field": {"type": "string"},
                    "value": {"type": "number"},
                    "suggestion": {"type": "string"},
                },
            },
        },
        "summary": {
            "type": "object",
            "additionalProperties": False,
            "required": [
                "totalChecks",
                "passedChecks",
                "failedChecks",
                "warningsCount",
                "overallHealth",
            ],
            "properties": {
                "totalChecks": {"type": "integer", "minimum": 0},
                "passedChecks": {"type": "integer", "minimum": 0},
                "failedChecks": {"type": "integer", "minimum": 0},
                "warningsCount": {"type": "integer", "minimum": 0},
                "overallHealth": {"type": "string", "enum": [h.value for h in OverallHealth]},
            },
        },
    },
}
