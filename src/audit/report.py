"""
Presentation helpers — read-only views over a ValidationResult for the UI
and report layers.
"""
from typing import Dict, List, Sequence

from src.config.constants import MAX_WARNINGS_BEFORE_REVIEW
from src.models.validation import (
    ErrorType,
    Severity,
    ValidationError,
    ValidationResult,
)

# Error type → recommendation, in display order
TYPE_RECOMMENDATIONS: List[tuple] = [
    (ErrorType.BALANCE_MISMATCH, "Verifique os cálculos de saldo e balanço financeiro"),
    (ErrorType.NEGATIVE_INVALID, "Revise valores negativos que podem estar incorretos"),
    (ErrorType.PERCENTAGE_INVALID, "Confira os percentuais das categorias de despesa"),
    (ErrorType.CNPJ_INVALID, "Confirme o CNPJ do condomínio no documento original"),
]


def categorize_errors(errors: Sequence[ValidationError]) -> Dict[str, List[ValidationError]]:
    """Group errors by severity; every severity key is always present."""
    grouped: Dict[str, List[ValidationError]] = {s.value: [] for s in Severity}
    for error in errors or ():
        grouped[error.severity.value].append(error)
    return grouped


def generate_summary(result: ValidationResult) -> str:
    """Multi-line textual summary of a validation run."""
    summary = result.summary
    by_severity = categorize_errors(result.errors)

    lines = [
        f"Score: {result.score}% ({summary.overall_health.value.upper()})",
        f"Verificações: {summary.passed_checks}/{summary.total_checks} aprovadas",
    ]

    critical = len(by_severity[Severity.CRITICAL.value])
    high = len(by_severity[Severity.HIGH.value])
    if critical:
        lines.append(f"{critical} erro(s) crítico(s)")
    if high:
        lines.append(f"{high} erro(s) de alta prioridade")
    if result.warnings:
        lines.append(f"{len(result.warnings)} aviso(s)")

    return "\n".join(lines)


def generate_recommendations(result: ValidationResult) -> List[str]:
    """Actionable recommendations derived from error types and warning volume."""
    recommendations: List[str] = []

    if any(e.severity == Severity.CRITICAL for e in result.errors):
        recommendations.append("Corrija imediatamente os erros críticos identificados")

    found_types = {e.type for e in result.errors}
    for error_type, text in TYPE_RECOMMENDATIONS:
        if error_type in found_types:
            recommendations.append(text)

    if len(result.warnings) > MAX_WARNINGS_BEFORE_REVIEW:
        recommendations.append(
            "Considere revisar os itens com avisos para melhorar a qualidade dos dados"
        )

    if not recommendations:
        recommendations.append("Prestação de contas está em conformidade")

    return recommendations
