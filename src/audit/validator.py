"""
Validator Orchestrator — the audit engine's single public entry point.

Runs every check function, merges tallies and findings, derives score and
overall health, and assembles one immutable ValidationResult.

The engine holds no state: the same statement always yields the same
result. It never logs and never raises; a programming fault inside a check
becomes the fixed fallback result, and the caller decides how to report it
(see src.audit.analysis).
"""
import math
from typing import List, Sequence

from src.audit.checks import ALL_CHECKS
from src.config.constants import FALLBACK_HEALTH, HEALTH_BANDS
from src.models.statement import FinancialStatement
from src.models.thresholds import DEFAULT_THRESHOLDS, ValidationThresholds
from src.models.validation import (
    ErrorType,
    OverallHealth,
    Severity,
    ValidationError,
    ValidationResult,
    ValidationSummary,
    ValidationWarning,
)


def compute_score(total_checks: int, passed_checks: int) -> int:
    """round(100 × passed / total), rounding halves up; 0 when nothing ran."""
    if total_checks <= 0:
        return 0
    return int(math.floor(100 * passed_checks / total_checks + 0.5))


def classify_health(total_checks: int, passed_checks: int, errors_count: int) -> OverallHealth:
    """
    Bucket thresholds (success rate, max errors):
        >= 0.95 and 0 errors  → excellent
        >= 0.85 and ≤ 1 error → good
        >= 0.70 and ≤ 3 errors → fair
        otherwise             → poor
    """
    success_rate = passed_checks / total_checks if total_checks > 0 else 0.0

    for health, min_rate, max_errors in HEALTH_BANDS:
        if success_rate >= min_rate and errors_count <= max_errors:
            return OverallHealth(health)
    return OverallHealth(FALLBACK_HEALTH)


def is_valid(errors: Sequence[ValidationError]) -> bool:
    """A statement is valid iff no error is critical or high."""
    return not any(e.is_blocking for e in errors)


def evaluate(
    statement: FinancialStatement,
    thresholds: ValidationThresholds = DEFAULT_THRESHOLDS,
) -> ValidationResult:
    """
    Run the full check pipeline without the fallback guard.

    Exceptions raised by a check propagate; use :func:`validate` unless the
    caller wants to observe them.
    """
    errors: List[ValidationError] = []
    warnings: List[ValidationWarning] = []
    total_checks = 0
    passed_checks = 0

    for _name, check in ALL_CHECKS:
        outcome = check(statement, thresholds)
        total_checks += outcome.checks
        passed_checks += outcome.passed
        errors.extend(outcome.errors)
        warnings.extend(outcome.warnings)

    summary = ValidationSummary(
        total_checks=total_checks,
        passed_checks=passed_checks,
        failed_checks=total_checks - passed_checks,
        warnings_count=len(warnings),
        overall_health=classify_health(total_checks, passed_checks, len(errors)),
    )

    return ValidationResult(
        is_valid=is_valid(errors),
        score=compute_score(total_checks, passed_checks),
        errors=tuple(errors),
        warnings=tuple(warnings),
        summary=summary,
    )


def fallback_result() -> ValidationResult:
    """Fixed result returned when the pipeline itself fails."""
    return ValidationResult(
        is_valid=False,
        score=0,
        errors=(
            ValidationError(
                type=ErrorType.CALCULATION_ERROR,
                message="Erro interno durante validação",
                severity=Severity.CRITICAL,
            ),
        ),
        warnings=(),
        summary=ValidationSummary(
            total_checks=1,
            passed_checks=0,
            failed_checks=1,
            warnings_count=0,
            overall_health=OverallHealth.POOR,
        ),
    )


def validate(
    statement: FinancialStatement,
    thresholds: ValidationThresholds = DEFAULT_THRESHOLDS,
) -> ValidationResult:
    """
    Audit one financial statement.

    Args:
        statement: Figures extracted from the uploaded PDF.
        thresholds: Tolerances and risk limits (defaults to the pinned constants).

    Returns:
        ValidationResult with validity flag, 0–100 score, errors, warnings
        and summary. Never raises.
    """
    try:
        return evaluate(statement, thresholds)
    except Exception:
        return fallback_result()
