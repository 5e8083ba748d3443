"""
Validation contracts — errors, warnings, summary and result of an audit run.

The string values of the enums are a contract with the presentation layer
and must stay stable.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class ErrorType(str, Enum):
    """Violations of a rule the engine considers mandatory."""

    BALANCE_MISMATCH = "balance_mismatch"
    NEGATIVE_INVALID = "negative_invalid"
    PERCENTAGE_INVALID = "percentage_invalid"
    DATE_INCONSISTENCY = "date_inconsistency"
    CALCULATION_ERROR = "calculation_error"
    MISSING_DATA = "missing_data"
    OUTLIER_DETECTED = "outlier_detected"
    CNPJ_INVALID = "cnpj_invalid"


class WarningType(str, Enum):
    """Risk signals that never affect validity."""

    UNUSUAL_VARIATION = "unusual_variation"
    HIGH_EXPENSE = "high_expense"
    LOW_RESERVE = "low_reserve"
    CATEGORY_IMBALANCE = "category_imbalance"
    DATE_PROXIMITY = "date_proximity"


class Severity(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# Severities that make a statement invalid
BLOCKING_SEVERITIES = frozenset({Severity.CRITICAL, Severity.HIGH})


class OverallHealth(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


def _drop_none(data: dict) -> dict:
    return {k: v for k, v in data.items() if v is not None}


@dataclass(frozen=True)
class ValidationError:
    """A rule violation found in a statement."""

    type: ErrorType
    message: str
    severity: Severity
    field: Optional[str] = None
    expected_value: Optional[float] = None
    actual_value: Optional[float] = None
    difference: Optional[float] = None

    @property
    def is_blocking(self) -> bool:
        return self.severity in BLOCKING_SEVERITIES

    def to_dict(self) -> dict:
        return _drop_none({
            "type": self.type.value,
            "message": self.message,
            "severity": self.severity.value,
            "field": self.field,
            "expectedValue": self.expected_value,
            "actualValue": self.actual_value,
            "difference": self.difference,
        })


@dataclass(frozen=True)
class ValidationWarning:
    """A noteworthy but non-fatal observation."""

    type: WarningType
    message: str
    field: Optional[str] = None
    value: Optional[float] = None
    suggestion: Optional[str] = None

    def to_dict(self) -> dict:
        return _drop_none({
            "type": self.type.value,
            "message": self.message,
            "field": self.field,
            "value": self.value,
            "suggestion": self.suggestion,
        })


@dataclass(frozen=True)
class CheckOutcome:
    """Tally and findings produced by a single check function."""

    checks: int = 0
    passed: int = 0
    errors: Tuple[ValidationError, ...] = field(default=())
    warnings: Tuple[ValidationWarning, ...] = field(default=())

    @property
    def failed(self) -> int:
        return self.checks - self.passed


@dataclass(frozen=True)
class ValidationSummary:
    total_checks: int
    passed_checks: int
    failed_checks: int
    warnings_count: int
    overall_health: OverallHealth

    def to_dict(self) -> dict:
        return {
            "totalChecks": self.total_checks,
            "passedChecks": self.passed_checks,
            "failedChecks": self.failed_checks,
            "warningsCount": self.warnings_count,
            "overallHealth": self.overall_health.value,
        }


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a full audit of one financial statement."""

    is_valid: bool
    score: int
    errors: Tuple[ValidationError, ...]
    warnings: Tuple[ValidationWarning, ...]
    summary: ValidationSummary

    def errors_of_type(self, error_type: ErrorType) -> Tuple[ValidationError, ...]:
        return tuple(e for e in self.errors if e.type == error_type)

    def warnings_of_type(self, warning_type: WarningType) -> Tuple[ValidationWarning, ...]:
        return tuple(w for w in self.warnings if w.type == warning_type)

    def to_dict(self) -> dict:
        return {
            "isValid": self.is_valid,
            "score": self.score,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings],
            "summary": self.summary.to_dict(),
        }
