"""
Analysis Run — invokes the audit engine once for a submitted statement.

This is the engine's caller: it owns timing, logging and metrics. A
programming fault inside the engine is logged here and replaced by the
engine's fallback result.
"""
import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from src.audit.metrics import record_engine_fault, record_result, timed_analysis
from src.audit.validator import evaluate, fallback_result
from src.models.statement import FinancialStatement
from src.models.thresholds import ValidationThresholds
from src.models.validation import Severity, ValidationResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    """One audit of one statement submission."""

    prestacao_id: str
    validation_result: ValidationResult
    analyzed_at: str          # ISO-8601, UTC
    processing_time_ms: int

    def to_dict(self) -> dict:
        return {
            "prestacaoId": self.prestacao_id,
            "validationResult": self.validation_result.to_dict(),
            "analyzedAt": self.analyzed_at,
            "processingTime": self.processing_time_ms,
        }


def run_analysis(
    prestacao_id: str,
    statement: FinancialStatement,
    thresholds: Optional[ValidationThresholds] = None,
) -> AnalysisResult:
    """
    Validate *statement* and wrap the result with run metadata.

    Args:
        prestacao_id: Identifier of the statement submission.
        statement: Extracted financial statement.
        thresholds: Limits to apply. Defaults to environment settings.

    Returns:
        AnalysisResult; never raises for engine faults.
    """
    if thresholds is None:
        thresholds = ValidationThresholds.from_settings()

    start_time = time.monotonic()
    logger.info("Starting financial validation for %s", prestacao_id)

    with timed_analysis():
        try:
            result = evaluate(statement, thresholds)
        except Exception:
            logger.exception("Validation pipeline failed for %s", prestacao_id)
            record_engine_fault()
            result = fallback_result()

    elapsed_ms = int((time.monotonic() - start_time) * 1000)
    record_result(result)

    critical = sum(1 for e in result.errors if e.severity == Severity.CRITICAL)
    high = sum(1 for e in result.errors if e.severity == Severity.HIGH)

    logger.info(
        "Validation finished for %s: score=%d health=%s errors=%d warnings=%d (%d ms)",
        prestacao_id,
        result.score,
        result.summary.overall_health.value,
        len(result.errors),
        len(result.warnings),
        elapsed_ms,
    )
    if critical:
        logger.warning("%s: %d critical error(s) found", prestacao_id, critical)
    elif high:
        logger.warning("%s: %d high-priority error(s) found", prestacao_id, high)

    return AnalysisResult(
        prestacao_id=prestacao_id,
        validation_result=result,
        analyzed_at=datetime.now(timezone.utc).isoformat(),
        processing_time_ms=elapsed_ms,
    )
