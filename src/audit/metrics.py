"""
Prometheus Metrics — audit engine observability.

Exposes counters and a histogram for:
- Analyses completed, by overall health and validity
- Findings emitted, by kind (error / warning) and type
- Engine faults converted into the fallback result
- Analysis latency

Usage
-----
    from src.audit.metrics import record_result, timed_analysis

    with timed_analysis():
        result = validate(statement)
    record_result(result)
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram

from src.models.validation import ValidationResult


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Completed analyses, labelled by health bucket and validity.
ANALYSES: Counter = Counter(
    "audit_analyses_total",
    "Total statements analysed by overall health and validity",
    ["overall_health", "is_valid"],
)

# Findings emitted, labelled by kind and type identifier.
FINDINGS: Counter = Counter(
    "audit_findings_total",
    "Total findings emitted by kind (error / warning) and type",
    ["kind", "finding_type"],
)

# Engine faults that produced the fallback result.
ENGINE_FAULTS: Counter = Counter(
    "audit_engine_faults_total",
    "Times the validation pipeline failed and returned the fallback result",
)

# End-to-end analysis latency (seconds).
ANALYSIS_LATENCY: Histogram = Histogram(
    "audit_analysis_seconds",
    "Time spent validating one statement in seconds",
    buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_finding(kind: str, finding_type: str) -> None:
    """Increment the findings counter for one *kind*/*finding_type* pair."""
    FINDINGS.labels(kind=kind, finding_type=finding_type).inc()


def record_result(result: ValidationResult) -> None:
    """Record the health bucket and every finding of *result*."""
    ANALYSES.labels(
        overall_health=result.summary.overall_health.value,
        is_valid=str(result.is_valid).lower(),
    ).inc()
    for error in result.errors:
        record_finding("error", error.type.value)
    for warning in result.warnings:
        record_finding("warning", warning.type.value)


def record_engine_fault() -> None:
    ENGINE_FAULTS.inc()


@contextmanager
def timed_analysis() -> Generator[None, None, None]:
    """
    Context manager that records analysis latency.

    Usage::

        with timed_analysis():
            result = validate(statement)
    """
    with ANALYSIS_LATENCY.time():
        yield
