"""
Unit tests for src.audit.metrics.

Counters are process-global, so assertions compare sample values before
and after each call instead of absolute values.
"""
from __future__ import annotations

from dataclasses import replace

import pytest
from prometheus_client import REGISTRY

from src.audit.validator import validate


def _sample(name: str, labels: dict | None = None) -> float:
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


class TestMetricsModule:
    def test_all_public_helpers_present(self):
        from src.audit import metrics as m
        for name in (
            "record_finding",
            "record_result",
            "record_engine_fault",
            "timed_analysis",
            "ANALYSES",
            "FINDINGS",
            "ENGINE_FAULTS",
            "ANALYSIS_LATENCY",
        ):
            assert hasattr(m, name), f"Missing public symbol: {name}"


class TestMetricHelpers:

    def test_record_finding(self):
        from src.audit.metrics import record_finding
        labels = {"kind": "error", "finding_type": "cnpj_invalid"}
        before = _sample("audit_findings_total", labels)
        record_finding("error", "cnpj_invalid")
        assert _sample("audit_findings_total", labels) == before + 1

    def test_record_result_counts_analysis_and_findings(self, perfect_statement):
        from src.audit.metrics import record_result
        result = validate(replace(perfect_statement, saldo_final=5000.0))
        analysis_labels = {"overall_health": "good", "is_valid": "false"}
        finding_labels = {"kind": "error", "finding_type": "balance_mismatch"}
        analyses_before = _sample("audit_analyses_total", analysis_labels)
        findings_before = _sample("audit_findings_total", finding_labels)

        record_result(result)

        assert _sample("audit_analyses_total", analysis_labels) == analyses_before + 1
        assert _sample("audit_findings_total", finding_labels) == findings_before + 1

    def test_record_result_counts_warnings(self):
        from src.audit.metrics import record_result
        from src.models.statement import FinancialStatement
        statement = FinancialStatement(
            receitas=10000.0, despesas=11500.0, saldo_anterior=2000.0, saldo_final=500.0
        )
        labels = {"kind": "warning", "finding_type": "high_expense"}
        before = _sample("audit_findings_total", labels)
        record_result(validate(statement))
        assert _sample("audit_findings_total", labels) == before + 1

    def test_record_engine_fault(self):
        from src.audit.metrics import record_engine_fault
        before = _sample("audit_engine_faults_total")
        record_engine_fault()
        assert _sample("audit_engine_faults_total") == before + 1

    def test_timed_analysis_observes_latency(self):
        from src.audit.metrics import timed_analysis
        before = _sample("audit_analysis_seconds_count")
        with timed_analysis():
            pass
        assert _sample("audit_analysis_seconds_count") == before + 1

    def test_timed_analysis_does_not_suppress_exceptions(self):
        from src.audit.metrics import timed_analysis
        with pytest.raises(ValueError, match="test error"):
            with timed_analysis():
                raise ValueError("test error")
