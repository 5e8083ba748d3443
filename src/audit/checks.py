"""
Check Functions — seven independent validation routines.

Each check:
- receives the statement and the thresholds, never another check's output
- declares its own precondition and skips (zero checks) when unmet
- reports rule violations as data (errors/warnings), never by raising
- returns a CheckOutcome with its own checks/passed tally

Checks:
    1. Structure      — required balance fields present and numeric
    2. Balance        — reconciliation, expense ceiling, reserve floor
    3. Percentages    — category percentages sum to 100
    4. Negatives      — revenue never negative, negative closing flagged
    5. Dates          — monthly period length and ordering
    6. Outliers       — z-score scan over category values
    7. CNPJ           — tax identifier checksum
"""
import math
import numbers
from datetime import date, datetime
from typing import Any, Callable, List, Optional, Tuple

from src.audit import statistics
from src.audit.cnpj import is_valid_cnpj
from src.config.constants import (
    FLOAT_COMPARISON_DIGITS,
    NON_NEGATIVE_FIELDS,
    REQUIRED_BALANCE_FIELDS,
    WATCHED_NEGATIVE_FIELDS,
)
from src.models.statement import FinancialStatement
from src.models.thresholds import ValidationThresholds
from src.models.validation import (
    CheckOutcome,
    ErrorType,
    Severity,
    ValidationError,
    ValidationWarning,
    WarningType,
)

CheckFn = Callable[[FinancialStatement, ValidationThresholds], CheckOutcome]


# ======================================================================
# Internal helpers
# ======================================================================

def is_number(value: Any) -> bool:
    """
    True for finite real numbers; booleans, NaN, infinities and integers
    beyond the float range are rejected.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False


def _within(difference: float, tolerance: float) -> bool:
    # Rounded so that an exact-cent difference is not failed by float noise
    return round(difference, FLOAT_COMPARISON_DIGITS) <= tolerance


def _calculation_error(field: str, value: Any) -> ValidationError:
    return ValidationError(
        type=ErrorType.CALCULATION_ERROR,
        message=f"Campo {field} deve ser numérico (recebido: {value!r})",
        severity=Severity.HIGH,
        field=field,
    )


def _parse_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip().replace("Z", "+00:00")).date()
        except ValueError:
            return None
    return None


def _money(value: float) -> str:
    return f"R$ {value:,.2f}"


# ======================================================================
# 1. Structure
# ======================================================================

def check_structure(
    statement: FinancialStatement,
    thresholds: ValidationThresholds,
) -> CheckOutcome:
    """
    One presence check per required balance field, then one numeric-shape
    check per field that is present.
    """
    errors: List[ValidationError] = []
    checks = 0
    passed = 0

    for field in REQUIRED_BALANCE_FIELDS:
        checks += 1
        if statement.get(field) is not None:
            passed += 1
        else:
            errors.append(
                ValidationError(
                    type=ErrorType.MISSING_DATA,
                    message=f"Campo obrigatório ausente: {field}",
                    severity=Severity.CRITICAL,
                    field=field,
                )
            )

    for field in REQUIRED_BALANCE_FIELDS:
        value = statement.get(field)
        if value is None:
            continue
        checks += 1
        if is_number(value):
            passed += 1
        else:
            errors.append(_calculation_error(field, value))

    return CheckOutcome(checks=checks, passed=passed, errors=tuple(errors))


# ======================================================================
# 2. Balance
# ======================================================================

def check_balance(
    statement: FinancialStatement,
    thresholds: ValidationThresholds,
) -> CheckOutcome:
    """
    Saldo Anterior + Receitas - Despesas = Saldo Final, plus two risk
    signals (expense ceiling, reserve floor) reported as warnings.

    Runs only when all four balance fields are finite numbers; the
    structural check reports them otherwise.
    """
    values = [statement.get(f) for f in REQUIRED_BALANCE_FIELDS]
    if not all(is_number(v) for v in values):
        return CheckOutcome()

    receitas, despesas, saldo_anterior, saldo_final = (float(v) for v in values)

    errors: List[ValidationError] = []
    warnings: List[ValidationWarning] = []
    checks = 0
    passed = 0

    # --- Reconciliation ---
    checks += 1
    calculated = saldo_anterior + receitas - despesas
    difference = abs(calculated - saldo_final)

    if _within(difference, thresholds.balance_tolerance):
        passed += 1
    else:
        errors.append(
            ValidationError(
                type=ErrorType.BALANCE_MISMATCH,
                message="Inconsistência no balanço financeiro",
                severity=Severity.CRITICAL,
                field="saldoFinal",
                expected_value=calculated,
                actual_value=saldo_final,
                difference=difference,
            )
        )

    # --- Expense ceiling ---
    checks += 1
    available = saldo_anterior + receitas

    if despesas <= available * thresholds.max_expense_percentage:
        passed += 1
    else:
        warnings.append(
            ValidationWarning(
                type=WarningType.HIGH_EXPENSE,
                message="Despesas muito altas em relação aos recursos disponíveis",
                field="despesas",
                value=despesas,
                suggestion=f"Considere revisar as despesas. Disponível: {_money(available)}",
            )
        )

    # --- Reserve floor ---
    checks += 1
    reserve_ratio = saldo_final / receitas if receitas != 0 else None

    if saldo_final >= 0 or (
        reserve_ratio is not None and reserve_ratio >= thresholds.min_reserve_percentage
    ):
        passed += 1
    else:
        warnings.append(
            ValidationWarning(
                type=WarningType.LOW_RESERVE,
                message="Saldo final muito baixo",
                field="saldoFinal",
                value=saldo_final,
                suggestion=(
                    "Recomenda-se manter reserva mínima de "
                    f"{thresholds.min_reserve_percentage * 100:.1f}%"
                ),
            )
        )

    return CheckOutcome(
        checks=checks, passed=passed, errors=tuple(errors), warnings=tuple(warnings)
    )


# ======================================================================
# 3. Percentages
# ======================================================================

def check_percentages(
    statement: FinancialStatement,
    thresholds: ValidationThresholds,
) -> CheckOutcome:
    """Category percentages must total 100 (missing percentual counts as 0)."""
    if not statement.categorias:
        return CheckOutcome()

    total = 0.0
    malformed: List[ValidationError] = []

    for i, categoria in enumerate(statement.categorias):
        percentual = categoria.percentual
        if percentual is None:
            continue
        if not is_number(percentual):
            malformed.append(_calculation_error(f"categorias[{i}].percentual", percentual))
            continue
        total += float(percentual)

    if malformed:
        return CheckOutcome(checks=1, passed=0, errors=tuple(malformed))

    difference = abs(total - 100)
    if _within(difference, thresholds.percentage_tolerance_points):
        return CheckOutcome(checks=1, passed=1)

    error = ValidationError(
        type=ErrorType.PERCENTAGE_INVALID,
        message="Soma dos percentuais não totaliza 100%",
        severity=Severity.MEDIUM,
        field="categorias",
        expected_value=100.0,
        actual_value=total,
        difference=difference,
    )
    return CheckOutcome(checks=1, passed=0, errors=(error,))


# ======================================================================
# 4. Negative values
# ======================================================================

def check_negative_values(
    statement: FinancialStatement,
    thresholds: ValidationThresholds,
) -> CheckOutcome:
    """Revenue may not be negative; a negative closing balance is only flagged."""
    errors: List[ValidationError] = []
    warnings: List[ValidationWarning] = []
    checks = 0
    passed = 0

    for field in NON_NEGATIVE_FIELDS:
        value = statement.get(field)
        if not is_number(value):
            continue
        checks += 1
        if value >= 0:
            passed += 1
        else:
            errors.append(
                ValidationError(
                    type=ErrorType.NEGATIVE_INVALID,
                    message=f"{field} não pode ser negativo",
                    severity=Severity.HIGH,
                    field=field,
                    actual_value=float(value),
                )
            )

    for field in WATCHED_NEGATIVE_FIELDS:
        value = statement.get(field)
        if is_number(value) and value < 0:
            warnings.append(
                ValidationWarning(
                    type=WarningType.UNUSUAL_VARIATION,
                    message=f"{field} está negativo",
                    field=field,
                    value=float(value),
                    suggestion="Verifique se este valor está correto",
                )
            )

    return CheckOutcome(
        checks=checks, passed=passed, errors=tuple(errors), warnings=tuple(warnings)
    )


# ======================================================================
# 5. Dates
# ======================================================================

def check_dates(
    statement: FinancialStatement,
    thresholds: ValidationThresholds,
) -> CheckOutcome:
    """Period length within the monthly window and start not after end."""
    if not statement.data_inicio or not statement.data_fim:
        return CheckOutcome()

    inicio = _parse_date(statement.data_inicio)
    fim = _parse_date(statement.data_fim)

    if inicio is None or fim is None:
        malformed = []
        if inicio is None:
            malformed.append(_calculation_error("dataInicio", statement.data_inicio))
        if fim is None:
            malformed.append(_calculation_error("dataFim", statement.data_fim))
        return CheckOutcome(checks=2, passed=0, errors=tuple(malformed))

    errors: List[ValidationError] = []
    warnings: List[ValidationWarning] = []
    checks = 0
    passed = 0

    # --- Period length ---
    checks += 1
    diff_days = abs((fim - inicio).days)

    if thresholds.min_date_diff_days <= diff_days <= thresholds.max_date_diff_days:
        passed += 1
    else:
        wording = "curto" if diff_days < thresholds.min_date_diff_days else "longo"
        warnings.append(
            ValidationWarning(
                type=WarningType.DATE_PROXIMITY,
                message=f"Período muito {wording}: {diff_days} dias",
                suggestion="Verifique se as datas estão corretas",
            )
        )

    # --- Ordering ---
    checks += 1
    if inicio <= fim:
        passed += 1
    else:
        errors.append(
            ValidationError(
                type=ErrorType.DATE_INCONSISTENCY,
                message="Data de início posterior à data de fim",
                severity=Severity.MEDIUM,
                field="dataInicio",
            )
        )

    return CheckOutcome(
        checks=checks, passed=passed, errors=tuple(errors), warnings=tuple(warnings)
    )


# ======================================================================
# 6. Outliers
# ======================================================================

def check_outliers(
    statement: FinancialStatement,
    thresholds: ValidationThresholds,
) -> CheckOutcome:
    """
    Flag categories whose value lies more than ``outlier_threshold``
    population standard deviations from the mean.

    A single detection check for the whole statement; it needs more than
    two positive category values.
    """
    malformed = [
        _calculation_error(f"categorias[{i}].valor", c.valor)
        for i, c in enumerate(statement.categorias)
        if c.valor is not None and not is_number(c.valor)
    ]
    if malformed:
        return CheckOutcome(checks=1, passed=0, errors=tuple(malformed))

    positives = [c for c in statement.categorias if c.valor is not None and c.valor > 0]
    if len(positives) <= 2:
        return CheckOutcome()

    valores = [float(c.valor) for c in positives]
    avg = statistics.mean(valores)

    warnings: List[ValidationWarning] = []
    for categoria, valor, z_score in zip(positives, valores, statistics.z_scores(valores)):
        if z_score > thresholds.outlier_threshold:
            warnings.append(
                ValidationWarning(
                    type=WarningType.CATEGORY_IMBALANCE,
                    message=(
                        "Valor atípico na categoria "
                        f"{categoria.nome or 'não identificada'}"
                    ),
                    field="categorias",
                    value=valor,
                    suggestion=f"Valor muito diferente da média ({_money(avg)})",
                )
            )

    return CheckOutcome(checks=1, passed=0 if warnings else 1, warnings=tuple(warnings))


# ======================================================================
# 7. CNPJ
# ======================================================================

def check_cnpj(
    statement: FinancialStatement,
    thresholds: ValidationThresholds,
) -> CheckOutcome:
    """Checksum-validate the condominium CNPJ when one was extracted."""
    if not statement.cnpj:
        return CheckOutcome()

    if is_valid_cnpj(statement.cnpj):
        return CheckOutcome(checks=1, passed=1)

    error = ValidationError(
        type=ErrorType.CNPJ_INVALID,
        message=f"CNPJ inválido: {statement.cnpj}",
        severity=Severity.MEDIUM,
        field="cnpj",
    )
    return CheckOutcome(checks=1, passed=0, errors=(error,))


# Findings are reported in this order.
ALL_CHECKS: Tuple[Tuple[str, CheckFn], ...] = (
    ("structure", check_structure),
    ("balance", check_balance),
    ("percentages", check_percentages),
    ("negative_values", check_negative_values),
    ("dates", check_dates),
    ("outliers", check_outliers),
    ("cnpj", check_cnpj),
)
