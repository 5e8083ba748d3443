"""
Constants used across the audit engine.
Versioned and pinned for determinism.
"""
from typing import List

# =============================================================================
# Balance fields (required by structural + balance checks)
# =============================================================================
REQUIRED_BALANCE_FIELDS: List[str] = [
    "receitas",
    "despesas",
    "saldoAnterior",
    "saldoFinal",
]

# Fields that must never be negative
NON_NEGATIVE_FIELDS: List[str] = ["receitas"]

# Fields that may be negative but are flagged for review
WATCHED_NEGATIVE_FIELDS: List[str] = ["saldoFinal"]

# =============================================================================
# Tolerances
# =============================================================================
BALANCE_TOLERANCE: float = 0.01          # R$ 0,01
PERCENTAGE_TOLERANCE: float = 0.001      # 0.1 percentage points (x 100)
FLOAT_COMPARISON_DIGITS: int = 9         # rounding applied before tolerance tests

# =============================================================================
# Risk thresholds
# =============================================================================
OUTLIER_THRESHOLD: float = 3.0           # standard deviations
MAX_EXPENSE_PERCENTAGE: float = 0.95     # of available funds
MIN_RESERVE_PERCENTAGE: float = 0.05     # of revenue

# =============================================================================
# Period bounds (monthly statement)
# =============================================================================
MIN_DATE_DIFF_DAYS: int = 25
MAX_DATE_DIFF_DAYS: int = 35

# =============================================================================
# Health classification: (health, min success rate, max errors)
# =============================================================================
HEALTH_BANDS: List[tuple] = [
    ("excellent", 0.95, 0),
    ("good", 0.85, 1),
    ("fair", 0.70, 3),
]
FALLBACK_HEALTH: str = "poor"

# =============================================================================
# Presentation
# =============================================================================
MAX_WARNINGS_BEFORE_REVIEW: int = 3

ENGINE_VERSION: str = "financial-validator-1.0.0"
