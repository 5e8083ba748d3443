"""
ValidationThresholds — frozen tolerance and risk limits for one audit run.

The defaults (95% expense ceiling, 5% reserve floor, 3σ outliers) have no
documented empirical basis; they are kept as named values so deployments
can override them through the environment.
"""
from dataclasses import dataclass

from src.config import constants


@dataclass(frozen=True)
class ValidationThresholds:
    """Contract of limits used by the check functions."""

    balance_tolerance: float = constants.BALANCE_TOLERANCE
    percentage_tolerance: float = constants.PERCENTAGE_TOLERANCE
    outlier_threshold: float = constants.OUTLIER_THRESHOLD
    max_expense_percentage: float = constants.MAX_EXPENSE_PERCENTAGE
    min_reserve_percentage: float = constants.MIN_RESERVE_PERCENTAGE
    min_date_diff_days: int = constants.MIN_DATE_DIFF_DAYS
    max_date_diff_days: int = constants.MAX_DATE_DIFF_DAYS

    @property
    def percentage_tolerance_points(self) -> float:
        """Tolerance expressed in percentage points (0.001 -> 0.1pt)."""
        return self.percentage_tolerance * 100

    @classmethod
    def from_settings(cls) -> "ValidationThresholds":
        from src.config import settings

        return cls(
            balance_tolerance=settings.AUDIT_BALANCE_TOLERANCE,
            percentage_tolerance=settings.AUDIT_PERCENTAGE_TOLERANCE,
            outlier_threshold=settings.AUDIT_OUTLIER_THRESHOLD,
            max_expense_percentage=settings.AUDIT_MAX_EXPENSE_PERCENTAGE,
            min_reserve_percentage=settings.AUDIT_MIN_RESERVE_PERCENTAGE,
            min_date_diff_days=settings.AUDIT_MIN_DATE_DIFF_DAYS,
            max_date_diff_days=settings.AUDIT_MAX_DATE_DIFF_DAYS,
        )

    def to_dict(self) -> dict:
        return {
            "balance_tolerance": self.balance_tolerance,
            "percentage_tolerance": self.percentage_tolerance,
            "outlier_threshold": self.outlier_threshold,
            "max_expense_percentage": self.max_expense_percentage,
            "min_reserve_percentage": self.min_reserve_percentage,
            "min_date_diff_days": self.min_date_diff_days,
            "max_date_diff_days": self.max_date_diff_days,
        }


DEFAULT_THRESHOLDS = ValidationThresholds()
