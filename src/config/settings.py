"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

from src.config import constants

load_dotenv()


# --- Logging ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# --- Tolerances ---
AUDIT_BALANCE_TOLERANCE: float = float(
    os.getenv("AUDIT_BALANCE_TOLERANCE", str(constants.BALANCE_TOLERANCE))
)
AUDIT_PERCENTAGE_TOLERANCE: float = float(
    os.getenv("AUDIT_PERCENTAGE_TOLERANCE", str(constants.PERCENTAGE_TOLERANCE))
)

# --- Risk thresholds ---
AUDIT_OUTLIER_THRESHOLD: float = float(
    os.getenv("AUDIT_OUTLIER_THRESHOLD", str(constants.OUTLIER_THRESHOLD))
)
AUDIT_MAX_EXPENSE_PERCENTAGE: float = float(
    os.getenv("AUDIT_MAX_EXPENSE_PERCENTAGE", str(constants.MAX_EXPENSE_PERCENTAGE))
)
AUDIT_MIN_RESERVE_PERCENTAGE: float = float(
    os.getenv("AUDIT_MIN_RESERVE_PERCENTAGE", str(constants.MIN_RESERVE_PERCENTAGE))
)

# --- Period bounds ---
AUDIT_MIN_DATE_DIFF_DAYS: int = int(
    os.getenv("AUDIT_MIN_DATE_DIFF_DAYS", str(constants.MIN_DATE_DIFF_DAYS))
)
AUDIT_MAX_DATE_DIFF_DAYS: int = int(
    os.getenv("AUDIT_MAX_DATE_DIFF_DAYS", str(constants.MAX_DATE_DIFF_DAYS))
)
