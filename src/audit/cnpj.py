"""
CNPJ checksum — Brazilian company tax identifier (14 digits, modulo 11).

Layout: 8-digit root + 4-digit branch + 2 check digits. Each check digit is
computed over the preceding digits with weights cycling 2→9 from the right;
``remainder < 2 → 0`` else ``11 - remainder``.
"""
import re
from typing import List

CNPJ_LENGTH: int = 14

_NON_DIGITS = re.compile(r"\D")


def strip_cnpj(value: str) -> str:
    """Remove formatting punctuation, keeping digits only."""
    return _NON_DIGITS.sub("", str(value))


def _check_digit(digits: List[int]) -> int:
    total = 0
    weight = 2
    for digit in reversed(digits):
        total += digit * weight
        weight = 2 if weight == 9 else weight + 1
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def compute_check_digits(base: str) -> str:
    """Return the two check digits for a 12-digit CNPJ base."""
    digits = [int(c) for c in base]
    first = _check_digit(digits)
    second = _check_digit(digits + [first])
    return f"{first}{second}"


def is_valid_cnpj(value: str) -> bool:
    """
    Validate a CNPJ, formatted or not.

    Rejects anything that is not exactly 14 digits after stripping, and the
    all-identical sequences (``00000000000000`` ...) that satisfy the
    checksum but are never issued.
    """
    cnpj = strip_cnpj(value)

    if len(cnpj) != CNPJ_LENGTH:
        return False

    if len(set(cnpj)) == 1:
        return False

    return compute_check_digits(cnpj[:12]) == cnpj[12:]


def format_cnpj(value: str) -> str:
    """Render as ``00.000.000/0000-00``; non-14-digit input is returned stripped."""
    cnpj = strip_cnpj(value)
    if len(cnpj) != CNPJ_LENGTH:
        return cnpj
    return f"{cnpj[:2]}.{cnpj[2:5]}.{cnpj[5:8]}/{cnpj[8:12]}-{cnpj[12:]}"
