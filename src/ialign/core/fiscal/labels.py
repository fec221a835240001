"""
Fiscal Year Labels — "FYnn" formatting and parsing

Fiscal years are exchanged as two-digit labels ("FY25", "FY26").
The label keeps only the last two digits of the fiscal year number,
so FY2099 and FY2199 are both rendered as "FY99" and FY99 is followed
by FY00. This is the established naming convention and is NOT widened
to four digits.
"""

import re
from typing import Final, Iterable, List

from pydantic import BaseModel, Field

from .boundaries import DateLike, fiscal_year_number_for_date

# =============================================================================
# LABEL FORMAT
# =============================================================================

FISCAL_YEAR_LABEL_PREFIX: Final[str] = "FY"

# Two-digit labels wrap modulo 100
FISCAL_YEAR_MODULUS: Final[int] = 100

_LABEL_RE: Final[re.Pattern] = re.compile(r"^FY([0-9]{2})$")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FiscalYearLabelError(ValueError):
    """Label does not match the "FYnn" format."""


# =============================================================================
# FORMAT / PARSE
# =============================================================================


def format_fiscal_year(number: int) -> str:
    """
    Render a fiscal year number as a label.

    Args:
        number: Fiscal year number (two- or four-digit, may be negative
            when produced by range arithmetic)

    Returns:
        "FY" + last two digits, zero-padded

    Examples:
        >>> format_fiscal_year(25)
        'FY25'
        >>> format_fiscal_year(2026)
        'FY26'
        >>> format_fiscal_year(100)
        'FY00'
    """
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"Fiscal year number must be int, got {type(number).__name__}")

    return f"{FISCAL_YEAR_LABEL_PREFIX}{number % FISCAL_YEAR_MODULUS:02d}"


def parse_fiscal_year(label: str) -> int:
    """
    Parse a "FYnn" label into its two-digit number.

    Args:
        label: Label such as "FY25" (surrounding whitespace is ignored)

    Returns:
        Two-digit fiscal year number (0..99)

    Raises:
        FiscalYearLabelError: If the label is not in "FYnn" format
    """
    if not isinstance(label, str):
        raise FiscalYearLabelError(f"Fiscal year label must be str, got {label!r}")

    match = _LABEL_RE.match(label.strip())
    if match is None:
        raise FiscalYearLabelError(f"Invalid fiscal year label: {label!r}")

    return int(match.group(1))


def is_fiscal_year_label(value: object) -> bool:
    """True if value is a well-formed "FYnn" label."""
    return isinstance(value, str) and _LABEL_RE.match(value.strip()) is not None


def sort_fiscal_year_labels(labels: Iterable[str]) -> List[str]:
    """
    Distinct labels in ascending order.

    Empty values are skipped, as are records without a fiscal year.

    Raises:
        FiscalYearLabelError: If a non-empty value is malformed
    """
    numbers = {parse_fiscal_year(label) for label in labels if label}
    return [format_fiscal_year(number) for number in sorted(numbers)]


def fiscal_year_for_date(on: DateLike) -> str:
    """
    Fiscal year label of a date.

    Args:
        on: Date to classify (mandatory; see current.get_current_fiscal_year
            for the clock-based variant)

    Returns:
        Label such as "FY26"

    Examples:
        >>> from datetime import date
        >>> fiscal_year_for_date(date(2025, 10, 27))
        'FY26'
    """
    return format_fiscal_year(fiscal_year_number_for_date(on))


# =============================================================================
# FISCAL YEAR MODEL
# =============================================================================


class FiscalYear(BaseModel):
    """
    Two-digit fiscal year value.

    Immutable (frozen=True) and hashable, usable as a dict key when
    grouping records by fiscal year.
    """

    number: int = Field(..., ge=0, lt=FISCAL_YEAR_MODULUS, description="Two-digit fiscal year")

    model_config = {"frozen": True}

    @classmethod
    def from_label(cls, label: str) -> "FiscalYear":
        return cls(number=parse_fiscal_year(label))

    @classmethod
    def from_date(cls, on: DateLike) -> "FiscalYear":
        return cls(number=fiscal_year_number_for_date(on) % FISCAL_YEAR_MODULUS)

    @property
    def label(self) -> str:
        return format_fiscal_year(self.number)

    def shifted(self, years: int) -> "FiscalYear":
        """Fiscal year `years` later (negative for earlier), wrapping at FY99."""
        return FiscalYear(number=(self.number + years) % FISCAL_YEAR_MODULUS)

    def __str__(self) -> str:
        return self.label
