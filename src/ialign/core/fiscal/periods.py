"""
FiscalPeriod — calendar bounds of a fiscal year

A fiscal period is the half-open UTC interval [start, end) where `start` is
the fiscal year's start boundary and `end` is the next fiscal year's start.
Consecutive periods tile the timeline without gaps or overlaps.
"""

from datetime import date, datetime, timedelta
from typing import Final

from pydantic import BaseModel, Field, model_validator

from .boundaries import (
    MAX_CALENDAR_YEAR,
    MIN_CALENDAR_YEAR,
    DateLike,
    fiscal_year_number_for_date,
    fiscal_year_start,
    normalize_calendar_date,
)
from .labels import FISCAL_YEAR_MODULUS, FiscalYear, parse_fiscal_year

# Two-digit labels resolve to FY2000..FY2099 unless another century is given
FISCAL_YEAR_CENTURY_BASE: Final[int] = 2000


class FiscalPeriod(BaseModel):
    """
    Bounds of one fiscal year.

    Immutable (frozen=True); both bounds are UTC midnight.
    """

    fiscal_year: FiscalYear = Field(..., description="Two-digit fiscal year")
    end_calendar_year: int = Field(..., description="Calendar year in which the fiscal year ends")
    start: datetime = Field(..., description="First instant (inclusive)")
    end: datetime = Field(..., description="Start of the next fiscal year (exclusive)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_bounds(self) -> "FiscalPeriod":
        if self.start >= self.end:
            raise ValueError(f"start {self.start} must be before end {self.end}")
        if self.fiscal_year.number != self.end_calendar_year % FISCAL_YEAR_MODULUS:
            raise ValueError(
                f"fiscal_year {self.fiscal_year} does not match "
                f"end_calendar_year {self.end_calendar_year}"
            )
        return self

    @property
    def label(self) -> str:
        return self.fiscal_year.label

    @property
    def last_day(self) -> date:
        """Last calendar day belonging to the period."""
        return (self.end - timedelta(days=1)).date()

    @property
    def length_days(self) -> int:
        return (self.end - self.start).days

    def contains(self, on: DateLike) -> bool:
        return self.start <= normalize_calendar_date(on) < self.end


def fiscal_period(end_calendar_year: int) -> FiscalPeriod:
    """
    Period of the fiscal year ending in `end_calendar_year`.

    Both bounds must be representable, so end_calendar_year is limited to
    2..9999. Dates before the FY2 boundary (year 1) or on or after the
    FY10000 boundary (late 9999) have no period.

    Raises:
        ValueError: If end_calendar_year is outside 2..9999

    Examples:
        >>> p = fiscal_period(2025)
        >>> p.label, p.start.date(), p.last_day
        ('FY25', datetime.date(2024, 10, 28), datetime.date(2025, 10, 26))
    """
    if not MIN_CALENDAR_YEAR + 1 <= end_calendar_year <= MAX_CALENDAR_YEAR:
        raise ValueError(
            f"No fiscal period ends in calendar year {end_calendar_year}: "
            f"supported range is {MIN_CALENDAR_YEAR + 1}..{MAX_CALENDAR_YEAR}"
        )

    return FiscalPeriod(
        fiscal_year=FiscalYear(number=end_calendar_year % FISCAL_YEAR_MODULUS),
        end_calendar_year=end_calendar_year,
        start=fiscal_year_start(end_calendar_year - 1),
        end=fiscal_year_start(end_calendar_year),
    )


def fiscal_period_for_date(on: DateLike) -> FiscalPeriod:
    """
    Period containing `on`.

    Raises:
        ValueError: If `on` falls outside the supported period range
            (see fiscal_period); fiscal_year_for_date still labels such dates
    """
    return fiscal_period(fiscal_year_number_for_date(on))


def fiscal_period_for_label(
    label: str,
    century_base: int = FISCAL_YEAR_CENTURY_BASE,
) -> FiscalPeriod:
    """
    Period of a "FYnn" label.

    Args:
        label: Fiscal year label, e.g. "FY26"
        century_base: First year of the century the label is resolved in

    Raises:
        FiscalYearLabelError: If the label is malformed
    """
    return fiscal_period(century_base + parse_fiscal_year(label))
