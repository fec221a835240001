"""
Fiscal Boundaries — Fiscal Year Start Calculation

Fiscal years are labelled by the calendar year in which they END:
FY25 starts in late October 2024 and ends in October 2025.

Boundary rule for calendar year Y:
- If October 31 of Y is a Sunday → the fiscal year starts on November 1 of Y
- Otherwise → the fiscal year starts on the last Monday of October of Y

Examples:
    October 2024 ends on Thursday → FY25 starts 2024-10-28
    October 2025 ends on Friday   → FY26 starts 2025-10-27
    October 2027 ends on Sunday   → FY28 starts 2027-11-01

CRITICAL INVARIANTS:
1. All calculations are performed on UTC midnight (time of day is discarded)
2. The boundary is always a Monday in October (25..31) or November 1
3. Every date belongs to exactly one fiscal year
"""

import logging
from datetime import date, datetime, timezone
from typing import Final, Union

logger = logging.getLogger(__name__)

# =============================================================================
# BOUNDARY PARAMETERS
# =============================================================================

FISCAL_BOUNDARY_MONTH: Final[int] = 10
FISCAL_BOUNDARY_DAY: Final[int] = 31

# Used instead of the last Monday when October ends on a Sunday
SUNDAY_ROLLOVER_MONTH: Final[int] = 11
SUNDAY_ROLLOVER_DAY: Final[int] = 1

# datetime.weekday(): Monday=0 .. Sunday=6
_SUNDAY: Final[int] = 6

MIN_CALENDAR_YEAR: Final[int] = 1
MAX_CALENDAR_YEAR: Final[int] = 9999

DateLike = Union[date, datetime]


# =============================================================================
# NORMALIZATION
# =============================================================================


def _utc_midnight(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


def normalize_calendar_date(value: DateLike) -> datetime:
    """
    Normalize a date to UTC midnight.

    Two timestamps on the same UTC calendar day always produce the same
    result regardless of their hour or original offset.

    Args:
        value: date, naive datetime (treated as UTC) or aware datetime

    Returns:
        Timezone-aware datetime at 00:00 UTC

    Raises:
        TypeError: If value is not a date/datetime

    Examples:
        >>> normalize_calendar_date(date(2025, 1, 15))
        datetime.datetime(2025, 1, 15, 0, 0, tzinfo=datetime.timezone.utc)
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return _utc_midnight(value.year, value.month, value.day)

    if isinstance(value, date):
        return _utc_midnight(value.year, value.month, value.day)

    raise TypeError(f"Expected date or datetime, got {type(value).__name__}")


# =============================================================================
# FISCAL YEAR START
# =============================================================================


def _validate_calendar_year(calendar_year: int) -> None:
    if isinstance(calendar_year, bool) or not isinstance(calendar_year, int):
        raise TypeError(
            f"calendar_year must be int, got {type(calendar_year).__name__}"
        )

    if not MIN_CALENDAR_YEAR <= calendar_year <= MAX_CALENDAR_YEAR:
        raise ValueError(
            f"calendar_year {calendar_year} out of range "
            f"[{MIN_CALENDAR_YEAR}, {MAX_CALENDAR_YEAR}]"
        )


def fiscal_year_start(calendar_year: int) -> datetime:
    """
    Date on which the fiscal year starting in calendar_year begins.

    The fiscal year starting on this date is FY(calendar_year + 1).

    Args:
        calendar_year: Four-digit calendar year

    Returns:
        UTC midnight of the last Monday of October, or of November 1 when
        October 31 falls on a Sunday

    Raises:
        TypeError: If calendar_year is not an int
        ValueError: If calendar_year is outside 1..9999

    Examples:
        >>> fiscal_year_start(2024).date()
        datetime.date(2024, 10, 28)
        >>> fiscal_year_start(2027).date()
        datetime.date(2027, 11, 1)
    """
    _validate_calendar_year(calendar_year)

    oct31 = _utc_midnight(calendar_year, FISCAL_BOUNDARY_MONTH, FISCAL_BOUNDARY_DAY)
    weekday = oct31.weekday()

    if weekday == _SUNDAY:
        logger.debug(
            "October %d ends on Sunday, fiscal year starts on November 1",
            calendar_year,
        )
        return _utc_midnight(calendar_year, SUNDAY_ROLLOVER_MONTH, SUNDAY_ROLLOVER_DAY)

    # With Monday=0 the weekday is exactly the distance back to the last Monday
    last_monday = FISCAL_BOUNDARY_DAY - weekday
    return _utc_midnight(calendar_year, FISCAL_BOUNDARY_MONTH, last_monday)


def fiscal_year_number_for_date(on: DateLike) -> int:
    """
    Full (four-digit) number of the fiscal year containing a date.

    Args:
        on: Date to classify

    Returns:
        Calendar year in which the containing fiscal year ends

    Examples:
        >>> fiscal_year_number_for_date(date(2024, 10, 27))
        2024
        >>> fiscal_year_number_for_date(date(2024, 10, 28))
        2025
    """
    normalized = normalize_calendar_date(on)
    year = normalized.year

    if normalized >= fiscal_year_start(year):
        return year + 1
    return year
