"""
Current Fiscal Year — clock-based entry points

The calculation functions in boundaries/labels/ranges take the date as a
mandatory argument. The wrappers here resolve an omitted date from a clock
at call time, so callers can write `get_current_fiscal_year()` while tests
pass a fixed date or a fixed clock.
"""

from datetime import datetime, timezone
from typing import Callable, List, Optional

from .boundaries import DateLike
from .labels import fiscal_year_for_date
from .ranges import (
    DEFAULT_RANGE_CONFIG,
    FiscalRangeConfig,
    fiscal_year_window,
    fiscal_years_ahead,
)

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Current UTC time."""
    return datetime.now(timezone.utc)


def _resolve(date: Optional[DateLike], clock: Clock) -> DateLike:
    return clock() if date is None else date


def get_current_fiscal_year(
    date: Optional[DateLike] = None,
    clock: Clock = system_clock,
) -> str:
    """
    Fiscal year label for `date`, or for today when omitted.

    Args:
        date: Date to classify (default: clock())
        clock: Source of the current time

    Returns:
        Label such as "FY26"
    """
    return fiscal_year_for_date(_resolve(date, clock))


def get_current_and_future_fiscal_years(
    future_years: Optional[int] = None,
    date: Optional[DateLike] = None,
    clock: Clock = system_clock,
    config: FiscalRangeConfig = DEFAULT_RANGE_CONFIG,
) -> List[str]:
    """
    Current fiscal year plus `future_years` subsequent years.

    Args:
        future_years: Years after the current one (default: config.future_years)
        date: Anchor date (default: clock())
        clock: Source of the current time
        config: Range defaults

    Returns:
        e.g. ["FY26", "FY27", "FY28"] for a date in FY26
    """
    if future_years is None:
        future_years = config.future_years

    return fiscal_years_ahead(
        _resolve(date, clock),
        future_years,
        max_span=config.max_span,
    )


def get_fiscal_year_range(
    previous_years: Optional[int] = None,
    future_years: Optional[int] = None,
    date: Optional[DateLike] = None,
    clock: Clock = system_clock,
    config: FiscalRangeConfig = DEFAULT_RANGE_CONFIG,
) -> List[str]:
    """
    Previous, current and future fiscal years.

    Args:
        previous_years: Years before the current one (default: config.previous_years)
        future_years: Years after the current one (default: config.future_years)
        date: Anchor date (default: clock())
        clock: Source of the current time
        config: Range defaults

    Returns:
        e.g. ["FY25", "FY26", "FY27", "FY28"] for a date in FY26
    """
    if previous_years is None:
        previous_years = config.previous_years
    if future_years is None:
        future_years = config.future_years

    return fiscal_year_window(
        _resolve(date, clock),
        previous_years,
        future_years,
        max_span=config.max_span,
    )
