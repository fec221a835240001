"""
Fiscal Year Ranges — sequences of consecutive fiscal year labels

Used to populate fiscal-year pickers and filters: the current fiscal year,
the next few years for planning, and one prior year for reporting.

Argument contract:
- get_fiscal_years: count <= 0 → empty list
- previous_years / future_years must be non-negative (FiscalRangeError)
- A sequence longer than MAX_FISCAL_YEAR_SPAN is rejected (FiscalRangeError):
  beyond 100 entries two-digit labels necessarily repeat
- Sequences crossing FY99 → FY00 are produced as-is and logged as a warning
"""

import logging
from dataclasses import dataclass
from typing import Final, List

from .boundaries import DateLike, fiscal_year_number_for_date
from .labels import FISCAL_YEAR_MODULUS, format_fiscal_year

logger = logging.getLogger(__name__)

# =============================================================================
# RANGE PARAMETERS
# =============================================================================

DEFAULT_PREVIOUS_YEARS: Final[int] = 1
DEFAULT_FUTURE_YEARS: Final[int] = 2

MAX_FISCAL_YEAR_SPAN: Final[int] = FISCAL_YEAR_MODULUS


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FiscalRangeError(ValueError):
    """Range arguments outside the supported contract."""


# =============================================================================
# VALIDATION
# =============================================================================


def _require_int(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")


def _require_non_negative(name: str, value: int) -> None:
    _require_int(name, value)
    if value < 0:
        raise FiscalRangeError(f"{name} must be non-negative, got {value}")


def _require_span(span: int, max_span: int) -> None:
    if span > max_span:
        raise FiscalRangeError(
            f"Requested {span} fiscal years, maximum is {max_span} "
            f"(two-digit labels repeat beyond that)"
        )


# =============================================================================
# CONFIGURATION
# =============================================================================


@dataclass(frozen=True)
class FiscalRangeConfig:
    """Default window used by fiscal-year pickers.

    - previous_years: years before the current fiscal year
    - future_years: years after the current fiscal year
    - max_span: longest sequence that may be generated
    """

    previous_years: int = DEFAULT_PREVIOUS_YEARS
    future_years: int = DEFAULT_FUTURE_YEARS
    max_span: int = MAX_FISCAL_YEAR_SPAN

    def __post_init__(self) -> None:
        _require_non_negative("previous_years", self.previous_years)
        _require_non_negative("future_years", self.future_years)
        _require_int("max_span", self.max_span)
        if self.max_span < 1:
            raise FiscalRangeError(f"max_span must be >= 1, got {self.max_span}")


DEFAULT_RANGE_CONFIG: Final[FiscalRangeConfig] = FiscalRangeConfig()


# =============================================================================
# SEQUENCES
# =============================================================================


def _labels(first: int, count: int) -> List[str]:
    labels = [format_fiscal_year(first + offset) for offset in range(count)]

    last = first + count - 1
    if count > 0 and first // FISCAL_YEAR_MODULUS != last // FISCAL_YEAR_MODULUS:
        logger.warning(
            "Fiscal year sequence %s..%s wraps past FY99, labels are not unique across centuries",
            labels[0],
            labels[-1],
        )

    return labels


def get_fiscal_years(
    start_year: int,
    count: int,
    max_span: int = MAX_FISCAL_YEAR_SPAN,
) -> List[str]:
    """
    Consecutive fiscal year labels.

    Args:
        start_year: First fiscal year (two-digit, e.g. 24 for FY24)
        count: Number of labels; zero or negative yields []
        max_span: Longest sequence allowed

    Returns:
        Ascending labels, e.g. ["FY24", "FY25", "FY26"]

    Raises:
        TypeError: If start_year or count is not an int
        FiscalRangeError: If count exceeds max_span

    Examples:
        >>> get_fiscal_years(24, 3)
        ['FY24', 'FY25', 'FY26']
        >>> get_fiscal_years(98, 3)
        ['FY98', 'FY99', 'FY00']
    """
    _require_int("start_year", start_year)
    _require_int("count", count)

    if count <= 0:
        return []

    _require_span(count, max_span)
    return _labels(start_year, count)


def fiscal_years_ahead(
    on: DateLike,
    future_years: int = DEFAULT_FUTURE_YEARS,
    max_span: int = MAX_FISCAL_YEAR_SPAN,
) -> List[str]:
    """
    Fiscal year of `on` followed by `future_years` subsequent years.

    Returns:
        future_years + 1 ascending labels

    Raises:
        FiscalRangeError: If future_years is negative or the span is too long
    """
    return fiscal_year_window(on, 0, future_years, max_span=max_span)


def fiscal_year_window(
    on: DateLike,
    previous_years: int = DEFAULT_PREVIOUS_YEARS,
    future_years: int = DEFAULT_FUTURE_YEARS,
    max_span: int = MAX_FISCAL_YEAR_SPAN,
) -> List[str]:
    """
    Fiscal years around the fiscal year of `on`.

    Args:
        on: Anchor date
        previous_years: Years before the anchor fiscal year
        future_years: Years after the anchor fiscal year
        max_span: Longest sequence allowed

    Returns:
        previous_years + future_years + 1 ascending labels

    Raises:
        FiscalRangeError: If an offset is negative or the span is too long

    Examples:
        >>> from datetime import date
        >>> fiscal_year_window(date(2026, 1, 15), 1, 2)
        ['FY25', 'FY26', 'FY27', 'FY28']
    """
    _require_non_negative("previous_years", previous_years)
    _require_non_negative("future_years", future_years)

    span = previous_years + future_years + 1
    _require_span(span, max_span)

    current = fiscal_year_number_for_date(on)
    return _labels(current - previous_years, span)
