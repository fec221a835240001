"""
Fiscal calendar for iAlign

Fiscal year boundaries, "FYnn" labels, label ranges and fiscal periods.
"""

# Boundaries
from ialign.core.fiscal.boundaries import (
    FISCAL_BOUNDARY_DAY,
    FISCAL_BOUNDARY_MONTH,
    SUNDAY_ROLLOVER_DAY,
    SUNDAY_ROLLOVER_MONTH,
    DateLike,
    fiscal_year_number_for_date,
    fiscal_year_start,
    normalize_calendar_date,
)

# Labels
from ialign.core.fiscal.labels import (
    FISCAL_YEAR_LABEL_PREFIX,
    FiscalYear,
    FiscalYearLabelError,
    fiscal_year_for_date,
    format_fiscal_year,
    is_fiscal_year_label,
    parse_fiscal_year,
    sort_fiscal_year_labels,
)

# Ranges
from ialign.core.fiscal.ranges import (
    DEFAULT_FUTURE_YEARS,
    DEFAULT_PREVIOUS_YEARS,
    DEFAULT_RANGE_CONFIG,
    MAX_FISCAL_YEAR_SPAN,
    FiscalRangeConfig,
    FiscalRangeError,
    fiscal_year_window,
    fiscal_years_ahead,
    get_fiscal_years,
)

# Clock-based wrappers
from ialign.core.fiscal.current import (
    Clock,
    get_current_and_future_fiscal_years,
    get_current_fiscal_year,
    get_fiscal_year_range,
    system_clock,
)

# Periods
from ialign.core.fiscal.periods import (
    FISCAL_YEAR_CENTURY_BASE,
    FiscalPeriod,
    fiscal_period,
    fiscal_period_for_date,
    fiscal_period_for_label,
)

__all__ = [
    # Boundaries — Constants
    "FISCAL_BOUNDARY_DAY",
    "FISCAL_BOUNDARY_MONTH",
    "SUNDAY_ROLLOVER_DAY",
    "SUNDAY_ROLLOVER_MONTH",
    # Boundaries — Functions
    "DateLike",
    "fiscal_year_number_for_date",
    "fiscal_year_start",
    "normalize_calendar_date",
    # Labels
    "FISCAL_YEAR_LABEL_PREFIX",
    "FiscalYear",
    "FiscalYearLabelError",
    "fiscal_year_for_date",
    "format_fiscal_year",
    "is_fiscal_year_label",
    "parse_fiscal_year",
    "sort_fiscal_year_labels",
    # Ranges
    "DEFAULT_FUTURE_YEARS",
    "DEFAULT_PREVIOUS_YEARS",
    "DEFAULT_RANGE_CONFIG",
    "MAX_FISCAL_YEAR_SPAN",
    "FiscalRangeConfig",
    "FiscalRangeError",
    "fiscal_year_window",
    "fiscal_years_ahead",
    "get_fiscal_years",
    # Clock-based wrappers
    "Clock",
    "get_current_and_future_fiscal_years",
    "get_current_fiscal_year",
    "get_fiscal_year_range",
    "system_clock",
    # Periods
    "FISCAL_YEAR_CENTURY_BASE",
    "FiscalPeriod",
    "fiscal_period",
    "fiscal_period_for_date",
    "fiscal_period_for_label",
]
