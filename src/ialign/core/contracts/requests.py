"""
Contract-checked fiscal year requests.

Payloads are validated against their schema before being handed to the
fiscal calendar, so malformed input surfaces as jsonschema.ValidationError
rather than as an error deep inside the calculation.
"""

from datetime import date
from typing import Any, Dict, List

from ialign.core.contracts.validators import (
    validate_fiscal_year_filter,
    validate_fiscal_year_range_request,
)
from ialign.core.fiscal import (
    Clock,
    get_fiscal_year_range,
    sort_fiscal_year_labels,
    system_clock,
)


def fiscal_year_range_for_request(
    data: Dict[str, Any],
    clock: Clock = system_clock,
) -> List[str]:
    """
    Fiscal year window described by a fiscal_year_range_request payload.

    Omitted fields fall back to the range defaults and to today's date.
    The schema caps previous_years and future_years at 49 each, so every
    accepted payload stays within MAX_FISCAL_YEAR_SPAN.

    Raises:
        ValidationError: If data does not match the schema
        ValueError: If "date" is not a real calendar date
    """
    validate_fiscal_year_range_request(data)

    on = date.fromisoformat(data["date"]) if "date" in data else None
    return get_fiscal_year_range(
        previous_years=data.get("previous_years"),
        future_years=data.get("future_years"),
        date=on,
        clock=clock,
    )


def selected_fiscal_years(data: Dict[str, Any]) -> List[str]:
    """
    Distinct fiscal years of a fiscal_year_filter payload, ascending.

    Raises:
        ValidationError: If data does not match the schema
    """
    validate_fiscal_year_filter(data)
    return sort_fiscal_year_labels(data["selected_fiscal_years"])


def matches_fiscal_year_filter(fiscal_year: str, selected: List[str]) -> bool:
    """
    Whether a record's fiscal year passes the filter.

    An empty selection matches everything, including records without a
    fiscal year. Otherwise the stored label must equal a selected label
    exactly; non-canonical values ("FY2025", " FY25", "Unknown") never match.
    """
    if not selected:
        return True
    return fiscal_year in selected
