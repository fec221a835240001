"""
Contract Validation Module

JSON contracts for fiscal year payloads exchanged with the iAlign API layer.
"""

from jsonschema import ValidationError

from .validators import (
    ContractValidator,
    FiscalYearFilterValidator,
    FiscalYearRangeRequestValidator,
    SchemaLoader,
    validate_fiscal_year_filter,
    validate_fiscal_year_range_request,
)
from .requests import (
    fiscal_year_range_for_request,
    matches_fiscal_year_filter,
    selected_fiscal_years,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FiscalYearFilterValidator",
    "FiscalYearRangeRequestValidator",
    "ValidationError",
    # Functions
    "validate_fiscal_year_filter",
    "validate_fiscal_year_range_request",
    "fiscal_year_range_for_request",
    "matches_fiscal_year_filter",
    "selected_fiscal_years",
]
