"""
Tests for Fiscal Year Labels

Covers:
- Reference boundary fixtures ("FY24"/"FY25"/"FY26")
- Two-digit formatting and century wraparound
- Strict "FYnn" parsing
- FiscalYear model (frozen, hashable, shifted)
"""

from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError

from ialign.core.fiscal import (
    FiscalYear,
    FiscalYearLabelError,
    fiscal_year_for_date,
    format_fiscal_year,
    is_fiscal_year_label,
    parse_fiscal_year,
    sort_fiscal_year_labels,
)


# =============================================================================
# TESTS: fiscal_year_for_date
# =============================================================================


class TestFiscalYearForDate:
    """Reference fixtures for the FY boundary."""

    @pytest.mark.parametrize(
        "on, expected",
        [
            (date(2024, 10, 27), "FY24"),  # Before FY25 start
            (date(2024, 10, 28), "FY25"),  # FY25 starts (last Monday of Oct 2024)
            (date(2024, 11, 1), "FY25"),
            (date(2025, 1, 15), "FY25"),   # Middle of FY25
            (date(2025, 10, 26), "FY25"),  # Before FY26 start
            (date(2025, 10, 27), "FY26"),  # FY26 starts (last Monday of Oct 2025)
            (date(2025, 11, 3), "FY26"),
            (date(2026, 1, 15), "FY26"),   # Middle of FY26
        ],
    )
    def test_reference_fixtures(self, on, expected):
        assert fiscal_year_for_date(on) == expected

    def test_utc_midnight_datetime_input(self):
        """UTC timestamps behave like their calendar day."""
        assert fiscal_year_for_date(datetime(2024, 10, 27, tzinfo=timezone.utc)) == "FY24"
        assert fiscal_year_for_date(datetime(2024, 10, 28, tzinfo=timezone.utc)) == "FY25"

    def test_time_of_day_ignored(self):
        late = datetime(2024, 10, 27, 23, 59, 59, tzinfo=timezone.utc)
        assert fiscal_year_for_date(late) == "FY24"

    def test_idempotent(self):
        on = date(2025, 10, 27)
        assert fiscal_year_for_date(on) == fiscal_year_for_date(on)

    def test_century_rollover(self):
        """FY2100 is labelled FY00, colliding with FY2000."""
        assert fiscal_year_for_date(date(2099, 11, 15)) == "FY00"
        assert fiscal_year_for_date(date(2000, 1, 15)) == "FY00"


# =============================================================================
# TESTS: format / parse
# =============================================================================


class TestFormatFiscalYear:

    @pytest.mark.parametrize(
        "number, expected",
        [(0, "FY00"), (5, "FY05"), (25, "FY25"), (99, "FY99"), (100, "FY00"), (2026, "FY26"), (-1, "FY99")],
    )
    def test_last_two_digits(self, number, expected):
        assert format_fiscal_year(number) == expected

    def test_non_int_rejected(self):
        with pytest.raises(TypeError):
            format_fiscal_year("25")
        with pytest.raises(TypeError):
            format_fiscal_year(False)


class TestParseFiscalYear:

    @pytest.mark.parametrize("label, expected", [("FY00", 0), ("FY07", 7), ("FY26", 26), (" FY26 ", 26)])
    def test_valid_labels(self, label, expected):
        assert parse_fiscal_year(label) == expected

    @pytest.mark.parametrize("label", ["", "FY", "FY2026", "fy26", "FY-1", "26", "FY2", "FY 26", "FY\u0662\u0665", None, 26])
    def test_invalid_labels(self, label):
        with pytest.raises(FiscalYearLabelError):
            parse_fiscal_year(label)

    def test_label_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_fiscal_year("Unknown")

    def test_is_fiscal_year_label(self):
        assert is_fiscal_year_label("FY25") is True
        assert is_fiscal_year_label("FY2025") is False
        assert is_fiscal_year_label(None) is False

    def test_non_ascii_digits_rejected(self):
        """Only ASCII digits form a label, matching the filter contract pattern."""
        arabic_indic = "FY\u0662\u0665"
        assert is_fiscal_year_label(arabic_indic) is False
        with pytest.raises(FiscalYearLabelError):
            sort_fiscal_year_labels([arabic_indic])


class TestSortFiscalYearLabels:

    def test_distinct_and_sorted(self):
        labels = ["FY26", "FY24", "FY26", "FY25"]
        assert sort_fiscal_year_labels(labels) == ["FY24", "FY25", "FY26"]

    def test_empty_values_skipped(self):
        assert sort_fiscal_year_labels(["FY25", "", None, "FY24"]) == ["FY24", "FY25"]

    def test_malformed_rejected(self):
        with pytest.raises(FiscalYearLabelError):
            sort_fiscal_year_labels(["FY25", "Unknown"])


# =============================================================================
# TESTS: FiscalYear model
# =============================================================================


class TestFiscalYearModel:

    def test_label_and_str(self):
        fy = FiscalYear(number=7)
        assert fy.label == "FY07"
        assert str(fy) == "FY07"

    def test_from_label(self):
        assert FiscalYear.from_label("FY26") == FiscalYear(number=26)

    def test_from_date(self):
        assert FiscalYear.from_date(date(2025, 10, 27)) == FiscalYear(number=26)
        assert FiscalYear.from_date(date(2099, 11, 15)) == FiscalYear(number=0)

    def test_range_enforced(self):
        with pytest.raises(ValidationError):
            FiscalYear(number=100)
        with pytest.raises(ValidationError):
            FiscalYear(number=-1)

    def test_frozen(self):
        fy = FiscalYear(number=25)
        with pytest.raises(ValidationError):
            fy.number = 26

    def test_hashable(self):
        years = {FiscalYear(number=25), FiscalYear.from_label("FY25"), FiscalYear(number=26)}
        assert len(years) == 2

    def test_shifted_wraps(self):
        assert FiscalYear(number=99).shifted(1) == FiscalYear(number=0)
        assert FiscalYear(number=0).shifted(-1) == FiscalYear(number=99)
        assert FiscalYear(number=25).shifted(2).label == "FY27"
