"""Tests for the SequentialConsistencyCheck validation.

This module verifies that the `SequentialConsistencyCheck` detects missing debt
values, inflation-adjustment and growth-rate mismatches, implausible values and
gaps between years, and that it accumulates every finding.
"""

from dataclasses import replace

import pytest

from us_debt.core.schemas import DatasetEntry
from us_debt.validation.checks.sequential_consistency import SequentialConsistencyCheck
from us_debt.validation.config import ValidationConfig


def _errors_mentioning(result, text):
    return [m for m in result.errors if text in m]


def test_complete_dataset_passes(complete_dataset):
    """A consistent, gap-free dataset produces no findings."""
    result = SequentialConsistencyCheck().validate(complete_dataset)

    assert result.check_id == "sequential_consistency"
    assert result.is_valid is True
    assert result.errors == []
    assert result.warnings == []


@pytest.mark.parametrize(
    "debt,adjusted_debt,expected",
    [
        (None, 100.0, ["1985: Missing or invalid debt value"]),
        (0.0, 100.0, ["1985: Missing or invalid debt value"]),
        (-5.0, 100.0, ["1985: Missing or invalid debt value"]),
        (100.0, None, ["1985: Missing or invalid adjusted debt value"]),
        (None, None, [
            "1985: Missing or invalid debt value",
            "1985: Missing or invalid adjusted debt value",
        ]),
    ],
)
def test_missing_or_invalid_debt(debt, adjusted_debt, expected):
    """Debt and adjusted debt must both be present and positive."""
    entry = DatasetEntry(year=1985, debt=debt, adjusted_debt=adjusted_debt)
    result = SequentialConsistencyCheck().validate([entry])

    assert result.errors == expected
    assert result.is_valid is False


def test_exact_adjustment_raises_no_error():
    """adjusted_debt == round(debt / adjuster) is always consistent."""
    entry = DatasetEntry(year=1990, debt=3206.3, adjusted_debt=4216.0, inflation_adjuster=0.7605)
    result = SequentialConsistencyCheck().validate([entry])

    assert _errors_mentioning(result, "adjustment mismatch") == []


def test_adjustment_within_tolerance():
    """A difference of exactly 5 after rounding is accepted; 6 is not."""
    check = SequentialConsistencyCheck()
    ok = DatasetEntry(year=2000, debt=1000.0, adjusted_debt=1005.0, inflation_adjuster=1.0)
    bad = DatasetEntry(year=2000, debt=1000.0, adjusted_debt=1006.0, inflation_adjuster=1.0)

    assert check.validate([ok]).errors == []
    assert check.validate([bad]).errors == [
        "2000: Inflation adjustment mismatch. Expected: 1000, Actual: 1006"
    ]


def test_rounding_is_half_up():
    """Halves round upward on both sides of the comparison."""
    # 1000.5 / 1.0 -> 1001; adjusted 1006.4 -> 1006; difference 5 is within tolerance
    entry = DatasetEntry(year=2000, debt=1000.5, adjusted_debt=1006.4, inflation_adjuster=1.0)
    assert SequentialConsistencyCheck().validate([entry]).errors == []


@pytest.mark.parametrize(
    "nominal,adjusted,label",
    [
        ("gdp", "adjusted_gdp", "GDP inflation adjustment mismatch"),
        ("spending", "adjusted_spending", "Spending inflation adjustment mismatch"),
    ],
)
def test_optional_pair_mismatch(nominal, adjusted, label):
    """GDP and spending pairs are checked independently of the debt pair."""
    entry = DatasetEntry(
        year=2005,
        debt=100.0,
        adjusted_debt=50.0,
        inflation_adjuster=2.0,
        **{nominal: 400.0, adjusted: 100.0},
    )
    result = SequentialConsistencyCheck().validate([entry])

    assert result.errors == [f"2005: {label}. Expected: 200, Actual: 100"]


def test_optional_pair_skipped_when_absent():
    """Missing optional fields skip the dependent check without findings."""
    entry = DatasetEntry(year=2005, debt=100.0, adjusted_debt=50.0, inflation_adjuster=2.0, gdp=400.0)
    result = SequentialConsistencyCheck().validate([entry])

    assert result.errors == []
    assert result.warnings == []


def test_zero_adjuster_is_never_used_as_divisor():
    """A zero adjuster skips the adjustment arithmetic instead of dividing by zero."""
    entry = DatasetEntry(
        year=2005, debt=100.0, adjusted_debt=50.0, gdp=400.0, adjusted_gdp=1.0, inflation_adjuster=0.0
    )
    result = SequentialConsistencyCheck().validate([entry])

    assert _errors_mentioning(result, "adjustment mismatch") == []


def test_growth_rate_matches():
    """A reported growth rate within 0.1 points of the computed one passes."""
    entries = [
        DatasetEntry(year=1999, adjusted_debt=110.0),
        DatasetEntry(year=2000, adjusted_debt=120.0, debt_growth_rate=9.09),
    ]
    result = SequentialConsistencyCheck().validate(entries)

    assert _errors_mentioning(result, "Growth rate mismatch") == []


def test_growth_rate_mismatch():
    """A reported growth rate far from the computed one is an error naming the year."""
    entries = [
        DatasetEntry(year=1999, adjusted_debt=110.0),
        DatasetEntry(year=2000, adjusted_debt=120.0, debt_growth_rate=50.0),
    ]
    result = SequentialConsistencyCheck().validate(entries)

    growth_errors = _errors_mentioning(result, "Growth rate mismatch")
    assert growth_errors == ["2000: Growth rate mismatch. Expected: 9.09%, Actual: 50.00%"]


def test_growth_rate_skipped_after_zero_adjusted_debt():
    """A zero predecessor cannot be divided by; the growth rate is not checked."""
    entries = [
        DatasetEntry(year=1999, debt=0.0, adjusted_debt=0.0),
        DatasetEntry(year=2000, debt=120.0, adjusted_debt=120.0, debt_growth_rate=50.0),
    ]
    result = SequentialConsistencyCheck().validate(entries)

    assert _errors_mentioning(result, "Growth rate mismatch") == []
    assert result.errors == [
        "1999: Missing or invalid debt value",
        "1999: Missing or invalid adjusted debt value",
    ]


def test_growth_rate_uses_sorted_order():
    """The predecessor is the previous year, regardless of input order."""
    entries = [
        DatasetEntry(year=2000, adjusted_debt=120.0, debt_growth_rate=9.09),
        DatasetEntry(year=1999, adjusted_debt=110.0),
    ]
    result = SequentialConsistencyCheck().validate(entries)

    assert _errors_mentioning(result, "Growth rate mismatch") == []


def test_growth_rate_on_first_entry_is_not_checked():
    """The earliest entry has no predecessor to compare against."""
    entry = DatasetEntry(year=1999, debt=110.0, adjusted_debt=110.0, debt_growth_rate=99.0)
    assert SequentialConsistencyCheck().validate([entry]).errors == []


def test_gap_warning():
    """Missing years between consecutive entries produce one warning."""
    entries = [
        DatasetEntry(year=2001, debt=100.0, adjusted_debt=100.0),
        DatasetEntry(year=1999, debt=100.0, adjusted_debt=100.0),
    ]
    result = SequentialConsistencyCheck().validate(entries)

    assert result.warnings == ["Gap in data: Missing years between 1999 and 2001"]
    assert result.is_valid is True


def test_high_debt_warning():
    entry = DatasetEntry(year=2030, debt=150000.0, adjusted_debt=100000.0)
    result = SequentialConsistencyCheck().validate([entry])

    assert result.warnings == ["2030: Debt value seems unusually high: 150000B"]


@pytest.mark.parametrize(
    "field_name,value,message",
    [
        ("inflation_adjuster", 0.05, "1950: Inflation adjuster seems unusual: 0.05"),
        ("inflation_adjuster", 6.0, "1950: Inflation adjuster seems unusual: 6"),
        ("population", 150.0, "1950: Population seems unusual: 150M"),
        ("population", 0.0, "1950: Population seems unusual: 0M"),
        ("population", 401.0, "1950: Population seems unusual: 401M"),
    ],
)
def test_range_warnings(field_name, value, message):
    """Values outside plausible ranges are flagged; a zero counts as present."""
    entry = DatasetEntry(year=1950, debt=100.0, adjusted_debt=100.0, **{field_name: value})
    result = SequentialConsistencyCheck().validate([entry])

    assert message in result.warnings


def test_debt_to_gdp_warning():
    entry = DatasetEntry(year=1946, debt=300.0, adjusted_debt=300.0, gdp=100.0)
    result = SequentialConsistencyCheck().validate([entry])

    assert result.warnings == ["1946: Very high debt-to-GDP ratio: 300.0%"]


@pytest.mark.parametrize("gdp", [0.0, -10.0])
def test_debt_to_gdp_skipped_without_positive_gdp(gdp):
    entry = DatasetEntry(year=1946, debt=300.0, adjusted_debt=300.0, gdp=gdp)
    result = SequentialConsistencyCheck().validate([entry])

    assert result.warnings == []


def test_accumulates_all_findings(complete_dataset):
    """Validation continues past the first failure and reports every defect."""
    broken = list(complete_dataset)
    broken[0] = replace(broken[0], debt=None)
    broken[2] = replace(broken[2], adjusted_debt=1.0)
    broken[4] = replace(broken[4], population=999.0)

    result = SequentialConsistencyCheck().validate(broken)

    assert "1997: Missing or invalid debt value" in result.errors
    assert any(m.startswith("1999: Inflation adjustment mismatch") for m in result.errors)
    assert "2001: Population seems unusual: 999M" in result.warnings


def test_input_not_mutated(complete_dataset):
    shuffled = list(reversed(complete_dataset))
    snapshot = list(shuffled)
    SequentialConsistencyCheck().validate(shuffled)

    assert shuffled == snapshot


def test_custom_thresholds():
    """Thresholds come from the check's ValidationConfig."""
    config = ValidationConfig(max_plausible_debt=50.0, adjusted_value_abs_tol=0)
    entry = DatasetEntry(year=2000, debt=100.0, adjusted_debt=101.0, inflation_adjuster=1.0)
    result = SequentialConsistencyCheck(config).validate([entry])

    assert result.errors == ["2000: Inflation adjustment mismatch. Expected: 100, Actual: 101"]
    assert result.warnings == ["2000: Debt value seems unusually high: 100B"]
