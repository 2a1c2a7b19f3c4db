"""Shared pytest configuration, fixtures, and utilities for debt dataset testing."""

from typing import Dict, List, Optional, Sequence

import pytest

from us_debt.core.schemas import DatasetEntry
from us_debt.core.utils import round_half_up


# year, debt, inflation_adjuster, gdp, spending, population
SAMPLE_ROWS = [
    (1997, 5369.2, 0.950, 8577.6, 1601.1, 272.6),
    (1998, 5478.2, 0.964, 9062.8, 1652.5, 275.9),
    (1999, 5605.5, 0.985, 9631.2, 1701.8, 279.0),
    (2000, 5628.7, 1.000, 10251.0, 1789.0, 282.2),
    (2001, 5769.9, 1.028, 10581.9, 1862.8, 285.0),
    (2002, 6198.4, 1.044, 10929.1, 2010.9, 287.6),
]


def build_series(rows: Sequence[tuple]) -> List[DatasetEntry]:
    """Build a fully populated, internally consistent series from nominal values.

    Adjusted values are rounded the same way the published data is, and growth
    rates are derived from the adjusted debt of the preceding row.
    """
    entries: List[DatasetEntry] = []
    prev_adjusted: Optional[float] = None
    for year, debt, adjuster, gdp, spending, population in rows:
        adjusted_debt = float(round_half_up(debt / adjuster))
        growth = None
        if prev_adjusted is not None:
            growth = round((adjusted_debt - prev_adjusted) / prev_adjusted * 100, 2)
        entries.append(
            DatasetEntry(
                year=year,
                debt=debt,
                adjusted_debt=adjusted_debt,
                gdp=gdp,
                adjusted_gdp=float(round_half_up(gdp / adjuster)),
                spending=spending,
                adjusted_spending=float(round_half_up(spending / adjuster)),
                inflation_adjuster=adjuster,
                debt_growth_rate=growth,
                population=population,
            )
        )
        prev_adjusted = adjusted_debt
    return entries


def as_records(entries: Sequence[DatasetEntry]) -> List[Dict]:
    """Convert entries to camelCase records, as found in the chart data files."""
    return [
        {
            "year": e.year,
            "debt": e.debt,
            "adjustedDebt": e.adjusted_debt,
            "gdp": e.gdp,
            "adjustedGdp": e.adjusted_gdp,
            "spending": e.spending,
            "adjustedSpending": e.adjusted_spending,
            "inflationAdjuster": e.inflation_adjuster,
            "debtGrowthRate": e.debt_growth_rate,
            "population": e.population,
        }
        for e in entries
    ]


@pytest.fixture
def complete_dataset() -> List[DatasetEntry]:
    """Consistent, gap-free dataset with every field populated."""
    return build_series(SAMPLE_ROWS)


@pytest.fixture
def complete_records(complete_dataset) -> List[Dict]:  # pylint: disable=redefined-outer-name
    """The complete dataset as camelCase records."""
    return as_records(complete_dataset)
