"""Data schemas and field definitions for the US debt dataset.

This module defines the `DatasetEntry` record and the classification of its
fields. Used by the loader, validation, and reporting to ensure consistency.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional, Tuple

from .enums import FieldClass
from .utils import is_present


@dataclass(frozen=True)
class DatasetEntry:
    """One calendar year's economic snapshot.

    Monetary values are in billions of USD; adjusted values are in base-year
    (2000) dollars. Population is in millions and the growth rate in percent.

    Attributes:
        year: Calendar year, unique within a dataset.
        debt: Nominal federal debt.
        adjusted_debt: Debt deflated by the inflation adjuster.
        gdp: Nominal gross domestic product.
        adjusted_gdp: GDP deflated by the inflation adjuster.
        spending: Nominal federal spending.
        adjusted_spending: Spending deflated by the inflation adjuster.
        inflation_adjuster: Deflation factor, 1.0 at the base year.
        debt_growth_rate: Year-over-year change in adjusted debt (percent).
        population: Resident population.

    Examples:
        >>> DatasetEntry(year=2000, debt=5674.0, adjusted_debt=5674.0, inflation_adjuster=1.0)
        DatasetEntry(year=2000, debt=5674.0, ...)
    """

    year: int
    debt: Optional[float] = None
    adjusted_debt: Optional[float] = None
    gdp: Optional[float] = None
    adjusted_gdp: Optional[float] = None
    spending: Optional[float] = None
    adjusted_spending: Optional[float] = None
    inflation_adjuster: Optional[float] = None
    debt_growth_rate: Optional[float] = None
    population: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate field constraints."""
        if isinstance(self.year, bool) or not isinstance(self.year, int):
            raise ValueError(f"Invalid year: {self.year!r}. Must be an integer.")

    def get(self, field_name: str) -> Any:
        """Return a field value by name (None if absent)."""
        return getattr(self, field_name)

    def has(self, field_name: str) -> bool:
        """Return True if the field is present (not None, not NaN)."""
        return is_present(self.get(field_name))


# Field aliases used by the chart data files (camelCase) -> attribute names
FIELD_ALIASES: Dict[str, str] = {
    "year": "year",
    "debt": "debt",
    "adjustedDebt": "adjusted_debt",
    "gdp": "gdp",
    "adjustedGdp": "adjusted_gdp",
    "spending": "spending",
    "adjustedSpending": "adjusted_spending",
    "inflationAdjuster": "inflation_adjuster",
    "debtGrowthRate": "debt_growth_rate",
    "population": "population",
}

# Nominal field -> deflated counterpart, with the label used in mismatch messages
ADJUSTED_PAIRS: List[Tuple[str, str, str]] = [
    ("debt", "adjusted_debt", "Inflation adjustment"),
    ("gdp", "adjusted_gdp", "GDP inflation adjustment"),
    ("spending", "adjusted_spending", "Spending inflation adjustment"),
]

_FIELD_CLASSES: Dict[FieldClass, List[str]] = {
    FieldClass.REQUIRED: ["debt", "adjusted_debt"],
    FieldClass.RECOMMENDED: [
        "gdp",
        "adjusted_gdp",
        "spending",
        "adjusted_spending",
        "population",
        "inflation_adjuster",
    ],
}


def get_entry_fields() -> List[str]:
    """Get all DatasetEntry attribute names in declaration order."""
    return [f.name for f in fields(DatasetEntry)]


def get_required_fields() -> List[str]:
    """Get fields every entry must carry.

    Examples:
        >>> get_required_fields()
        ['debt', 'adjusted_debt']
    """
    return list(_FIELD_CLASSES[FieldClass.REQUIRED])


def get_recommended_fields() -> List[str]:
    """Get fields whose absence is reported as a warning."""
    return list(_FIELD_CLASSES[FieldClass.RECOMMENDED])


def get_fields_by_class(field_class: FieldClass) -> List[str]:
    """Get the field names belonging to a classification.

    Raises:
        ValueError: If field_class is not a known classification.
    """
    if field_class not in _FIELD_CLASSES:
        raise ValueError(f"Unknown field class: {field_class}")
    return list(_FIELD_CLASSES[field_class])


def normalize_field_name(name: str) -> str:
    """Map a camelCase or snake_case column name to a DatasetEntry attribute.

    Unknown names are returned stripped but otherwise unchanged.

    Examples:
        >>> normalize_field_name("adjustedDebt")
        'adjusted_debt'
        >>> normalize_field_name("adjusted_debt")
        'adjusted_debt'
    """
    key = str(name).strip()
    return FIELD_ALIASES.get(key, key)
