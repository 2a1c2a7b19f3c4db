"""Sequential consistency validation check.

Walks the dataset in ascending year order and verifies that the deflated values
match their nominal counterparts, that reported growth rates match the adjusted
debt series, and that values fall within plausible ranges. Gaps between
consecutive years are reported as warnings.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import numpy as np

from us_debt.core.schemas import ADJUSTED_PAIRS, DatasetEntry
from us_debt.core.utils import format_number, round_half_up
from ..config import DEFAULT_CONFIG, ValidationConfig
from ..models import ValidationResult

logger = logging.getLogger(__name__)


class SequentialConsistencyCheck:
    """Validate arithmetic consistency across the year-sorted dataset."""

    check_id = "sequential_consistency"

    def __init__(self, config: ValidationConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def validate(self, entries: Sequence[DatasetEntry]) -> ValidationResult:
        """Check every entry against its own fields and its predecessor.

        Verifies:
        - debt and adjusted_debt present and positive
        - adjusted_X = round(X / inflation_adjuster) for debt, gdp, spending
        - debt_growth_rate = change in adjusted_debt vs previous entry
        - debt, inflation adjuster, population, debt-to-GDP within plausible ranges
        - no missing years between consecutive entries

        Args:
            entries: Dataset entries in any order; a sorted copy is used.

        Returns:
            ValidationResult with all findings in year order.
        """
        errors: List[str] = []
        warnings: List[str] = []
        ordered = sorted(entries, key=lambda e: e.year)

        prev: Optional[DatasetEntry] = None
        for entry in ordered:
            self._check_required_values(entry, errors)
            self._check_inflation_adjustments(entry, errors)
            if prev is not None:
                self._check_growth_rate(entry, prev, errors)
            self._check_ranges(entry, warnings)
            if prev is not None and entry.year - prev.year > 1:
                warnings.append(f"Gap in data: Missing years between {prev.year} and {entry.year}")
            prev = entry

        logger.debug(
            "%s: %d entries, %d errors, %d warnings",
            self.check_id,
            len(ordered),
            len(errors),
            len(warnings),
        )
        return ValidationResult(self.check_id, errors, warnings)

    @staticmethod
    def _check_required_values(entry: DatasetEntry, errors: List[str]) -> None:
        if not entry.has("debt") or entry.debt <= 0:
            errors.append(f"{entry.year}: Missing or invalid debt value")
        if not entry.has("adjusted_debt") or entry.adjusted_debt <= 0:
            errors.append(f"{entry.year}: Missing or invalid adjusted debt value")

    def _check_inflation_adjustments(self, entry: DatasetEntry, errors: List[str]) -> None:
        # The adjuster is a divisor: only positive values take part
        if not entry.has("inflation_adjuster") or entry.inflation_adjuster <= 0:
            return
        tol = self.config.adjusted_value_abs_tol
        for nominal_field, adjusted_field, label in ADJUSTED_PAIRS:
            if not (entry.has(nominal_field) and entry.has(adjusted_field)):
                continue
            expected = round_half_up(entry.get(nominal_field) / entry.inflation_adjuster)
            actual = round_half_up(entry.get(adjusted_field))
            if abs(expected - actual) > tol:
                errors.append(
                    f"{entry.year}: {label} mismatch. Expected: {expected}, Actual: {actual}"
                )

    def _check_growth_rate(
        self, entry: DatasetEntry, prev: DatasetEntry, errors: List[str]
    ) -> None:
        if not entry.has("debt_growth_rate"):
            return
        if not (entry.has("adjusted_debt") and prev.has("adjusted_debt")):
            return
        if prev.adjusted_debt == 0:
            return
        expected = (entry.adjusted_debt - prev.adjusted_debt) / prev.adjusted_debt * 100
        actual = entry.debt_growth_rate
        if not np.isclose(expected, actual, rtol=0, atol=self.config.growth_rate_tol):
            errors.append(
                f"{entry.year}: Growth rate mismatch. "
                f"Expected: {expected:.2f}%, Actual: {actual:.2f}%"
            )

    def _check_ranges(self, entry: DatasetEntry, warnings: List[str]) -> None:
        cfg = self.config
        if entry.has("debt") and entry.debt > cfg.max_plausible_debt:
            warnings.append(
                f"{entry.year}: Debt value seems unusually high: {format_number(entry.debt)}B"
            )

        if entry.has("inflation_adjuster"):
            low, high = cfg.adjuster_range
            factor = entry.inflation_adjuster
            if not low <= factor <= high:
                warnings.append(
                    f"{entry.year}: Inflation adjuster seems unusual: {format_number(factor)}"
                )

        if entry.has("population"):
            low, high = cfg.population_range
            if not low <= entry.population <= high:
                warnings.append(
                    f"{entry.year}: Population seems unusual: {format_number(entry.population)}M"
                )

        if entry.has("debt") and entry.has("gdp") and entry.gdp > 0:
            ratio = entry.debt / entry.gdp * 100
            if ratio > cfg.max_debt_to_gdp_pct:
                warnings.append(f"{entry.year}: Very high debt-to-GDP ratio: {ratio:.1f}%")
