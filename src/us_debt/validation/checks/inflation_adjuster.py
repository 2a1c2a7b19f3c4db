"""Inflation adjuster validation check.

Every entry needs a positive adjustment factor, the base year must be
normalized to 1.0, and factors should sit on the expected side of 1.0 relative
to the base year. Each entry is judged on its own, so input order does not matter.
"""

from __future__ import annotations

from typing import List, Sequence

from us_debt.core.schemas import DatasetEntry
from us_debt.core.utils import format_number
from ..config import DEFAULT_CONFIG, ValidationConfig
from ..models import ValidationResult


class InflationAdjusterCheck:
    """Validate the inflation adjustment factor of each entry."""

    check_id = "inflation_adjuster"

    def __init__(self, config: ValidationConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def validate(self, entries: Sequence[DatasetEntry]) -> ValidationResult:
        """Check presence, base-year normalization and direction of each factor.

        Args:
            entries: Dataset entries in any order; findings follow input order.

        Returns:
            ValidationResult with one error per missing/invalid or mis-normalized
            factor and one warning per factor on the unexpected side of 1.0.
        """
        errors: List[str] = []
        warnings: List[str] = []
        base_year = self.config.base_year

        for entry in entries:
            factor = entry.inflation_adjuster
            if not entry.has("inflation_adjuster") or factor <= 0:
                errors.append(f"{entry.year}: Missing or invalid inflation adjuster")
                continue

            if entry.year == base_year and abs(factor - 1.0) > self.config.base_year_adjuster_tol:
                errors.append(
                    f"{entry.year}: Base year inflation adjuster should be 1.0, "
                    f"got {format_number(factor)}"
                )

            if entry.year > base_year and factor < 1.0:
                warnings.append(
                    f"{entry.year}: Inflation adjuster less than 1.0 for post-{base_year} year"
                )

            if entry.year < base_year and factor > 1.0:
                warnings.append(
                    f"{entry.year}: Inflation adjuster greater than 1.0 for pre-{base_year} year"
                )

        return ValidationResult(self.check_id, errors, warnings)
