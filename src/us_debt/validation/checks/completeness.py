"""Completeness validation check.

Required fields (debt, adjusted debt) must be present on every entry; missing
recommended fields (GDP, spending, population, inflation adjuster and their
adjusted counterparts) are reported for review. A zero value counts as present.
"""

from __future__ import annotations

from typing import List, Sequence

from us_debt.core.enums import FieldClass
from us_debt.core.schemas import DatasetEntry, get_fields_by_class
from ..models import ValidationResult


class CompletenessCheck:
    """Validate that required and recommended fields are populated."""

    check_id = "completeness"

    def validate(self, entries: Sequence[DatasetEntry]) -> ValidationResult:
        """Report absent fields per entry.

        Args:
            entries: Dataset entries in any order; findings follow input order.

        Returns:
            ValidationResult with an error per missing required field and a
            warning per missing recommended field.
        """
        errors: List[str] = []
        warnings: List[str] = []
        required = get_fields_by_class(FieldClass.REQUIRED)
        recommended = get_fields_by_class(FieldClass.RECOMMENDED)

        for entry in entries:
            for field_name in required:
                if not entry.has(field_name):
                    errors.append(f"{entry.year}: Missing required field: {field_name}")
            for field_name in recommended:
                if not entry.has(field_name):
                    warnings.append(f"{entry.year}: Missing recommended field: {field_name}")

        return ValidationResult(self.check_id, errors, warnings)
