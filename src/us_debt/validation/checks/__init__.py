"""Validation checks base interface.

This module defines the protocol (interface) that all validation checks must implement.
Each check is responsible for validating a specific aspect of the dataset (e.g.,
inflation-adjustment arithmetic, base-year normalization, field completeness).

To implement a new validation check:

1. Create a new file in this directory (e.g., `my_check.py`)
2. Define a class that implements the ValidationCheck protocol
3. Give it a `check_id` and implement `validate()`
4. Add the check to the ALL_CHECKS list in registry.py

Example:
    ```python
    # checks/my_check.py
    from typing import Sequence
    from us_debt.core.schemas import DatasetEntry
    from ..config import DEFAULT_CONFIG, ValidationConfig
    from ..models import ValidationResult

    class MyCheck:
        check_id = "my_check"

        def __init__(self, config: ValidationConfig = DEFAULT_CONFIG) -> None:
            self.config = config

        def validate(self, entries: Sequence[DatasetEntry]) -> ValidationResult:
            errors, warnings = [], []
            # Validation logic here
            return ValidationResult(self.check_id, errors, warnings)
    ```
"""

from __future__ import annotations

from typing import Protocol, Sequence

from us_debt.core.schemas import DatasetEntry
from ..models import ValidationResult


class ValidationCheck(Protocol):
    """Protocol defining the interface for validation checks.

    All validation checks must implement this interface. Use duck typing
    (Protocol) for flexibility - no need to inherit from a base class.

    Checks are stateless: they must not mutate the entries and must return
    identical results for identical input. Findings are reported as data in
    the result, never raised.

    Attributes:
        check_id: Unique identifier reported in ValidationResult.check_id.
    """

    check_id: str

    def validate(self, entries: Sequence[DatasetEntry]) -> ValidationResult:
        """Run the validation check.

        Args:
            entries: Dataset entries in any order.

        Returns:
            ValidationResult with every error and warning found, in order.

        Examples:
            >>> result = check.validate(entries)
            >>> if not result.is_valid:
            ...     for msg in result.errors:
            ...         print(msg)
        """
        ...


__all__ = ["ValidationCheck"]
