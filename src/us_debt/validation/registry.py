"""Validation check registry and runner.

This module orchestrates validation checks:
- build_checks(): Instantiates the checks in their fixed run order
- run_validation(): Executes the checks and returns a ValidationReport
- summarize_dataset(): Computes size, year range and completeness statistics
- generate_validation_report(): Runs validation and renders the Markdown report
- print_report(): Displays validation results to console
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from us_debt.core.schemas import (
    DatasetEntry,
    get_recommended_fields,
    get_required_fields,
)
from us_debt.core.utils import round_half_up_to
from .checks import ValidationCheck
from .checks.completeness import CompletenessCheck
from .checks.inflation_adjuster import InflationAdjusterCheck
from .checks.sequential_consistency import SequentialConsistencyCheck
from .config import DEFAULT_CONFIG, ValidationConfig
from .models import DatasetSummary, ValidationReport, ValidationResult

logger = logging.getLogger(__name__)


def build_checks(config: Optional[ValidationConfig] = None) -> List[ValidationCheck]:
    """Instantiate all validation checks.

    The order is part of the report contract: errors and warnings are
    concatenated in this order (consistency, inflation, completeness).

    Args:
        config: Thresholds to use. Defaults to DEFAULT_CONFIG.

    Returns:
        List of check instances in run order.
    """
    cfg = config or DEFAULT_CONFIG
    return [
        SequentialConsistencyCheck(cfg),
        InflationAdjusterCheck(cfg),
        CompletenessCheck(),
    ]


# Registry of all available validation checks with default thresholds
ALL_CHECKS = build_checks()


def summarize_dataset(entries: Iterable[DatasetEntry]) -> DatasetSummary:
    """Compute dataset size, year range and completeness statistics.

    Args:
        entries: Dataset entries in any order.

    Returns:
        DatasetSummary. For an empty dataset the year range is None and the
        completeness percentage is 0.0.

    Examples:
        >>> summary = summarize_dataset(entries)
        >>> summary.completeness_percent
        100.0
    """
    entries = list(entries)
    required = get_required_fields()
    full = required + get_recommended_fields()

    size = len(entries)
    years = [e.year for e in entries]
    basic = sum(1 for e in entries if all(e.has(f) for f in required))
    complete = sum(1 for e in entries if all(e.has(f) for f in full))
    percent = round_half_up_to(complete / size * 100, 1) if size else 0.0

    return DatasetSummary(
        dataset_size=size,
        min_year=min(years) if years else None,
        max_year=max(years) if years else None,
        years_with_basic_data=basic,
        years_with_full_data=complete,
        completeness_percent=percent,
    )


def run_validation(
    entries: Iterable[DatasetEntry], config: Optional[ValidationConfig] = None
) -> ValidationReport:
    """Run all validation checks on a dataset.

    The input is never mutated; each check receives the same snapshot.

    Args:
        entries: Dataset entries in any order.
        config: Thresholds to use. Defaults to DEFAULT_CONFIG.

    Returns:
        ValidationReport containing one result per check and the dataset summary.

    Examples:
        >>> from us_debt.ingestion.loader import load_dataset
        >>> report = run_validation(load_dataset(Path("data/us-debt.csv")))
        >>> print(report.to_console_summary())
    """
    snapshot = tuple(entries)
    checks = ALL_CHECKS if config is None else build_checks(config)

    results: List[ValidationResult] = []
    for check in checks:
        result = check.validate(snapshot)
        logger.debug(
            "Check %s: %d errors, %d warnings",
            result.check_id,
            len(result.errors),
            len(result.warnings),
        )
        results.append(result)

    return ValidationReport(results=results, summary=summarize_dataset(snapshot))


def generate_validation_report(
    entries: Iterable[DatasetEntry], config: Optional[ValidationConfig] = None
) -> str:
    """Run validation and render the Markdown report."""
    return run_validation(entries, config).to_markdown()


def print_report(report: ValidationReport) -> None:
    """Print validation report to console.

    Displays the summary followed by the first finding of each check that
    reported anything.

    Args:
        report: ValidationReport to display.

    Examples:
        >>> report = run_validation(entries)
        >>> print_report(report)
        Validation Summary:
          Dataset: 3 entries (1999 - 2001)
          Checks: 3 executed
          Issues: 0 errors, 1 warnings
          Completeness: 100.0%

        Check Details:
        ⚠️ sequential_consistency: 0 errors, 1 warnings
           - Gap in data: Missing years between 1999 and 2001
    """
    print(report.to_console_summary())
