"""Validation data models.

This module defines core data structures for validation results:
- ValidationResult: Findings of a single validation check
- DatasetSummary: Size, year range and completeness statistics of a dataset
- ValidationReport: Aggregated results from all checks plus rendering helpers
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class ValidationResult:
    """Findings of a single validation check.

    Attributes:
        check_id: Unique identifier for the check (e.g., "inflation_adjuster").
        errors: Hard correctness violations, in the order they were found.
        warnings: Suspicious values that do not affect validity, in order found.

    Examples:
        >>> ValidationResult(
        ...     check_id="completeness",
        ...     errors=["1985: Missing required field: debt"],
        ...     warnings=[],
        ... ).is_valid
        False
    """

    check_id: str
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate field constraints."""
        if not self.check_id:
            raise ValueError("check_id must be a non-empty string")

    @property
    def is_valid(self) -> bool:
        """True exactly when the check found no errors."""
        return len(self.errors) == 0


@dataclass(frozen=True)
class DatasetSummary:
    """Summary statistics over a dataset.

    Attributes:
        dataset_size: Number of entries.
        min_year: Earliest year (None for an empty dataset).
        max_year: Latest year (None for an empty dataset).
        years_with_basic_data: Entries carrying both debt and adjusted debt.
        years_with_full_data: Entries carrying every required and recommended field.
        completeness_percent: years_with_full_data / dataset_size * 100, one decimal.
    """

    dataset_size: int
    min_year: Optional[int]
    max_year: Optional[int]
    years_with_basic_data: int
    years_with_full_data: int
    completeness_percent: float


@dataclass
class ValidationReport:
    """Aggregated validation results for a dataset.

    Attributes:
        results: One result per check, in the order the checks ran.
        summary: Dataset statistics computed alongside the checks.

    Examples:
        >>> report = ValidationReport(results=[r1, r2, r3], summary=summary)
        >>> report.is_valid
        False
        >>> report.get_error_count()
        2
    """

    results: List[ValidationResult]
    summary: DatasetSummary

    @property
    def errors(self) -> List[str]:
        """All errors, concatenated in check order."""
        return [msg for r in self.results for msg in r.errors]

    @property
    def warnings(self) -> List[str]:
        """All warnings, concatenated in check order."""
        return [msg for r in self.results for msg in r.warnings]

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def has_errors(self, strict: bool = False) -> bool:
        """Check if validation failed.

        Args:
            strict: If True, treat warnings as errors. Default False.

        Returns:
            True if any errors found (or warnings in strict mode), False otherwise.
        """
        if self.errors:
            return True
        return strict and bool(self.warnings)

    def get_error_count(self) -> int:
        """Count total number of errors across all checks."""
        return sum(len(r.errors) for r in self.results)

    def get_warning_count(self) -> int:
        """Count total number of warnings across all checks."""
        return sum(len(r.warnings) for r in self.results)

    def get_failed_checks(self) -> List[ValidationResult]:
        """Get all checks that reported at least one error or warning."""
        return [r for r in self.results if r.errors or r.warnings]

    def to_markdown(self) -> str:
        """Generate the Markdown validation report.

        Sections, in order: title with dataset size and year range, pass/fail
        banner, critical errors (if any), warnings (if any), completeness summary.
        Downstream tooling may parse this layout, so the order is fixed.

        Returns:
            Formatted Markdown string.
        """
        s = self.summary
        errors = self.errors
        warnings = self.warnings

        lines = [
            "# Data Validation Report",
            "",
            f"**Dataset Size:** {s.dataset_size} entries",
            f"**Year Range:** {_fmt_year(s.min_year)} - {_fmt_year(s.max_year)}",
            "",
        ]

        if not errors:
            lines.append("## ✅ Validation Status: PASSED")
            lines.append("")
            lines.append("All critical validation checks passed successfully.")
            lines.append("")
        else:
            lines.append("## ❌ Validation Status: FAILED")
            lines.append("")
            lines.append(f"Found {len(errors)} critical errors that must be addressed.")
            lines.append("")
            lines.append("### Critical Errors:")
            for msg in errors:
                lines.append(f"- {msg}")
            lines.append("")

        if warnings:
            lines.append(f"### Warnings ({len(warnings)}):")
            for msg in warnings:
                lines.append(f"- {msg}")
            lines.append("")

        lines.append("## Data Completeness Summary")
        lines.append(
            f"- **Years with basic data:** {s.years_with_basic_data}/{s.dataset_size}"
        )
        lines.append(
            f"- **Years with complete data:** {s.years_with_full_data}/{s.dataset_size}"
        )
        lines.append(f"- **Data completeness:** {s.completeness_percent:.1f}%")
        lines.append("")

        return "\n".join(lines) + "\n"

    def to_json(self) -> str:
        """Generate the JSON validation report.

        Returns:
            Formatted JSON string with per-check results, the concatenated
            error and warning lists, and the dataset summary.
        """
        report_data = {
            "is_valid": self.is_valid,
            "summary": asdict(self.summary),
            "errors": self.errors,
            "warnings": self.warnings,
            "checks": [
                {
                    "check_id": r.check_id,
                    "is_valid": r.is_valid,
                    "errors": list(r.errors),
                    "warnings": list(r.warnings),
                }
                for r in self.results
            ],
        }
        return json.dumps(report_data, indent=2, ensure_ascii=False)

    def to_console_summary(self) -> str:
        """Generate a concise summary for console output.

        Returns:
            A string containing the overall counts and the first finding of
            each check that reported anything.
        """
        s = self.summary
        lines = [
            "Validation Summary:",
            f"  Dataset: {s.dataset_size} entries "
            f"({_fmt_year(s.min_year)} - {_fmt_year(s.max_year)})",
            f"  Checks: {len(self.results)} executed",
            f"  Issues: {self.get_error_count()} errors, {self.get_warning_count()} warnings",
            f"  Completeness: {s.completeness_percent:.1f}%",
            "",
        ]

        failed_checks = self.get_failed_checks()
        if not failed_checks:
            lines.append("✅ All validation checks passed!")
        else:
            lines.append("Check Details:")
            for result in failed_checks:
                icon = "❌" if result.errors else "⚠️"
                lines.append(
                    f"{icon} {result.check_id}: "
                    f"{len(result.errors)} errors, {len(result.warnings)} warnings"
                )
                first = result.errors[0] if result.errors else result.warnings[0]
                lines.append(f"   - {first}")

        return "\n".join(lines)


def _fmt_year(year: Optional[int]) -> str:
    return "n/a" if year is None else str(year)
