"""Validation system for US Debt Tools.

This module provides the validation framework for the US debt dataset:

- **Models**: ValidationResult, DatasetSummary, ValidationReport - result data structures
- **Checks**: Individual validation check implementations (see validation/checks/)
- **Config**: Tolerance constants and thresholds (import from .config)
- **Registry**: run_validation(), generate_validation_report(), print_report()

Public API:
    ValidationResult: Errors and warnings found by a single check
    ValidationReport: Aggregated results with summary and renderers
    run_validation: Run all validation checks on a dataset
    generate_validation_report: Run validation and render the Markdown report
    print_report: Display validation results to console

Usage:
    >>> from pathlib import Path
    >>> from us_debt.ingestion.loader import load_dataset
    >>> from us_debt.validation import run_validation, print_report
    >>> report = run_validation(load_dataset(Path("data/us-debt.csv")))
    >>> print_report(report)

For implementation details:
    - See validation/checks/__init__.py for check interface conventions
    - See validation/config.py for tolerance configuration
    - See validation/registry.py for check orchestration
"""

from __future__ import annotations

from .config import ValidationConfig, load_config
from .models import DatasetSummary, ValidationReport, ValidationResult
from .registry import generate_validation_report, print_report, run_validation

__all__ = [
    # Data models
    "ValidationResult",
    "DatasetSummary",
    "ValidationReport",
    # Configuration
    "ValidationConfig",
    "load_config",
    # Runner functions
    "run_validation",
    "generate_validation_report",
    "print_report",
]
