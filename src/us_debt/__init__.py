"""US Debt Tools — dataset validation for the US debt time series.

The package validates the yearly debt/GDP/spending dataset that backs the
debt chart and produces a structured pass/fail report. Nothing runs at
import time; use `us_debt.validation.run_validation` or the `us-debt` CLI.
"""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
