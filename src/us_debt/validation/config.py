"""Validation configuration constants.

This module centralizes all validation tolerances and plausibility thresholds.
Adjust these constants (or pass a YAML override to `load_config`) to tune
validation behavior based on real data patterns.

Severity Levels:
    - "error": Hard correctness violations (missing required values, arithmetic
      mismatches beyond tolerance, incorrect base-year normalization)
    - "warning": Plausible-but-suspicious values that warrant review
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Tuple

import yaml

# ============================================================================
# BASE YEAR
# ============================================================================

# Inflation-adjusted values are expressed in dollars of this year
BASE_YEAR = 2000


# ============================================================================
# TOLERANCE CONSTANTS
# ============================================================================

# adjusted_X vs round(X / inflation_adjuster), in the field's native unit (billions)
ADJUSTED_VALUE_ABS_TOL = 5

# Reported vs computed debt growth rate, in percentage points
GROWTH_RATE_TOL = 0.1

# Inflation adjuster at the base year vs 1.0
BASE_YEAR_ADJUSTER_TOL = 0.01


# ============================================================================
# PLAUSIBILITY THRESHOLDS (warnings)
# ============================================================================

MAX_PLAUSIBLE_DEBT = 100000  # billions USD
ADJUSTER_RANGE = (0.1, 5.0)
POPULATION_RANGE = (200.0, 400.0)  # millions
MAX_DEBT_TO_GDP_PCT = 200.0


@dataclass(frozen=True)
class ValidationConfig:
    """Thresholds used by the validation checks.

    Defaults mirror the module constants; use `load_config` to override a
    subset from YAML.
    """

    base_year: int = BASE_YEAR
    adjusted_value_abs_tol: float = ADJUSTED_VALUE_ABS_TOL
    growth_rate_tol: float = GROWTH_RATE_TOL
    base_year_adjuster_tol: float = BASE_YEAR_ADJUSTER_TOL
    max_plausible_debt: float = MAX_PLAUSIBLE_DEBT
    adjuster_range: Tuple[float, float] = ADJUSTER_RANGE
    population_range: Tuple[float, float] = POPULATION_RANGE
    max_debt_to_gdp_pct: float = MAX_DEBT_TO_GDP_PCT

    def __post_init__(self) -> None:
        """Validate field constraints."""
        for name in ("adjuster_range", "population_range"):
            low, high = getattr(self, name)
            if low > high:
                raise ValueError(f"Invalid {name}: lower bound {low} exceeds upper bound {high}")


DEFAULT_CONFIG = ValidationConfig()


def load_config(path: Path) -> ValidationConfig:
    """Load validation thresholds from a YAML file.

    The file holds a mapping whose keys are `ValidationConfig` field names,
    either at the top level or under a `validation:` key. Ranges are given as
    two-element lists.

    Args:
        path: Path to the YAML file.

    Returns:
        ValidationConfig with the file's overrides applied to the defaults.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file cannot be parsed or contains unknown keys.

    Examples:
        >>> # thresholds.yaml
        >>> # validation:
        >>> #   max_plausible_debt: 50000
        >>> #   population_range: [150, 450]
        >>> cfg = load_config(Path("thresholds.yaml"))
        >>> cfg.max_plausible_debt
        50000.0
    """
    if not path.exists():
        raise FileNotFoundError(f"Validation config not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ValueError(f"Failed to read validation config {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Validation config must be a mapping, got {type(data).__name__}")
    data = data.get("validation", data) or {}

    known = {f.name for f in fields(ValidationConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(
            f"Unknown validation config keys: {', '.join(unknown)}. "
            f"Valid keys: {', '.join(sorted(known))}"
        )

    overrides = {}
    for key, value in data.items():
        if key in ("adjuster_range", "population_range"):
            if not isinstance(value, (list, tuple)) or len(value) != 2:
                raise ValueError(f"{key} must be a two-element list, got {value!r}")
        try:
            if key in ("adjuster_range", "population_range"):
                overrides[key] = (float(value[0]), float(value[1]))
            elif key == "base_year":
                overrides[key] = int(value)
            else:
                overrides[key] = float(value)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid value for {key}: {value!r}") from e
    return replace(DEFAULT_CONFIG, **overrides)
