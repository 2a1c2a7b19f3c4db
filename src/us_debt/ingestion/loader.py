"""Dataset loader for the US debt time series.

Reads CSV, JSON or YAML files into `DatasetEntry` records. Column names may use
either the camelCase names of the chart data files (`adjustedDebt`) or the
snake_case attribute names (`adjusted_debt`). Empty cells become None.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping

import pandas as pd
import yaml

from us_debt.core.schemas import DatasetEntry, get_entry_fields, normalize_field_name

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".csv", ".json", ".yaml", ".yml")


def load_dataset(path: Path) -> List[DatasetEntry]:
    """Load dataset entries from a file.

    Args:
        path: Path to a `.csv`, `.json` or `.yaml`/`.yml` file. JSON and YAML
            files hold either a list of records or a mapping with a `data` list.

    Returns:
        Entries in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the format is unsupported or the content cannot be parsed.

    Examples:
        >>> entries = load_dataset(Path("data/us-debt.csv"))
        >>> entries[0].year
        1970
    """
    if not path.exists():
        raise FileNotFoundError(f"Dataset file not found: {path}")

    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(
            f"Unsupported dataset format: {path.suffix or '(none)'}. "
            f"Supported: {', '.join(SUPPORTED_SUFFIXES)}"
        )

    if suffix == ".csv":
        try:
            df = pd.read_csv(path, encoding="utf-8-sig", float_precision="round_trip")
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            raise ValueError(f"Failed to read CSV file {path}: {e}") from e
        entries = entries_from_frame(df)
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                if suffix == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ValueError(f"Failed to read dataset file {path}: {e}") from e
        entries = entries_from_records(_extract_records(data, path))

    logger.info("Loaded %d entries from %s", len(entries), path)
    return entries


def _extract_records(data: Any, path: Path) -> List[Dict[str, Any]]:
    if isinstance(data, Mapping):
        data = data.get("data")
    if not isinstance(data, list) or not all(isinstance(r, Mapping) for r in data):
        raise ValueError(
            f"Dataset file {path} must contain a list of records or a mapping with a 'data' list"
        )
    return [dict(r) for r in data]


def entries_from_records(records: Iterable[Mapping[str, Any]]) -> List[DatasetEntry]:
    """Build entries from an iterable of record mappings."""
    records = list(records)
    if not records:
        return []
    return entries_from_frame(pd.DataFrame.from_records(records))


def entries_from_frame(df: pd.DataFrame) -> List[DatasetEntry]:
    """Build entries from a DataFrame with one row per year.

    Unknown columns are ignored. Numeric columns are coerced to float; NaN
    becomes None.

    Raises:
        ValueError: If the `year` column is missing, a row has no integral year,
            or a value cannot be read as a number.
    """
    df = df.rename(columns=normalize_field_name)
    known = get_entry_fields()

    if "year" not in df.columns:
        raise ValueError(f"Dataset has no 'year' column. Columns: {list(df.columns)}")

    ignored = [c for c in df.columns if c not in known]
    if ignored:
        logger.debug("Ignoring unknown dataset columns: %s", ", ".join(map(str, ignored)))

    columns = [c for c in known if c in df.columns]
    df = df[columns].copy()
    for col in columns:
        try:
            df[col] = pd.to_numeric(df[col], errors="raise")
        except (ValueError, TypeError) as e:
            raise ValueError(f"Column '{col}' contains non-numeric values: {e}") from e

    entries: List[DatasetEntry] = []
    for index, row in df.iterrows():
        year = row["year"]
        if pd.isna(year) or float(year) != int(year):
            raise ValueError(f"Row {index}: missing or non-integer year: {year!r}")
        values = {
            col: None if pd.isna(row[col]) else float(row[col])
            for col in columns
            if col != "year"
        }
        entries.append(DatasetEntry(year=int(year), **values))

    years = [e.year for e in entries]
    if len(set(years)) != len(years):
        duplicates = sorted({y for y in years if years.count(y) > 1})
        logger.warning("Dataset contains duplicate years: %s", duplicates)

    return entries
