"""Core enumerations used across the package."""

from __future__ import annotations

from enum import Enum


class FieldClass(str, Enum):
    """Classification of dataset fields for completeness reporting.

    Values are strings to ease serialization and CLI interchange.
    """

    REQUIRED = "required"
    RECOMMENDED = "recommended"


__all__ = ["FieldClass"]
