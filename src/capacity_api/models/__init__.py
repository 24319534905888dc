"""
Shared data models for the capacity API.

This module provides the Sheets payload model and the endpoint result models.
"""

from .sheets import (
    DEFAULT_SHEET_RANGE,
    ROW_COUNT_THRESHOLD,
    ErrorResult,
    RowCountResult,
    SheetsConfig,
    SheetValues,
)

__all__ = [
    # Constants
    "DEFAULT_SHEET_RANGE",
    "ROW_COUNT_THRESHOLD",
    # Input models
    "SheetsConfig",
    "SheetValues",
    # Output models
    "ErrorResult",
    "RowCountResult",
]
