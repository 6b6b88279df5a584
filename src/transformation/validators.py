"""
Input Validators

Checks for list inputs and polars columns.
List checks only report; column checks raise ValueError on mismatch.
"""

import polars as pl
from typing import Any, Sequence
import logging

logger = logging.getLogger(__name__)

COLUMN_KINDS = ("numeric", "text")


def _is_number(value: Any) -> bool:
    # bool is an int subclass but not a number here
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_numeric_sequence(values: Sequence[Any]) -> bool:
    """
    Check that every element is an int or float

    Args:
        values: Sequence to check

    Returns:
        bool: False (with a warning logged) at the first non-number
    """
    for index, value in enumerate(values):
        if not _is_number(value):
            logger.warning(
                f"Non-numeric value at index {index}: {value!r} ({type(value).__name__})"
            )
            return False
    return True


def is_text_sequence(values: Sequence[Any]) -> bool:
    """Check that every element is a str, warning on the first that is not"""
    for index, value in enumerate(values):
        if not isinstance(value, str):
            logger.warning(
                f"Non-text value at index {index}: {value!r} ({type(value).__name__})"
            )
            return False
    return True


def validate_column(df: pl.DataFrame, column: str, kind: str) -> bool:
    """
    Validate that a frame column exists and holds the expected kind of data

    Args:
        df: Frame to inspect
        column: Column name
        kind: "numeric" or "text"

    Returns:
        bool: True if valid, raises exception if invalid
    """
    if kind not in COLUMN_KINDS:
        raise ValueError(f"Unknown column kind: {kind}")

    if column not in df.columns:
        raise ValueError(f"Column '{column}' not found, got {df.columns}")

    dtype = df.schema[column]
    if kind == "numeric" and not dtype.is_numeric():
        raise ValueError(f"Column '{column}' must be numeric, got {dtype}")
    if kind == "text" and dtype != pl.String:
        raise ValueError(f"Column '{column}' must be text, got {dtype}")

    logger.info(f"Column '{column}' validation passed: {df.height} {kind} records")
    return True
