"""
Frame Transformers - Column Variants

The array rules applied to a polars DataFrame column.
Functions return new frames (or scalars) and never modify their input.
"""

import polars as pl
from typing import List, Sequence, Union
from .arrays import RGB_COLORS, SHORT_WORD_LIMIT, inject_positive, make_math
from .schemas import (
    FLOAT_VALUES_SCHEMA,
    INTEGER_VALUES_SCHEMA,
    TEXT_VALUES_SCHEMA,
    VALUE_COLUMN,
)
from .validators import is_numeric_sequence, is_text_sequence, validate_column
import logging

logger = logging.getLogger(__name__)

Number = Union[int, float]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Same prefix rule as parsing.INTEGER_PREFIX, in Rust regex syntax
INTEGER_PREFIX_PATTERN = r"^\s*([+-]?[0-9]+)"


def numbers_frame(values: Sequence[Number]) -> pl.DataFrame:
    """
    Build a single "value" column frame from numbers

    Args:
        values: Numbers; any float makes the column Float64. Integer-only
            values must fit in Int64 or ValueError is raised

    Returns:
        pl.DataFrame: Frame matching INTEGER_VALUES_SCHEMA or FLOAT_VALUES_SCHEMA
    """
    if not is_numeric_sequence(values):
        raise ValueError("numbers_frame expects only int or float values")

    schema = (
        FLOAT_VALUES_SCHEMA
        if any(isinstance(value, float) for value in values)
        else INTEGER_VALUES_SCHEMA
    )
    if schema is INTEGER_VALUES_SCHEMA:
        out_of_range = [
            value for value in values if not INT64_MIN <= value <= INT64_MAX
        ]
        if out_of_range:
            raise ValueError(
                f"numbers_frame values outside the Int64 range: {out_of_range[:3]}"
            )

    return pl.DataFrame({VALUE_COLUMN: list(values)}, schema=schema)


def text_frame(values: Sequence[str]) -> pl.DataFrame:
    """Build a single "value" column frame from strings"""
    if not is_text_sequence(values):
        raise ValueError("text_frame expects only str values")
    return pl.DataFrame({VALUE_COLUMN: list(values)}, schema=TEXT_VALUES_SCHEMA)


def _integer_prefix(expr: pl.Expr) -> pl.Expr:
    # Missing prefix and Int64 overflow both end up null, then 0
    return (
        expr.str.extract(INTEGER_PREFIX_PATTERN, 1)
        .str.replace(r"^\+", "")
        .cast(pl.Int64, strict=False)
        .fill_null(0)
    )


def triple_column(df: pl.DataFrame, column: str) -> pl.DataFrame:
    """Multiply a numeric column by 3"""
    validate_column(df, column, "numeric")
    return df.with_columns(pl.col(column) * 3)


def strings_to_integers_column(df: pl.DataFrame, column: str) -> pl.DataFrame:
    """
    Replace a text column with the integer prefix of each value

    Args:
        df: Frame holding the column
        column: Text column to convert

    Returns:
        pl.DataFrame: Same frame with the column as Int64, 0 where unparseable
    """
    logger.info(f"Parsing integers in column '{column}'")

    try:
        validate_column(df, column, "text")
        result_df = df.with_columns(_integer_prefix(pl.col(column)))

        logger.info(f"Parsed {result_df.height} values in column '{column}'")
        return result_df

    except Exception as e:
        logger.error(f"❌ Error parsing integers in column '{column}': {e}")
        raise


def remove_dollars_column(df: pl.DataFrame, column: str) -> pl.DataFrame:
    """Strip one leading "$" from each value, then parse as integers"""
    logger.info(f"Removing dollars in column '{column}'")

    try:
        validate_column(df, column, "text")
        stripped = pl.col(column).str.replace(r"^\$", "")
        return df.with_columns(_integer_prefix(stripped))

    except Exception as e:
        logger.error(f"❌ Error removing dollars in column '{column}': {e}")
        raise


def shout_if_exclaiming_frame(df: pl.DataFrame, column: str) -> pl.DataFrame:
    """
    Uppercase values ending in "!", then drop rows whose value ends in "?"

    Args:
        df: Frame holding the messages
        column: Text column with messages

    Returns:
        pl.DataFrame: Remaining rows in original order. Null messages are kept.
    """
    validate_column(df, column, "text")

    message = pl.col(column)
    shouted_df = df.with_columns(
        pl.when(message.str.ends_with("!"))
        .then(message.str.to_uppercase())
        .otherwise(message)
        .alias(column)
    )
    result_df = shouted_df.filter(~message.str.ends_with("?").fill_null(False))

    logger.info(
        f"Shouted column '{column}': kept {result_df.height} of {df.height} rows"
    )
    return result_df


def count_short_words_column(df: pl.DataFrame, column: str) -> int:
    """Count values with fewer than 4 characters (nulls are not counted)"""
    validate_column(df, column, "text")
    return df.select(
        (pl.col(column).str.len_chars() < SHORT_WORD_LIMIT).fill_null(False).sum()
    ).item()


def all_rgb_column(df: pl.DataFrame, column: str) -> bool:
    """True when every value is "red", "blue" or "green"; nulls fail the check"""
    validate_column(df, column, "text")
    if df.height == 0:
        return True
    return bool(
        df.select(
            pl.col(column).is_in(sorted(RGB_COLORS)).fill_null(False).all()
        ).item()
    )


def make_math_column(df: pl.DataFrame, column: str) -> str:
    validate_column(df, column, "numeric")
    return make_math(df.get_column(column).drop_nulls().to_list())


def inject_positive_column(df: pl.DataFrame, column: str) -> List[Number]:
    """Run inject_positive over a numeric column's non-null values"""
    validate_column(df, column, "numeric")
    return inject_positive(df.get_column(column).drop_nulls().to_list())
