"""
Transformation Layer Schemas

Single-column frame layouts used by the polars column variants.
"""

import polars as pl

VALUE_COLUMN = "value"

INTEGER_VALUES_SCHEMA = pl.Schema([(VALUE_COLUMN, pl.Int64())])

FLOAT_VALUES_SCHEMA = pl.Schema([(VALUE_COLUMN, pl.Float64())])

TEXT_VALUES_SCHEMA = pl.Schema([(VALUE_COLUMN, pl.String())])
