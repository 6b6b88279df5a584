"""
Frame Transformer Tests - the array rules over polars columns
"""

import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import polars as pl
import pytest
from src.transformation.frames import (
    all_rgb_column,
    count_short_words_column,
    inject_positive_column,
    make_math_column,
    numbers_frame,
    remove_dollars_column,
    shout_if_exclaiming_frame,
    strings_to_integers_column,
    text_frame,
    triple_column,
)
from src.transformation.schemas import (
    FLOAT_VALUES_SCHEMA,
    INTEGER_VALUES_SCHEMA,
    TEXT_VALUES_SCHEMA,
)


def test_frame_builders():
    """Test builders pick the schema from the values"""
    print("🧪 Testing frame builders...")

    assert numbers_frame([1, 2, 3]).schema == INTEGER_VALUES_SCHEMA
    assert numbers_frame([1, 2.5]).schema == FLOAT_VALUES_SCHEMA
    assert numbers_frame([]).schema == INTEGER_VALUES_SCHEMA
    assert text_frame(["a", "b"]).schema == TEXT_VALUES_SCHEMA

    with pytest.raises(ValueError):
        numbers_frame([1, "2"])

    with pytest.raises(ValueError):
        text_frame(["a", 2])

    print("✅ Frame builders passed")


def test_numbers_frame_rejects_ints_outside_int64():
    """Test oversized ints raise ValueError instead of a polars overflow"""
    assert numbers_frame([2**63 - 1, -(2**63)])["value"].to_list() == [
        2**63 - 1,
        -(2**63),
    ]

    with pytest.raises(ValueError, match="outside the Int64 range"):
        numbers_frame([1, 2**63])

    with pytest.raises(ValueError, match="outside the Int64 range"):
        numbers_frame([-(2**63) - 1])


def test_triple_column():
    df = numbers_frame([1, 2, 3])
    result_df = triple_column(df, "value")

    assert result_df["value"].to_list() == [3, 6, 9]
    assert df["value"].to_list() == [1, 2, 3], "Input frame must not change"


def test_triple_column_rejects_text():
    with pytest.raises(ValueError, match="must be numeric"):
        triple_column(text_frame(["1"]), "value")


def test_strings_to_integers_column():
    """Test prefix parsing, fallback to 0 and Int64 overflow"""
    df = text_frame(["1", "2", "abc", "  -7x", "+8", "+-1", "99999999999999999999"])
    result_df = strings_to_integers_column(df, "value")

    assert result_df.schema["value"] == pl.Int64
    assert result_df["value"].to_list() == [1, 2, 0, -7, 8, 0, 0]


def test_strings_to_integers_column_missing_column():
    with pytest.raises(ValueError, match="not found"):
        strings_to_integers_column(text_frame(["1"]), "amount")


def test_remove_dollars_column():
    df = text_frame(["$1", "2", "$abc", "$$5"])
    result_df = remove_dollars_column(df, "value")

    assert result_df["value"].to_list() == [1, 2, 0, 0]
    assert df["value"].to_list() == ["$1", "2", "$abc", "$$5"]


def test_shout_if_exclaiming_frame():
    """Test rows are uppercased first and then filtered"""
    df = pl.DataFrame(
        {"message": ["hi!", "bye?", "ok", None, "why?!"], "id": [1, 2, 3, 4, 5]}
    )
    result_df = shout_if_exclaiming_frame(df, "message")

    assert result_df["message"].to_list() == ["HI!", "ok", None, "WHY?!"]
    assert result_df["id"].to_list() == [1, 3, 4, 5]
    assert df.height == 5


def test_count_short_words_column():
    assert count_short_words_column(text_frame(["a", "dog", "house"]), "value") == 2
    assert count_short_words_column(text_frame([]), "value") == 0


def test_all_rgb_column():
    assert all_rgb_column(text_frame([]), "value") is True
    assert all_rgb_column(text_frame(["red", "blue"]), "value") is True
    assert all_rgb_column(text_frame(["red", "pink"]), "value") is False

    with_null = pl.DataFrame({"color": ["red", None]}, schema={"color": pl.String})
    assert all_rgb_column(with_null, "color") is False


def test_make_math_column():
    assert make_math_column(numbers_frame([1, 2, 3]), "value") == "6=1+2+3"
    assert make_math_column(numbers_frame([]), "value") == "0=0"
    assert make_math_column(numbers_frame([1, -2]), "value") == "-1=1+-2"


def test_inject_positive_column():
    assert inject_positive_column(numbers_frame([1, 9, -5, 7]), "value") == [
        1,
        9,
        -5,
        10,
        7,
    ]
    assert inject_positive_column(numbers_frame([1, 9, 7]), "value") == [1, 9, 7, 17]


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
