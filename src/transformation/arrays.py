"""
Array Transformers - Sequence Exercises

Pure functions over lists of numbers and strings.
Every function returns a new list (or a scalar) and leaves its input alone.
"""

import math
import operator
from decimal import Decimal
from functools import reduce
from typing import List, Sequence, Union
from .parsing import parse_int_or_zero, strip_dollar
import logging

logger = logging.getLogger(__name__)

Number = Union[int, float]

RGB_COLORS = frozenset({"red", "blue", "green"})
SHORT_WORD_LIMIT = 4

# Plain decimal rendering for 1e-7 <= |x| < 1e21, exponent form outside
MAX_DECIMAL_EXPONENT = 21
MIN_DECIMAL_EXPONENT = -6


def book_end_list(numbers: Sequence[Number]) -> List[Number]:
    """
    Keep only the first and last number

    Args:
        numbers: Numbers to pick from

    Returns:
        List: [] when empty, [x, x] for a single element, else [first, last]
    """
    logger.debug(f"book_end_list over {len(numbers)} numbers")

    if not numbers:
        return []
    return [numbers[0], numbers[-1]]


def triple_numbers(numbers: Sequence[Number]) -> List[Number]:
    """Multiply every number by 3, keeping order"""
    logger.debug(f"triple_numbers over {len(numbers)} numbers")
    return [value * 3 for value in numbers]


def strings_to_integers(numbers: Sequence[str]) -> List[int]:
    """
    Parse each string's leading integer, using 0 when there is none

    Args:
        numbers: Text values such as "12", " -3px" or "abc"

    Returns:
        List[int]: One integer per input string
    """
    logger.debug(f"strings_to_integers over {len(numbers)} strings")
    return [parse_int_or_zero(text) for text in numbers]


def remove_dollars(amounts: Sequence[str]) -> List[int]:
    """Drop a single leading "$" from each amount, then parse as integers"""
    logger.debug(f"remove_dollars over {len(amounts)} amounts")
    return [parse_int_or_zero(strip_dollar(amount)) for amount in amounts]


def shout_if_exclaiming(messages: Sequence[str]) -> List[str]:
    """
    Uppercase exclamations, then drop questions

    Args:
        messages: Messages to process

    Returns:
        List[str]: Messages ending in "!" uppercased; messages ending in "?"
        (after uppercasing) removed. Order is preserved.
    """
    logger.debug(f"shout_if_exclaiming over {len(messages)} messages")

    shouted = [
        message.upper() if message.endswith("!") else message for message in messages
    ]
    return [message for message in shouted if not message.endswith("?")]


def count_short_words(words: Sequence[str]) -> int:
    """Count words with fewer than 4 characters (counted as Unicode code points)"""
    count = sum(1 for word in words if len(word) < SHORT_WORD_LIMIT)
    logger.debug(f"count_short_words found {count} of {len(words)}")
    return count


def all_rgb(colors: Sequence[str]) -> bool:
    """True when every color is exactly "red", "blue" or "green" (vacuous on [])"""
    result = all(color in RGB_COLORS for color in colors)
    logger.debug(f"all_rgb over {len(colors)} colors: {result}")
    return result


def _add_left_to_right(values: Sequence[Number]) -> Number:
    # Plain fold; sum() compensates float rounding on 3.12+
    return reduce(operator.add, values, 0)


def _render_float(value: float) -> str:
    """
    Render a float in ECMAScript Number-to-String form

    Args:
        value: Float to render

    Returns:
        str: Shortest round-trip digits, e.g. 3.0 -> "3", 1e-05 -> "0.00001",
        1e21 -> "1e+21", inf -> "Infinity", nan -> "NaN"
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()

    # value == 0.<digits> * 10**point
    point = len(digit_tuple) + exponent
    digits = "".join(str(digit) for digit in digit_tuple).rstrip("0")

    if len(digits) <= point <= MAX_DECIMAL_EXPONENT:
        return sign + digits + "0" * (point - len(digits))
    if 0 < point <= MAX_DECIMAL_EXPONENT:
        return sign + digits[:point] + "." + digits[point:]
    if MIN_DECIMAL_EXPONENT < point <= 0:
        return sign + "0." + "0" * -point + digits

    power = point - 1
    mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
    return f"{sign}{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"


def _render_number(value: Number) -> str:
    if isinstance(value, float):
        return _render_float(value)
    return str(value)


def make_math(addends: Sequence[Number]) -> str:
    """
    Render an addition and its result

    Args:
        addends: Numbers to add

    Returns:
        str: "<sum>=<a+b+...>", e.g. [1, 2, 3] -> "6=1+2+3" and [] -> "0=0".
        Negative addends are joined as-is, so [1, -2] -> "-1=1+-2".
    """
    total = _add_left_to_right(addends)
    expression = "+".join(_render_number(value) for value in addends) or "0"

    logger.debug(f"make_math rendered {len(addends)} addends")
    return f"{_render_number(total)}={expression}"


def inject_positive(values: Sequence[Number]) -> List[Number]:
    """
    Insert a running sum after the first negative number

    Args:
        values: Numbers to scan

    Returns:
        List: Copy of values with the sum of everything before the first
        negative inserted right after it. Without a negative, the total
        sum is appended instead.
    """
    result = list(values)

    for index, value in enumerate(values):
        if value < 0:
            prefix_sum = _add_left_to_right(values[:index])
            result.insert(index + 1, prefix_sum)
            logger.debug(f"inject_positive inserted {prefix_sum} at {index + 1}")
            return result

    result.append(_add_left_to_right(values))
    logger.debug("inject_positive found no negative, appended total")
    return result
