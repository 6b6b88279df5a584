"""
Integer Parsing - Total, Fallback-to-Zero

Prefix parsing of decimal integers out of free text. Parsing never fails:
callers get a ParseResult and collapse it to an int straight away.

Only base 10 is read: "0x1A" parses as 0 (the leading "0"), not 26.
"""

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Leading whitespace, optional sign, then ASCII digits. Anything after is ignored.
INTEGER_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")

DOLLAR = "$"


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing a leading integer"""

    valid: bool
    value: int = 0


def parse_int(text: str) -> ParseResult:
    """
    Parse the leading decimal integer of a string

    Args:
        text: Text such as "42", "  -7 apples" or "abc"

    Returns:
        ParseResult: valid=False with value 0 when no digits lead the text
    """
    match = INTEGER_PREFIX.match(text)
    if match is None:
        return ParseResult(valid=False)
    try:
        return ParseResult(valid=True, value=int(match.group(1)))
    except ValueError as e:
        # int() refuses digit strings past sys.get_int_max_str_digits()
        logger.warning(f"Integer prefix too long to convert, using 0: {e}")
        return ParseResult(valid=False)


def parse_int_or_zero(text: str) -> int:
    return parse_int(text).value


def strip_dollar(text: str) -> str:
    """Drop exactly one leading "$" if present"""
    return text[len(DOLLAR) :] if text.startswith(DOLLAR) else text
