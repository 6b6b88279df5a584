"""
Transformation Layer - Pure, Deterministic Functions

This layer contains all sequence transformations.
- Pure functions (input → output)
- No I/O operations
- Unit testable
- Deterministic results
"""

from .arrays import (
    all_rgb,
    book_end_list,
    count_short_words,
    inject_positive,
    make_math,
    remove_dollars,
    shout_if_exclaiming,
    strings_to_integers,
    triple_numbers,
)

__all__ = [
    "all_rgb",
    "book_end_list",
    "count_short_words",
    "inject_positive",
    "make_math",
    "remove_dollars",
    "shout_if_exclaiming",
    "strings_to_integers",
    "triple_numbers",
]
