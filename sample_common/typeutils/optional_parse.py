"""
Parsing helpers that report failure as an absent value rather than a sentinel.

`parse_int` returns `None` when the text is not a valid 32-bit integer, which keeps
"did not parse" distinct from a legitimate zero.
"""

import re

INT32_MIN = -2**31
INT32_MAX = 2**31 - 1

# Optional sign followed by ASCII digits only; no underscores, radix prefixes or decimals
_INT_PATTERN = re.compile(r"[+-]?[0-9]+", flags=re.ASCII)

# Only ASCII whitespace may surround the number; NBSP and other Unicode spaces may not
_SURROUNDING_WHITESPACE = " \t\n\v\f\r"

def parse_int(text: str | None) -> int | None:
    """
    Parse a signed 32-bit decimal integer.

    Leading and trailing ASCII whitespace (space, tab, line feed, vertical tab, form feed,
    carriage return) is ignored; other Unicode spaces such as NBSP are not. The remainder must
    be an optional `+`/`-` sign followed by one or more ASCII digits, and the value must lie
    within [INT32_MIN, INT32_MAX].

    Args:
        text (str | None):
            The text to parse.

    Returns:
        int | None:
            The parsed value, or None if the text is absent, malformed or out of range.

    Example:
        >>> parse_int(" -42 ")
        -42

        >>> parse_int("0")
        0

        >>> parse_int("1_000") is None
        True
    """
    if text is None:
        return None

    stripped = text.strip(_SURROUNDING_WHITESPACE)
    if not _INT_PATTERN.fullmatch(stripped):
        return None

    value = int(stripped)
    if not INT32_MIN <= value <= INT32_MAX:
        return None
    return value

def values_match(number: int, text: str | None) -> bool:
    """
    Check whether `text` parses to the same integer as `number`.

    Args:
        number (int):
            The expected value.
        text (str | None):
            The text to parse with `parse_int`.

    Returns:
        bool:
            True if the text parses and equals `number`; False otherwise, including when the
            text does not parse.
    """
    parsed = parse_int(text)
    if parsed is None:
        return False
    return parsed == number

__all__ = [
    "INT32_MIN",
    "INT32_MAX",
    "parse_int",
    "values_match",
]
