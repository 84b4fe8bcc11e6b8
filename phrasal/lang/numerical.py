"""Numeric conversions for phrasal. Integers and decimals only ever enter a program as text (a literal token or a line
read by `complem`), so this module turns text into numbers the way a C++ stream program would: the longest numeric
prefix is used and anything after it is ignored. Text without a numeric prefix is a fatal GenericException.

Values going the other way are formatted as a C++ stream would print them (decimals use six significant digits).
"""

import re

from phrasal.lang.error import GenericException


INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1

_INTEGER_PREFIX = re.compile(r"\s*([+-]?\d+)")
_DECIMAL_PREFIX = re.compile(r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))", re.IGNORECASE)


def integer(text):
    """Returns int parsed from the leading integer in text."""
    match = _INTEGER_PREFIX.match(text)
    try:
        assert match is not None
        num = int(match.group(1))
    except (AssertionError, ValueError) as err:
        raise GenericException("'{}' is not a valid integer", text, diagnosis=False) from err

    if not INT_MIN <= num <= INT_MAX:
        raise GenericException("'{}' is out of integer range", text, diagnosis=False)
    return num


def decimal(text):
    """Returns float parsed from the leading decimal in text."""
    match = _DECIMAL_PREFIX.match(text)
    try:
        assert match is not None
        return float(match.group(1))
    except (AssertionError, ValueError) as err:
        raise GenericException("'{}' is not a valid decimal", text, diagnosis=False) from err


def display(value):
    """Returns str of value as printed by `phrase`."""
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)
