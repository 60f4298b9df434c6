"""
Parsing Utilities
=================

Scalar and collection parsers shared by the standalone accessors and the
struct loader. All parsers raise ``ParseError`` (or a subclass) on bad input;
callers decide whether to propagate or fall back.
"""

import re
from typing import List, Optional

from ..errors import LengthMismatchError, ParseError

INT32_BITS = 32
INT64_BITS = 64

_INT_PATTERN = re.compile(r'[+-]?[0-9]+')

_TRUE_TOKENS = frozenset({'1', 't', 'T', 'TRUE', 'true', 'True'})
_FALSE_TOKENS = frozenset({'0', 'f', 'F', 'FALSE', 'false', 'False'})


def int_bounds(bits: int) -> tuple:
    """Return the inclusive (min, max) range of a signed integer of the given width."""
    if bits not in (INT32_BITS, INT64_BITS):
        raise ValueError(f"Unsupported integer width: {bits}")
    limit = 1 << (bits - 1)
    return -limit, limit - 1


def parse_bool(value: str) -> bool:
    """
    Parse a boolean token.

    Accepted: 1, t, T, TRUE, true, True and 0, f, F, FALSE, false, False.

    Args:
        value: Raw string

    Returns:
        Parsed boolean

    Raises:
        ParseError: If the token is not in the accepted set
    """
    if value in _TRUE_TOKENS:
        return True
    if value in _FALSE_TOKENS:
        return False
    raise ParseError(f'parsing "{value}": invalid syntax')


def parse_int(value: str, bits: int = INT64_BITS) -> int:
    """
    Parse a base-10 signed integer that must fit in ``bits`` bits.

    Whitespace, underscores and non-ASCII digits are rejected.

    Args:
        value: Raw string
        bits: Target width, 32 or 64

    Returns:
        Parsed integer

    Raises:
        ParseError: On invalid syntax or overflow
    """
    if not _INT_PATTERN.fullmatch(value):
        raise ParseError(f'parsing "{value}": invalid syntax')

    parsed = int(value)
    low, high = int_bounds(bits)
    if parsed < low or parsed > high:
        raise ParseError(f'parsing "{value}": value out of range')
    return parsed


def parse_int_list(value: str, bits: int = INT64_BITS, length: Optional[int] = None) -> List[int]:
    """
    Parse a comma-separated list of integers.

    Tokens are trimmed; an empty token becomes 0, so "1,,3" gives [1, 0, 3].
    An empty input gives an empty list, or ``length`` zeros for a fixed-size
    target.

    Args:
        value: Raw comma-separated string
        bits: Element width, 32 or 64
        length: Required element count for fixed-size targets, None for variable size

    Returns:
        Parsed integers in input order

    Raises:
        LengthMismatchError: If ``length`` is given and the token count differs
        ParseError: If a token is not a valid integer, with ``index`` set
    """
    if value == '':
        return [0] * length if length is not None else []

    parts = value.split(',')

    if length is not None and len(parts) != length:
        raise LengthMismatchError(len(parts), length)

    result = []
    for i, part in enumerate(parts):
        part = part.strip()
        if part == '':
            result.append(0)
            continue
        try:
            result.append(parse_int(part, bits))
        except ParseError as e:
            raise ParseError(f"invalid int value at index {i}: {e}", index=i) from e

    return result


def split_list(value: str, separator: str) -> List[str]:
    """
    Split a string on ``separator`` without trimming.

    An empty string yields [""]; an empty separator splits into characters.
    """
    if separator == '':
        return list(value)
    return value.split(separator)


_SIZE_PATTERN = re.compile(r'([0-9]+(?:\.[0-9]+)?)\s*(KB|MB|GB|B)?', re.IGNORECASE)
_SIZE_UNITS = {'': 1, 'B': 1, 'KB': 1024, 'MB': 1024 ** 2, 'GB': 1024 ** 3}


def parse_size(value: str) -> int:
    """
    Parse a byte size such as '512', '2KB', '10MB' or '1gb'.

    Raises:
        ParseError: If the value is not a number with an optional B/KB/MB/GB suffix
    """
    match = _SIZE_PATTERN.fullmatch(value.strip())
    if not match:
        raise ParseError(f'parsing "{value}": invalid size')
    number, unit = match.groups()
    return int(float(number) * _SIZE_UNITS[(unit or '').upper()])
