"""
Standalone Accessors
====================

Typed lookups of single environment variables. These never raise: an unset
or empty variable, or a value that does not parse, yields the caller's default.

Example:
    PORTS=8080,8081,8082
    ports = get_int_slice("PORTS", [3000, 3001])
"""

import logging
from typing import List, Mapping, Optional

from ..errors import ParseError
from ..utils.parsing import INT64_BITS, parse_bool, parse_int, parse_int_list, split_list
from .environment import resolve

logger = logging.getLogger(__name__)


def get(key: str, default: str, *, environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the variable's value, or ``default`` if it is unset or empty."""
    return resolve(key, default, environ)


def get_bool(key: str, default: bool, *, environ: Optional[Mapping[str, str]] = None) -> bool:
    """
    Return a boolean variable, or ``default`` if it is unset, empty or invalid.

    Supported values: true, false, 1, 0, t, f, T, F, TRUE, FALSE, True, False
    """
    value = resolve(key, '', environ)
    if value == '':
        return default

    try:
        return parse_bool(value)
    except ParseError as e:
        logger.debug(f"Invalid boolean in {key}, using default {default}: {e}")
        return default


def get_int(key: str, default: int, *, environ: Optional[Mapping[str, str]] = None) -> int:
    """Return an integer variable, or ``default`` if it is unset, empty or invalid."""
    return _get_int(key, default, INT64_BITS, environ)


def get_int64(key: str, default: int, *, environ: Optional[Mapping[str, str]] = None) -> int:
    """Return a 64-bit integer variable, or ``default`` if it is unset, empty or invalid."""
    return _get_int(key, default, INT64_BITS, environ)


def _get_int(key, default, bits, environ):
    value = resolve(key, '', environ)
    if value == '':
        return default

    try:
        return parse_int(value, bits)
    except ParseError as e:
        logger.debug(f"Invalid integer in {key}, using default {default}: {e}")
        return default


def get_int_slice(key: str, default: List[int], *, environ: Optional[Mapping[str, str]] = None) -> List[int]:
    """
    Return a comma-separated list of integers.

    Spaces around values are trimmed and empty elements read as 0. The default
    is returned if the variable is unset, empty, or contains an invalid value.
    """
    return _get_int_slice(key, default, INT64_BITS, environ)


def get_int64_slice(key: str, default: List[int], *, environ: Optional[Mapping[str, str]] = None) -> List[int]:
    """
    Return a comma-separated list of 64-bit integers.

    Example:
        MAX_SIZES=1024,2048,4096
        max_sizes = get_int64_slice("MAX_SIZES", [512, 1024])
    """
    return _get_int_slice(key, default, INT64_BITS, environ)


def _get_int_slice(key, default, bits, environ):
    value = resolve(key, '', environ)
    if value == '':
        return default

    try:
        return parse_int_list(value, bits)
    except ParseError as e:
        logger.debug(f"Invalid integer list in {key}, using default {default}: {e}")
        return default


def to_list(value: str, separator: str) -> List[str]:
    """Split ``value`` on ``separator``, e.g. to_list("a;b;c", ";") -> ["a", "b", "c"]."""
    return split_list(value, separator)


__all__ = [
    'get',
    'get_bool',
    'get_int',
    'get_int64',
    'get_int_slice',
    'get_int64_slice',
    'to_list',
]
