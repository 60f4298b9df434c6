"""
Utilities Module
================

Parsing helpers and logging setup.
"""

from .parsing import parse_bool, parse_int, parse_int_list, parse_size, split_list

__all__ = [
    'parse_bool',
    'parse_int',
    'parse_int_list',
    'parse_size',
    'split_list'
]
