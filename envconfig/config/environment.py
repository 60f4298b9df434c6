"""Environment accessor: the single place where variables are looked up."""

import os
from typing import Mapping, Optional


def current_environ(environ: Optional[Mapping[str, str]] = None) -> Mapping[str, str]:
    """Return the injected mapping, or the live process environment."""
    return os.environ if environ is None else environ


def resolve(name: str, fallback: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Look up ``name`` and fall back when it is unset or empty.

    Args:
        name: Variable name
        fallback: Returned verbatim when the variable is unset or empty
        environ: Mapping to read from, defaults to os.environ

    Returns:
        The variable's value, or ``fallback``
    """
    value = current_environ(environ).get(name, '')
    if value:
        return value
    return fallback
