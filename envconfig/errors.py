"""
Errors
======

Exception hierarchy raised by the struct loader and the parsers.

The standalone ``get*`` accessors never raise these; they fall back to the
caller's default instead.
"""

from typing import Optional


class EnvConfigError(Exception):
    """Base class for all envconfig errors."""


class PreconditionError(EnvConfigError, TypeError):
    """The populate target is not a mutable dataclass instance."""


class ParseError(EnvConfigError, ValueError):
    """A scalar value or collection token could not be parsed."""

    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.index = index


class LengthMismatchError(ParseError):
    """Token count does not match the length of a fixed-size collection."""

    def __init__(self, got: int, expected: int):
        super().__init__(f"array length mismatch: got {got} values, expected {expected}")
        self.got = got
        self.expected = expected


class UnsupportedKindError(EnvConfigError, TypeError):
    """An annotated field has a type the loader cannot populate."""


class FieldError(EnvConfigError):
    """
    Failure while populating a single field.

    Attributes:
        variable: Environment variable name of the failing field
        field: Attribute name on the target
        cause: Underlying error
    """

    def __init__(self, variable: str, field: str, cause: Exception):
        super().__init__(f"env {variable}: {cause}")
        self.variable = variable
        self.field = field
        self.cause = cause


__all__ = [
    'EnvConfigError',
    'PreconditionError',
    'ParseError',
    'LengthMismatchError',
    'UnsupportedKindError',
    'FieldError',
]
