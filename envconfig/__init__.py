"""
envconfig - Environment Configuration
=====================================

Reads process environment variables, optionally seeded from a .env file, and
exposes typed accessors plus a dataclass populator driven by field metadata.

Modules:
- config: Accessors, .env loading and struct population
- utils: Parsers and logging setup
- errors: Exception hierarchy
"""

__version__ = "1.0.0"

from .config import (
    DEFAULT_ENV_FILE,
    ENV_FILE_KEY,
    Int32,
    Int64,
    describe_fields,
    env_field,
    get,
    get_bool,
    get_int,
    get_int64,
    get_int_slice,
    get_int64_slice,
    load,
    load_env_file,
    load_struct,
    to_list,
)
from .errors import (
    EnvConfigError,
    FieldError,
    LengthMismatchError,
    ParseError,
    PreconditionError,
    UnsupportedKindError,
)
from .utils.logger import LoggingSettings, setup_logging

__all__ = [
    "DEFAULT_ENV_FILE",
    "ENV_FILE_KEY",
    "Int32",
    "Int64",
    "describe_fields",
    "env_field",
    "get",
    "get_bool",
    "get_int",
    "get_int64",
    "get_int_slice",
    "get_int64_slice",
    "load",
    "load_env_file",
    "load_struct",
    "to_list",
    "EnvConfigError",
    "FieldError",
    "LengthMismatchError",
    "ParseError",
    "PreconditionError",
    "UnsupportedKindError",
    "LoggingSettings",
    "setup_logging",
]
