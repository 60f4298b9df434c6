"""Configuration package.

Environment lookups, typed accessors, the .env loader and the dataclass
struct loader.
"""
from .environment import resolve  # noqa: F401
from .getters import get, get_bool, get_int, get_int64, get_int_slice, get_int64_slice, to_list  # noqa: F401
from .fields import Int32, Int64, FieldKind, FieldDescriptor, env_field, describe_fields  # noqa: F401
from .struct_loader import load_struct  # noqa: F401
from .env_loader import DEFAULT_ENV_FILE, ENV_FILE_KEY, load, load_env_file  # noqa: F401
