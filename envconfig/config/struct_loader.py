"""
Struct Loader
=============

Populates a dataclass instance from environment variables, driven by the
``env`` and ``default`` field metadata (see ``fields.py``).

Supported field types: str, bool, int, Int32, Int64, List[int], Tuple[int, ...]
and fixed-size tuples such as Tuple[int, int, int].

Failure handling is fail-fast: the first field that cannot be parsed stops
population with a ``FieldError`` naming its variable. Fields already written
keep their new values; later fields are left untouched.
"""

import dataclasses
import logging
from typing import Any, Mapping, Optional, TypeVar

from ..errors import EnvConfigError, FieldError, PreconditionError, UnsupportedKindError
from ..utils.parsing import parse_bool, parse_int, parse_int_list
from .environment import resolve
from .fields import FieldDescriptor, FieldKind, describe_fields

logger = logging.getLogger(__name__)

T = TypeVar('T')


def load_struct(cfg: T, environ: Optional[Mapping[str, str]] = None) -> T:
    """
    Load configuration from environment variables into a dataclass instance.

    Example:
        @dataclass
        class Config:
            host: str = env_field("HOST", "localhost", initial="")
            port: int = env_field("PORT", "8080", initial=0)

        cfg = load_struct(Config())

    Args:
        cfg: Mutable dataclass instance, modified in place
        environ: Mapping to read from, defaults to os.environ

    Returns:
        The same ``cfg`` object

    Raises:
        PreconditionError: If ``cfg`` is not a mutable dataclass instance
        FieldError: If a field value cannot be parsed or its type is unsupported
    """
    _check_target(cfg)

    populated = 0
    for descriptor in describe_fields(cfg):
        if descriptor.is_inert:
            continue

        raw = resolve(descriptor.env_name, descriptor.default, environ)
        try:
            setattr(cfg, descriptor.name, convert(descriptor, raw))
        except EnvConfigError as e:
            raise FieldError(descriptor.env_name, descriptor.name, e) from e
        populated += 1

    logger.debug(f"Populated {populated} field(s) of {type(cfg).__name__} from environment")
    return cfg


def _check_target(cfg: Any) -> None:
    if cfg is None:
        raise PreconditionError("cfg must be a dataclass instance, got None")
    if isinstance(cfg, type):
        raise PreconditionError(f"cfg must be a dataclass instance, not the class {cfg.__name__}")
    if not dataclasses.is_dataclass(cfg):
        raise PreconditionError(f"cfg must be a dataclass instance, got {type(cfg).__name__}")
    if type(cfg).__dataclass_params__.frozen:
        raise PreconditionError(f"cfg must be mutable, {type(cfg).__name__} is a frozen dataclass")


def convert(descriptor: FieldDescriptor, value: str) -> Any:
    """
    Convert an already-resolved raw string into the field's declared type.

    Empty values give the type's zero value: "", False, 0, an empty
    collection, or ``length`` zeros for a fixed-size tuple.
    """
    kind = descriptor.kind

    if kind is FieldKind.TEXT:
        return value

    if kind is FieldKind.BOOL:
        if value == '':
            return False
        return parse_bool(value)

    if kind in (FieldKind.INT, FieldKind.INT64):
        if value == '':
            return 0
        return parse_int(value, descriptor.width)

    if kind in (FieldKind.ARRAY, FieldKind.SLICE):
        values = parse_int_list(value, descriptor.width, descriptor.length)
        return descriptor.container(values)

    raise UnsupportedKindError(descriptor.reason or f"unsupported kind: {descriptor.type_name}")


__all__ = ['load_struct', 'convert']
