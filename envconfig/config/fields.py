"""
Field Descriptors
=================

Builds the per-field table the struct loader works from. A target record is a
dataclass whose fields carry two optional metadata entries:

- ``env``: name of the environment variable (fields without it are skipped)
- ``default``: raw default string, encoded like an environment value

Example:
    @dataclass
    class ServerConfig:
        host: str = env_field("HOST", "localhost", initial="")
        port: int = env_field("PORT", "8080", initial=0)
        ports: List[int] = env_field("PORTS", "3000,3001", default_factory=list)
"""

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, NewType, Optional, Tuple, get_args, get_origin, get_type_hints

from ..utils.parsing import INT32_BITS, INT64_BITS

ENV_TAG = 'env'
DEFAULT_TAG = 'default'

# Width markers for integer annotations. Plain ``int`` is 64 bits wide.
Int32 = NewType('Int32', int)
Int64 = NewType('Int64', int)

_ELEMENT_WIDTHS = {
    int: INT64_BITS,
    Int32: INT32_BITS,
    Int64: INT64_BITS,
}


class FieldKind(Enum):
    """Declared kind of a target field."""
    TEXT = "text"
    BOOL = "bool"
    INT = "int"
    INT64 = "int64"
    ARRAY = "array"          # fixed-size integer collection
    SLICE = "slice"          # variable-size integer collection
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class FieldDescriptor:
    """Metadata for one field of a target record."""
    name: str
    kind: FieldKind
    type_name: str
    env_name: Optional[str] = None
    default: str = ""
    width: int = INT64_BITS
    length: Optional[int] = None     # ARRAY only
    container: Optional[type] = None  # list or tuple for collections
    reason: str = ""                 # UNSUPPORTED only

    @property
    def is_inert(self) -> bool:
        return not self.env_name


def env_field(env: str, default: Optional[str] = None, *, initial: Any = dataclasses.MISSING, **field_kwargs):
    """
    Declare a dataclass field bound to an environment variable.

    Args:
        env: Environment variable name
        default: Raw default used when the variable is unset or empty
        initial: Value the field holds before population
        **field_kwargs: Passed through to ``dataclasses.field`` (e.g. default_factory)

    Returns:
        A dataclasses.Field
    """
    metadata = dict(field_kwargs.pop('metadata', None) or {})
    metadata[ENV_TAG] = env
    if default is not None:
        metadata[DEFAULT_TAG] = default
    if initial is not dataclasses.MISSING:
        field_kwargs['default'] = initial
    return dataclasses.field(metadata=metadata, **field_kwargs)


def _type_name(hint: Any) -> str:
    if isinstance(hint, str):
        return hint
    return getattr(hint, '__name__', None) or repr(hint)


def classify(hint: Any) -> Tuple[FieldKind, dict]:
    """
    Map a resolved type hint to a field kind plus descriptor attributes.

    Never raises; unsupported hints come back as ``FieldKind.UNSUPPORTED``
    with a ``reason``.
    """
    if hint is str:
        return FieldKind.TEXT, {}
    if hint is bool:
        return FieldKind.BOOL, {}
    if hint is int:
        return FieldKind.INT, {'width': INT64_BITS}
    if hint is Int32:
        return FieldKind.INT, {'width': INT32_BITS}
    if hint is Int64:
        return FieldKind.INT64, {'width': INT64_BITS}

    origin = get_origin(hint)
    args = get_args(hint)

    if origin is list and len(args) == 1:
        return _collection(FieldKind.SLICE, args[0], list)

    if origin is tuple and args and args != ((),):
        if len(args) == 2 and args[1] is Ellipsis:
            return _collection(FieldKind.SLICE, args[0], tuple)
        if all(arg is args[0] for arg in args):
            kind, attrs = _collection(FieldKind.ARRAY, args[0], tuple)
            if kind is FieldKind.ARRAY:
                attrs['length'] = len(args)
            return kind, attrs

    return FieldKind.UNSUPPORTED, {'reason': f"unsupported kind: {_type_name(hint)}"}


def _collection(kind: FieldKind, element: Any, container: type) -> Tuple[FieldKind, dict]:
    width = _ELEMENT_WIDTHS.get(element)
    if width is None:
        return FieldKind.UNSUPPORTED, {
            'reason': f"unsupported slice/array element type: {_type_name(element)}",
        }
    return kind, {'width': width, 'container': container}


def _resolve_hint(record_type: type, f: dataclasses.Field) -> Any:
    """
    Resolve one field's annotation in the namespace of the class declaring it.

    String annotations (``from __future__ import annotations``) are evaluated
    against that class's module globals; other fields are not looked at.

    Raises:
        NameError: If the annotation names something not defined at runtime
    """
    if not isinstance(f.type, str):
        return f.type

    owner = record_type
    for base in record_type.__mro__:
        annotations = base.__dict__.get('__annotations__')
        if annotations is None:
            annotations = getattr(base, '__annotations__', None) or {}
        if f.name in annotations:
            owner = base
            break

    holder = type(owner.__name__, (), {
        '__annotations__': {f.name: f.type},
        '__module__': owner.__module__,
    })
    return get_type_hints(holder, localns=dict(vars(owner)))[f.name]


def describe_fields(record: Any) -> List[FieldDescriptor]:
    """
    Build the descriptor table for a dataclass type or instance.

    Fields are returned in declaration order. Annotations are only resolved
    for fields that carry an ``env`` entry; one that cannot be resolved is
    recorded as UNSUPPORTED and fails when the loader reaches it.
    """
    record_type = record if isinstance(record, type) else type(record)

    descriptors = []
    for f in dataclasses.fields(record_type):
        env_name = f.metadata.get(ENV_TAG) or None
        hint = f.type
        if env_name is None:
            kind, attrs = classify(hint)
        else:
            try:
                hint = _resolve_hint(record_type, f)
            except (NameError, TypeError) as e:
                kind, attrs = FieldKind.UNSUPPORTED, {
                    'reason': f"unresolvable type annotation {_type_name(hint)}: {e}",
                }
            else:
                kind, attrs = classify(hint)
        descriptors.append(FieldDescriptor(
            name=f.name,
            kind=kind,
            type_name=_type_name(hint),
            env_name=env_name,
            default=f.metadata.get(DEFAULT_TAG, ''),
            **attrs,
        ))
    return descriptors


__all__ = [
    'ENV_TAG',
    'DEFAULT_TAG',
    'Int32',
    'Int64',
    'FieldKind',
    'FieldDescriptor',
    'env_field',
    'classify',
    'describe_fields',
]
