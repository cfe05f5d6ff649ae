"""
Response normalization.

Every record declares a static ``FIELDS`` table of ``FieldSpec`` entries.
``normalize`` walks that table against a decoded JSON body and builds frozen
record instances, coercing scalars and recursing into embedded records.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, ClassVar, Dict, List, Mapping, Optional, Protocol, Tuple, Type, TypeVar, Union

from .errors import ShapeMismatchError, TypeCoercionError
from .types import coerce_enum, coerce_epoch


R = TypeVar("R")

_INTEGER_RE = re.compile(r"^[+-]?\d+$")


class FieldKind(str, Enum):
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    MAP = "map"
    STRING_LIST = "string_list"
    EPOCH = "epoch"
    ENUM = "enum"
    EMBED_ONE = "embed_one"
    EMBED_MANY = "embed_many"


@dataclass(frozen=True)
class FieldSpec:
    """One declared field of a record: its name, kind and nested type."""

    name: str
    kind: FieldKind = FieldKind.STRING
    record: Optional[type] = None
    enum: Optional[Type[Enum]] = None

    def __post_init__(self) -> None:
        if self.kind in (FieldKind.EMBED_ONE, FieldKind.EMBED_MANY) and self.record is None:
            raise ValueError(f"Embedded field '{self.name}' requires a record type")
        if self.kind is FieldKind.ENUM and self.enum is None:
            raise ValueError(f"Enum field '{self.name}' requires an enum type")

    @property
    def default(self) -> Any:
        if self.kind in (FieldKind.EMBED_MANY, FieldKind.STRING_LIST):
            return ()
        return None


class Normalizable(Protocol):
    FIELDS: ClassVar[Tuple[FieldSpec, ...]]


def _to_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    raise TypeCoercionError(value, "expected a string")


def _to_integer(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeCoercionError(value, "expected an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and _INTEGER_RE.match(value.strip()):
        try:
            return int(value.strip())
        except ValueError as exc:
            raise TypeCoercionError(value, "integer out of range") from exc
    raise TypeCoercionError(value, "expected an integer")


def _to_float(value: Any) -> float:
    if isinstance(value, bool):
        raise TypeCoercionError(value, "expected a number")
    if not isinstance(value, (int, float, str)):
        raise TypeCoercionError(value, "expected a number")
    try:
        result = float(value.strip() if isinstance(value, str) else value)
    except (ValueError, OverflowError) as exc:
        raise TypeCoercionError(value, "expected a finite number") from exc
    if not math.isfinite(result):
        raise TypeCoercionError(value, "expected a finite number")
    return result


def _to_boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise TypeCoercionError(value, "expected a boolean")


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


_SCALAR_COERCERS: Dict[FieldKind, Callable[[Any], Any]] = {
    FieldKind.STRING: _to_string,
    FieldKind.INTEGER: _to_integer,
    FieldKind.FLOAT: _to_float,
    FieldKind.BOOLEAN: _to_boolean,
    FieldKind.EPOCH: coerce_epoch,
}


def _join(path: str, name: str) -> str:
    return f"{path}.{name}" if path else name


def _ensure_record_type(record_type: Type[Normalizable]) -> Tuple[FieldSpec, ...]:
    fields = getattr(record_type, "FIELDS", None)
    if not isinstance(fields, tuple):
        raise TypeError(f"{record_type!r} does not declare a FIELDS table")
    return fields


def _cast_field(spec: FieldSpec, value: Any, path: str) -> Any:
    if value is None:
        return spec.default

    if spec.kind is FieldKind.EMBED_ONE:
        if not isinstance(value, Mapping):
            raise ShapeMismatchError("mapping", value, field=path)
        return _normalize_mapping(value, spec.record, path)

    if spec.kind is FieldKind.EMBED_MANY:
        if not isinstance(value, (list, tuple)):
            raise ShapeMismatchError("list of mappings", value, field=path)
        return tuple(
            _normalize_item(item, spec.record, f"{path}[{index}]")
            for index, item in enumerate(value)
        )

    if spec.kind is FieldKind.MAP:
        if not isinstance(value, Mapping):
            raise ShapeMismatchError("mapping", value, field=path)
        return _freeze(value)

    if spec.kind is FieldKind.STRING_LIST:
        if not isinstance(value, (list, tuple)):
            raise ShapeMismatchError("list of strings", value, field=path)
        items = []
        for index, item in enumerate(value):
            try:
                items.append(_to_string(item))
            except TypeCoercionError as exc:
                raise exc.at(f"{path}[{index}]") from exc
        return tuple(items)

    if isinstance(value, (Mapping, list, tuple)):
        raise ShapeMismatchError("scalar", value, field=path)

    try:
        if spec.kind is FieldKind.ENUM:
            return coerce_enum(value, spec.enum)
        return _SCALAR_COERCERS[spec.kind](value)
    except TypeCoercionError as exc:
        raise exc.at(path) from exc


def _normalize_mapping(source: Mapping[str, Any], record_type: Type[R], path: str) -> R:
    values = {
        spec.name: _cast_field(spec, source.get(spec.name), _join(path, spec.name))
        for spec in _ensure_record_type(record_type)
    }
    return record_type(**values)


def _normalize_item(item: Any, record_type: Type[R], path: str) -> R:
    if not isinstance(item, Mapping):
        raise ShapeMismatchError("mapping", item, field=path)
    return _normalize_mapping(item, record_type, path)


def normalize(raw: Any, record_type: Type[R]) -> Union[R, List[R]]:
    """
    Normalize a decoded JSON body into ``record_type``.

    Args:
        raw: A mapping, or a list/tuple of mappings.
        record_type: A record class declaring a ``FIELDS`` table.

    Returns:
        One record for a mapping, or a list of records in input order.

    Raises:
        TypeCoercionError: A scalar could not be converted.
        ShapeMismatchError: The body or a nested value has the wrong shape.
    """
    _ensure_record_type(record_type)
    if isinstance(raw, Mapping):
        return _normalize_mapping(raw, record_type, "")
    if isinstance(raw, (list, tuple)):
        return [_normalize_item(item, record_type, f"[{index}]") for index, item in enumerate(raw)]
    raise ShapeMismatchError("mapping or list of mappings", raw)


def normalize_one(raw: Any, record_type: Type[R]) -> R:
    """Normalize a body that must be a single mapping."""
    if not isinstance(raw, Mapping):
        raise ShapeMismatchError("mapping", raw)
    return normalize(raw, record_type)


def normalize_many(raw: Any, record_type: Type[R]) -> List[R]:
    """Normalize a body that must be a list of mappings."""
    if not isinstance(raw, (list, tuple)):
        raise ShapeMismatchError("list of mappings", raw)
    return normalize(raw, record_type)
