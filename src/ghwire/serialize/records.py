# serialize/records.py
"""
Generic projection of model records to plain data.

Every model type is a dataclass whose field order is its wire order. A
field's key is its name with `_` turned into `-` unless metadata["key"]
says otherwise. Zero values are left out (see `ghwire.model.is_zero`),
with two exceptions driven by metadata:

    {"required": True}  zero value is an IncompleteRequired error
    {"omit": "none"}    only None is left out (False / 0 are kept)
"""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, Dict, Optional

from ..errors import IncompleteRequired, UnrenderableValue
from ..expressions import Expression, StepOutput
from ..model import is_zero

# Per-type projections that replace the generic one (workflow jobs, steps, ...)
Projector = Callable[[Any, str], Any]
_PROJECTORS: Dict[type, Projector] = {}


def projector(cls: type):
    """Register a custom projection for `cls` (exact type match)."""
    def decorator(fn: Projector) -> Projector:
        _PROJECTORS[cls] = fn
        return fn
    return decorator


def wire_key(f: dataclasses.Field) -> str:
    return f.metadata.get("key", f.name.replace("_", "-"))


def join_path(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def record(
    obj: Any,
    path: str = "",
    special: Optional[Dict[str, Projector]] = None,
) -> Dict[str, Any]:
    """
    Project a dataclass to an ordered dict using the rules above.

    `special` maps field names to projections used instead of `value_of`
    for non-zero values of that field.
    """
    special = special or {}
    out: Dict[str, Any] = {}
    for f in dataclasses.fields(obj):
        key = wire_key(f)
        value = getattr(obj, f.name)
        field_path = join_path(path, key)

        if f.metadata.get("omit") == "none":
            if value is None:
                continue
        elif is_zero(value):
            if f.metadata.get("required"):
                raise IncompleteRequired(f"{key!r} is required", path=field_path)
            continue

        if f.name in special:
            out[key] = special[f.name](value, field_path)
        else:
            out[key] = value_of(value, field_path)
    return out


def value_of(value: Any, path: str) -> Any:
    """Normalize any model value into YAML-ready data."""
    if isinstance(value, (Expression, StepOutput)):
        return str(value)
    # bool before int: bool is an int subclass
    if value is None or isinstance(value, (bool, str, int, float)):
        return value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        custom: Optional[Projector] = _PROJECTORS.get(type(value))
        if custom is not None:
            return custom(value, path)
        return record(value, path)
    if isinstance(value, dict):
        return mapping(value, path)
    if isinstance(value, (list, tuple)):
        return [value_of(v, f"{path}[{i}]") for i, v in enumerate(value)]
    raise UnrenderableValue(f"cannot render value of type {type(value).__name__}", path=path)


def mapping(value: Dict[Any, Any], path: str) -> Dict[str, Any]:
    """User-keyed map: keys emitted in lexicographic order."""
    out: Dict[str, Any] = {}
    for k in sorted(value, key=str):
        out[str(k)] = value_of(value[k], join_path(path, str(k)))
    return out
