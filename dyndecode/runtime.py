"""
Runtime introspection of dynamic values.

These probes are the only place that looks at the concrete Python type of an
incoming value. Each one is total: it returns Ok(payload) when the value has
the requested shape and Err(None) otherwise, and never raises.
"""

from __future__ import annotations

import types
from collections.abc import Mapping, Set
from typing import Any

from .types import Dynamic, Err, Ok

_BYTES_LIKE = (bytes, bytearray, memoryview)
_FUNCTION_TYPES = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.LambdaType,
)


def classify(value: Dynamic) -> str:
    """
    Describe the runtime shape of a value for error messages.

    Examples:
        classify("a")        # "String"
        classify(True)       # "Bool"
        classify((1, 2))     # "Tuple of 2 elements"
        classify(object())   # "object"
    """
    match value:
        case None:
            return "Nil"
        case bool():
            return "Bool"
        case int():
            return "Int"
        case float():
            return "Float"
        case str():
            return "String"
        case bytes() | bytearray() | memoryview():
            return "BitString"
        case list():
            return "List"
        case tuple():
            n = len(value)
            return f"Tuple of {n} element" + ("" if n == 1 else "s")
    if isinstance(value, Mapping):
        return "Map"
    if isinstance(value, Set):
        return "Set"
    if isinstance(value, _FUNCTION_TYPES):
        return "Function"
    return type(value).__name__


def as_string(value: Dynamic) -> Ok[str] | Err[None]:
    if isinstance(value, str):
        return Ok(value)
    return Err(None)


def as_int(value: Dynamic) -> Ok[int] | Err[None]:
    # bool is a subclass of int but is never accepted as one
    if isinstance(value, int) and not isinstance(value, bool):
        return Ok(value)
    return Err(None)


def as_float(value: Dynamic) -> Ok[float] | Err[None]:
    if isinstance(value, float):
        return Ok(value)
    return Err(None)


def as_bool(value: Dynamic) -> Ok[bool] | Err[None]:
    if isinstance(value, bool):
        return Ok(value)
    return Err(None)


def as_bytes(value: Dynamic) -> Ok[bytes] | Err[None]:
    if isinstance(value, _BYTES_LIKE):
        return Ok(bytes(value))
    return Err(None)


def as_list(value: Dynamic) -> Ok[list[Any]] | Err[None]:
    if isinstance(value, list):
        return Ok(value)
    return Err(None)


def as_map(value: Dynamic) -> Ok[Mapping[Any, Any]] | Err[None]:
    if isinstance(value, Mapping):
        return Ok(value)
    return Err(None)


def field_lookup(value: Dynamic, key: Any) -> Ok[Any] | Err[None]:
    """Look up `key` in a mapping. Fails for non-mappings and missing keys."""
    if not isinstance(value, Mapping):
        return Err(None)
    try:
        if key in value:
            return Ok(value[key])
    except TypeError:
        # unhashable key
        pass
    return Err(None)


def as_tuple(value: Dynamic) -> Ok[tuple[Any, ...]] | Err[None]:
    if isinstance(value, tuple):
        return Ok(value)
    return Err(None)


def tuple_size(t: tuple[Any, ...]) -> int:
    return len(t)


def tuple_get(t: tuple[Any, ...], index: int) -> Ok[Any] | Err[None]:
    """Get an element by absolute index. Negative indexes are not wrapped."""
    if 0 <= index < len(t):
        return Ok(t[index])
    return Err(None)


def is_absent(value: Dynamic) -> bool:
    """True for the values that stand for "no value"."""
    return value is None
