"""
Primitive decoders.

The base cases of every decoder tree. Each one either unwraps a value of its
target shape or fails with exactly one error naming that shape.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from . import runtime as dyn
from .types import DecodeError, Dynamic, Err, Ok


def _primitive(
    expected: str, probe: Callable[[Dynamic], Ok[Any] | Err[None]]
) -> Callable[[Dynamic], Ok[Any] | Err[list[DecodeError]]]:
    def decode(value: Dynamic) -> Ok[Any] | Err[list[DecodeError]]:
        result = probe(value)
        if isinstance(result, Ok):
            return result
        return Err([DecodeError(expected=expected, found=dyn.classify(value))])

    decode.__name__ = expected.lower()
    decode.__qualname__ = decode.__name__
    return decode


def dynamic(value: Dynamic) -> Ok[Dynamic]:
    """Accept anything, unchanged. Useful as a placeholder inside combinators."""
    return Ok(value)


string = _primitive("String", dyn.as_string)
string.__doc__ = "Decode a str."

int_ = _primitive("Int", dyn.as_int)
int_.__doc__ = "Decode an int. Booleans are rejected."

float_ = _primitive("Float", dyn.as_float)
float_.__doc__ = "Decode a float. Ints are rejected, there is no widening."

bool_ = _primitive("Bool", dyn.as_bool)
bool_.__doc__ = "Decode a bool."

bytes_ = _primitive("BitString", dyn.as_bytes)
bytes_.__doc__ = "Decode bytes-like values into bytes."


def shallow_list(value: Dynamic) -> Ok[list[Dynamic]] | Err[list[DecodeError]]:
    """
    Check that a value is a list, leaving its elements undecoded.

    Use list_of() to decode the elements as well.
    """
    result = dyn.as_list(value)
    if isinstance(result, Ok):
        return result
    return Err([DecodeError(expected="List", found=dyn.classify(value))])


def map_(value: Dynamic) -> Ok[Mapping[Dynamic, Dynamic]] | Err[list[DecodeError]]:
    """Check that a value is a mapping. Keys and values stay undecoded."""
    result = dyn.as_map(value)
    if isinstance(result, Ok):
        return result
    return Err([DecodeError(expected="Map", found=dyn.classify(value))])
