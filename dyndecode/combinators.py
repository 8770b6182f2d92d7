"""
Structural combinators.

Each function here takes one or more decoders and returns a new decoder.
Child failures are forwarded with the path segment that led to them.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Any, Iterable

from . import runtime as dyn
from .context import list_error_mode
from .decoders import shallow_list
from .errors import map_errors, push_path
from .types import DecodeError, DecodeErrors, Decoder, Dynamic, Err, Ok, T

logger = logging.getLogger(__name__)


def list_of(decoder: Decoder[T]) -> Decoder[list[T]]:
    """
    Decode a list whose elements all decode with `decoder`.

    By default decoding stops at the first malformed element and its errors
    are tagged with "*". Inside decoding_context(list_errors="all") every
    element is decoded and each malformed one is reported under its index.

    Usage:
        list_of(int_)([1, 2, 3])     # Ok([1, 2, 3])
        list_of(int_)([1, "x"])      # Err([DecodeError("Int", "String", ("*",))])
    """

    def decode(value: Dynamic) -> Ok[list[T]] | Err[DecodeErrors]:
        shallow = shallow_list(value)
        if isinstance(shallow, Err):
            return shallow

        if list_error_mode() == "all":
            return _decode_all_elements(shallow.value, decoder)

        decoded: list[T] = []
        for item in shallow.value:
            result = decoder(item)
            if isinstance(result, Err):
                return map_errors(result, partial(push_path, segment="*"))
            decoded.append(result.value)
        return Ok(decoded)

    return decode


def _decode_all_elements(
    items: list[Dynamic], decoder: Decoder[T]
) -> Ok[list[T]] | Err[DecodeErrors]:
    decoded: list[T] = []
    errors: DecodeErrors = []
    for i, item in enumerate(items):
        result = decoder(item)
        if isinstance(result, Err):
            errors.extend(push_path(e, i) for e in result.error)
        else:
            decoded.append(result.value)
    return Err(errors) if errors else Ok(decoded)


def optional(decoder: Decoder[T]) -> Decoder[T | None]:
    """
    Decode an absent value (None) as None, anything else with `decoder`.

    A failure of `decoder` is returned as is; it is not turned into None.
    """

    def decode(value: Dynamic) -> Ok[T | None] | Err[DecodeErrors]:
        if dyn.is_absent(value):
            return Ok(None)
        return decoder(value)

    return decode


def field(name: Any, decoder: Decoder[T]) -> Decoder[T]:
    """
    Decode the value stored under `name` in a mapping.

    Errors:
        - input is not a mapping: expected "Map" (no path)
        - key is missing: expected "field", found "nothing", path (name,)
        - value does not decode: the inner errors, with `name` prepended

    Usage:
        field("age", int_)({"age": 3})   # Ok(3)
        field("age", int_)({})           # Err([DecodeError("field", "nothing", ("age",))])
    """

    def decode(value: Dynamic) -> Ok[T] | Err[DecodeErrors]:
        if isinstance(dyn.as_map(value), Err):
            return Err([DecodeError(expected="Map", found=dyn.classify(value))])

        found = dyn.field_lookup(value, name)
        if isinstance(found, Err):
            missing = DecodeError(expected="field", found="nothing")
            return Err([push_path(missing, name)])

        return map_errors(decoder(found.value), partial(push_path, segment=name))

    return decode


def optional_field(name: Any, decoder: Decoder[T]) -> Decoder[T | None]:
    """
    Like field(), but a missing key or an absent value decodes as None.

    The input itself must still be a mapping.
    """

    def decode(value: Dynamic) -> Ok[T | None] | Err[DecodeErrors]:
        if isinstance(dyn.as_map(value), Err):
            return Err([DecodeError(expected="Map", found=dyn.classify(value))])

        found = dyn.field_lookup(value, name)
        if isinstance(found, Err) or dyn.is_absent(found.value):
            return Ok(None)

        return map_errors(decoder(found.value), partial(push_path, segment=name))

    return decode


def element(index: int, decoder: Decoder[T]) -> Decoder[T]:
    """
    Decode one element of a tuple of any size.

    Negative indexes count from the end, so element(-1, d) is the last
    element. Errors from `decoder` are tagged with `index` as given.

    Usage:
        element(0, int_)((1, "a"))     # Ok(1)
        element(-1, string)((1, "a"))  # Ok("a")
        element(2, int_)((1, "a"))     # Err: expected "Tuple of at least 3 elements"
    """

    def decode(value: Dynamic) -> Ok[T] | Err[DecodeErrors]:
        as_tuple = dyn.as_tuple(value)
        if isinstance(as_tuple, Err):
            return Err([DecodeError(expected="Tuple", found=dyn.classify(value))])

        t = as_tuple.value
        size = dyn.tuple_size(t)
        effective = index if index >= 0 else size + index
        item = dyn.tuple_get(t, effective)
        if isinstance(item, Err):
            return _at_least_error(index + 1 if index >= 0 else -index, value)

        return map_errors(decoder(item.value), partial(push_path, segment=index))

    return decode


def _at_least_error(size: int, value: Dynamic) -> Err[DecodeErrors]:
    plural = "" if size == 1 else "s"
    expected = f"Tuple of at least {size} element{plural}"
    return Err([DecodeError(expected=expected, found=dyn.classify(value))])


def any_(decoders: Iterable[Decoder[T]]) -> Decoder[T]:
    """
    Try each decoder in order and return the first success.

    When every candidate fails the individual errors are dropped and a single
    DecodeError("another type", classify(value)) is returned instead.

    Usage:
        number = any_([int_, float_])
        number(1.5)     # Ok(1.5)
        number("1.5")   # Err([DecodeError("another type", "String")])
    """
    candidates = tuple(decoders)

    def decode(value: Dynamic) -> Ok[T] | Err[DecodeErrors]:
        for candidate in candidates:
            result = candidate(value)
            if isinstance(result, Ok):
                return result
            logger.debug("any_ candidate rejected value: %s", result.error)
        return Err([DecodeError(expected="another type", found=dyn.classify(value))])

    return decode
