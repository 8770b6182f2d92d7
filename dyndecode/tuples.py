"""
Fixed-arity tuple decoders.

tupleN checks that the input is a tuple of exactly N elements, then decodes
every element and reports every bad one, tagged with its index.
"""

from __future__ import annotations

from typing import Any, TypeVar

from . import runtime as dyn
from .errors import push_path
from .types import DecodeError, DecodeErrors, Decoder, Dynamic, Err, Ok

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")
F = TypeVar("F")


def tuple_of(*decoders: Decoder[Any]) -> Decoder[tuple[Any, ...]]:
    """
    Decode a tuple with exactly len(decoders) elements.

    Raises:
        ValueError: if no decoders are given
    """
    if not decoders:
        raise ValueError("tuple_of() needs at least one decoder")

    size = len(decoders)
    expected = f"{size} element tuple"

    def decode(value: Dynamic) -> Ok[tuple[Any, ...]] | Err[DecodeErrors]:
        as_tuple = dyn.as_tuple(value)
        if isinstance(as_tuple, Err) or dyn.tuple_size(as_tuple.value) != size:
            return Err([DecodeError(expected=expected, found=dyn.classify(value))])

        items = as_tuple.value
        decoded: list[Any] = []
        errors: DecodeErrors = []
        for i, decoder in enumerate(decoders):
            result = decoder(items[i])
            if isinstance(result, Err):
                errors.extend(push_path(e, i) for e in result.error)
            else:
                decoded.append(result.value)

        return Err(errors) if errors else Ok(tuple(decoded))

    return decode


def tuple2(a: Decoder[A], b: Decoder[B]) -> Decoder[tuple[A, B]]:
    """
    Decode a 2 element tuple.

    Usage:
        tuple2(int_, string)((1, "a"))   # Ok((1, "a"))
        tuple2(int_, string)(("a", 1))   # two errors, at ("0",) and ("1",)
    """
    return tuple_of(a, b)


def tuple3(a: Decoder[A], b: Decoder[B], c: Decoder[C]) -> Decoder[tuple[A, B, C]]:
    """Decode a 3 element tuple."""
    return tuple_of(a, b, c)


def tuple4(
    a: Decoder[A], b: Decoder[B], c: Decoder[C], d: Decoder[D]
) -> Decoder[tuple[A, B, C, D]]:
    return tuple_of(a, b, c, d)


def tuple5(
    a: Decoder[A], b: Decoder[B], c: Decoder[C], d: Decoder[D], e: Decoder[E]
) -> Decoder[tuple[A, B, C, D, E]]:
    return tuple_of(a, b, c, d, e)


def tuple6(
    a: Decoder[A],
    b: Decoder[B],
    c: Decoder[C],
    d: Decoder[D],
    e: Decoder[E],
    f: Decoder[F],
) -> Decoder[tuple[A, B, C, D, E, F]]:
    return tuple_of(a, b, c, d, e, f)
