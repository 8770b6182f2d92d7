"""
Multi-field construction.

decodeN runs N decoders against the same value (usually a mapping, with each
decoder built from field()) and passes the results to a constructor.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from .errors import push_path
from .types import DecodeErrors, Decoder, Dynamic, Err, Ok

R = TypeVar("R")
T1 = TypeVar("T1")
T2 = TypeVar("T2")
T3 = TypeVar("T3")
T4 = TypeVar("T4")
T5 = TypeVar("T5")
T6 = TypeVar("T6")
T7 = TypeVar("T7")
T8 = TypeVar("T8")
T9 = TypeVar("T9")


def decode(constructor: Callable[..., R], *decoders: Decoder[Any]) -> Decoder[R]:
    """
    Build a value from several decoders applied to the same input.

    Every decoder runs, even after one has failed. Errors are tagged with the
    decoder's position ("0", "1", ...) and returned in that order. The
    constructor is only called when all decoders succeed.

    Usage:
        point = decode(Point, field("x", int_), field("y", int_))
        point({"x": 1, "y": 2})   # Ok(Point(1, 2))
        point({})                 # errors at ("0", "x") and ("1", "y")

    Raises:
        ValueError: if no decoders are given
    """
    if not decoders:
        raise ValueError("decode() needs at least one decoder")

    def build(value: Dynamic) -> Ok[R] | Err[DecodeErrors]:
        decoded: list[Any] = []
        errors: DecodeErrors = []
        for slot, decoder in enumerate(decoders):
            result = decoder(value)
            if isinstance(result, Err):
                errors.extend(push_path(e, slot) for e in result.error)
            else:
                decoded.append(result.value)

        if errors:
            return Err(errors)
        return Ok(constructor(*decoded))

    return build


def decode2(
    constructor: Callable[[T1, T2], R], t1: Decoder[T1], t2: Decoder[T2]
) -> Decoder[R]:
    return decode(constructor, t1, t2)


def decode3(
    constructor: Callable[[T1, T2, T3], R],
    t1: Decoder[T1],
    t2: Decoder[T2],
    t3: Decoder[T3],
) -> Decoder[R]:
    return decode(constructor, t1, t2, t3)


def decode4(
    constructor: Callable[[T1, T2, T3, T4], R],
    t1: Decoder[T1],
    t2: Decoder[T2],
    t3: Decoder[T3],
    t4: Decoder[T4],
) -> Decoder[R]:
    return decode(constructor, t1, t2, t3, t4)


def decode5(
    constructor: Callable[[T1, T2, T3, T4, T5], R],
    t1: Decoder[T1],
    t2: Decoder[T2],
    t3: Decoder[T3],
    t4: Decoder[T4],
    t5: Decoder[T5],
) -> Decoder[R]:
    return decode(constructor, t1, t2, t3, t4, t5)


def decode6(
    constructor: Callable[[T1, T2, T3, T4, T5, T6], R],
    t1: Decoder[T1],
    t2: Decoder[T2],
    t3: Decoder[T3],
    t4: Decoder[T4],
    t5: Decoder[T5],
    t6: Decoder[T6],
) -> Decoder[R]:
    return decode(constructor, t1, t2, t3, t4, t5, t6)


def decode7(
    constructor: Callable[[T1, T2, T3, T4, T5, T6, T7], R],
    t1: Decoder[T1],
    t2: Decoder[T2],
    t3: Decoder[T3],
    t4: Decoder[T4],
    t5: Decoder[T5],
    t6: Decoder[T6],
    t7: Decoder[T7],
) -> Decoder[R]:
    return decode(constructor, t1, t2, t3, t4, t5, t6, t7)


def decode8(
    constructor: Callable[[T1, T2, T3, T4, T5, T6, T7, T8], R],
    t1: Decoder[T1],
    t2: Decoder[T2],
    t3: Decoder[T3],
    t4: Decoder[T4],
    t5: Decoder[T5],
    t6: Decoder[T6],
    t7: Decoder[T7],
    t8: Decoder[T8],
) -> Decoder[R]:
    return decode(constructor, t1, t2, t3, t4, t5, t6, t7, t8)


def decode9(
    constructor: Callable[[T1, T2, T3, T4, T5, T6, T7, T8, T9], R],
    t1: Decoder[T1],
    t2: Decoder[T2],
    t3: Decoder[T3],
    t4: Decoder[T4],
    t5: Decoder[T5],
    t6: Decoder[T6],
    t7: Decoder[T7],
    t8: Decoder[T8],
    t9: Decoder[T9],
) -> Decoder[R]:
    return decode(constructor, t1, t2, t3, t4, t5, t6, t7, t8, t9)
