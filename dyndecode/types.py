"""
Type definitions for dyndecode.

Provides a minimal Result type (Ok/Err), the DecodeError record and type aliases.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing an error value."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class DecodeError:
    """
    A single decoding failure.

    `path` reads from the decoding root to the failure site; every segment is
    already rendered as a string ("user", "2", "*").
    """

    expected: str
    found: str
    path: tuple[str, ...] = ()


# Type aliases
Dynamic = Any
Path = tuple[str, ...]
DecodeErrors = list[DecodeError]
DecodeResult = Union[Ok[T], Err[DecodeErrors]]
Decoder = Callable[[Dynamic], DecodeResult[T]]
