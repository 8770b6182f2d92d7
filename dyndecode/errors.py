"""
Error helpers for dyndecode.

Combinators use push_path + map_errors to annotate child failures with the
step (field name, tuple index, "*") that led to them.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable

from .runtime import classify
from .types import DecodeError, DecodeErrors, DecodeResult, Err, T


def push_path(error: DecodeError, segment: Any) -> DecodeError:
    """
    Prepend a path segment to an error.

    Usage:
        push_path(DecodeError("Int", "String", ("b",)), "a").path  # ("a", "b")
        push_path(err, 2).path[0]                                  # "2"
    """
    match segment:
        case bool():
            rendered = f"<{classify(segment)}>"
        case int():
            rendered = str(segment)
        case str():
            rendered = segment
        case _:
            rendered = f"<{classify(segment)}>"
    return replace(error, path=(rendered, *error.path))


def map_errors(
    result: DecodeResult[T], fn: Callable[[DecodeError], DecodeError]
) -> DecodeResult[T]:
    """Apply `fn` to every error of a failed result. Identity on success."""
    if isinstance(result, Err):
        return Err([fn(e) for e in result.error])
    return result


def format_error(error: DecodeError) -> str:
    """Render an error as a single line."""
    msg = f"expected {error.expected}, found {error.found}"
    if error.path:
        msg += f" at {'.'.join(error.path)}"
    return msg


class DecodeFailure(Exception):
    """
    Raised by decode_or_raise() when a value does not decode.

    Decoders themselves never raise; this is only for call sites that prefer
    exceptions over inspecting an Err.
    """

    def __init__(self, errors: DecodeErrors):
        self.errors = list(errors)
        super().__init__(self._render())

    def _render(self) -> str:
        lines = [f"{len(self.errors)} decode error(s):"]
        lines.extend(f"  - {format_error(e)}" for e in self.errors)
        return "\n".join(lines)
