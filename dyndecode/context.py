"""
Context manager for decoding configuration (e.g., list error policy).
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Literal

ListErrors = Literal["first", "all"]

_LIST_ERROR_MODES = ("first", "all")

# Context variable for the list_of() failure policy
_list_errors: ContextVar[str] = ContextVar("list_errors", default="first")


def list_error_mode() -> str:
    """Return the list_of() failure policy currently in effect."""
    return _list_errors.get()


@contextmanager
def decoding_context(*, list_errors: ListErrors = "first"):
    """
    Context manager for decoding configuration.

    Args:
        list_errors: How list_of() reports malformed elements.
            "first" (default) stops at the first bad element and tags its
            errors with "*". "all" decodes every element and reports each bad
            one, tagged with its index.

    Example:
        from dyndecode import decoding_context, int_, list_of

        decode_ints = list_of(int_)

        decode_ints([1, "a", "b"])   # one error at ("*",)

        with decoding_context(list_errors="all"):
            decode_ints([1, "a", "b"])   # errors at ("1",) and ("2",)
    """
    if list_errors not in _LIST_ERROR_MODES:
        raise ValueError(
            f"list_errors must be one of {_LIST_ERROR_MODES}, got {list_errors!r}"
        )
    token = _list_errors.set(list_errors)
    try:
        yield
    finally:
        _list_errors.reset(token)
