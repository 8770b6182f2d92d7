"""
Pydantic interop.

model() turns a pydantic model into a decoder, so models can be mixed freely
with field(), list_of() and the other combinators.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from . import runtime as dyn
from .types import DecodeError, DecodeErrors, Decoder, Dynamic, Err, Ok

M = TypeVar("M", bound=BaseModel)


def model(model_cls: type[M], *, strict: bool = True) -> Decoder[M]:
    """
    Decode a mapping into an instance of a pydantic model.

    Validation errors are translated into DecodeErrors whose path is the
    pydantic location. Strict mode is on by default so pydantic does not
    coerce between kinds (e.g. "1" -> 1).

    Usage:
        class User(BaseModel):
            name: str

        list_of(model(User))([{"name": "a"}])   # Ok([User(name="a")])

    Raises:
        TypeError: if `model_cls` is not a BaseModel subclass
    """
    if not (isinstance(model_cls, type) and issubclass(model_cls, BaseModel)):
        raise TypeError(f"Expected a pydantic BaseModel subclass, got {model_cls!r}")

    def decode(value: Dynamic) -> Ok[M] | Err[DecodeErrors]:
        if isinstance(dyn.as_map(value), Err):
            return Err([DecodeError(expected="Map", found=dyn.classify(value))])
        try:
            return Ok(model_cls.model_validate(dict(value), strict=strict))
        except ValidationError as e:
            return Err([_from_pydantic(err) for err in e.errors()])

    return decode


def _from_pydantic(err: Any) -> DecodeError:
    """Convert one entry of ValidationError.errors() into a DecodeError."""
    if err["type"] == "missing":
        found = "nothing"
    else:
        found = dyn.classify(err.get("input"))
    path = tuple(str(seg) for seg in err["loc"])
    return DecodeError(expected=err["msg"], found=found, path=path)
