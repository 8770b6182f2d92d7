"""
dyndecode - composable decoders for dynamically typed data.

Usage:
    from dyndecode import decode2, field, int_, list_of, string

    user = decode2(User, field("name", string), field("tags", list_of(string)))
    result = user(json.loads(payload))   # Ok(User(...)) or Err([DecodeError, ...])
"""

from .combinators import any_, element, field, list_of, optional, optional_field
from .context import decoding_context, list_error_mode
from .decoders import (
    bool_,
    bytes_,
    dynamic,
    float_,
    int_,
    map_,
    shallow_list,
    string,
)
from .errors import DecodeFailure, format_error, map_errors, push_path
from .interop import model
from .records import (
    decode,
    decode2,
    decode3,
    decode4,
    decode5,
    decode6,
    decode7,
    decode8,
    decode9,
)
from .runner import decode_or_raise, run
from .runtime import classify
from .tuples import tuple2, tuple3, tuple4, tuple5, tuple6, tuple_of
from .types import (
    DecodeError,
    DecodeErrors,
    DecodeResult,
    Decoder,
    Dynamic,
    Err,
    Ok,
)

__all__ = [
    # Result types
    "Ok",
    "Err",
    "DecodeError",
    "DecodeErrors",
    "DecodeResult",
    "Decoder",
    "Dynamic",
    # Errors
    "DecodeFailure",
    "push_path",
    "map_errors",
    "format_error",
    # Primitives
    "classify",
    "dynamic",
    "string",
    "int_",
    "float_",
    "bool_",
    "bytes_",
    "shallow_list",
    "map_",
    # Combinators
    "list_of",
    "optional",
    "field",
    "optional_field",
    "element",
    "any_",
    # Tuples
    "tuple_of",
    "tuple2",
    "tuple3",
    "tuple4",
    "tuple5",
    "tuple6",
    # Records
    "decode",
    "decode2",
    "decode3",
    "decode4",
    "decode5",
    "decode6",
    "decode7",
    "decode8",
    "decode9",
    # Pydantic
    "model",
    # Running
    "run",
    "decode_or_raise",
    # Config
    "decoding_context",
    "list_error_mode",
]
