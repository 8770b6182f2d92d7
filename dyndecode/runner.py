"""
Entry points for running a decoder against a value.
"""

from __future__ import annotations

import logging

from .errors import DecodeFailure
from .types import DecodeResult, Decoder, Dynamic, Err, T

logger = logging.getLogger(__name__)


def run(value: Dynamic, decoder: Decoder[T]) -> DecodeResult[T]:
    """Decode `value`, returning Ok(decoded) or Err([DecodeError, ...])."""
    result = decoder(value)
    if isinstance(result, Err):
        logger.debug("Decoding failed with %d error(s)", len(result.error))
    return result


def decode_or_raise(value: Dynamic, decoder: Decoder[T]) -> T:
    """
    Decode `value` or raise.

    Raises:
        DecodeFailure: carrying every error the decoder reported
    """
    result = run(value, decoder)
    if isinstance(result, Err):
        raise DecodeFailure(result.error)
    return result.value
