"""Stock mask functions."""

from __future__ import annotations

import hashlib
import random
import re
from typing import Optional

from .exceptions import InvalidRangeError
from .models import (
    DEFAULT_FLOAT_RANGE,
    DEFAULT_INT_RANGE,
    MaskFloatFunc,
    MaskIntFunc,
    MaskStringFunc,
)

_FLOAT_RANGE_PATTERN = re.compile(r'(\d+)(?:\.(\d+))?')


def mask_filled_string(mask_char: str, length: Optional[int] = None) -> MaskStringFunc:
    """
    Replace a string with repeated mask characters.

    Args:
        mask_char: Character (or string) to repeat
        length: Fixed output length; when omitted the output has one
            mask character per code point of the original value
    """
    if length is not None and length < 0:
        raise InvalidRangeError(length, "length must be non-negative")

    def mask(path: str, value: str) -> str:
        if length is not None:
            return mask_char * length
        return mask_char * len(value)

    return mask


def mask_hash_string() -> MaskStringFunc:
    """Replace a string with the hex SHA-1 digest of its UTF-8 bytes."""
    def mask(path: str, value: str) -> str:
        return hashlib.sha1(value.encode("utf-8")).hexdigest()

    return mask


def mask_random_int(
    bound: int = DEFAULT_INT_RANGE,
    rng: Optional[random.Random] = None
) -> MaskIntFunc:
    """Replace an integer with a random integer in [0, bound)."""
    if bound <= 0:
        raise InvalidRangeError(bound, "bound must be positive")
    rng = rng or random.Random()

    def mask(path: str, value: int) -> int:
        return rng.randrange(bound)

    return mask


def mask_random_float(
    shape: str = DEFAULT_FLOAT_RANGE,
    rng: Optional[random.Random] = None
) -> MaskFloatFunc:
    """
    Replace a number with a random decimal.

    The shape "<int>.<digits>" gives the upper bound of the integer part
    and the number of decimal places: "1000.3" yields values from 0.000
    to 999.999. The shape is parsed when the function runs, so a bad
    shape fails the masking call rather than construction.
    """
    rng = rng or random.Random()

    def mask(path: str, value: float) -> float:
        upper, places = parse_float_range(shape)
        scale = 10 ** places
        return int(rng.random() * upper * scale) / scale

    return mask


def parse_float_range(shape: str) -> tuple[int, int]:
    """
    Parse a "<int>.<digits>" shape string.

    Returns:
        Tuple of (integer upper bound, decimal places)
    """
    match = _FLOAT_RANGE_PATTERN.fullmatch(shape)
    if not match:
        raise InvalidRangeError(
            shape, "expected <int>.<digits> with non-negative integer parts"
        )
    upper = int(match.group(1))
    places = int(match.group(2)) if match.group(2) is not None else 0
    return upper, places
