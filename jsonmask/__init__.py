"""
jsonmask - Field masking for JSON documents

Masks selected fields of a JSON document by bare field name (every
occurrence, whole sub-trees included) or by absolute path (one exact
location), using pluggable mask functions per scalar kind.
"""

from .engine import JsonMask, mask
from .models import (
    EngineConfig,
    LogLevel,
    MaskFloatFunc,
    MaskIntFunc,
    MaskMode,
    MaskRules,
    MaskStringFunc,
    NumberMask,
    StringMask,
)
from .selectors import SelectorSet
from .transforms import (
    mask_filled_string,
    mask_hash_string,
    mask_random_float,
    mask_random_int,
)
from .exceptions import (
    JsonMaskError,
    JsonParseError,
    JsonSerializeError,
    MaskError,
    MaskFuncError,
    UnknownValueTypeError,
    MaxDepthExceededError,
    PayloadSizeError,
    InvalidRangeError,
    ConfigurationError,
)
from .runner import MaskRunner, RunReport, FileResult

__version__ = "1.0.0"
__all__ = [
    # Engine
    "JsonMask",
    "mask",
    "EngineConfig",
    "LogLevel",
    "MaskMode",
    "SelectorSet",
    # Mask functions
    "MaskStringFunc",
    "MaskIntFunc",
    "MaskFloatFunc",
    "mask_filled_string",
    "mask_hash_string",
    "mask_random_int",
    "mask_random_float",
    # Rules
    "MaskRules",
    "StringMask",
    "NumberMask",
    # Errors
    "JsonMaskError",
    "JsonParseError",
    "JsonSerializeError",
    "MaskError",
    "MaskFuncError",
    "UnknownValueTypeError",
    "MaxDepthExceededError",
    "PayloadSizeError",
    "InvalidRangeError",
    "ConfigurationError",
    # Batch runner
    "MaskRunner",
    "RunReport",
    "FileResult",
]
