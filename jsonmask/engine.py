"""Main masking engine for jsonmask."""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from .exceptions import (
    JsonParseError,
    JsonSerializeError,
    MaxDepthExceededError,
    PayloadSizeError,
)
from .masker import Masker
from .models import (
    EngineConfig,
    MaskFloatFunc,
    MaskIntFunc,
    MaskRules,
    MaskStringFunc,
    NumberMask,
    StringMask,
)
from .registry import MaskFuncRegistry
from .selectors import SelectorSet
from .transforms import (
    mask_filled_string,
    mask_hash_string,
    mask_random_float,
    mask_random_int,
)
from .utils import get_text_size_mb, get_type_name

logger = logging.getLogger(__name__)


class JsonMask:
    """
    Masks JSON fields globally or by path.

    Field specifiers:
    1. Global (``a``, ``b``) - masks every occurrence of the key; objects
       and arrays under it are masked entirely
    2. Path (``/a/b/c``, ``/a/list[0]``) - masks only that location

    Usage:
        mask = JsonMask("password", "/user/email")
        mask.register_mask_string_func(mask_hash_string())
        masked = mask.mask('{"password": "secret", ...}')

    Selectors and mask functions are fixed once masking starts; a
    configured instance may be shared by concurrent callers.
    """

    def __init__(self, *fields: str, config: Optional[EngineConfig] = None):
        """
        Initialize the engine.

        Args:
            fields: Global field names and/or absolute paths
            config: Engine configuration (uses defaults if not provided)
        """
        self.config = config or EngineConfig()
        self.selectors = SelectorSet.classify(fields)
        self.registry = MaskFuncRegistry()

    @classmethod
    def from_rules(
        cls,
        rules: MaskRules,
        config: Optional[EngineConfig] = None
    ) -> JsonMask:
        """Build an engine with the stock mask functions named by the rules."""
        engine = cls(*rules.fields, config=config)

        if rules.string_mask is StringMask.HASH:
            engine.register_mask_string_func(mask_hash_string())
        elif rules.string_mask is StringMask.FILL:
            engine.register_mask_string_func(
                mask_filled_string(rules.fill_char, rules.fill_length)
            )

        if rules.int_mask is NumberMask.RANDOM:
            engine.register_mask_int_func(mask_random_int(rules.int_range))

        if rules.float_mask is NumberMask.RANDOM:
            engine.register_mask_float_func(mask_random_float(rules.float_range))

        return engine

    def register_mask_string_func(self, fn: MaskStringFunc) -> None:
        self.registry.register_string(fn)

    def register_mask_int_func(self, fn: MaskIntFunc) -> None:
        self.registry.register_int(fn)

    def register_mask_float_func(self, fn: MaskFloatFunc) -> None:
        self.registry.register_float(fn)

    def mask(self, value: str | bytes) -> str:
        """
        Mask a JSON document.

        Args:
            value: JSON text whose top level is an object

        Returns:
            The masked JSON text

        Raises:
            PayloadSizeError: input exceeds ``max_payload_size_mb``
            JsonParseError: input is not a JSON object
            MaskError: unknown value kind or a mask function failed
            JsonSerializeError: the masked document cannot be encoded
        """
        self._validate_input(value)

        document = self._parse(value)
        self.mask_data(document)
        return self._serialize(document)

    def mask_data(self, data: dict) -> dict:
        """
        Mask an already-parsed JSON object in place.

        Returns:
            The same object
        """
        if not isinstance(data, dict):
            raise JsonParseError(
                f"top-level value must be an object, got {get_type_name(data)}"
            )

        logger.debug(
            "Masking document with %d global and %d path field(s), %r",
            len(self.selectors.global_fields),
            len(self.selectors.path_fields),
            self.registry
        )

        masker = Masker(self.selectors, self.registry, self.config.max_depth)
        try:
            return masker.mask(data)
        except RecursionError:
            # max_depth set above what the interpreter stack allows
            raise MaxDepthExceededError(self.config.max_depth, "/") from None

    def _validate_input(self, value: str | bytes) -> None:
        """Validate input parameters."""
        if value is None:
            raise JsonParseError("document is required")

        limit = self.config.max_payload_size_mb
        if limit is None:
            return

        if isinstance(value, bytes):
            size = len(value) / (1024 * 1024)
        else:
            size = get_text_size_mb(value)

        if size > limit:
            raise PayloadSizeError(size, limit)

    def _parse(self, value: str | bytes) -> dict:
        try:
            document = json.loads(value, parse_constant=_reject_constant)
        except json.JSONDecodeError as e:
            raise JsonParseError(e.msg, e.lineno, e.colno) from e
        except (TypeError, ValueError, RecursionError) as e:
            raise JsonParseError(str(e)) from e

        if not isinstance(document, dict):
            raise JsonParseError(
                f"top-level value must be an object, got {get_type_name(document)}"
            )
        return document

    def _serialize(self, document: dict) -> str:
        try:
            return json.dumps(
                document,
                sort_keys=self.config.sort_keys,
                ensure_ascii=self.config.ensure_ascii,
                allow_nan=False,
                separators=(",", ":")
            )
        except (TypeError, ValueError, RecursionError) as e:
            raise JsonSerializeError(str(e)) from e


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid constant {name}")


def mask(
    value: str | bytes,
    *fields: str,
    string_func: Optional[MaskStringFunc] = None,
    int_func: Optional[MaskIntFunc] = None,
    float_func: Optional[MaskFloatFunc] = None,
    config: Optional[EngineConfig] = None
) -> str:
    """
    Convenience function to mask a single JSON document.

    Args:
        value: JSON text whose top level is an object
        fields: Global field names and/or absolute paths
        string_func: Optional mask function for strings
        int_func: Optional mask function for integral numbers
        float_func: Optional mask function for numbers
        config: Optional engine configuration

    Returns:
        The masked JSON text
    """
    engine = JsonMask(*fields, config=config)
    if string_func is not None:
        engine.register_mask_string_func(string_func)
    if int_func is not None:
        engine.register_mask_int_func(int_func)
    if float_func is not None:
        engine.register_mask_float_func(float_func)
    return engine.mask(value)
