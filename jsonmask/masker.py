"""Tree walker that applies mask functions to a parsed JSON document."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from .exceptions import MaskFuncError, MaxDepthExceededError, UnknownValueTypeError
from .models import MaskMode, ValueKind
from .registry import MaskFuncRegistry
from .selectors import SelectorSet
from .utils import ROOT_PATH, array_element_path, child_path, is_integer, value_kind

logger = logging.getLogger(__name__)


class Masker:
    """
    Rewrites a parsed JSON object in place.

    Modes:
    - SELECTIVE: a scalar is masked when its key is a global field or its
      exact path is a path field. Objects under a global key switch to
      BLANKET.
    - BLANKET: every scalar beneath is masked, selectors are not consulted.

    Array elements are masked when the array is reached in BLANKET mode or
    under a global key. Otherwise a string element is matched by its own
    path (``/list[1]``) while a number element is matched by the array's
    path (``/list``). Nested arrays are always walked in BLANKET mode.

    Errors abort the walk; siblings visited before the failure stay
    rewritten.
    """

    def __init__(
        self,
        selectors: SelectorSet,
        registry: MaskFuncRegistry,
        max_depth: int = 100
    ):
        self.selectors = selectors
        self.registry = registry
        self.max_depth = max_depth
        self.masked_count = 0

    def mask(self, document: dict) -> dict:
        """
        Mask a parsed document.

        Args:
            document: Top-level JSON object, modified in place

        Returns:
            The same object, for chaining
        """
        self.masked_count = 0
        self._mask_object(document, ROOT_PATH, MaskMode.SELECTIVE, 0)
        logger.debug("Masked %d value(s)", self.masked_count)
        return document

    def _mask_object(self, obj: dict, path: str, mode: MaskMode, depth: int) -> None:
        self._check_depth(path, depth)
        for key, value in obj.items():
            fk = child_path(path, key)
            matched = mode is MaskMode.BLANKET or self.selectors.is_global(key)
            obj[key] = self._visit(
                value,
                key,
                fk,
                matched=matched,
                number_path=fk,
                array_mode=MaskMode.BLANKET if matched else MaskMode.SELECTIVE,
                depth=depth
            )

    def _mask_array(self, arr: list, key: str, path: str, mode: MaskMode, depth: int) -> None:
        self._check_depth(path, depth)
        matched = mode is MaskMode.BLANKET or self.selectors.is_global(key)
        for i, item in enumerate(arr):
            arr[i] = self._visit(
                item,
                key,
                array_element_path(path, i),
                matched=matched,
                # Numbers in arrays are matched against the array's own path while
                # strings use the element path. The asymmetry is kept on purpose
                # and pinned by tests; matching numbers by element path is a
                # behaviour change for existing path selectors.
                number_path=path,
                array_mode=MaskMode.BLANKET,
                depth=depth
            )

    def _visit(
        self,
        value: Any,
        key: str,
        path: str,
        *,
        matched: bool,
        number_path: str,
        array_mode: MaskMode,
        depth: int
    ) -> Any:
        """Dispatch a single node by kind and return its replacement."""
        kind = value_kind(value)

        if kind is ValueKind.OBJECT:
            mode = MaskMode.BLANKET if matched else MaskMode.SELECTIVE
            self._mask_object(value, path, mode, depth + 1)
            return value

        elif kind is ValueKind.ARRAY:
            self._mask_array(value, key, path, array_mode, depth + 1)
            return value

        elif kind is ValueKind.STRING:
            if self.registry.string_func is None:
                return value
            if matched or self.selectors.is_path(path):
                return self._apply(self.registry.string_func, path, value)
            return value

        elif kind is ValueKind.NUMBER:
            if matched or self.selectors.is_path(number_path):
                return self._mask_number(path, value)
            return value

        elif kind in (ValueKind.BOOLEAN, ValueKind.NULL):
            return value

        raise UnknownValueTypeError(path, type(value).__name__)

    def _mask_number(self, path: str, value: int | float) -> int | float:
        """
        Apply the int and float functions to a selected number.

        An integral number goes through the int function first and the
        float function then sees the replaced value. Without an int
        function an integral number is left as is.
        """
        if is_integer(value):
            if self.registry.int_func is None:
                return value
            value = self._apply(self.registry.int_func, path, value, int)

        if self.registry.float_func is not None:
            value = self._apply(self.registry.float_func, path, value, float)

        return value

    def _apply(
        self,
        fn: Callable[[str, Any], Any],
        path: str,
        value: Any,
        cast: Optional[Callable[[Any], Any]] = None
    ) -> Any:
        try:
            # int too large for a float raises OverflowError here
            if cast is not None:
                value = cast(value)
            result = fn(path, value)
        except Exception as e:
            raise MaskFuncError(path, e) from e
        self.masked_count += 1
        return result

    def _check_depth(self, path: str, depth: int) -> None:
        if depth > self.max_depth:
            raise MaxDepthExceededError(self.max_depth, path or "/")
