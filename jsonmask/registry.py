"""Registry of mask functions, one per scalar kind."""

from __future__ import annotations

from typing import Optional

from .models import MaskFloatFunc, MaskIntFunc, MaskStringFunc


class MaskFuncRegistry:
    """
    Holds at most one mask function per scalar kind.

    Registering a function replaces the previous one for that kind.
    Kinds without a function are left unchanged by the engine.
    Registration is not synchronized; finish it before masking.
    """

    def __init__(self):
        self.string_func: Optional[MaskStringFunc] = None
        self.int_func: Optional[MaskIntFunc] = None
        self.float_func: Optional[MaskFloatFunc] = None

    def register_string(self, fn: MaskStringFunc) -> None:
        self.string_func = fn

    def register_int(self, fn: MaskIntFunc) -> None:
        self.int_func = fn

    def register_float(self, fn: MaskFloatFunc) -> None:
        self.float_func = fn

    def __repr__(self) -> str:
        registered = [
            name for name, fn in (
                ("string", self.string_func),
                ("int", self.int_func),
                ("float", self.float_func),
            ) if fn is not None
        ]
        return f"MaskFuncRegistry(registered={registered})"
