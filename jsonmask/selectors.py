"""Field selectors: global field names and absolute path expressions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .utils import PATH_SEPARATOR


@dataclass(frozen=True)
class SelectorSet:
    """
    Fields selected for masking.

    A specifier containing the path separator is an absolute path
    (``/metadata/labels/name``, ``/items[0]/sku``) and matches only that
    location. Anything else is a global field name and matches every key
    with that name, masking the whole value beneath it.

    Path syntax is not validated; a malformed path simply never matches.
    """
    global_fields: frozenset[str] = field(default_factory=frozenset)
    path_fields: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def classify(cls, fields: Iterable[str]) -> SelectorSet:
        global_fields = set()
        path_fields = set()
        for spec in fields:
            if PATH_SEPARATOR in spec:
                path_fields.add(spec)
            else:
                global_fields.add(spec)
        return cls(frozenset(global_fields), frozenset(path_fields))

    def is_global(self, name: str) -> bool:
        return name in self.global_fields

    def is_path(self, path: str) -> bool:
        return path in self.path_fields

    def __bool__(self) -> bool:
        return bool(self.global_fields or self.path_fields)
