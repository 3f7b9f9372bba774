"""Data models for the jsonmask engine."""

from __future__ import annotations

from dataclasses import dataclass, field, fields as dataclass_fields
from enum import Enum
from typing import Any, Callable, Optional

from .exceptions import ConfigurationError


# Mask function signatures: (path, value) -> replacement value.
# Failures are signalled by raising.
MaskStringFunc = Callable[[str, str], str]
MaskIntFunc = Callable[[str, int], int]
MaskFloatFunc = Callable[[str, float], float]

DEFAULT_INT_RANGE = 1000
DEFAULT_FLOAT_RANGE = "1000.3"


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    @property
    def logging_level(self) -> str:
        return "WARNING" if self is LogLevel.WARN else self.value


class MaskMode(Enum):
    """How an object or array was reached during the walk."""
    # Gated per node by global/path selectors
    SELECTIVE = "selective"
    # Under a global match; every scalar is masked
    BLANKET = "blanket"


class ValueKind(Enum):
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


class StringMask(Enum):
    HASH = "hash"
    FILL = "fill"


class NumberMask(Enum):
    RANDOM = "random"


@dataclass
class EngineConfig:
    """Global configuration for the masking engine."""
    max_depth: int = 100
    max_payload_size_mb: Optional[float] = None
    sort_keys: bool = True
    ensure_ascii: bool = False
    log_level: LogLevel = LogLevel.INFO

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> EngineConfig:
        if not data:
            return cls()
        if not isinstance(data, dict):
            raise ConfigurationError(
                "engine section must be an object",
                {"type": type(data).__name__}
            )

        known = {f.name for f in dataclass_fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown engine option(s): {', '.join(unknown)}",
                {"unknown": unknown}
            )

        values = dict(data)
        if "log_level" in values:
            try:
                values["log_level"] = LogLevel(str(values["log_level"]).upper())
            except ValueError:
                raise ConfigurationError(
                    f"Invalid log level: {values['log_level']}",
                    {"allowed": [lvl.value for lvl in LogLevel]}
                )

        config = cls(**values)
        if not isinstance(config.max_depth, int) or config.max_depth < 1:
            raise ConfigurationError(
                "max_depth must be a positive integer",
                {"max_depth": config.max_depth}
            )
        return config


@dataclass
class MaskRules:
    """Which fields to mask and with which stock transformations."""
    fields: list[str] = field(default_factory=list)
    string_mask: Optional[StringMask] = None
    fill_char: str = "*"
    fill_length: Optional[int] = None
    int_mask: Optional[NumberMask] = None
    int_range: int = DEFAULT_INT_RANGE
    float_mask: Optional[NumberMask] = None
    float_range: str = DEFAULT_FLOAT_RANGE

    @classmethod
    def from_dict(cls, data: Any) -> MaskRules:
        """
        Build rules from a parsed rules file.

        Expected layout:

            fields: [password, /user/email]
            string: {mask: fill, char: "#", length: 8}
            int: {mask: random, range: 100}
            float: {mask: random, range: "10.2"}
        """
        if not isinstance(data, dict):
            raise ConfigurationError(
                "Rules must be an object",
                {"type": type(data).__name__}
            )

        raw_fields = data.get("fields") or []
        if not isinstance(raw_fields, list) or not all(isinstance(f, str) for f in raw_fields):
            raise ConfigurationError("fields must be a list of strings")

        rules = cls(fields=list(raw_fields))

        string_cfg = _section(data, "string")
        if string_cfg:
            rules.string_mask = _enum_value(StringMask, string_cfg.get("mask"), "string.mask")
            rules.fill_char = str(string_cfg.get("char", rules.fill_char))
            length = string_cfg.get("length")
            if length is not None:
                if not isinstance(length, int) or isinstance(length, bool) or length < 0:
                    raise ConfigurationError(
                        "string.length must be a non-negative integer",
                        {"length": length}
                    )
                rules.fill_length = length

        int_cfg = _section(data, "int")
        if int_cfg:
            rules.int_mask = _enum_value(NumberMask, int_cfg.get("mask"), "int.mask")
            bound = int_cfg.get("range", rules.int_range)
            if not isinstance(bound, int) or isinstance(bound, bool) or bound <= 0:
                raise ConfigurationError(
                    "int.range must be a positive integer",
                    {"range": bound}
                )
            rules.int_range = bound

        float_cfg = _section(data, "float")
        if float_cfg:
            rules.float_mask = _enum_value(NumberMask, float_cfg.get("mask"), "float.mask")
            rules.float_range = str(float_cfg.get("range", rules.float_range))

        return rules


def _section(data: dict, name: str) -> Optional[dict]:
    section = data.get(name)
    if section is None:
        return None
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"{name} section must be an object",
            {"type": type(section).__name__}
        )
    return section


def _enum_value(enum_cls, value, option: str):
    try:
        return enum_cls(value)
    except ValueError:
        raise ConfigurationError(
            f"Invalid value for {option}: {value!r}",
            {"allowed": [m.value for m in enum_cls]}
        )
