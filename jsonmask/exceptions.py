"""Custom exceptions for the jsonmask engine."""


class JsonMaskError(Exception):
    """Base exception for jsonmask errors."""
    pass


class JsonParseError(JsonMaskError):
    """Raised when the input document cannot be parsed into a JSON object."""
    def __init__(self, message: str, line: int = None, column: int = None):
        super().__init__(f"Failed to parse JSON document: {message}")
        self.message = message
        self.line = line
        self.column = column


class JsonSerializeError(JsonMaskError):
    """Raised when the masked document cannot be encoded back to JSON."""
    def __init__(self, message: str):
        super().__init__(f"Failed to encode masked document: {message}")
        self.message = message


class MaskError(JsonMaskError):
    """Raised when the tree walk fails."""
    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.message = message
        self.path = path


class UnknownValueTypeError(MaskError):
    """Raised when a node is not one of the six JSON value kinds."""
    def __init__(self, path: str, type_name: str):
        super().__init__(f"Unknown value type {type_name} at {path}", path)
        self.type_name = type_name


class MaskFuncError(MaskError):
    """Raised when a registered mask function fails."""
    def __init__(self, path: str, cause: Exception):
        super().__init__(f"Mask function failed at {path}: {cause}", path)
        self.cause = cause


class MaxDepthExceededError(MaskError):
    """Raised when maximum nesting depth is exceeded."""
    def __init__(self, depth: int, path: str):
        super().__init__(f"Maximum depth ({depth}) exceeded at {path}", path)
        self.depth = depth


class PayloadSizeError(JsonMaskError):
    """Raised when payload size exceeds limit."""
    def __init__(self, size_mb: float, limit_mb: float):
        super().__init__(f"Payload size ({size_mb:.2f}MB) exceeds limit ({limit_mb}MB)")
        self.size_mb = size_mb
        self.limit_mb = limit_mb


class InvalidRangeError(JsonMaskError, ValueError):
    """Raised when a random mask range is malformed."""
    def __init__(self, value, reason: str):
        super().__init__(f"Invalid range {value!r}: {reason}")
        self.value = value
        self.reason = reason


class ConfigurationError(JsonMaskError):
    """Raised when mask rules or engine configuration are invalid."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
