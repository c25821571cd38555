"""Exception classes for analysis settings decoding."""

from typing import Any


class AnalysisDecodeError(ValueError):
    """Base exception for values that cannot be decoded.

    Every subclass records the location of the failure as a JSON-path-like
    string (``$.filter.my_filter.type``) so callers can point at the
    offending part of a settings document.
    """

    def __init__(self, message: str, path: str = "$"):
        """Initialize with message and location."""
        self.path = path
        super().__init__(f"{message} (at {path})")


class MissingFieldError(AnalysisDecodeError):
    """Raised when a required key is absent."""

    def __init__(self, field: str, path: str = "$"):
        """Initialize with the missing field name."""
        self.field = field
        super().__init__(f"Missing required field: {field!r}", path)


class UnrecognizedVariantError(AnalysisDecodeError):
    """Raised when a ``type`` discriminator is outside the known set."""

    def __init__(self, kind: str, value: Any, path: str = "$"):
        """Initialize with the union kind and the raw discriminator."""
        self.kind = kind
        self.value = value
        super().__init__(f"Unrecognized {kind} type: {value!r}", path)


class InvalidEnumValueError(AnalysisDecodeError):
    """Raised when text is not one of an enumeration's tags."""

    def __init__(self, kind: str, value: Any, path: str = "$"):
        """Initialize with the enumeration name and the raw value."""
        self.kind = kind
        self.value = value
        super().__init__(f"{value!r} is not a supported {kind}", path)


class TypeMismatchError(AnalysisDecodeError):
    """Raised when a value has the wrong JSON shape."""

    def __init__(self, expected: str, value: Any, path: str = "$"):
        """Initialize with the expected shape and the raw value."""
        self.expected = expected
        self.value = value
        super().__init__(
            f"Expected {expected}, got {type(value).__name__} {value!r}", path
        )


class MalformedDocumentError(AnalysisDecodeError):
    """Raised when raw input is not valid JSON or YAML."""

    def __init__(self, details: str):
        """Initialize with the parser's description of the problem."""
        super().__init__(f"Malformed document: {details}")
