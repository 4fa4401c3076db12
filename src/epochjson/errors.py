"""Errors raised while converting field values to and from JSON tokens."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    FORMAT = "format"
    TYPE = "type"
    RANGE = "range"


class CodecError(Exception):
    """Base error for a failed field conversion.

    ``field`` is unset when a codec is called directly and is filled in by
    the serializer that owns the field binding.
    """

    kind: ErrorKind

    def __init__(self, message: str, *, token: Any = None, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.token = token
        self.field = field

    def __str__(self) -> str:
        if self.field:
            return f"{self.field}: {self.message}"
        return self.message


class FormatError(CodecError, ValueError):
    """Raised when a decoded token has the wrong JSON type."""

    kind = ErrorKind.FORMAT


class TypeMismatchError(CodecError, TypeError):
    """Raised when a value handed to ``encode`` has the wrong Python type."""

    kind = ErrorKind.TYPE


class RangeError(CodecError, ValueError):
    """Raised when a value falls outside the representable range."""

    kind = ErrorKind.RANGE
