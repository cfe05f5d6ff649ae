"""Exception types raised by the Mux wrapper."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence


class MuxWrapperError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(MuxWrapperError, ValueError):
    """Raised when Mux credentials are not configured."""


class TransportError(MuxWrapperError):
    """Raised when a Mux API call fails.

    Keeps the vendor's ``(reason, details)`` pair so callers can tell a
    ``not_found`` apart from a ``rate_limit_exceeded``.
    """

    def __init__(
        self,
        reason: str,
        details: Optional[Sequence[str]] = None,
        status_code: Optional[int] = None,
    ) -> None:
        self.reason = reason
        self.details: List[str] = [str(item) for item in (details or [])]
        self.status_code = status_code
        super().__init__(self._format())

    @property
    def first_detail(self) -> str:
        return self.details[0] if self.details else ""

    def _format(self) -> str:
        message = f"{self.reason}: {self.first_detail}" if self.details else self.reason
        if self.status_code is not None:
            return f"{message} (HTTP {self.status_code})"
        return message


class CastingError(MuxWrapperError):
    """Base class for response normalization failures."""


class TypeCoercionError(CastingError, TypeError):
    """Raised when a scalar value cannot be converted per its declared rule."""

    def __init__(self, value: Any, message: str, field: Optional[str] = None) -> None:
        self.value = value
        self.field = field
        self.reason = message
        prefix = f"{field}: " if field else ""
        try:
            shown = repr(value)
        except ValueError:
            # ints past the str-conversion digit limit cannot be repr'd
            shown = f"<{type(value).__name__} too large to display>"
        super().__init__(f"{prefix}{message} (got {shown})")

    def at(self, field: str) -> "TypeCoercionError":
        """Return a copy of this error bound to ``field``."""
        return TypeCoercionError(self.value, self.reason, field=field)


class ShapeMismatchError(CastingError):
    """Raised when a response body does not have the expected shape."""

    def __init__(self, expected: str, actual: Any, field: Optional[str] = None) -> None:
        self.expected = expected
        self.actual_type = type(actual).__name__
        self.field = field
        location = f" at {field}" if field else ""
        super().__init__(f"Expected {expected}{location}, got {self.actual_type}")
