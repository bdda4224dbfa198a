"""
Custom exceptions for prom-reader-core.
"""

from typing import Any, Optional, Sequence


class PromError(Exception):
    """Base exception for all Prometheus-related errors."""
    pass


class PromConnectionError(PromError):
    """Raised when connection to the Prometheus server fails."""
    pass


class PromQueryError(PromError):
    """Raised when a request fails with an unexpected HTTP response."""
    pass


class PromAuthError(PromError):
    """Raised when authentication to Prometheus fails."""
    pass


class PromApiError(PromError):
    """Raised when an error envelope is unwrapped."""

    def __init__(self, error_type: str, error_message: str):
        super().__init__(f"{error_type}: {error_message}")
        self.error_type = error_type
        self.error_message = error_message


class PromDecodeError(PromError):
    """Base exception for response bodies that cannot be decoded."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class StructuralMismatchError(PromDecodeError):
    """Raised when no payload shape accepts the `data` value."""

    def __init__(self, attempted: Sequence[str], reasons: Sequence[str]):
        details = "; ".join(f"{name}: {reason}" for name, reason in zip(attempted, reasons))
        super().__init__(
            f"data matches none of the payload shapes ({', '.join(attempted)}): {details}",
            field="data",
        )
        self.attempted = list(attempted)
        self.reasons = list(reasons)


class FieldDecodeError(PromDecodeError):
    """Raised when a present field has the wrong type or an unparseable value."""

    def __init__(self, field: str, value: Any, expected: str):
        super().__init__(f"invalid value for '{field}': {value!r} (expected {expected})", field=field)
        self.value = value
        self.expected = expected


class MissingFieldError(PromDecodeError):
    """Raised when a required field is absent."""

    def __init__(self, field: str):
        super().__init__(f"missing field '{field}'", field=field)


class DuplicateFieldError(PromDecodeError):
    """Raised when a field appears more than once."""

    def __init__(self, field: str):
        super().__init__(f"duplicate field '{field}'", field=field)


class UnknownFieldError(PromDecodeError):
    """Raised when a strict decoder meets keys it does not recognize."""

    def __init__(self, fields: Sequence[str], allowed: Sequence[str]):
        super().__init__(
            f"unknown field(s) {', '.join(repr(f) for f in fields)}, "
            f"expected one of {', '.join(repr(a) for a in allowed)}",
            field=fields[0] if fields else None,
        )
        self.fields = list(fields)
        self.allowed = list(allowed)
