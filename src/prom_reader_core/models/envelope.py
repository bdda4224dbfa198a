"""
Envelope model representing a complete Prometheus API response.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

import json

from ..exceptions import FieldDecodeError, PromApiError, PromDecodeError
from .base import Payload
from .fields import WireObject, expect_list_of, expect_object, expect_str, require
from .payload import decode_payload


class Status(str, Enum):
    """Value of the `status` field of every response."""

    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Envelope:
    """
    Outer wrapper of every Prometheus API response.

    Error envelopes always carry an error type and message and may still
    carry a partial payload.

    Attributes:
        status: SUCCESS or ERROR.
        data: Decoded payload, or None if the response had none.
        warnings: Warnings reported alongside the result.
        error_type: Error category (e.g. "bad_data"); None on success.
        error_message: Human-readable error; None on success.
    """

    status: Status
    data: Optional[Payload] = None
    warnings: list[str] = field(default_factory=list)
    error_type: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status is Status.SUCCESS

    def unwrap(self) -> Optional[Payload]:
        """
        Get the payload of a successful response.

        Returns:
            The decoded payload, or None if the response had no data.

        Raises:
            PromApiError: If this is an error envelope.
        """
        if not self.is_success:
            raise PromApiError(self.error_type or "", self.error_message or "")
        return self.data

    def to_prom_response(self) -> dict:
        """
        Convert back to the API's JSON response format.

        Returns:
            Dictionary with status, optional data, warnings (possibly empty)
            and, for errors, the error fields.
        """
        response: dict[str, Any] = {"status": self.status.value}
        if self.status is Status.ERROR:
            response["errorType"] = self.error_type
            response["error"] = self.error_message
        if self.data is not None:
            response["data"] = self.data.to_prom_data()
        response["warnings"] = list(self.warnings)
        return response

    @classmethod
    def from_prom_response(
        cls,
        response_data: Any,
        hint: Optional[type[Payload]] = None
    ) -> "Envelope":
        """
        Create Envelope from an already-parsed API response.

        Args:
            response_data: Full JSON response object.
            hint: Optional payload class the calling endpoint expects.

        Returns:
            Envelope instance.

        Raises:
            PromDecodeError: If the response or its payload cannot be decoded.
        """
        response_data = expect_object(response_data, "response")
        raw_status = expect_str(require(response_data, "status"), "status")
        try:
            status = Status(raw_status)
        except ValueError as e:
            raise FieldDecodeError("status", raw_status, "one of success, error") from e

        error_type = None
        error_message = None
        if status is Status.ERROR:
            error_type = expect_str(require(response_data, "errorType"), "errorType")
            error_message = expect_str(require(response_data, "error"), "error")

        raw_data = response_data.get("data")
        data = decode_payload(raw_data, hint) if raw_data is not None else None

        warnings = expect_list_of(
            response_data.get("warnings") or [], "warnings", lambda w: expect_str(w, "warnings")
        )

        return cls(
            status=status,
            data=data,
            warnings=warnings,
            error_type=error_type,
            error_message=error_message,
        )


def decode_envelope(
    raw: bytes | str | dict,
    hint: Optional[type[Payload]] = None
) -> Envelope:
    """
    Decode a response body into an Envelope.

    Args:
        raw: Response body bytes or text, or an already-parsed JSON object.
        hint: Optional payload class the calling endpoint expects.

    Returns:
        Envelope instance.

    Raises:
        PromDecodeError: If the body is not valid JSON or does not decode.
    """
    if isinstance(raw, (bytes, str)):
        try:
            raw = json.loads(raw, object_pairs_hook=WireObject.from_pairs)
        except ValueError as e:
            raise PromDecodeError(f"Invalid JSON response: {e}") from e
    return Envelope.from_prom_response(raw, hint)
