"""
Payload base class shared by every variant of a response's `data` field.
"""

from typing import Any


class Payload:
    """
    Base class for the decoded `data` field of a Prometheus response.

    Subclasses decode one structural shape and must raise a PromDecodeError
    for any value outside that shape, so the resolver can move on to the next
    candidate.
    """

    @classmethod
    def from_prom_data(cls, value: Any) -> "Payload":
        """Decode one `data` value; overridden by each payload variant."""
        raise NotImplementedError

    def to_prom_data(self) -> Any:
        """Encode back to the wire `data` value; overridden by each variant."""
        raise NotImplementedError
