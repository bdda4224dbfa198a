"""
Sample models representing single [timestamp, value] datapoints from Prometheus.
"""

from dataclasses import dataclass
from typing import Any

import math

from ..exceptions import FieldDecodeError, MissingFieldError
from .fields import expect_list, expect_number, expect_str

INFINITY = "Inf"
POSITIVE_INFINITY = "+Inf"
NEGATIVE_INFINITY = "-Inf"
NAN = "NaN"

SENTINELS = {
    INFINITY: math.inf,
    POSITIVE_INFINITY: math.inf,
    NEGATIVE_INFINITY: -math.inf,
    NAN: math.nan,
}


def parse_sample_value(text: str) -> float:
    """
    Parse the string half of a sample into a float.

    Non-finite values are spelled as the Prometheus sentinels ("Inf", "+Inf",
    "-Inf", "NaN"). Other spellings Python's float() also accepts ("inf",
    "nan", "Infinity") are rejected. Numbers too large for a float, such as
    "1e400", become infinite.

    Args:
        text: Value string from the wire (e.g. "3.14", "Inf", "NaN").

    Returns:
        Parsed float.

    Raises:
        FieldDecodeError: If the string is neither a sentinel nor a number.
    """
    if text in SENTINELS:
        return SENTINELS[text]
    try:
        value = float(text)
    except ValueError as e:
        raise FieldDecodeError("value", text, "a number or one of Inf, +Inf, -Inf, NaN") from e
    spelled_out = any(c.isalpha() and c not in "eE" for c in text)
    if (not math.isfinite(value) and spelled_out) or "_" in text or text != text.strip():
        raise FieldDecodeError("value", text, "a number or one of Inf, +Inf, -Inf, NaN")
    return value


def format_sample_value(value: float) -> str:
    """
    Format a float the way Prometheus writes sample values.

    Non-finite values become their sentinel; whole numbers drop the '.0'.
    """
    if math.isnan(value):
        return NAN
    if math.isinf(value):
        return INFINITY if value > 0 else NEGATIVE_INFINITY
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _unpack_pair(value: Any) -> tuple[Any, Any]:
    pair = expect_list(value, "sample")
    if len(pair) < 1:
        raise MissingFieldError("time")
    if len(pair) < 2:
        raise MissingFieldError("value")
    if len(pair) > 2:
        raise FieldDecodeError("sample", value, "a [time, value] pair")
    return pair[0], pair[1]


@dataclass(frozen=True)
class Sample:
    """
    A single numeric datapoint.

    Prometheus returns samples as [unix_seconds_float, "string_value"], with
    "Inf", "-Inf" and "NaN" standing in for non-finite values.

    Attributes:
        epoch: Unix timestamp in seconds (possibly fractional).
        value: Sample value; may be infinite or NaN.
    """

    epoch: float
    value: float

    def to_prom_value(self) -> list:
        """
        Convert to Prometheus' [timestamp, value] wire format.

        Returns:
            Two-element list of epoch and value string.
        """
        return [self.epoch, format_sample_value(self.value)]

    @classmethod
    def from_prom_value(cls, value: Any) -> "Sample":
        """
        Create Sample from Prometheus' [timestamp, value] format.

        Args:
            value: List of [timestamp_seconds, value_string] from the API.

        Returns:
            Sample instance.

        Raises:
            MissingFieldError: If the time or value element is missing.
            FieldDecodeError: If either element has the wrong type or the
                value string is not numeric.
        """
        epoch, text = _unpack_pair(value)
        return cls(
            epoch=expect_number(epoch, "time"),
            value=parse_sample_value(expect_str(text, "value"))
        )


@dataclass(frozen=True)
class StringSample:
    """
    A single string datapoint, as returned for string-typed expressions.

    Attributes:
        epoch: Unix timestamp in seconds (possibly fractional).
        value: The string value, verbatim.
    """

    epoch: float
    value: str

    def to_prom_value(self) -> list:
        return [self.epoch, self.value]

    @classmethod
    def from_prom_value(cls, value: Any) -> "StringSample":
        epoch, text = _unpack_pair(value)
        return cls(
            epoch=expect_number(epoch, "time"),
            value=expect_str(text, "value")
        )
