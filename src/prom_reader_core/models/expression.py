"""
Expression models representing the result of an instant or range query.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from ..exceptions import FieldDecodeError
from .base import Payload
from .fields import expect_label_map, expect_list_of, expect_object, expect_str, require
from .sample import Sample, StringSample


class ResultType(str, Enum):
    """Value of the `resultType` tag of an expression result."""

    SCALAR = "scalar"
    STRING = "string"
    VECTOR = "vector"
    MATRIX = "matrix"


@dataclass(frozen=True)
class Instant:
    """
    A single sample of one series, as returned in vector results.

    Format: {"metric": {labels}, "value": [ts, val]}

    Attributes:
        metric: Label set identifying the series.
        sample: The series' value at the evaluation time.
    """

    metric: dict[str, str]
    sample: Sample

    def to_prom_data(self) -> dict:
        return {"metric": self.metric, "value": self.sample.to_prom_value()}

    @classmethod
    def from_prom_data(cls, data: Any) -> "Instant":
        data = expect_object(data, "result")
        return cls(
            metric=expect_label_map(require(data, "metric"), "metric"),
            sample=Sample.from_prom_value(require(data, "value"))
        )


@dataclass(frozen=True)
class Range:
    """
    A series of samples sharing one label set, as returned in matrix results.

    Format: {"metric": {labels}, "values": [[ts, val], ...]}

    Attributes:
        metric: Label set identifying the series.
        samples: Samples in timestamp order.
    """

    metric: dict[str, str]
    samples: list[Sample]

    def to_prom_data(self) -> dict:
        return {
            "metric": self.metric,
            "values": [sample.to_prom_value() for sample in self.samples]
        }

    @classmethod
    def from_prom_data(cls, data: Any) -> "Range":
        data = expect_object(data, "result")
        return cls(
            metric=expect_label_map(require(data, "metric"), "metric"),
            samples=expect_list_of(require(data, "values"), "values", Sample.from_prom_value)
        )


class Expression(Payload):
    """
    Result of evaluating a query expression.

    The only payload with an explicit discriminator: `resultType` selects
    which decoder reads `result`. Concrete results are ScalarResult,
    StringResult, InstantVector and RangeMatrix. Keys besides `resultType`
    and `result` (such as `stats`) are ignored.
    """

    result_type: ClassVar[ResultType]

    @classmethod
    def from_prom_data(cls, value: Any) -> "Expression":
        """
        Create the Expression subclass selected by `resultType`.

        Args:
            value: The `data` object of a query response.

        Returns:
            ScalarResult, StringResult, InstantVector or RangeMatrix.

        Raises:
            MissingFieldError: If `resultType` or `result` is absent.
            FieldDecodeError: If `resultType` is unrecognized or `result`
                does not match it.
        """
        data = expect_object(value, "data")
        tag = expect_str(require(data, "resultType"), "resultType")
        try:
            result_type = ResultType(tag)
        except ValueError as e:
            raise FieldDecodeError(
                "resultType", tag, "one of scalar, string, vector, matrix"
            ) from e
        result_class = _RESULT_CLASSES[result_type]
        return result_class.from_result(require(data, "result"))

    @classmethod
    def from_result(cls, result: Any) -> "Expression":
        """Decode the `result` field; overridden by each result type."""
        raise NotImplementedError

    def to_prom_data(self) -> dict:
        return {"resultType": self.result_type.value, "result": self._result_to_prom()}

    def _result_to_prom(self) -> Any:
        """Encode the `result` field; overridden by each result type."""
        raise NotImplementedError


@dataclass(frozen=True)
class ScalarResult(Expression):
    result_type: ClassVar[ResultType] = ResultType.SCALAR

    result: Sample

    @classmethod
    def from_result(cls, result: Any) -> "ScalarResult":
        return cls(result=Sample.from_prom_value(result))

    def _result_to_prom(self) -> list:
        return self.result.to_prom_value()


@dataclass(frozen=True)
class StringResult(Expression):
    result_type: ClassVar[ResultType] = ResultType.STRING

    result: StringSample

    @classmethod
    def from_result(cls, result: Any) -> "StringResult":
        return cls(result=StringSample.from_prom_value(result))

    def _result_to_prom(self) -> list:
        return self.result.to_prom_value()


@dataclass(frozen=True)
class InstantVector(Expression):
    """Vector result: one Instant per matching series."""

    result_type: ClassVar[ResultType] = ResultType.VECTOR

    result: list[Instant]

    @classmethod
    def from_result(cls, result: Any) -> "InstantVector":
        return cls(result=expect_list_of(result, "result", Instant.from_prom_data))

    def _result_to_prom(self) -> list:
        return [instant.to_prom_data() for instant in self.result]


@dataclass(frozen=True)
class RangeMatrix(Expression):
    """Matrix result: one Range per matching series."""

    result_type: ClassVar[ResultType] = ResultType.MATRIX

    result: list[Range]

    @classmethod
    def from_result(cls, result: Any) -> "RangeMatrix":
        return cls(result=expect_list_of(result, "result", Range.from_prom_data))

    def _result_to_prom(self) -> list:
        return [series.to_prom_data() for series in self.result]

    @property
    def total_samples(self) -> int:
        """
        Get total number of samples across all series.

        Returns:
            Total sample count.
        """
        return sum(len(series.samples) for series in self.result)


_RESULT_CLASSES: dict[ResultType, type[Expression]] = {
    ResultType.SCALAR: ScalarResult,
    ResultType.STRING: StringResult,
    ResultType.VECTOR: InstantVector,
    ResultType.MATRIX: RangeMatrix,
}
