"""
Series and label list payloads returned by the series and label endpoints.
"""

from dataclasses import dataclass
from typing import Any

from .base import Payload
from .fields import expect_label_map, expect_list_of, expect_str


@dataclass(frozen=True)
class SeriesList(Payload):
    """
    Unique label sets matching a series selector.

    Attributes:
        series: List of label dictionaries, one per series.
    """

    series: list[dict[str, str]]

    def to_prom_data(self) -> list:
        return [dict(labels) for labels in self.series]

    @classmethod
    def from_prom_data(cls, value: Any) -> "SeriesList":
        return cls(series=expect_list_of(value, "data", lambda item: expect_label_map(item, "series")))


@dataclass(frozen=True)
class LabelOrValueList(Payload):
    """
    Label names, or the values of a single label.

    Attributes:
        values: List of label names or label values.
    """

    values: list[str]

    def to_prom_data(self) -> list:
        return list(self.values)

    @classmethod
    def from_prom_data(cls, value: Any) -> "LabelOrValueList":
        return cls(values=expect_list_of(value, "data", lambda item: expect_str(item, "data")))
