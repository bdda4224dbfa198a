"""
Rule models representing recording and alerting rule groups.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..exceptions import FieldDecodeError
from .alerts import Alert
from .base import Payload
from .fields import (
    expect_label_map,
    expect_list_of,
    expect_number,
    expect_object,
    expect_str,
    optional,
    reject_unknown,
    require,
)


class RuleType(str, Enum):
    """Kind of rule. Unrecognized tokens are decode errors."""

    RECORDING = "recording"
    ALERTING = "alerting"

    @classmethod
    def from_prom(cls, value: Any) -> "RuleType":
        try:
            return cls(expect_str(value, "type"))
        except ValueError as e:
            raise FieldDecodeError("type", value, "one of recording, alerting") from e


def _alert_list(value: Any, field: str) -> list[Alert]:
    return expect_list_of(value, field, Alert.from_prom_data)


@dataclass(frozen=True)
class Rule:
    """
    A recording or alerting rule.

    Attributes:
        alerts: Alerts produced by an alerting rule; None for recording rules.
        annotations: Rule annotations, if any.
        duration: Pending duration in seconds of an alerting rule, if any.
        labels: Labels added by the rule, if any.
        health: Health of the last evaluation ("ok", "err", "unknown").
        name: Rule name (alert name or recorded metric).
        query: The rule's query expression.
        rule_type: RECORDING or ALERTING.
    """

    alerts: Optional[list[Alert]]
    annotations: Optional[dict[str, str]]
    duration: Optional[float]
    labels: Optional[dict[str, str]]
    health: str
    name: str
    query: str
    rule_type: RuleType

    def to_prom_data(self) -> dict:
        return {
            "alerts": None if self.alerts is None else [a.to_prom_data() for a in self.alerts],
            "annotations": self.annotations,
            "duration": self.duration,
            "labels": self.labels,
            "health": self.health,
            "name": self.name,
            "query": self.query,
            "type": self.rule_type.value
        }

    @classmethod
    def from_prom_data(cls, data: Any) -> "Rule":
        data = expect_object(data, "rules")
        return cls(
            alerts=optional(data, "alerts", _alert_list),
            annotations=optional(data, "annotations", expect_label_map),
            duration=optional(data, "duration", expect_number),
            labels=optional(data, "labels", expect_label_map),
            health=expect_str(require(data, "health"), "health"),
            name=expect_str(require(data, "name"), "name"),
            query=expect_str(require(data, "query"), "query"),
            rule_type=RuleType.from_prom(require(data, "type"))
        )


@dataclass(frozen=True)
class RuleGroup:
    """
    A group of rules evaluated together.

    Attributes:
        name: Group name.
        file: Rule file the group was loaded from.
        interval: Evaluation interval in seconds.
        rules: Rules in the group.
    """

    name: str
    file: str
    interval: float
    rules: list[Rule]

    def to_prom_data(self) -> dict:
        return {
            "name": self.name,
            "file": self.file,
            "interval": self.interval,
            "rules": [rule.to_prom_data() for rule in self.rules]
        }

    @classmethod
    def from_prom_data(cls, data: Any) -> "RuleGroup":
        data = expect_object(data, "groups")
        return cls(
            name=expect_str(require(data, "name"), "name"),
            file=expect_str(require(data, "file"), "file"),
            interval=expect_number(require(data, "interval"), "interval"),
            rules=expect_list_of(require(data, "rules"), "rules", Rule.from_prom_data)
        )


@dataclass(frozen=True)
class Rules(Payload):
    """
    All loaded rule groups. Unknown keys are rejected.

    Attributes:
        groups: List of rule groups.
    """

    groups: list[RuleGroup]

    def to_prom_data(self) -> dict:
        return {"groups": [group.to_prom_data() for group in self.groups]}

    @classmethod
    def from_prom_data(cls, value: Any) -> "Rules":
        data = expect_object(value, "data")
        reject_unknown(data, ("groups",))
        return cls(groups=expect_list_of(require(data, "groups"), "groups", RuleGroup.from_prom_data))

    @property
    def all_rules(self) -> list[Rule]:
        """
        Get every rule across all groups.

        Returns:
            Flattened list of rules.
        """
        return [rule for group in self.groups for rule in group.rules]
