"""
Alert models representing alerts produced by alerting rules.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..exceptions import FieldDecodeError
from .base import Payload
from .fields import expect_label_map, expect_list_of, expect_object, expect_str, optional, reject_unknown, require


class AlertState(str, Enum):
    """State of an alert. Unrecognized tokens are decode errors."""

    INACTIVE = "inactive"
    PENDING = "pending"
    FIRING = "firing"

    @classmethod
    def from_prom(cls, value: Any) -> "AlertState":
        try:
            return cls(expect_str(value, "state"))
        except ValueError as e:
            raise FieldDecodeError("state", value, "one of inactive, pending, firing") from e


@dataclass(frozen=True)
class Alert:
    """
    A single alert.

    Attributes:
        active_at: RFC3339 time the alert became active, or "" if never.
        annotations: Alert annotations, if any.
        labels: Alert labels, if any.
        state: Current alert state.
        value: Value of the alert expression when last evaluated.
    """

    active_at: str
    annotations: Optional[dict[str, str]]
    labels: Optional[dict[str, str]]
    state: AlertState
    value: str

    def to_prom_data(self) -> dict:
        return {
            "activeAt": self.active_at,
            "annotations": self.annotations,
            "labels": self.labels,
            "state": self.state.value,
            "value": self.value
        }

    @classmethod
    def from_prom_data(cls, data: Any) -> "Alert":
        data = expect_object(data, "alerts")
        return cls(
            active_at=expect_str(data.get("activeAt", ""), "activeAt"),
            annotations=optional(data, "annotations", expect_label_map),
            labels=optional(data, "labels", expect_label_map),
            state=AlertState.from_prom(require(data, "state")),
            value=expect_str(require(data, "value"), "value")
        )


@dataclass(frozen=True)
class Alerts(Payload):
    """
    All active alerts. Unknown keys are rejected.

    Attributes:
        alerts: List of alerts.
    """

    alerts: list[Alert]

    def to_prom_data(self) -> dict:
        return {"alerts": [alert.to_prom_data() for alert in self.alerts]}

    @classmethod
    def from_prom_data(cls, value: Any) -> "Alerts":
        data = expect_object(value, "data")
        reject_unknown(data, ("alerts",))
        return cls(alerts=expect_list_of(require(data, "alerts"), "alerts", Alert.from_prom_data))

    @property
    def firing(self) -> list[Alert]:
        """
        Get alerts currently firing.

        Returns:
            Alerts in the FIRING state.
        """
        return [alert for alert in self.alerts if alert.state is AlertState.FIRING]
