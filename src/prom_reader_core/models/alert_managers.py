"""
AlertManager models representing the Alertmanagers Prometheus notifies.
"""

from dataclasses import dataclass, field
from typing import Any

from ..exceptions import DuplicateFieldError, MissingFieldError, UnknownFieldError
from .base import Payload
from .fields import expect_list_of, expect_object, expect_url, reject_unknown


@dataclass(frozen=True)
class AlertManager:
    """
    A single Alertmanager endpoint.

    Attributes:
        url: Absolute URL alerts are posted to.
    """

    url: str

    def to_prom_data(self) -> dict:
        return {"url": self.url}

    @classmethod
    def from_prom_data(cls, data: Any) -> "AlertManager":
        """
        Create AlertManager from a {"url": ...} object.

        The field name is matched case-insensitively and may occur once.

        Args:
            data: One entry of `activeAlertmanagers` or `droppedAlertmanagers`.

        Returns:
            AlertManager instance.

        Raises:
            DuplicateFieldError: If the url field occurs more than once.
            UnknownFieldError: If any other field is present.
            MissingFieldError: If there is no url field.
        """
        data = expect_object(data, "alertmanagers")
        if any(key.lower() == "url" for key in getattr(data, "duplicate_keys", ())):
            raise DuplicateFieldError("url")

        url = None
        for key, value in data.items():
            if key.lower() != "url":
                raise UnknownFieldError([key], ["url"])
            if url is not None:
                raise DuplicateFieldError("url")
            url = expect_url(value, "url")

        if url is None:
            raise MissingFieldError("url")
        return cls(url=url)


@dataclass(frozen=True)
class AlertManagers(Payload):
    """
    Active and dropped Alertmanagers.

    Same key rules as Targets: unknown keys are rejected and at least one of
    the two lists must be present.

    Attributes:
        active: Alertmanagers currently notified.
        dropped: Alertmanagers removed by relabeling.
    """

    FIELDS = ("activeAlertmanagers", "droppedAlertmanagers")

    active: list[AlertManager] = field(default_factory=list)
    dropped: list[AlertManager] = field(default_factory=list)

    def to_prom_data(self) -> dict:
        return {
            "activeAlertmanagers": [am.to_prom_data() for am in self.active],
            "droppedAlertmanagers": [am.to_prom_data() for am in self.dropped]
        }

    @classmethod
    def from_prom_data(cls, value: Any) -> "AlertManagers":
        data = expect_object(value, "data")
        reject_unknown(data, cls.FIELDS)
        if not any(key in data for key in cls.FIELDS):
            raise MissingFieldError("activeAlertmanagers")
        return cls(
            active=expect_list_of(
                data.get("activeAlertmanagers", []), "activeAlertmanagers", AlertManager.from_prom_data
            ),
            dropped=expect_list_of(
                data.get("droppedAlertmanagers", []), "droppedAlertmanagers", AlertManager.from_prom_data
            )
        )
