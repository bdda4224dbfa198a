"""
Target models representing the scrape targets Prometheus knows about.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from ..exceptions import FieldDecodeError, MissingFieldError
from ..utils import format_rfc3339, parse_rfc3339
from .base import Payload
from .fields import (
    expect_label_map,
    expect_list_of,
    expect_object,
    expect_str,
    expect_url,
    reject_unknown,
    require,
)


class TargetHealth(str, Enum):
    """Health of an active target's last scrape."""

    UP = "up"
    DOWN = "down"
    UNKNOWN = "unknown"

    @classmethod
    def from_prom(cls, value: Any) -> "TargetHealth":
        """
        Map a wire health token, falling back to UNKNOWN.

        Unlike alert state, an unrecognized or null health is not an error.
        """
        if value == "up":
            return cls.UP
        if value == "down":
            return cls.DOWN
        return cls.UNKNOWN


@dataclass(frozen=True)
class ActiveTarget:
    """
    A target currently being scraped.

    Attributes:
        discovered_labels: Labels from service discovery, before relabeling.
        labels: Labels after relabeling.
        scrape_url: URL the target is scraped from.
        last_error: Error of the last scrape, or None if it succeeded.
        last_scrape: Time of the last scrape, with its UTC offset.
        health: Health of the last scrape.
    """

    discovered_labels: dict[str, str]
    labels: dict[str, str]
    scrape_url: str
    last_error: Optional[str]
    last_scrape: datetime
    health: TargetHealth

    def to_prom_data(self) -> dict:
        return {
            "discoveredLabels": self.discovered_labels,
            "labels": self.labels,
            "scrapeUrl": self.scrape_url,
            # the API reports a clean scrape as "", never null
            "lastError": self.last_error or "",
            "lastScrape": format_rfc3339(self.last_scrape),
            "health": self.health.value
        }

    @classmethod
    def from_prom_data(cls, data: Any) -> "ActiveTarget":
        """
        Create ActiveTarget from the API's camelCase object.

        Args:
            data: One entry of `activeTargets`.

        Returns:
            ActiveTarget instance.

        Raises:
            MissingFieldError: If a required field is absent.
            FieldDecodeError: If a field has the wrong type, the scrape URL
                is not absolute or lastScrape is not an RFC3339 timestamp.
        """
        data = expect_object(data, "activeTargets")

        if "lastError" not in data:
            raise MissingFieldError("lastError")
        last_error = data["lastError"]
        if last_error is not None:
            last_error = expect_str(last_error, "lastError") or None

        raw_scrape = expect_str(require(data, "lastScrape"), "lastScrape")
        try:
            last_scrape = parse_rfc3339(raw_scrape)
        except (ValueError, OverflowError) as e:
            raise FieldDecodeError("lastScrape", raw_scrape, "an RFC3339 timestamp") from e

        if "health" not in data:
            raise MissingFieldError("health")

        return cls(
            discovered_labels=expect_label_map(require(data, "discoveredLabels"), "discoveredLabels"),
            labels=expect_label_map(require(data, "labels"), "labels"),
            scrape_url=expect_url(require(data, "scrapeUrl"), "scrapeUrl"),
            last_error=last_error,
            last_scrape=last_scrape,
            health=TargetHealth.from_prom(data["health"])
        )


@dataclass(frozen=True)
class DroppedTarget:
    """
    A target removed by relabeling.

    Attributes:
        discovered_labels: Labels from service discovery.
    """

    discovered_labels: dict[str, str]

    def to_prom_data(self) -> dict:
        return {"discoveredLabels": self.discovered_labels}

    @classmethod
    def from_prom_data(cls, data: Any) -> "DroppedTarget":
        data = expect_object(data, "droppedTargets")
        return cls(
            discovered_labels=expect_label_map(require(data, "discoveredLabels"), "discoveredLabels")
        )


@dataclass(frozen=True)
class Targets(Payload):
    """
    Active and dropped targets.

    Unknown keys are rejected, and at least one of `activeTargets` and
    `droppedTargets` must be present, so plain flag maps never match.

    Attributes:
        active: Targets being scraped.
        dropped: Targets removed by relabeling.
    """

    FIELDS = ("activeTargets", "droppedTargets")

    active: list[ActiveTarget] = field(default_factory=list)
    dropped: list[DroppedTarget] = field(default_factory=list)

    def to_prom_data(self) -> dict:
        return {
            "activeTargets": [target.to_prom_data() for target in self.active],
            "droppedTargets": [target.to_prom_data() for target in self.dropped]
        }

    @classmethod
    def from_prom_data(cls, value: Any) -> "Targets":
        data = expect_object(value, "data")
        reject_unknown(data, cls.FIELDS)
        if not any(key in data for key in cls.FIELDS):
            raise MissingFieldError("activeTargets")
        return cls(
            active=expect_list_of(data.get("activeTargets", []), "activeTargets", ActiveTarget.from_prom_data),
            dropped=expect_list_of(data.get("droppedTargets", []), "droppedTargets", DroppedTarget.from_prom_data)
        )
