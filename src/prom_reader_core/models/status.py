"""
Status payloads: server configuration, command-line flags and TSDB snapshots.
"""

from dataclasses import dataclass
from typing import Any

from .base import Payload
from .fields import expect_label_map, expect_object, expect_str, reject_unknown, require


@dataclass(frozen=True)
class Config(Payload):
    """
    The loaded configuration file.

    Attributes:
        yaml: Configuration as YAML text.
    """

    yaml: str

    def to_prom_data(self) -> dict:
        return {"yaml": self.yaml}

    @classmethod
    def from_prom_data(cls, value: Any) -> "Config":
        data = expect_object(value, "data")
        reject_unknown(data, ("yaml",))
        return cls(yaml=expect_str(require(data, "yaml"), "yaml"))


@dataclass(frozen=True)
class Snapshot(Payload):
    """
    A created TSDB snapshot.

    Attributes:
        name: Snapshot directory name.
    """

    name: str

    def to_prom_data(self) -> dict:
        return {"name": self.name}

    @classmethod
    def from_prom_data(cls, value: Any) -> "Snapshot":
        data = expect_object(value, "data")
        reject_unknown(data, ("name",))
        return cls(name=expect_str(require(data, "name"), "name"))


@dataclass(frozen=True)
class FlagMap(Payload):
    """
    Command-line flag values, or any other plain string-to-string object.

    Accepts every string map, so the resolver only tries it after all other
    payload shapes have been rejected.

    Attributes:
        flags: Flag name to value.
    """

    flags: dict[str, str]

    def to_prom_data(self) -> dict:
        return dict(self.flags)

    @classmethod
    def from_prom_data(cls, value: Any) -> "FlagMap":
        return cls(flags=expect_label_map(value, "data"))
