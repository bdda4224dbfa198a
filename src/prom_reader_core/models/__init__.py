"""
Data models for prom-reader-core.
"""

from .alert_managers import AlertManager, AlertManagers
from .alerts import Alert, Alerts, AlertState
from .base import Payload
from .envelope import Envelope, Status, decode_envelope
from .expression import (
    Expression,
    Instant,
    InstantVector,
    Range,
    RangeMatrix,
    ResultType,
    ScalarResult,
    StringResult,
)
from .payload import decode_payload
from .rules import Rule, RuleGroup, Rules, RuleType
from .sample import Sample, StringSample
from .series import LabelOrValueList, SeriesList
from .status import Config, FlagMap, Snapshot
from .targets import ActiveTarget, DroppedTarget, TargetHealth, Targets

__all__ = [
    "ActiveTarget",
    "Alert",
    "AlertManager",
    "AlertManagers",
    "AlertState",
    "Alerts",
    "Config",
    "DroppedTarget",
    "Envelope",
    "Expression",
    "FlagMap",
    "Instant",
    "InstantVector",
    "LabelOrValueList",
    "Payload",
    "Range",
    "RangeMatrix",
    "ResultType",
    "Rule",
    "RuleGroup",
    "RuleType",
    "Rules",
    "Sample",
    "ScalarResult",
    "SeriesList",
    "Snapshot",
    "Status",
    "StringResult",
    "StringSample",
    "TargetHealth",
    "Targets",
    "decode_envelope",
    "decode_payload",
]
