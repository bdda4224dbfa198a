"""
Python library for querying Prometheus via its HTTP API
"""

from .client import PrometheusClient, RuleTypeFilter, TargetState
from .exceptions import (
    DuplicateFieldError,
    FieldDecodeError,
    MissingFieldError,
    PromApiError,
    PromAuthError,
    PromConnectionError,
    PromDecodeError,
    PromError,
    PromQueryError,
    StructuralMismatchError,
    UnknownFieldError,
)
from .models import (
    ActiveTarget,
    Alert,
    AlertManager,
    AlertManagers,
    Alerts,
    AlertState,
    Config,
    DroppedTarget,
    Envelope,
    Expression,
    FlagMap,
    Instant,
    InstantVector,
    LabelOrValueList,
    Payload,
    Range,
    RangeMatrix,
    ResultType,
    Rule,
    RuleGroup,
    Rules,
    RuleType,
    Sample,
    ScalarResult,
    SeriesList,
    Snapshot,
    Status,
    StringResult,
    StringSample,
    TargetHealth,
    Targets,
    decode_envelope,
    decode_payload,
)

__version__ = "0.1.0"

__all__ = [
    "PrometheusClient",
    "RuleTypeFilter",
    "TargetState",
    "decode_envelope",
    "decode_payload",
    "Envelope",
    "Status",
    "Payload",
    "Expression",
    "ScalarResult",
    "StringResult",
    "InstantVector",
    "RangeMatrix",
    "ResultType",
    "Instant",
    "Range",
    "Sample",
    "StringSample",
    "SeriesList",
    "LabelOrValueList",
    "Targets",
    "ActiveTarget",
    "DroppedTarget",
    "TargetHealth",
    "Rules",
    "RuleGroup",
    "Rule",
    "RuleType",
    "Alerts",
    "Alert",
    "AlertState",
    "AlertManagers",
    "AlertManager",
    "Config",
    "Snapshot",
    "FlagMap",
    "PromError",
    "PromConnectionError",
    "PromQueryError",
    "PromAuthError",
    "PromApiError",
    "PromDecodeError",
    "StructuralMismatchError",
    "FieldDecodeError",
    "MissingFieldError",
    "DuplicateFieldError",
    "UnknownFieldError",
]
