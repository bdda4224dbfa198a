"""
Resolution of an untagged `data` value into its payload variant.

The API does not say which shape `data` has, so each candidate decoder is
tried in a fixed order and the first one that accepts the value wins.
"""

from typing import Any, Optional

from ..exceptions import PromDecodeError, StructuralMismatchError
from .alert_managers import AlertManagers
from .alerts import Alerts
from .base import Payload
from .expression import Expression
from .rules import Rules
from .series import LabelOrValueList, SeriesList
from .status import Config, FlagMap, Snapshot
from .targets import Targets

# Specific shapes first. The strict object decoders reject unknown keys, which
# is what lets a plain map fall through to FlagMap.
PAYLOAD_ORDER: tuple[type[Payload], ...] = (
    Expression,
    SeriesList,
    LabelOrValueList,
    Targets,
    Rules,
    Alerts,
    AlertManagers,
    Config,
    Snapshot,
)

# Accepts any string map; always tried after everything in PAYLOAD_ORDER.
CATCH_ALL: type[Payload] = FlagMap


def candidate_order(hint: Optional[type[Payload]] = None) -> list[type[Payload]]:
    """
    Get the order in which payload decoders are tried.

    Args:
        hint: Payload class the calling endpoint expects. It is moved to the
            front; the catch-all stays last regardless.

    Returns:
        Payload classes in trial order, ending with FlagMap.

    Raises:
        ValueError: If hint is not a payload variant.
    """
    order = list(PAYLOAD_ORDER)
    if hint is not None and hint is not CATCH_ALL:
        if hint not in order:
            raise ValueError(f"Not a payload variant: {hint!r}")
        order.remove(hint)
        order.insert(0, hint)
    order.append(CATCH_ALL)
    return order


def decode_payload(value: Any, hint: Optional[type[Payload]] = None) -> Payload:
    """
    Decode the `data` field of a response into its payload variant.

    Args:
        value: Already-parsed JSON value of `data`.
        hint: Optional payload class the calling endpoint expects.

    Returns:
        The first payload variant that accepts the value.

    Raises:
        StructuralMismatchError: If no variant accepts the value; lists every
            attempted shape with the reason it was rejected.
    """
    attempted: list[str] = []
    reasons: list[str] = []

    for payload_class in candidate_order(hint):
        try:
            payload = payload_class.from_prom_data(value)
        except PromDecodeError as e:
            attempted.append(payload_class.__name__)
            reasons.append(str(e))
            continue

        return payload

    raise StructuralMismatchError(attempted, reasons)
