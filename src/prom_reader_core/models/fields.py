"""
Readers for individual wire fields shared by the model decoders.

Each reader takes an already-parsed JSON value plus the wire name it was read
from, and raises a PromDecodeError subclass naming that field on mismatch.
"""

from typing import Any, Callable, Iterable, Optional, TypeVar
from urllib.parse import urlsplit

from ..exceptions import FieldDecodeError, MissingFieldError, UnknownFieldError

T = TypeVar("T")


class WireObject(dict):
    """
    A decoded JSON object that remembers keys repeated in the source text.

    Used as the json.loads object_pairs_hook so strict decoders can reject
    duplicates that a plain dict would silently collapse.
    """

    duplicate_keys: tuple[str, ...] = ()

    @classmethod
    def from_pairs(cls, pairs: list[tuple[str, Any]]) -> "WireObject":
        obj = cls()
        repeated = []
        for key, value in pairs:
            if key in obj:
                repeated.append(key)
            obj[key] = value
        if repeated:
            obj.duplicate_keys = tuple(repeated)
        return obj


def expect_object(value: Any, field: str) -> dict:
    if not isinstance(value, dict):
        raise FieldDecodeError(field, value, "an object")
    return value


def expect_list(value: Any, field: str) -> list:
    if not isinstance(value, list):
        raise FieldDecodeError(field, value, "an array")
    return value


def expect_str(value: Any, field: str) -> str:
    if not isinstance(value, str):
        raise FieldDecodeError(field, value, "a string")
    return value


def expect_number(value: Any, field: str) -> float:
    # bool is an int subclass but never a JSON number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise FieldDecodeError(field, value, "a number")
    return float(value)


def expect_label_map(value: Any, field: str) -> dict[str, str]:
    """Read a string-to-string object such as a label set."""
    obj = expect_object(value, field)
    for key, item in obj.items():
        if not isinstance(item, str):
            raise FieldDecodeError(f"{field}.{key}", item, "a string")
    return dict(obj)


def expect_url(value: Any, field: str) -> str:
    """Read an absolute URL, kept as its original string."""
    text = expect_str(value, field)
    try:
        parts = urlsplit(text)
    except ValueError as e:
        raise FieldDecodeError(field, value, "an absolute URL") from e
    if not parts.scheme or not parts.netloc:
        raise FieldDecodeError(field, value, "an absolute URL")
    return text


def expect_list_of(value: Any, field: str, decode_item: Callable[[Any], T]) -> list[T]:
    return [decode_item(item) for item in expect_list(value, field)]


def require(obj: dict, key: str) -> Any:
    if key not in obj:
        raise MissingFieldError(key)
    return obj[key]


def optional(obj: dict, key: str, decode: Callable[[Any, str], T]) -> Optional[T]:
    """Decode obj[key], treating an absent key and null alike as None."""
    value = obj.get(key)
    if value is None:
        return None
    return decode(value, key)


def reject_unknown(obj: dict, allowed: Iterable[str]) -> None:
    allowed = list(allowed)
    unknown = [key for key in obj if key not in allowed]
    if unknown:
        raise UnknownFieldError(unknown, allowed)
