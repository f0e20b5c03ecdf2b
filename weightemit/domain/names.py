"""Registration name parsing.

A registration name is either a bare event key (``"event"``) or a key followed
by a weight suffix (``"event.2"``, ``"event.1.5"``, ``"event.-Infinity"``).
Suffixes that are not weights keep the dot as part of an opaque key
(``"event.e"``), except for numeric suffixes nested deeper than ``I.F``
(``"event.1.1.1"``), which are rejected.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Union

from .exceptions import InvalidEventName

DEFAULT_SEPARATOR = "."
DEFAULT_WEIGHT = -math.inf

_WEIGHT_TOKEN = re.compile(r"[+-]?(\d+(\.\d+)?|Infinity)", re.ASCII)


@dataclass(frozen=True, slots=True)
class Registration:
    """Where a listener lives in the store."""

    key: str
    weight: float = DEFAULT_WEIGHT

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not self.key:
            raise InvalidEventName(self.key)
        if (
            isinstance(self.weight, bool)
            or not isinstance(self.weight, (int, float))
            or math.isnan(self.weight)
        ):
            raise InvalidEventName(
                self.key,
                reason=f"weight {self.weight!r} for event {self.key!r} "
                "must be a real number other than NaN",
            )
        object.__setattr__(self, "weight", float(self.weight))


@dataclass(frozen=True, slots=True)
class ParsedName:
    """Name that carried an explicit weight."""

    key: str
    weight: float

    @property
    def registration(self) -> Registration:
        return Registration(self.key, self.weight)


@dataclass(frozen=True, slots=True)
class OpaqueName:
    """Name used verbatim as the event key, with the default weight."""

    key: str

    @property
    def weight(self) -> float:
        return DEFAULT_WEIGHT

    @property
    def registration(self) -> Registration:
        return Registration(self.key, DEFAULT_WEIGHT)


NameParseResult = Union[ParsedName, OpaqueName]


def parse_weight(token: str) -> float:
    """Strictly convert a weight token to a float.

    Only signed decimals with at most one fractional part and the
    ``Infinity`` literal are accepted, so the result is never NaN.
    """
    if not isinstance(token, str) or not _WEIGHT_TOKEN.fullmatch(token):
        raise ValueError(f"Invalid weight token {token!r}")
    if token.lstrip("+-") == "Infinity":
        return -math.inf if token.startswith("-") else math.inf
    return float(token)


def format_weight(weight: float) -> str:
    if weight == math.inf:
        return "Infinity"
    if weight == -math.inf:
        return "-Infinity"
    if weight.is_integer():
        return str(int(weight))
    return repr(weight)


def parse_name(name: object, separator: str = DEFAULT_SEPARATOR) -> NameParseResult:
    """Split a registration name into its event key and weight."""
    if not isinstance(name, str) or not name:
        raise InvalidEventName(name)
    key, sep, suffix = name.partition(separator)
    if not sep:
        return OpaqueName(name)
    if not key or not suffix or any(not part for part in suffix.split(separator)):
        raise InvalidEventName(name)

    patterns = _suffix_patterns(separator)
    if patterns[0].fullmatch(suffix):
        return ParsedName(key, parse_weight(suffix.replace(separator, ".")))
    if patterns[1].fullmatch(suffix) or _has_stray_characters(suffix):
        raise InvalidEventName(name)
    return OpaqueName(name)


def is_valid_event_name(name: object, separator: str = DEFAULT_SEPARATOR) -> bool:
    try:
        parse_name(name, separator)
    except InvalidEventName:
        return False
    return True


def _has_stray_characters(suffix: str) -> bool:
    return any(ch.isspace() or (ch.isdecimal() and not ch.isascii()) for ch in suffix)


@lru_cache(maxsize=8)
def _suffix_patterns(separator: str) -> tuple[re.Pattern[str], re.Pattern[str]]:
    sep = re.escape(separator)
    weight = re.compile(rf"[+-]?((\d+{sep})?\d+|Infinity)", re.ASCII)
    too_deep = re.compile(rf"[+-]?\d+({sep}\d+){{2,}}", re.ASCII)
    return weight, too_deep


__all__ = [
    "DEFAULT_SEPARATOR",
    "DEFAULT_WEIGHT",
    "NameParseResult",
    "OpaqueName",
    "ParsedName",
    "Registration",
    "format_weight",
    "is_valid_event_name",
    "parse_name",
    "parse_weight",
]
