"""Name parsing, listener validation and storage primitives."""

from .exceptions import InvalidArgument, InvalidEventName, InvalidListener, WeightEmitError
from .listeners import ListenerWrapper, Subscription, is_valid_listener, resolve_callable
from .names import (
    DEFAULT_WEIGHT,
    OpaqueName,
    ParsedName,
    Registration,
    format_weight,
    is_valid_event_name,
    parse_name,
    parse_weight,
)
from .store import ListenerStore

__all__ = [
    "DEFAULT_WEIGHT",
    "InvalidArgument",
    "InvalidEventName",
    "InvalidListener",
    "ListenerStore",
    "ListenerWrapper",
    "OpaqueName",
    "ParsedName",
    "Registration",
    "Subscription",
    "WeightEmitError",
    "format_weight",
    "is_valid_event_name",
    "is_valid_listener",
    "parse_name",
    "parse_weight",
    "resolve_callable",
]
