"""weightemit public API."""

from .config import EmitterConfig
from .domain.exceptions import InvalidArgument, InvalidEventName, InvalidListener, WeightEmitError
from .domain.listeners import ListenerWrapper
from .domain.names import Registration
from .emitter import WeightedEmitter, current_emitter

__all__ = [
    "EmitterConfig",
    "InvalidArgument",
    "InvalidEventName",
    "InvalidListener",
    "ListenerWrapper",
    "Registration",
    "WeightEmitError",
    "WeightedEmitter",
    "current_emitter",
]
