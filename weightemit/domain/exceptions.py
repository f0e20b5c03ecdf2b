"""Exceptions raised by weightemit."""

from __future__ import annotations


class WeightEmitError(RuntimeError):
    """Base class for emitter exceptions."""


class InvalidArgument(WeightEmitError, TypeError):
    """Raised when a public call receives an argument it cannot accept."""

    def __init__(self, argument: str, message: str) -> None:
        super().__init__(message)
        self.argument = argument


class InvalidListener(InvalidArgument):
    """Raised when a listener is neither invocable nor a valid wrapper."""

    def __init__(self, listener: object) -> None:
        super().__init__(
            "listener",
            f"listener is not valid, must be a callable, a compiled pattern or a "
            f"wrapper exposing one (got {type(listener).__name__})",
        )


class InvalidEventName(InvalidArgument):
    """Raised when an event name does not follow the registration grammar."""

    def __init__(self, name: object, *, reason: str | None = None) -> None:
        super().__init__(
            "event_name",
            f"event name {name!r} is not valid: {reason}"
            if reason
            else f"event name {name!r} is not valid, must be a static name or a name "
            f"followed by a weight, such as 'event', 'event.1' or 'event.1.1'",
        )
