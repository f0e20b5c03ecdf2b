"""Testing utilities for weightemit."""

from .factory import EventNameFactory
from .fixtures import emitter, emitter_fixture, recorder
from .recorder import CallRecorder, RecordedCall

__all__ = [
    "CallRecorder",
    "EventNameFactory",
    "RecordedCall",
    "emitter",
    "emitter_fixture",
    "recorder",
]
