"""Pytest fixtures for weightemit."""

from __future__ import annotations

import pytest

from ..config import EmitterConfig
from ..emitter import WeightedEmitter
from .recorder import CallRecorder


@pytest.fixture()
def emitter() -> WeightedEmitter:
    return WeightedEmitter(EmitterConfig())


@pytest.fixture()
def recorder() -> CallRecorder:
    return CallRecorder()


def emitter_fixture(**kwargs) -> WeightedEmitter:
    """Helper for ad-hoc tests where pytest is not available."""
    return WeightedEmitter(EmitterConfig(**kwargs))
