"""Describe the delivery order of an event without dispatching it."""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.listeners import describe_listener
from ..domain.names import format_weight
from ..emitter import WeightedEmitter


@dataclass(slots=True)
class PlanEntry:
    position: int
    weight: str
    label: str
    once: bool


def build_plan(emitter: WeightedEmitter, key: str) -> list[PlanEntry]:
    return [
        PlanEntry(
            position=position,
            weight=format_weight(weight),
            label=describe_listener(subscription.listener),
            once=subscription.once,
        )
        for position, (weight, subscription) in enumerate(emitter.ordered(key), start=1)
    ]
