"""Factories for tests and prototyping."""

from __future__ import annotations

from dataclasses import dataclass, field
from random import Random
from typing import Iterable

from faker import Faker

from ..domain.names import Registration


@dataclass(slots=True)
class EventNameFactory:
    faker: Faker = field(default_factory=Faker)
    rng: Random = field(default_factory=Random)

    def key(self) -> str:
        return f"{self.faker.unique.word()}_{self.faker.unique.lexify(text='????')}"

    def weight(self) -> float:
        return round(self.rng.uniform(-100, 100), 2)

    def name(self, key: str | None = None, weight: float | None = None) -> str:
        key = key or self.key()
        weight = self.weight() if weight is None else weight
        return f"{key}.{weight}"

    def registration(self, key: str | None = None) -> Registration:
        return Registration(key or self.key(), self.weight())

    def batch(self, count: int, key: str | None = None) -> Iterable[str]:
        key = key or self.key()
        for _ in range(count):
            yield self.name(key)
