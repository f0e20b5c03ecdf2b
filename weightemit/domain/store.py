"""Listener storage bucketed by event key and weight."""

from __future__ import annotations

import re
from typing import Any, Dict, Iterator, List

from .listeners import Subscription
from .names import Registration, format_weight


class ListenerStore:
    """Two-level ordered map: event key -> weight -> subscriptions.

    Buckets are created on first use. Insertion order is preserved inside
    each bucket.
    """

    def __init__(self, *, prune_empty: bool = False) -> None:
        self._buckets: Dict[str, Dict[float, List[Subscription]]] = {}
        self._prune_empty = prune_empty

    def add(self, registration: Registration, subscription: Subscription) -> None:
        weights = self._buckets.setdefault(registration.key, {})
        weights.setdefault(registration.weight, []).append(subscription)

    def resolve(self, key: str) -> list[Subscription]:
        """Return a snapshot of the subscriptions for ``key`` in delivery order."""
        return [subscription for _, subscription in self.ordered(key)]

    def ordered(self, key: str) -> list[tuple[float, Subscription]]:
        weights = self._buckets.get(key)
        if weights is None:
            return []
        return [
            (weight, subscription)
            for weight in sorted(weights, reverse=True)
            for subscription in weights[weight]
        ]

    def remove(self, key: str, listener: Any) -> int:
        """Remove the first match of ``listener`` from every bucket of ``key``."""
        weights = self._buckets.get(key)
        if weights is None:
            return 0
        removed = 0
        for weight, bucket in list(weights.items()):
            for index, subscription in enumerate(bucket):
                if subscription.matches(listener):
                    del bucket[index]
                    removed += 1
                    break
            self._prune(key, weight)
        return removed

    def discard(self, key: str, subscription: Subscription) -> bool:
        """Remove exactly ``subscription``; other entries are untouched."""
        weights = self._buckets.get(key)
        if weights is None:
            return False
        for weight, bucket in list(weights.items()):
            for index, candidate in enumerate(bucket):
                if candidate is subscription:
                    del bucket[index]
                    self._prune(key, weight)
                    return True
        return False

    def drop(self, key: str) -> bool:
        return self._buckets.pop(key, None) is not None

    def drop_matching(self, pattern: re.Pattern[str]) -> list[str]:
        matched = [key for key in self._buckets if pattern.search(key)]
        for key in matched:
            del self._buckets[key]
        return matched

    def clear(self) -> None:
        self._buckets.clear()

    def keys(self) -> list[str]:
        return list(self._buckets)

    def weights(self, key: str) -> list[float]:
        return sorted(self._buckets.get(key, {}), reverse=True)

    def count(self, key: str | None = None) -> int:
        if key is None:
            return sum(self.count(name) for name in self._buckets)
        return sum(len(bucket) for bucket in self._buckets.get(key, {}).values())

    def snapshot(self) -> dict[str, dict[str, int]]:
        return {
            key: {format_weight(weight): len(bucket) for weight, bucket in weights.items()}
            for key, weights in self._buckets.items()
        }

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key in self._buckets

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._buckets))

    def __len__(self) -> int:
        return len(self._buckets)

    def _prune(self, key: str, weight: float) -> None:
        if not self._prune_empty:
            return
        weights = self._buckets[key]
        if not weights[weight]:
            del weights[weight]
        if not weights:
            del self._buckets[key]


__all__ = ["ListenerStore"]
