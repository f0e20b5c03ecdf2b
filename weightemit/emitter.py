"""Weighted event emitter."""

from __future__ import annotations

import logging
import re
from contextvars import ContextVar
from typing import Any

from .config import EmitterConfig
from .domain.exceptions import InvalidEventName, InvalidListener
from .domain.listeners import Subscription, is_valid_listener, wants_once
from .domain.names import Registration, format_weight, parse_name
from .domain.store import ListenerStore

logger = logging.getLogger(__name__)

_current_emitter: ContextVar["WeightedEmitter | None"] = ContextVar(
    "weightemit_current_emitter", default=None
)


def current_emitter() -> "WeightedEmitter | None":
    """Return the emitter whose listener is currently running, if any."""
    return _current_emitter.get()


class WeightedEmitter:
    """Publish/subscribe dispatcher ordering listeners by weight.

    Listeners subscribe with a registration name such as ``"saved"``,
    ``"saved.10"`` or ``"saved.2.5"``. ``emit("saved")`` calls them from the
    highest weight to the lowest; listeners without a weight come last.
    Subscription and dispatch methods return the emitter for chaining.
    """

    def __init__(self, config: EmitterConfig | None = None) -> None:
        self.config = config or EmitterConfig()
        self._store = ListenerStore(prune_empty=self.config.prune_empty_buckets)

    def on(self, name: str, listener: Any) -> "WeightedEmitter":
        return self._subscribe_name(name, listener, once=False)

    def once(self, name: str, listener: Any) -> "WeightedEmitter":
        return self._subscribe_name(name, listener, once=True)

    def subscribe(
        self, registration: Registration, listener: Any, *, once: bool = False
    ) -> "WeightedEmitter":
        """Subscribe using an explicit key/weight record instead of a name."""
        if not is_valid_listener(listener):
            raise InvalidListener(listener)
        if not isinstance(registration, Registration):
            raise InvalidEventName(registration)
        subscription = Subscription(listener, once=once or wants_once(listener))
        self._store.add(registration, subscription)
        logger.debug(
            "Subscribed listener to '%s' at weight %s (once=%s)",
            registration.key,
            format_weight(registration.weight),
            subscription.once,
        )
        return self

    def off(self, key: str, listener: Any) -> "WeightedEmitter":
        if not isinstance(key, str):
            return self
        removed = self._store.remove(key, listener)
        if removed:
            logger.debug("Removed %d subscription(s) from '%s'", removed, key)
        return self

    def off_all(self, key_or_pattern: str | re.Pattern) -> "WeightedEmitter":
        if isinstance(key_or_pattern, str):
            parse_name(key_or_pattern, self.config.separator)
            if self._store.drop(key_or_pattern):
                logger.debug("Removed all listeners of '%s'", key_or_pattern)
        elif isinstance(key_or_pattern, re.Pattern):
            dropped = self._store.drop_matching(key_or_pattern)
            if dropped:
                logger.debug(
                    "Removed all listeners of %s matching /%s/",
                    dropped,
                    key_or_pattern.pattern,
                )
        return self

    def emit(self, key: str, *args: Any) -> "WeightedEmitter":
        if not isinstance(key, str) or key not in self._store:
            return self
        queue = self._store.resolve(key)
        if self.config.log_dispatch:
            logger.debug("Dispatching '%s' to %d listener(s)", key, len(queue))

        for subscription in queue:
            if subscription.once:
                if subscription.spent:
                    continue
                subscription.spent = True
            token = _current_emitter.set(self)
            try:
                subscription.invoke(*args)
            finally:
                _current_emitter.reset(token)
                if subscription.once:
                    self._store.discard(key, subscription)
        return self

    def listeners(self, key: str) -> list[Any]:
        """Listeners of ``key`` in the order ``emit`` would call them."""
        return [subscription.listener for subscription in self._store.resolve(key)]

    def ordered(self, key: str) -> list[tuple[float, Subscription]]:
        """Subscriptions of ``key`` in delivery order, paired with their weight."""
        return self._store.ordered(key)

    def weights(self, key: str) -> list[float]:
        return self._store.weights(key)

    def listener_count(self, key: str | None = None) -> int:
        return self._store.count(key)

    def event_names(self) -> list[str]:
        return self._store.keys()

    def snapshot(self) -> dict[str, dict[str, int]]:
        """Export listener counts per key and weight for debugging."""
        return self._store.snapshot()

    def clear(self) -> "WeightedEmitter":
        self._store.clear()
        return self

    def _subscribe_name(self, name: str, listener: Any, *, once: bool) -> "WeightedEmitter":
        if not is_valid_listener(listener):
            raise InvalidListener(listener)
        parsed = parse_name(name, self.config.separator)
        return self.subscribe(parsed.registration, listener, once=once)


__all__ = ["WeightedEmitter", "current_emitter"]
