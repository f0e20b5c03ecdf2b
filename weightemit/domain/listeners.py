"""Listener validation and invocation helpers."""

from __future__ import annotations

import inspect
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Union

Invocable = Union[Callable[..., Any], re.Pattern]


@dataclass(slots=True, eq=False)
class ListenerWrapper:
    """Wrap an invocable to attach subscription options."""

    listener: Invocable
    once: bool = False


@dataclass(slots=True, eq=False)
class Subscription:
    """Entry stored in a weight bucket.

    ``listener`` is the exact object handed to ``on``; it is what ``off``
    compares against and what dispatch unwraps and calls.
    """

    listener: Any
    once: bool = False
    spent: bool = field(default=False, repr=False)

    def matches(self, listener: Any) -> bool:
        if self.listener is listener:
            return True
        return inspect.ismethod(self.listener) and self.listener == listener

    def invoke(self, *args: Any) -> Any:
        return resolve_callable(self.listener)(*args)


def _is_invocable(value: Any) -> bool:
    return isinstance(value, re.Pattern) or callable(value)


def _wrapped(value: Any) -> tuple[bool, Any]:
    if isinstance(value, Mapping):
        return "listener" in value, value.get("listener")
    if hasattr(value, "listener") and not isinstance(value, (str, bytes)):
        return True, getattr(value, "listener")
    return False, None


def is_valid_listener(value: Any) -> bool:
    """Return True for invocables and wrappers around an invocable."""
    if value is None:
        return False
    if _is_invocable(value):
        return True
    is_wrapper, inner = _wrapped(value)
    if not is_wrapper or inner is None:
        return False
    return _is_invocable(inner)


def resolve_callable(value: Any) -> Callable[..., Any]:
    """Return the callable dispatch should invoke for ``value``."""
    if isinstance(value, re.Pattern):
        return value.search
    if callable(value):
        return value
    is_wrapper, inner = _wrapped(value)
    if is_wrapper and _is_invocable(inner):
        return inner.search if isinstance(inner, re.Pattern) else inner
    raise TypeError(f"{type(value).__name__} object is not an invocable listener")


def wants_once(value: Any) -> bool:
    if isinstance(value, Mapping):
        return bool(value.get("once", False))
    if _is_invocable(value):
        return False
    return bool(getattr(value, "once", False))


def describe_listener(value: Any) -> str:
    is_wrapper, inner = (False, None) if _is_invocable(value) else _wrapped(value)
    target = inner if is_wrapper else value
    if isinstance(target, re.Pattern):
        return f"/{target.pattern}/"
    name = getattr(target, "__qualname__", None) or getattr(target, "__name__", None)
    return name or type(target).__name__


__all__ = [
    "Invocable",
    "ListenerWrapper",
    "Subscription",
    "describe_listener",
    "is_valid_listener",
    "resolve_callable",
    "wants_once",
]
