"""Configuration models for weightemit."""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes"}


@dataclass(slots=True)
class EmitterConfig:
    """Tune how an emitter parses names and maintains its store."""

    separator: str = "."
    prune_empty_buckets: bool = False
    log_dispatch: bool = False

    def __post_init__(self) -> None:
        if (
            not isinstance(self.separator, str)
            or len(self.separator) != 1
            or self.separator.isalnum()
            or self.separator in "+-_ "
        ):
            raise ValueError(f"Invalid separator {self.separator!r}")

    @classmethod
    def from_env(cls) -> "EmitterConfig":
        """Create config from environment variables prefixed with WEIGHTEMIT_."""
        prefix = "WEIGHTEMIT_"
        return cls(
            separator=os.getenv(f"{prefix}SEPARATOR", ".") or ".",
            prune_empty_buckets=os.getenv(f"{prefix}PRUNE_EMPTY_BUCKETS", "false").lower()
            in _TRUTHY,
            log_dispatch=os.getenv(f"{prefix}LOG_DISPATCH", "false").lower() in _TRUTHY,
        )


__all__ = ["EmitterConfig"]
