"""Configuration models for event emitters."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_MAX_LISTENERS = 10


@dataclass(slots=True)
class EmitterConfig:
    """Defaults applied when an emitter is created."""

    max_listeners: int = DEFAULT_MAX_LISTENERS
    leak_warnings: bool = True
    logger_name: str = "eventemitter"

    def effective_max_listeners(self) -> int:
        return self.max_listeners if self.leak_warnings else 0

    @classmethod
    def from_env(cls) -> "EmitterConfig":
        """Create config from environment variables prefixed with EVENTEMITTER_."""
        prefix = "EVENTEMITTER_"
        return cls(
            max_listeners=_parse_max_listeners(os.getenv(f"{prefix}MAX_LISTENERS")),
            leak_warnings=os.getenv(f"{prefix}LEAK_WARNINGS", "true").lower()
            in {"1", "true", "yes"},
            logger_name=os.getenv(f"{prefix}LOGGER") or "eventemitter",
        )


def _parse_max_listeners(raw: str | None) -> int:
    if raw is None or not raw.strip():
        return DEFAULT_MAX_LISTENERS
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError("Invalid integer for EVENTEMITTER_MAX_LISTENERS") from exc
    if value < 0:
        raise ValueError("EVENTEMITTER_MAX_LISTENERS cannot be negative")
    return value
