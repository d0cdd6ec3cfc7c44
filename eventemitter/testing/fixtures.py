"""Pytest fixtures for event emitters."""

from __future__ import annotations

import pytest

from ..config import EmitterConfig
from ..emitter import EventEmitter


@pytest.fixture()
def emitter() -> EventEmitter:
    return EventEmitter(EmitterConfig())


def emitter_fixture(**kwargs) -> EventEmitter:
    """Helper for ad-hoc tests where pytest is not available."""
    return EventEmitter(EmitterConfig(**kwargs))
