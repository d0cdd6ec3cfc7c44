"""Testing utilities for event emitters."""

from .factory import EventTypeFactory
from .fixtures import emitter, emitter_fixture
from .recorder import CallRecorder, RecordedCall

__all__ = [
    "CallRecorder",
    "EventTypeFactory",
    "RecordedCall",
    "emitter",
    "emitter_fixture",
]
