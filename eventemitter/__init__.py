"""Synchronous in-process event emitter public API."""

from .config import EmitterConfig
from .domain.exceptions import EventEmitterError, InvalidListener, InvalidMaxListeners
from .domain.listener import Listener, ListenerList
from .emitter import NEW_LISTENER, EventEmitter

__all__ = [
    "EmitterConfig",
    "EventEmitter",
    "EventEmitterError",
    "InvalidListener",
    "InvalidMaxListeners",
    "Listener",
    "ListenerList",
    "NEW_LISTENER",
]
