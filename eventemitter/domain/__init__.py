"""Listener records and emitter exceptions."""

from .exceptions import EventEmitterError, InvalidListener, InvalidMaxListeners
from .listener import EventType, Handler, Listener, ListenerList

__all__ = [
    "EventType",
    "Handler",
    "Listener",
    "ListenerList",
    "EventEmitterError",
    "InvalidListener",
    "InvalidMaxListeners",
]
